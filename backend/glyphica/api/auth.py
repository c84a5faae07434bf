from flask import Blueprint, request, jsonify, current_app
from flask_login import login_user, logout_user, login_required, current_user

from glyphica.errors import NotFound, ValidationError
from glyphica.services import accounts

auth = Blueprint('auth', __name__)


def _credentials():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ValidationError('Username and password are required')
    return data.get('username'), data.get('password')


@auth.route('/register', methods=['POST'])
def register():
    user = accounts.register(*_credentials())
    login_user(user, remember=True)
    return jsonify({'success': True, 'user': user.to_dict()}), 201


@auth.route('/login', methods=['POST'])
def login():
    user = accounts.authenticate(*_credentials())
    login_user(user, remember=True)
    current_app.logger.info(f"[login] user={user.id}")
    return jsonify({'success': True, 'user': user.to_dict()})


@auth.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return jsonify({'success': True})


@auth.route('/me', methods=['GET'])
def me():
    if not current_user.is_authenticated:
        return jsonify({'loggedIn': False})
    return jsonify({'loggedIn': True, 'user': current_user.to_dict()})


@auth.route('/users/<string:username>', methods=['GET'])
def get_user(username):
    user = accounts.lookup(username)
    if user is None:
        raise NotFound('User not found')
    return jsonify(user.to_dict(include_created=True))
