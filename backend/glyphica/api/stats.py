from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user

from glyphica.errors import ValidationError
from glyphica.services import records, achievements, leaderboard
from glyphica.services.stats import compute_profile, compute_summary

stats = Blueprint('stats', __name__)

TRUTHY = ('1', 'true', 'yes', 'on')


def _leaderboard_limit() -> int:
    cfg = current_app.config
    default_limit = int(cfg.get('LEADERBOARD_LIMIT', 50))
    max_limit = int(cfg.get('LEADERBOARD_MAX_LIMIT', 100))
    raw = request.args.get('limit')
    if raw is None or raw == '':
        return min(default_limit, max_limit)
    try:
        limit = int(raw)
    except ValueError:
        raise ValidationError('limit must be an integer')
    if limit < 1:
        raise ValidationError('limit must be at least 1')
    return min(limit, max_limit)


@stats.route('/game', methods=['POST'])
@login_required
def save_game():
    data = request.get_json(silent=True) or {}
    record = records.append(current_user.id, data)
    return jsonify({'success': True, 'gameId': record.id}), 201


@stats.route('/profile', methods=['GET'])
@login_required
def profile():
    return jsonify(compute_profile(current_user.id))


@stats.route('/summary', methods=['GET'])
@login_required
def summary():
    return jsonify(compute_summary(current_user.id))


@stats.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    mode = request.args.get('mode') or current_app.config.get('DEFAULT_GAME_MODE', 'classic')
    include_played_at = request.args.get('include_played_at', '').lower() in TRUTHY
    entries = leaderboard.rank(mode, limit=_leaderboard_limit(), include_played_at=include_played_at)
    return jsonify(entries)


@stats.route('/achievement', methods=['POST'])
@login_required
def save_achievement():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ValidationError('Achievement id is required')
    result = achievements.unlock(current_user.id, data.get('achievementId'))
    return jsonify({
        'success': True,
        'created': result['created'],
        'alreadyUnlocked': not result['created'],
    })


@stats.route('/achievements', methods=['GET'])
@login_required
def list_achievements():
    return jsonify([a.to_dict() for a in achievements.unlocked_for_user(current_user.id)])
