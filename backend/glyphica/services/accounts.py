from typing import Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from glyphica import db, bcrypt
from glyphica.errors import ValidationError, DuplicateUsername, InvalidCredentials
from glyphica.models import User

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 4

DUMMY_DIGEST_EXTENSION = 'glyphica_dummy_digest'


def _get_dummy_digest() -> str:
    """Digest checked when the username is unknown, so both failure paths cost one bcrypt check.

    Cached per app because it must be hashed with that app's BCRYPT_LOG_ROUNDS.
    """
    digest = current_app.extensions.get(DUMMY_DIGEST_EXTENSION)
    if digest is None:
        rounds = current_app.config.get('BCRYPT_LOG_ROUNDS', 12)
        digest = bcrypt.generate_password_hash('glyphica-placeholder', rounds=rounds).decode('utf-8')
        current_app.extensions[DUMMY_DIGEST_EXTENSION] = digest
    return digest


def _require_credentials(username, password) -> None:
    if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
        raise ValidationError('Username and password are required')


def lookup(username) -> Optional[User]:
    """Find a user by username, ignoring case."""
    if not isinstance(username, str) or not username:
        return None
    return User.query.filter_by(username_key=username.lower()).first()


def register(username, password) -> User:
    """Create a new account.

    Usernames are 3 to 20 characters and unique regardless of case;
    passwords need at least 4 characters. Only the bcrypt digest is stored.
    """
    _require_credentials(username, password)
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise ValidationError(
            f'Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters'
        )
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f'Password must be at least {PASSWORD_MIN_LENGTH} characters')

    if lookup(username) is not None:
        raise DuplicateUsername()

    user = User(username=username)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration of the same name
        db.session.rollback()
        raise DuplicateUsername()
    current_app.logger.info(f"[register] user={user.id} username={user.username}")
    return user


def authenticate(username, password) -> User:
    """Return the user for a valid username/password pair.

    Raises InvalidCredentials without saying which half was wrong.
    """
    _require_credentials(username, password)
    user = lookup(username)
    if user is None:
        bcrypt.check_password_hash(_get_dummy_digest(), password)
        raise InvalidCredentials()
    if not user.check_password(password):
        raise InvalidCredentials()
    return user
