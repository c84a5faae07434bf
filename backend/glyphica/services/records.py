import math
from typing import List

from flask import current_app

from glyphica import db
from glyphica.errors import ValidationError, NotFound
from glyphica.models import GameRecord, User

MODE_MAX_LENGTH = 32
# Largest value an INTEGER column holds on every supported database
INTEGER_COLUMN_MAX = 2**31 - 1

# field -> (default, minimum, maximum)
INTEGER_FIELDS = {
    'score': (0, 0, INTEGER_COLUMN_MAX),
    'wave': (1, 1, INTEGER_COLUMN_MAX),
    'accuracy': (100, 0, 100),
    'kills': (0, 0, INTEGER_COLUMN_MAX),
}


def _parse_integer(name, value, minimum, maximum):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f'{name} must be a number')
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f'{name} must be a whole number')
        value = int(value)
    if value < minimum or value > maximum:
        raise ValidationError(f'{name} must be between {minimum} and {maximum}')
    return value


def _parse_wpm(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError('wpm must be a number')
    try:
        value = float(value)
    except OverflowError:
        raise ValidationError('wpm must be a finite number')
    if not math.isfinite(value):
        raise ValidationError('wpm must be a finite number')
    if value < 0:
        raise ValidationError('wpm must be at least 0')
    return value


def _parse_mode(value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError('mode must be a non-empty string')
    if len(value) > MODE_MAX_LENGTH:
        raise ValidationError(f'mode must be at most {MODE_MAX_LENGTH} characters')
    return value


def append(user_id: int, data: dict) -> GameRecord:
    """Store one finished game for a user.

    Missing fields take their defaults (score 0, wave 1, accuracy 100,
    wpm 0, kills 0, mode from DEFAULT_GAME_MODE). The record id and
    played_at are always assigned here; anything the client sent for them
    is ignored.
    """
    if db.session.get(User, user_id) is None:
        raise NotFound('User not found')
    data = data or {}
    if not isinstance(data, dict):
        raise ValidationError('Game data must be an object')

    fields = {}
    for name, (default, minimum, maximum) in INTEGER_FIELDS.items():
        value = data.get(name)
        fields[name] = default if value is None else _parse_integer(name, value, minimum, maximum)
    wpm = data.get('wpm')
    fields['wpm'] = 0 if wpm is None else _parse_wpm(wpm)
    mode = data.get('mode')
    fields['mode'] = current_app.config.get('DEFAULT_GAME_MODE', 'classic') if mode is None else _parse_mode(mode)

    record = GameRecord(user_id=user_id, **fields)
    db.session.add(record)
    db.session.commit()
    current_app.logger.info(
        f"[game] user={user_id} game={record.id} mode={record.mode} score={record.score} wave={record.wave}"
    )
    return record


def records_for_user(user_id: int) -> List[GameRecord]:
    """All of a user's game records. Callers must not rely on the order."""
    return GameRecord.query.filter_by(user_id=user_id).order_by(GameRecord.id).all()
