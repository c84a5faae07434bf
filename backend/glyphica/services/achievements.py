from typing import List

from flask import current_app
from sqlalchemy.exc import IntegrityError

from glyphica import db
from glyphica.errors import ValidationError
from glyphica.models import AchievementUnlock

ACHIEVEMENT_ID_MAX_LENGTH = 64


def _find_unlock(user_id, achievement_id):
    return AchievementUnlock.query.filter_by(user_id=user_id, achievement_id=achievement_id).first()


def unlock(user_id: int, achievement_id) -> dict:
    """Record that a user unlocked an achievement.

    Unlocking the same achievement twice is a no-op: the first row and its
    timestamp stay as they are and ``created`` comes back False.
    """
    if not isinstance(achievement_id, str) or not achievement_id.strip():
        raise ValidationError('Achievement id is required')
    if len(achievement_id) > ACHIEVEMENT_ID_MAX_LENGTH:
        raise ValidationError(f'Achievement id must be at most {ACHIEVEMENT_ID_MAX_LENGTH} characters')

    if _find_unlock(user_id, achievement_id) is not None:
        return {'created': False}

    db.session.add(AchievementUnlock(user_id=user_id, achievement_id=achievement_id))
    try:
        db.session.commit()
    except IntegrityError:
        # A concurrent request inserted the same pair first
        db.session.rollback()
        return {'created': False}
    current_app.logger.info(f"[achievement] user={user_id} achievement={achievement_id}")
    return {'created': True}


def unlocked_for_user(user_id: int) -> List[AchievementUnlock]:
    return (
        AchievementUnlock.query
        .filter_by(user_id=user_id)
        .order_by(AchievementUnlock.unlocked_at, AchievementUnlock.id)
        .all()
    )
