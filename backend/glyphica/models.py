from datetime import datetime, timezone
from flask import current_app
from flask_login import UserMixin
from glyphica import db, bcrypt


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _isoformat(value):
    return value.isoformat() + 'Z' if value else None


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(20), nullable=False)
    # Lower-cased username; the unique index makes names case-insensitive.
    # Wider than username since lower() can lengthen it ('İ' becomes two characters)
    username_key = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    game_records = db.relationship('GameRecord', back_populates='user', lazy='dynamic')
    achievements = db.relationship('AchievementUnlock', back_populates='user', lazy='dynamic')

    def __init__(self, **kwargs):
        super(User, self).__init__(**kwargs)
        if self.username and not self.username_key:
            self.username_key = self.username.lower()

    def set_password(self, password):
        rounds = current_app.config.get('BCRYPT_LOG_ROUNDS', 12)
        self.password_hash = bcrypt.generate_password_hash(password, rounds=rounds).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self, include_created=False):
        data = {
            'id': self.id,
            'username': self.username,
        }
        if include_created:
            data['created_at'] = _isoformat(self.created_at)
        return data

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"


class GameRecord(db.Model):
    __tablename__ = 'game_record'
    __table_args__ = (
        db.Index('ix_game_record_mode_score', 'mode', 'score'),
    )
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False, default=0)
    wave = db.Column(db.Integer, nullable=False, default=1)
    accuracy = db.Column(db.Integer, nullable=False, default=100)
    wpm = db.Column(db.Float, nullable=False, default=0)
    mode = db.Column(db.String(32), nullable=False, default='classic')
    kills = db.Column(db.Integer, nullable=False, default=0)
    played_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    user = db.relationship('User', back_populates='game_records')

    def to_dict(self):
        return {
            'id': self.id,
            'score': self.score,
            'wave': self.wave,
            'accuracy': self.accuracy,
            'wpm': self.wpm,
            'mode': self.mode,
            'kills': self.kills,
            'played_at': _isoformat(self.played_at),
        }

    def __repr__(self):
        return f"<GameRecord(id={self.id}, user_id={self.user_id}, mode='{self.mode}', score={self.score})>"


class AchievementUnlock(db.Model):
    __tablename__ = 'achievement_unlock'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'achievement_id', name='uq_achievement_unlock_user_achievement'),
    )
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    achievement_id = db.Column(db.String(64), nullable=False)
    unlocked_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    user = db.relationship('User', back_populates='achievements')

    def to_dict(self):
        return {
            'id': self.id,
            'achievement_id': self.achievement_id,
            'unlocked_at': _isoformat(self.unlocked_at),
        }
