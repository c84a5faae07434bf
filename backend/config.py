import os
from datetime import timedelta

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'glyphica-dev-secret'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///glyphica.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Password hashing cost; long passwords are pre-hashed instead of rejected
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '10'))
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    # Sessions last a week
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    REMEMBER_COOKIE_DURATION = timedelta(days=7)
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', '0') == '1'
    # Leaderboard size when the caller gives no limit, and the hard cap
    LEADERBOARD_LIMIT = int(os.environ.get('LEADERBOARD_LIMIT', '50'))
    LEADERBOARD_MAX_LIMIT = int(os.environ.get('LEADERBOARD_MAX_LIMIT', '100'))
    RECENT_GAMES_LIMIT = int(os.environ.get('RECENT_GAMES_LIMIT', '10'))
    DEFAULT_GAME_MODE = os.environ.get('DEFAULT_GAME_MODE', 'classic')
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
