"""Per-user statistics derived from the full game history.

Two views exist and they deliberately differ:

- ``compute_profile`` backs the profile page. Averages are left
  unrounded and the payload carries recent games and achievements.
- ``compute_summary`` is the compact numbers-only view. Averages are
  rounded to one decimal and the total score is included.
"""
from typing import List

from flask import current_app

from glyphica.models import GameRecord
from glyphica.services.records import records_for_user
from glyphica.services.achievements import unlocked_for_user


def _empty_stats() -> dict:
    return {
        'totalGames': 0,
        'bestScore': 0,
        'bestWave': 0,
        'avgWpm': 0,
        'avgAccuracy': 0,
        'totalKills': 0,
    }


def _aggregate(records: List[GameRecord]) -> dict:
    total_games = len(records)
    return {
        'totalGames': total_games,
        'bestScore': max(r.score for r in records),
        'bestWave': max(r.wave for r in records),
        'avgWpm': sum(r.wpm for r in records) / total_games,
        'avgAccuracy': sum(r.accuracy for r in records) / total_games,
        'totalKills': sum(r.kills for r in records),
    }


def recent_games(records: List[GameRecord], limit: int) -> List[GameRecord]:
    """Most recent first; records played at the same instant put the later insert first."""
    ordered = sorted(records, key=lambda r: (r.played_at, r.id), reverse=True)
    return ordered[:limit]


def compute_profile(user_id: int) -> dict:
    records = records_for_user(user_id)
    if not records:
        return {
            'stats': _empty_stats(),
            'recentGames': [],
            'achievements': [],
        }

    limit = int(current_app.config.get('RECENT_GAMES_LIMIT', 10))
    return {
        'stats': _aggregate(records),
        'recentGames': [r.to_dict() for r in recent_games(records, limit)],
        'achievements': [a.to_dict() for a in unlocked_for_user(user_id)],
    }


def compute_summary(user_id: int) -> dict:
    records = records_for_user(user_id)
    if not records:
        summary = _empty_stats()
        summary['totalScore'] = 0
        return summary

    summary = _aggregate(records)
    summary['avgWpm'] = round(summary['avgWpm'], 1)
    summary['avgAccuracy'] = round(summary['avgAccuracy'], 1)
    summary['totalScore'] = sum(r.score for r in records)
    return summary
