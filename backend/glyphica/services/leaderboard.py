from typing import Dict, List

from flask import current_app

from glyphica.models import GameRecord, User

UNKNOWN_USERNAME = 'Unknown'


def _is_better(candidate: GameRecord, current: GameRecord) -> bool:
    # Higher score wins; on equal score the earlier game (then lower id) is kept
    if candidate.score != current.score:
        return candidate.score > current.score
    return (candidate.played_at, candidate.id) < (current.played_at, current.id)


def best_per_user(records: List[GameRecord]) -> Dict[int, GameRecord]:
    best: Dict[int, GameRecord] = {}
    for record in records:
        current = best.get(record.user_id)
        if current is None or _is_better(record, current):
            best[record.user_id] = record
    return best


def rank(mode: str, limit: int = 20, include_played_at: bool = False) -> List[dict]:
    """Rank users by their best score in ``mode``.

    Each user appears once, with the record holding their highest score.
    Records whose user cannot be found are listed as "Unknown".
    """
    records = GameRecord.query.filter_by(mode=mode).order_by(GameRecord.id).all()
    best = best_per_user(records)

    user_ids = list(best.keys())
    usernames = {}
    if user_ids:
        usernames = {
            u.id: u.username
            for u in User.query.filter(User.id.in_(user_ids)).all()
        }

    ordered = sorted(best.values(), key=lambda r: (-r.score, r.played_at, r.id))[:max(limit, 0)]
    entries = []
    for record in ordered:
        entry = {
            'username': usernames.get(record.user_id, UNKNOWN_USERNAME),
            'score': record.score,
            'wave': record.wave,
            'wpm': record.wpm,
            'accuracy': record.accuracy,
        }
        if include_played_at:
            entry['played_at'] = record.to_dict()['played_at']
        entries.append(entry)

    current_app.logger.info(f"[leaderboard] mode={mode} users={len(best)} entries={len(entries)}")
    return entries
