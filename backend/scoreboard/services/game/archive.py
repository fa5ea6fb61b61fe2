from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import func

from scoreboard import db
from scoreboard.models import GameRecord


def _parse_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None


def archive_session(snapshot: Dict[str, Any]) -> Optional[GameRecord]:
    """Store a summary of the session described by ``snapshot``.

    Sessions without plays are not archived. Database errors are logged and
    rolled back so that a failing archive never blocks the live game.
    """
    if not snapshot.get('playsCount'):
        return None

    players = snapshot.get('players') or []
    winner = max(players, key=lambda p: p['score'], default=None)
    started_at = _parse_iso(snapshot.get('startedAt'))
    ended_at = datetime.now(timezone.utc)
    duration = int((ended_at - started_at).total_seconds()) if started_at else None

    record = GameRecord(
        players_count=len(players),
        plays_count=snapshot['playsCount'],
        winner_name=winner['name'] if winner else None,
        winner_score=winner['score'] if winner else None,
        total_score=sum(p['score'] for p in players),
        started_at=started_at,
        ended_at=ended_at,
        duration_seconds=duration,
    )
    try:
        db.session.add(record)
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.error(f"[archive] failed to store session: {exc}")
        return None
    current_app.logger.info(
        f"[archive] session={record.id} plays={record.plays_count} winner={record.winner_name} score={record.winner_score}"
    )
    return record


def session_stats() -> Dict[str, Any]:
    count, plays, best, avg_total = db.session.query(
        func.count(GameRecord.id),
        func.coalesce(func.sum(GameRecord.plays_count), 0),
        func.max(GameRecord.winner_score),
        func.avg(GameRecord.total_score),
    ).one()
    return {
        'sessions': int(count or 0),
        'total_plays': int(plays or 0),
        'best_score': best,
        'average_total_score': round(float(avg_total), 2) if avg_total is not None else None,
    }
