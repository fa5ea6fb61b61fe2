from datetime import datetime, timezone

from scoreboard import db


def _utcnow():
    return datetime.now(timezone.utc)


class GameRecord(db.Model):
    """Summary of one finished session, written when the live game is reset."""
    __tablename__ = 'game_record'
    id = db.Column(db.Integer, primary_key=True)
    players_count = db.Column(db.Integer, nullable=False)
    plays_count = db.Column(db.Integer, nullable=False, default=0)
    winner_name = db.Column(db.String(64), nullable=True)
    winner_score = db.Column(db.Integer, nullable=True)
    total_score = db.Column(db.Integer, nullable=False, default=0)
    started_at = db.Column(db.DateTime(timezone=True), nullable=True)
    ended_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    duration_seconds = db.Column(db.Integer, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'players_count': self.players_count,
            'plays_count': self.plays_count,
            'winner_name': self.winner_name,
            'winner_score': self.winner_score,
            'total_score': self.total_score,
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'ended_at': self.ended_at.isoformat() if self.ended_at else None,
            'duration_seconds': self.duration_seconds,
        }
