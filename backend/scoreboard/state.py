"""In-memory game state for the live scoreboard.

The state is owned by the keeper (see ``scoreboard.keeper``). Nothing outside
the keeper and the game services should hold a reference to it; observers and
HTTP callers only ever see ``GameState.snapshot()`` copies.
"""

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class _PlayIdClock:
    """Millisecond ids that never repeat or go backwards, even within one ms."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            now_ms = time.time_ns() // 1_000_000
            self._last = max(now_ms, self._last + 1)
            return self._last


_play_ids = _PlayIdClock()


@dataclass
class Player:
    id: int
    name: str
    score: int = 0
    active: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'score': self.score,
            'active': self.active,
        }


@dataclass(frozen=True)
class HistoryEntry:
    id: int
    player_id: int
    player_name: str
    slot_label: str
    points: int
    total: int
    timestamp: str

    @classmethod
    def record(cls, player: Player, slot_label: str, points: int) -> 'HistoryEntry':
        """Build an entry for a play already applied to ``player``."""
        return cls(
            id=_play_ids.next_id(),
            player_id=player.id,
            player_name=player.name,
            slot_label=slot_label,
            points=points,
            total=player.score,
            timestamp=utc_now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'playerId': self.player_id,
            'playerName': self.player_name,
            'slotLabel': self.slot_label,
            'points': self.points,
            'total': self.total,
            'timestamp': self.timestamp,
        }


def seed_players(names: List[str]) -> List[Player]:
    """Players with contiguous ids 1..N, the first one holding the turn."""
    return [Player(id=i, name=name, active=(i == 1)) for i, name in enumerate(names, start=1)]


@dataclass
class GameState:
    players: List[Player] = field(default_factory=list)
    current_player_id: Optional[int] = None
    history: List[HistoryEntry] = field(default_factory=list)
    session_active: bool = False
    history_limit: int = 10
    # Bookkeeping for the session archive
    plays_count: int = 0
    started_at: Optional[str] = None

    @classmethod
    def create(cls, player_names: List[str], history_limit: int = 10) -> 'GameState':
        if history_limit < 1:
            raise ValueError(f"history_limit must be at least 1, got {history_limit}")
        players = seed_players(player_names)
        return cls(
            players=players,
            current_player_id=players[0].id if players else None,
            history_limit=history_limit,
        )

    def find_player(self, player_id: Any) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    @property
    def current_player(self) -> Optional[Player]:
        return self.find_player(self.current_player_id)

    def record_play(self, entry: HistoryEntry) -> None:
        """Prepend a play and evict the oldest ones past the limit."""
        self.history.insert(0, entry)
        del self.history[self.history_limit:]
        self.plays_count += 1
        if self.started_at is None:
            self.started_at = entry.timestamp

    def reset(self) -> None:
        for player in self.players:
            player.score = 0
            player.active = player.id == 1
        self.current_player_id = 1
        self.history = []
        self.plays_count = 0
        self.started_at = utc_now_iso()
        self.session_active = True

    def snapshot(self) -> Dict[str, Any]:
        return {
            'players': [p.to_dict() for p in self.players],
            'currentPlayerId': self.current_player_id,
            'history': [e.to_dict() for e in self.history],
            'sessionActive': self.session_active,
            'playsCount': self.plays_count,
            'startedAt': self.started_at,
        }
