"""Single-writer core that owns the live ``GameState``.

Every mutation (score, turn, reset) and the broadcast that follows it run
inside one lock, one event at a time, so each observer receives events in the
order they were produced. Callers never get the state itself, only snapshots.
"""

import threading
from typing import Any, Dict, List, Optional

from flask import current_app

from scoreboard.broadcast import BroadcastChannel
from scoreboard.errors import Rejected
from scoreboard.services.game.archive import archive_session
from scoreboard.services.game.scoring import ingest_score
from scoreboard.services.game.turns import advance_turn
from scoreboard.state import GameState, utc_now_iso

EXTENSION_KEY = 'score_keeper'
WELCOME_MESSAGE = 'Connected to the scoreboard server'


class ScoreKeeper:
    def __init__(self, channel: BroadcastChannel, player_names: List[str],
                 history_limit: int = 10, archive: bool = True,
                 state: Optional[GameState] = None):
        self.channel = channel
        self.archive = archive
        self.started_at = utc_now_iso()
        self._state = state if state is not None else GameState.create(player_names, history_limit=history_limit)
        self._lock = threading.Lock()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self._state.snapshot()

    # ---- Connection lifecycle ----

    def connect(self, sid: str) -> None:
        with self._lock:
            self.channel.attach(sid)
            self.channel.send(sid, 'initial_state', {
                'fullState': self._state.snapshot(),
                'message': WELCOME_MESSAGE,
            })
            self.channel.mark_connected(sid)
            status = self.channel.status(sid)
        current_app.logger.info(f"[connect] sid={sid} status={status.value} observers={self.channel.observer_count()}")

    def disconnect(self, sid: str) -> None:
        status = self.channel.detach(sid)
        current_app.logger.info(f"[disconnect] sid={sid} status={status.value} observers={self.channel.observer_count()}")

    # ---- Inbound events ----

    def submit_score(self, sid: Optional[str], event: Any):
        with self._lock:
            result = ingest_score(self._state, event)
            if isinstance(result, Rejected):
                current_app.logger.info(f"[score-rejected] sid={sid} reason={result.error.reason}")
                if sid:
                    self.channel.send(sid, 'score_error', result.notice())
                return result
            self.channel.publish('score_updated', {
                'player': result.player.to_dict(),
                'entry': result.entry.to_dict(),
                'fullState': self._state.snapshot(),
            })
        current_app.logger.info(
            f"[score] player={result.player.id} slot={result.entry.slot_label} points={result.entry.points} total={result.entry.total}"
        )
        return result

    def advance_turn(self, sid: Optional[str] = None):
        with self._lock:
            result = advance_turn(self._state)
            if isinstance(result, Rejected):
                current_app.logger.warning(f"[turn] sid={sid} rejected: {result.error.reason}")
                if sid:
                    self.channel.send(sid, 'error', result.notice())
                return result
            self.channel.publish('turn_changed', {
                'currentPlayer': result.player.to_dict(),
                'fullState': self._state.snapshot(),
            })
        current_app.logger.info(f"[turn] current player -> {result.player.id} ({result.player.name})")
        return result

    def chat(self, sid: Optional[str], data: Any) -> Dict[str, Any]:
        data = data if isinstance(data, dict) else {}
        message = {
            'text': data.get('text'),
            'author': data.get('author') or 'Anonymous',
            'timestamp': utc_now_iso(),
        }
        with self._lock:
            self.channel.publish('chat_broadcast', message)
        current_app.logger.info(f"[chat] sid={sid} author={message['author']}")
        return message

    def reset(self) -> Dict[str, Any]:
        with self._lock:
            if self.archive:
                archive_session(self._state.snapshot())
            self._state.reset()
            snapshot = self._state.snapshot()
            self.channel.publish('game_reset', {'fullState': snapshot})
        current_app.logger.info('[reset] game state reinitialized')
        return snapshot


def get_keeper() -> ScoreKeeper:
    return current_app.extensions[EXTENSION_KEY]
