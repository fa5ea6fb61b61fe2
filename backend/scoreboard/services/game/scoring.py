from dataclasses import dataclass
from typing import Any, Union

from scoreboard.errors import NotFoundError, Rejected, ValidationError
from scoreboard.state import GameState, HistoryEntry, Player


@dataclass(frozen=True)
class ScoreApplied:
    player: Player
    entry: HistoryEntry

    ok = True


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def ingest_score(state: GameState, event: Any) -> Union[ScoreApplied, Rejected]:
    """Apply one scoring event to ``state``.

    The event carries ``playerId``, ``points`` and ``slotLabel``. A points value
    of 0 is a real play and is recorded; only a missing value is rejected.
    Nothing is mutated unless the play is accepted.
    """
    if not isinstance(event, dict):
        return Rejected(ValidationError('Score event must be an object', event))

    player_id = event.get('playerId')
    points = event.get('points')
    slot_label = event.get('slotLabel')

    if not player_id or points is None or not slot_label:
        return Rejected(ValidationError('Incomplete score data', event))
    if not _is_int(player_id) or not _is_int(points):
        return Rejected(ValidationError('playerId and points must be integers', event))
    if not isinstance(slot_label, str):
        return Rejected(ValidationError('slotLabel must be a string', event))

    player = state.find_player(player_id)
    if player is None:
        return Rejected(NotFoundError(f'Player {player_id} not found', event))

    player.score += points
    entry = HistoryEntry.record(player, slot_label, points)
    state.record_play(entry)
    return ScoreApplied(player=player, entry=entry)
