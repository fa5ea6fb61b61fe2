from dataclasses import dataclass
from typing import Union

from scoreboard.errors import Rejected, StateError
from scoreboard.state import GameState, Player


@dataclass(frozen=True)
class TurnAdvanced:
    player: Player

    ok = True


def advance_turn(state: GameState) -> Union[TurnAdvanced, Rejected]:
    """Hand the turn to the next player, wrapping after the last one.

    The wrap is computed from the player count, so ids are expected to be the
    contiguous range 1..N. When the computed id does not exist the turn is left
    untouched and a StateError is returned.
    """
    if not state.players:
        return Rejected(StateError('No players to rotate'))

    current_id = state.current_player_id or 0
    next_id = current_id + 1
    if next_id > len(state.players):
        next_id = state.players[0].id

    nxt = state.find_player(next_id)
    if nxt is None:
        return Rejected(StateError(
            f'Next player {next_id} not found; player ids are not contiguous',
            {'currentPlayerId': state.current_player_id, 'nextPlayerId': next_id},
        ))

    for player in state.players:
        player.active = False
    nxt.active = True
    state.current_player_id = nxt.id
    return TurnAdvanced(player=nxt)
