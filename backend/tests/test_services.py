import pytest

from scoreboard.errors import NotFoundError, Rejected, StateError, ValidationError
from scoreboard.services.game.scoring import ScoreApplied, ingest_score
from scoreboard.services.game.turns import TurnAdvanced, advance_turn
from scoreboard.state import GameState, Player


@pytest.fixture()
def state():
    return GameState.create(['Player 1', 'Player 2'])


def test_score_adds_points_and_records_entry(state):
    result = ingest_score(state, {'playerId': 1, 'points': 25, 'slotLabel': 'A'})
    assert isinstance(result, ScoreApplied)
    assert result.ok
    assert result.player.score == 25
    assert result.entry.total == 25
    assert result.entry.player_name == 'Player 1'
    assert result.entry.slot_label == 'A'
    assert state.history == [result.entry]


def test_scenario_two_players_newest_first(state):
    ingest_score(state, {'playerId': 1, 'points': 25, 'slotLabel': 'A'})
    ingest_score(state, {'playerId': 2, 'points': 50, 'slotLabel': 'B'})
    assert state.find_player(1).score == 25
    assert state.find_player(2).score == 50
    assert [e.player_id for e in state.history] == [2, 1]


def test_zero_points_is_a_valid_play(state):
    result = ingest_score(state, {'playerId': 1, 'points': 0, 'slotLabel': 'rana'})
    assert isinstance(result, ScoreApplied)
    assert result.entry.points == 0
    assert len(state.history) == 1


@pytest.mark.parametrize('event', [
    {'points': 5, 'slotLabel': 'A'},
    {'playerId': 1, 'slotLabel': 'A'},
    {'playerId': 1, 'points': None, 'slotLabel': 'A'},
    {'playerId': 1, 'points': 5},
    {'playerId': 1, 'points': 5, 'slotLabel': ''},
    {'playerId': '1', 'points': 5, 'slotLabel': 'A'},
    {'playerId': 1, 'points': 'five', 'slotLabel': 'A'},
    {'playerId': 1, 'points': True, 'slotLabel': 'A'},
    {'playerId': 1, 'points': 5, 'slotLabel': 7},
    'not-an-object',
])
def test_invalid_events_are_rejected_without_mutation(state, event):
    before = state.snapshot()
    result = ingest_score(state, event)
    assert isinstance(result, Rejected)
    assert not result.ok
    assert isinstance(result.error, ValidationError)
    assert result.notice()['kind'] == 'validation'
    assert state.snapshot() == before


def test_unknown_player_is_not_found(state):
    before = state.snapshot()
    event = {'playerId': 9, 'points': 5, 'slotLabel': 'A'}
    result = ingest_score(state, event)
    assert isinstance(result.error, NotFoundError)
    assert result.notice() == {'kind': 'not_found', 'reason': 'Player 9 not found', 'data': event}
    assert state.snapshot() == before


def test_history_keeps_ten_most_recent(state):
    for i in range(11):
        ingest_score(state, {'playerId': 1, 'points': i, 'slotLabel': f'S{i}'})
    assert len(state.history) == 10
    assert [e.points for e in state.history] == list(range(10, 0, -1))
    assert all(e.slot_label != 'S0' for e in state.history)
    assert state.plays_count == 11


def test_advance_turn_moves_to_next_player(state):
    result = advance_turn(state)
    assert isinstance(result, TurnAdvanced)
    assert result.player.id == 2
    assert state.current_player_id == 2
    assert [p.active for p in state.players] == [False, True]


def test_advance_turn_wraps_to_first(state):
    advance_turn(state)
    result = advance_turn(state)
    assert result.player.id == 1
    assert [p.active for p in state.players] == [True, False]


@pytest.mark.parametrize('count', [1, 2, 3, 5])
def test_n_advances_return_to_start(count):
    state = GameState.create([f'P{i}' for i in range(1, count + 1)])
    for _ in range(count):
        assert advance_turn(state).ok
    assert state.current_player_id == 1
    assert sum(p.active for p in state.players) == 1


def test_advance_turn_without_players_is_state_error():
    result = advance_turn(GameState())
    assert isinstance(result.error, StateError)


def test_advance_turn_with_sparse_ids_is_noop():
    state = GameState(players=[Player(id=1, name='A', active=True), Player(id=5, name='B')], current_player_id=1)
    result = advance_turn(state)
    assert isinstance(result, Rejected)
    assert isinstance(result.error, StateError)
    assert state.current_player_id == 1
    assert [p.active for p in state.players] == [True, False]
