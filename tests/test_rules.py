import pytest

from morris_ai.engine import (
    BLACK,
    INITIAL_STATE,
    WHITE,
    NoLegalMoveError,
    SearchLimits,
    Searcher,
    agent_choose_move,
    initial_state,
    is_terminal,
    legal_successors,
    winner,
)
from morris_ai.engine.bitboard import pack_state, pieces_on_board, side_to_move


def bits(*points):
    m = 0
    for p in points:
        m |= 1 << p
    return m


BLOCKED = pack_state(bits(0, 2, 21, 23), bits(1, 9, 14, 22), 0, 0, WHITE)
TWO_PIECES = pack_state(bits(0, 2), bits(9, 10, 12, 13), 0, 0, WHITE)


def test_initial_state():
    assert initial_state() == INITIAL_STATE
    assert len(legal_successors(initial_state())) == 24
    assert not is_terminal(INITIAL_STATE)
    assert winner(INITIAL_STATE) is None


def test_terminal_positions():
    assert is_terminal(BLOCKED)
    assert winner(BLOCKED) == BLACK
    assert is_terminal(TWO_PIECES)
    assert winner(TWO_PIECES) == BLACK
    s = pack_state(bits(9, 10, 12, 13), bits(0, 2), 0, 0, BLACK)
    assert winner(s) == WHITE


def test_is_terminal_uses_given_moves():
    assert is_terminal(INITIAL_STATE, [])
    assert not is_terminal(BLOCKED, [INITIAL_STATE])


def test_agent_choose_move_defaults_to_side_to_move():
    s = pack_state(bits(3, 5, 22), bits(0, 1, 14, 20), 0, 0, BLACK)
    best = agent_choose_move(s, limits=SearchLimits(max_depth=1))
    assert best in legal_successors(s)
    assert pieces_on_board(best, WHITE) == 2
    assert side_to_move(best) == WHITE


def test_agent_choose_move_with_agent():
    agent = Searcher(WHITE, SearchLimits(max_depth=2))
    best = agent_choose_move(INITIAL_STATE, agent)
    assert best in legal_successors(INITIAL_STATE)
    assert len(agent.tt) > 0


def test_agent_choose_move_on_lost_state():
    with pytest.raises(NoLegalMoveError):
        agent_choose_move(BLOCKED, limits=SearchLimits(max_depth=2))
