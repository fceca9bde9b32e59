"""Operations the engine exposes to game drivers and players."""

from __future__ import annotations

from typing import List, Optional

from .bitboard import INITIAL_STATE, has_fewer_than_three, side_to_move
from .eval import evaluate
from .movegen import generate_moves
from .search import SearchLimits, Searcher

__all__ = [
    "initial_state",
    "legal_successors",
    "is_terminal",
    "winner",
    "evaluate",
    "agent_choose_move",
]


def initial_state() -> int:
    return INITIAL_STATE


def legal_successors(state: int) -> List[int]:
    return generate_moves(state)


def is_terminal(state: int, moves: Optional[List[int]] = None) -> bool:
    """The side to move has lost: too few pieces, or nothing to play."""
    if has_fewer_than_three(state):
        return True
    if moves is None:
        moves = generate_moves(state)
    return not moves


def winner(state: int, moves: Optional[List[int]] = None) -> Optional[int]:
    """WHITE or BLACK once the game is over, else None."""
    if is_terminal(state, moves):
        return 1 - side_to_move(state)
    return None


def agent_choose_move(state: int, agent: Optional[Searcher] = None, limits: Optional[SearchLimits] = None) -> int:
    """Pick a move with `agent`, or with a fresh searcher playing the side to move.

    Raises NoLegalMoveError when `state` is already lost; check is_terminal first.
    """
    if agent is None:
        agent = Searcher(side_to_move(state), limits)
    return agent.choose_move(state)
