from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .bitboard import has_fewer_than_three, side_mask, side_to_move
from .movegen import generate_moves
from .topology import forms_mill, run_mask

# Mobility evaluation: every legal successor is worth a point, more if it closes a mill.


@dataclass(frozen=True)
class EvalWeights:
    move: int = 1
    mill_move: int = 5
    terminal: int = 1000


DEFAULT_WEIGHTS = EvalWeights()


def mobility_score(state: int, moves: List[int], weights: EvalWeights = DEFAULT_WEIGHTS) -> int:
    """Non-negative score of `moves` for the side to move in `state`."""
    mover = side_to_move(state)
    old_runs = run_mask(side_mask(state, mover))
    score = 0
    for child in moves:
        if forms_mill(old_runs, run_mask(side_mask(child, mover))):
            score += weights.mill_move
        else:
            score += weights.move
    return score


def evaluate_for_mover(
    state: int, moves: Optional[List[int]] = None, weights: EvalWeights = DEFAULT_WEIGHTS
) -> int:
    """Score from the viewpoint of whoever is to move; a lost position is -terminal."""
    if has_fewer_than_three(state):
        return -weights.terminal
    if moves is None:
        moves = generate_moves(state)
    if not moves:
        return -weights.terminal
    return mobility_score(state, moves, weights)


def evaluate(
    state: int, perspective: int, moves: Optional[List[int]] = None, weights: EvalWeights = DEFAULT_WEIGHTS
) -> int:
    """Score of `state` for `perspective` (WHITE or BLACK); positive is good for it.

    `moves` may carry the already generated successors of `state`.
    """
    score = evaluate_for_mover(state, moves, weights)
    return score if side_to_move(state) == perspective else -score
