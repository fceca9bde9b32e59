from __future__ import annotations

from typing import List

from .bitboard import BOARD_MASK, make_state, side_mask, side_to_move, to_place
from .topology import ADJACENCY, forms_mill, run_mask


def _bits(mask: int) -> List[int]:
    out: List[int] = []
    m = mask
    while m:
        lsb = m & -m
        out.append(lsb.bit_length() - 1)
        m ^= lsb
    return out


def own_boards(own: int, opp: int, own_to_place: int) -> List[int]:
    """Every new occupancy mask the mover can reach in one ply, captures ignored."""
    empty = ~(own | opp) & BOARD_MASK
    boards: List[int] = []
    if own_to_place > 0:
        for sq in _bits(empty):
            boards.append(own | (1 << sq))
        return boards

    # Three or fewer pieces fly to any empty point.
    flying = own.bit_count() <= 3
    for src in _bits(own):
        targets = empty if flying else ADJACENCY[src] & empty
        lifted = own & ~(1 << src)
        for dst in _bits(targets):
            boards.append(lifted | (1 << dst))
    return boards


def removable_pieces(opp: int) -> int:
    """Opposing points a mill may capture: those standing in a mill, else all of them."""
    return (opp & run_mask(opp)) or opp


def generate_moves(state: int) -> List[int]:
    """All states reachable from `state` in one ply, including mill captures.

    The list is duplicate-free and enumerated in ascending point order
    (source, then destination, then captured point). The order is stable,
    not meaningful.
    """
    side = side_to_move(state)
    own = side_mask(state, side)
    opp = side_mask(state, 1 - side)
    own_left = to_place(state, side)
    opp_left = to_place(state, 1 - side)

    boards = own_boards(own, opp, own_left)
    if own_left > 0:
        own_left -= 1

    old_runs = run_mask(own)
    victims = _bits(removable_pieces(opp))
    moves: List[int] = []
    for board in boards:
        if forms_mill(old_runs, run_mask(board)):
            for sq in victims:
                moves.append(make_state(side, board, opp & ~(1 << sq), own_left, opp_left))
        else:
            moves.append(make_state(side, board, opp, own_left, opp_left))
    return moves

