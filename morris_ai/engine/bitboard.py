from __future__ import annotations

# The whole game state is one 64-bit int, points numbered 0..23 (see topology.py).
#
#   bits  0-23  White occupancy
#   bits 24-30  White pieces still to place
#   bit  31     reserved, always 0
#   bits 32-55  Black occupancy
#   bits 56-62  Black pieces still to place
#   bit  63     side to move (0=White, 1=Black)
#
# States are never mutated; every transition packs a new int.

WHITE = 0
BLACK = 1

BOARD_MASK = 0xFFFFFF
COUNT_MASK = 0x7F

_TO_PLACE_SHIFT = 24
_SIDE_SHIFT = 32

PIECES_PER_SIDE = 9
INITIAL_STATE = (PIECES_PER_SIDE << 24) | (PIECES_PER_SIDE << 56)  # 0x0900000009000000

SIDE_NAMES = ("White", "Black")


def popcount(x: int) -> int:
    return x.bit_count()


def side_to_move(state: int) -> int:
    return (state >> 63) & 1


def side_mask(state: int, side: int) -> int:
    """Occupancy mask (24 bits) of `side`."""
    return (state >> (_SIDE_SHIFT * side)) & BOARD_MASK


def to_place(state: int, side: int) -> int:
    """Pieces `side` still holds in hand."""
    return (state >> (_SIDE_SHIFT * side + _TO_PLACE_SHIFT)) & COUNT_MASK


def pieces_on_board(state: int, side: int) -> int:
    return popcount(side_mask(state, side))


# Phase predicates, always for the side to move.

def is_placement_phase(state: int) -> bool:
    return to_place(state, side_to_move(state)) > 0


def is_movement_phase(state: int) -> bool:
    if is_placement_phase(state):
        return False
    return pieces_on_board(state, side_to_move(state)) > 3


def is_flying_phase(state: int) -> bool:
    if is_placement_phase(state):
        return False
    return pieces_on_board(state, side_to_move(state)) == 3


def has_fewer_than_three(state: int) -> bool:
    """Loss condition: past placement with fewer than three pieces left."""
    if is_placement_phase(state):
        return False
    return pieces_on_board(state, side_to_move(state)) < 3


def phase_name(state: int) -> str:
    if is_placement_phase(state):
        return "placement"
    if is_movement_phase(state):
        return "movement"
    return "flying"


def pack_state(white: int, black: int, white_to_place: int, black_to_place: int, stm: int) -> int:
    return (
        (white & BOARD_MASK)
        | (white_to_place & COUNT_MASK) << 24
        | (black & BOARD_MASK) << 32
        | (black_to_place & COUNT_MASK) << 56
        | (stm & 1) << 63
    )


def make_state(mover: int, own: int, opp: int, own_to_place: int, opp_to_place: int) -> int:
    """Pack the state that follows a ply by `mover`; the opponent is to move next.

    No validation: callers must hand in disjoint masks and sane counters.
    """
    if mover == WHITE:
        return pack_state(own, opp, own_to_place, opp_to_place, BLACK)
    return pack_state(opp, own, opp_to_place, own_to_place, WHITE)
