"""
Point notation for Nine Men's Morris.

Points 0-23 are named by file (a-g) and rank (7 at the top, 1 at the bottom)
of the 7x7 grid the board is drawn on, e.g. 'a7' for the top-left corner.
"""

from __future__ import annotations

from typing import List

from .bitboard import (
    SIDE_NAMES,
    phase_name,
    side_mask,
    side_to_move,
    to_place,
    WHITE,
    BLACK,
)

POINT_NAMES = (
    "a7", "d7", "g7",
    "b6", "d6", "f6",
    "c5", "d5", "e5",
    "a4", "b4", "c4", "e4", "f4", "g4",
    "c3", "d3", "e3",
    "b2", "d2", "f2",
    "a1", "d1", "g1",
)

_POINT_INDEX = {name: i for i, name in enumerate(POINT_NAMES)}


def point_to_notation(point: int) -> str:
    """Convert point index (0-23) to notation (e.g. 'd6')."""
    if point < 0 or point > 23:
        raise ValueError(f"Invalid point: {point}")
    return POINT_NAMES[point]


def notation_to_point(notation: str) -> int:
    """Convert notation (e.g. 'D6', ' d6 ') to a point index (0-23)."""
    key = notation.strip().lower()
    if key not in _POINT_INDEX:
        raise ValueError(f"Invalid notation: {notation!r}")
    return _POINT_INDEX[key]


def _first_point(mask: int) -> str:
    if not mask:
        return "{null}"
    return point_to_notation((mask & -mask).bit_length() - 1)


def describe_move(before: int, after: int) -> str:
    """Human-readable ply, e.g. 'White: d6', 'Black: a1-a4 xd7'."""
    mover = side_to_move(before)
    own_before = side_mask(before, mover)
    own_after = side_mask(after, mover)
    removed = side_mask(before, 1 - mover) & ~side_mask(after, 1 - mover)

    lifted = own_before & ~own_after
    text = _first_point(own_after & ~own_before)
    if lifted:
        text = f"{_first_point(lifted)}-{text}"
    if removed:
        text += f" x{_first_point(removed)}"
    return f"{SIDE_NAMES[mover]}: {text}"


def moves_to_string(history: List[int]) -> str:
    """Describe every ply of a sequence of states, comma separated."""
    return ", ".join(describe_move(a, b) for a, b in zip(history, history[1:]))


def _piece(state: int, point: int) -> str:
    bit = 1 << point
    if side_mask(state, WHITE) & bit:
        return "W"
    if side_mask(state, BLACK) & bit:
        return "B"
    return "O"


def render_board(state: int) -> str:
    p = [_piece(state, i) for i in range(24)]
    lines = [
        f"{SIDE_NAMES[side_to_move(state)]} to play: {phase_name(state).capitalize()} Phase",
        f"Pieces to play: White: {to_place(state, WHITE)}, Black: {to_place(state, BLACK)}",
        f"7 {p[0]}-----{p[1]}-----{p[2]}",
        "  |     |     |",
        f"6 | {p[3]}---{p[4]}---{p[5]} |",
        "  | |   |   | |",
        f"5 | | {p[6]}-{p[7]}-{p[8]} | |",
        "  | | |   | | |",
        f"4 {p[9]}-{p[10]}-{p[11]}   {p[12]}-{p[13]}-{p[14]}",
        "  | | |   | | |",
        f"3 | | {p[15]}-{p[16]}-{p[17]} | |",
        "  | |   |   | |",
        f"2 | {p[18]}---{p[19]}---{p[20]} |",
        "  |     |     |",
        f"1 {p[21]}-----{p[22]}-----{p[23]}",
        "",
        "  a b c d e f g",
    ]
    return "\n".join(lines)
