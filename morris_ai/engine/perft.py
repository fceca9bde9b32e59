from __future__ import annotations

from .bitboard import has_fewer_than_three
from .movegen import generate_moves


def perft(state: int, depth: int) -> int:
    """Leaf count of the successor tree `depth` plies deep; lost positions add nothing."""
    if depth == 0:
        return 1
    if has_fewer_than_three(state):
        return 0
    total = 0
    for child in generate_moves(state):
        total += perft(child, depth - 1)
    return total


def parse_state(text: str) -> int:
    """Packed state from hex ("0x0900000009000000") or decimal text."""
    value = int(text.strip(), 0)
    if not 0 <= value < 1 << 64:
        raise ValueError(f"state out of range: {text}")
    return value
