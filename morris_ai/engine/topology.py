from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .bitboard import popcount

# Point numbering, row by row:
#
#     0-----------1-----------2
#     |           |           |
#     |     3-----4-----5     |
#     |     |     |     |     |
#     |     |  6--7--8  |     |
#     |     |  |     |  |     |
#     9----10-11    12-13----14
#     |     |  |     |  |     |
#     |     | 15-16-17  |     |
#     |     |     |     |     |
#     |    18----19----20     |
#     |           |           |
#    21----------22----------23

NUM_POINTS = 24

# The 16 mills, three bits each.
MILLS: Tuple[int, ...] = (
    # rows
    0x000007,  # 0 1 2
    0x000038,  # 3 4 5
    0x0001C0,  # 6 7 8
    0x000E00,  # 9 10 11
    0x007000,  # 12 13 14
    0x038000,  # 15 16 17
    0x1C0000,  # 18 19 20
    0xE00000,  # 21 22 23
    # columns
    0x200201,  # 0 9 21
    0x040408,  # 3 10 18
    0x008840,  # 6 11 15
    0x000092,  # 1 4 7
    0x490000,  # 16 19 22
    0x021100,  # 8 12 17
    0x102020,  # 5 13 20
    0x804004,  # 2 14 23
)

# Single-step neighbours of each point (movement phase only).
ADJACENCY: Tuple[int, ...] = (
    0x000202,  # 0: 1 9
    0x000015,  # 1: 0 2 4
    0x004002,  # 2: 1 14
    0x000410,  # 3: 4 10
    0x0000AA,  # 4: 1 3 5 7
    0x002010,  # 5: 4 13
    0x000880,  # 6: 7 11
    0x000150,  # 7: 4 6 8
    0x001080,  # 8: 7 12
    0x200401,  # 9: 0 10 21
    0x040A08,  # 10: 3 9 11 18
    0x008440,  # 11: 6 10 15
    0x022100,  # 12: 8 13 17
    0x105020,  # 13: 5 12 14 20
    0x802004,  # 14: 2 13 23
    0x010800,  # 15: 11 16
    0x0A8000,  # 16: 15 17 19
    0x011000,  # 17: 12 16
    0x080400,  # 18: 10 19
    0x550000,  # 19: 16 18 20 22
    0x082000,  # 20: 13 19
    0x400200,  # 21: 9 22
    0xA80000,  # 22: 19 21 23
    0x404000,  # 23: 14 22
)


@lru_cache(maxsize=1 << 16)
def run_mask(board: int) -> int:
    """Union of the points of every mill fully occupied in `board` (one side's 24-bit mask)."""
    runs = 0
    for mill in MILLS:
        if (board & mill) == mill:
            runs |= mill
    return runs


def forms_mill(old_runs: int, new_runs: int) -> bool:
    """True when a ply turned run mask `old_runs` into `new_runs` by closing a mill.

    Whole run masks are compared, so a piece that leaves one mill and closes
    another in the same ply also counts.
    """
    return new_runs != old_runs and popcount(new_runs) >= popcount(old_runs)
