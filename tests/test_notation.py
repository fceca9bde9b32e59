"""
Tests for point notation and board rendering.
"""

import pytest
from morris_ai.engine.bitboard import INITIAL_STATE, WHITE, pack_state
from morris_ai.engine.movegen import generate_moves
from morris_ai.engine.notation import (
    POINT_NAMES,
    describe_move,
    moves_to_string,
    notation_to_point,
    point_to_notation,
    render_board,
)


class TestPointNotation:
    """Point index <-> name conversion."""

    def test_point_to_notation(self):
        assert point_to_notation(0) == "a7"
        assert point_to_notation(2) == "g7"
        assert point_to_notation(4) == "d6"
        assert point_to_notation(9) == "a4"
        assert point_to_notation(14) == "g4"
        assert point_to_notation(21) == "a1"
        assert point_to_notation(23) == "g1"

    def test_notation_to_point(self):
        assert notation_to_point("a7") == 0
        assert notation_to_point("e3") == 17
        # case and whitespace are ignored
        assert notation_to_point("G1") == 23
        assert notation_to_point(" d5\n") == 7

    def test_round_trip_all_points(self):
        assert len(set(POINT_NAMES)) == 24
        for p in range(24):
            assert notation_to_point(point_to_notation(p)) == p

    def test_invalid_points(self):
        with pytest.raises(ValueError):
            point_to_notation(-1)
        with pytest.raises(ValueError):
            point_to_notation(24)

    def test_invalid_notation(self):
        for bad in ("", "d4", "a2", "h1", "a77", "7a", "xx"):
            with pytest.raises(ValueError):
                notation_to_point(bad)


class TestMoveDescription:
    """Plies rendered from before/after state pairs."""

    def test_placement(self):
        after = pack_state(1 << 4, 0, 8, 9, 1)
        assert describe_move(INITIAL_STATE, after) == "White: d6"

    def test_move_with_capture(self):
        before = pack_state(
            (1 << 0) | (1 << 1) | (1 << 14) | (1 << 20),
            (1 << 3) | (1 << 5) | (1 << 9) | (1 << 22),
            0, 0, WHITE,
        )
        after = pack_state(
            (1 << 0) | (1 << 1) | (1 << 2) | (1 << 20),
            (1 << 5) | (1 << 9) | (1 << 22),
            0, 0, 1,
        )
        assert after in generate_moves(before)
        assert describe_move(before, after) == "White: g4-g7 xb6"

    def test_moves_to_string(self):
        s1 = generate_moves(INITIAL_STATE)[0]
        s2 = generate_moves(s1)[0]
        assert moves_to_string([INITIAL_STATE, s1, s2]) == "White: a7, Black: d7"
        assert moves_to_string([INITIAL_STATE]) == ""
        assert moves_to_string([]) == ""


class TestRenderBoard:

    def test_initial_board(self):
        lines = render_board(INITIAL_STATE).splitlines()
        assert lines[0] == "White to play: Placement Phase"
        assert lines[1] == "Pieces to play: White: 9, Black: 9"
        assert lines[2] == "7 O-----O-----O"
        assert lines[8] == "4 O-O-O   O-O-O"
        assert lines[-1] == "  a b c d e f g"

    def test_pieces_drawn(self):
        s = pack_state(1 << 0, 1 << 23, 8, 8, WHITE)
        lines = render_board(s).splitlines()
        assert lines[2] == "7 W-----O-----O"
        assert lines[14] == "1 O-----O-----B"
