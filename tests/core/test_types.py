"""Tests for square types and coordinate conversion."""

import pytest

from schack.core.errors import InvalidCoordinate, InvalidNotation, SchackError
from schack.core.types import (
    all_squares,
    filerank_to_square,
    is_valid_square,
    pixel_to_square,
    square_to_filerank,
    to_tuple_moves,
)


class TestSquareToFilerank:
    def test_top_left_is_a8(self) -> None:
        assert square_to_filerank(0, 0) == "A8"

    def test_bottom_right_is_h1(self) -> None:
        assert square_to_filerank(7, 7) == "H1"

    def test_column_is_file_and_row_is_rank(self) -> None:
        assert square_to_filerank(4, 6) == "E2"
        assert square_to_filerank(6, 7) == "G1"
        assert square_to_filerank(0, 7) == "A1"
        assert square_to_filerank(7, 0) == "H8"

    @pytest.mark.parametrize(
        ("column", "row"), [(-1, 0), (0, -1), (8, 0), (0, 8), (True, 0), (1.0, 2)]
    )
    def test_out_of_range_raises(self, column: object, row: object) -> None:
        with pytest.raises(InvalidCoordinate):
            square_to_filerank(column, row)  # type: ignore[arg-type]


class TestFilerankToSquare:
    def test_e4(self) -> None:
        # E is the fifth file; rank 4 is row 7 - (4 - 1)
        assert filerank_to_square("E4") == (4, 4)

    def test_corners(self) -> None:
        assert filerank_to_square("A8") == (0, 0)
        assert filerank_to_square("H1") == (7, 7)
        assert filerank_to_square("A1") == (0, 7)

    @pytest.mark.parametrize("code", ["e4", "I1", "A0", "A9", "", "A10", "AA", "4E"])
    def test_invalid_notation_raises(self, code: str) -> None:
        with pytest.raises(InvalidNotation):
            filerank_to_square(code)

    def test_non_string_raises(self) -> None:
        with pytest.raises(InvalidNotation):
            filerank_to_square(None)  # type: ignore[arg-type]

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            filerank_to_square("Z9")
        assert issubclass(InvalidNotation, SchackError)
        assert issubclass(InvalidCoordinate, SchackError)


def test_round_trip_over_whole_board() -> None:
    for column, row in all_squares():
        assert filerank_to_square(square_to_filerank(column, row)) == (column, row)


def test_to_tuple_moves_preserves_order() -> None:
    assert to_tuple_moves(["E3", "E4"]) == [(4, 5), (4, 4)]
    assert to_tuple_moves([]) == []


def test_to_tuple_moves_rejects_bad_code() -> None:
    with pytest.raises(InvalidNotation):
        to_tuple_moves(["E3", "X4"])


class TestPixelToSquare:
    def test_origin(self) -> None:
        assert pixel_to_square(0, 0, 90) == (0, 0)

    def test_tile_edges(self) -> None:
        assert pixel_to_square(89.9, 89.9, 90) == (0, 0)
        assert pixel_to_square(90, 0, 90) == (1, 0)
        assert pixel_to_square(0, 90, 90) == (0, 1)

    def test_x_is_column_y_is_row(self) -> None:
        assert pixel_to_square(4 * 90 + 10, 6 * 90 + 10, 90) == (4, 6)

    def test_last_square(self) -> None:
        assert pixel_to_square(719, 719, 90) == (7, 7)

    @pytest.mark.parametrize(("x", "y"), [(720, 0), (0, 720), (-1, 5), (5, -0.5)])
    def test_outside_board_is_none(self, x: float, y: float) -> None:
        assert pixel_to_square(x, y, 90) is None

    def test_non_positive_tile_raises(self) -> None:
        with pytest.raises(ValueError):
            pixel_to_square(10, 10, 0)


def test_is_valid_square() -> None:
    assert is_valid_square(0, 7)
    assert not is_valid_square(8, 0)
    assert not is_valid_square(False, 0)
    assert not is_valid_square("0", 0)


def test_all_squares_row_major() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert squares[0] == (0, 0)
    assert squares[1] == (1, 0)
    assert squares[8] == (0, 1)
    assert squares[-1] == (7, 7)
