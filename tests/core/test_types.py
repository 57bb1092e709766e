"""Tests for square coordinate helpers."""

import pytest

from chesstrainer.core.types import (
    A1, E4, H1, H8,
    file_of,
    is_light_square,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)


class TestCoordinates:
    def test_corners(self) -> None:
        assert make_square(0, 0) == A1 == 0
        assert make_square(7, 0) == H1 == 7
        assert make_square(7, 7) == H8 == 63

    def test_file_and_rank_of(self) -> None:
        assert file_of(E4) == 4
        assert rank_of(E4) == 3

    def test_pair_round_trip_is_total(self) -> None:
        for file in range(8):
            for rank in range(8):
                sq = make_square(file, rank)
                assert is_valid_square(sq)
                assert (file_of(sq), rank_of(sq)) == (file, rank)


class TestLabels:
    def test_square_name(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(E4) == "e4"
        assert square_name(H8) == "h8"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("h8") == 63

    def test_label_round_trip_is_total(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("text", ["", "e", "e9", "i1", "E4", "e44", "4e"])
    def test_parse_square_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(text)


class TestSquareColor:
    def test_a1_is_dark_h1_is_light(self) -> None:
        assert not is_light_square(A1)
        assert is_light_square(H1)
        assert not is_light_square(H8)
