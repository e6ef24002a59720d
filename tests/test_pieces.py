"""Tests for piece, file and rank tables."""

import chess
import pytest

from alice_chess.pieces import (
    BLACK_GLYPHS,
    SQUARE_KEYS,
    STARTING_ROW,
    WHITE_GLYPHS,
    Column,
    Piece,
    Row,
    square_from_index,
    square_index,
    square_key,
)


def test_glyph_tables_cover_every_piece():
    """Test every piece kind has a glyph for both sides."""
    assert set(WHITE_GLYPHS) == set(Piece)
    assert set(BLACK_GLYPHS) == set(Piece)


def test_glyphs_distinct_per_side():
    """Test non-empty pieces have distinct glyphs per side and empty is blank."""
    white = [piece.white_glyph for piece in Piece if piece != Piece.EMPTY]
    black = [piece.black_glyph for piece in Piece if piece != Piece.EMPTY]
    assert len(set(white + black)) == 12
    assert Piece.EMPTY.white_glyph == " "
    assert Piece.EMPTY.black_glyph == " "


def test_glyph_by_side():
    """Test glyph() picks the side's glyph."""
    assert Piece.KING.glyph(chess.WHITE) == "♔"
    assert Piece.KING.glyph(chess.BLACK) == "♚"
    assert Piece.PAWN.glyph(chess.BLACK) == "♟"


def test_column_labels():
    """Test file labels in both forms."""
    assert "".join(column.upper for column in Column) == "ABCDEFGH"
    assert "".join(column.lower for column in Column) == "abcdefgh"


def test_row_labels_top_down():
    """Test rank labels run from 8 at the top to 1 at the bottom."""
    assert "".join(row.label for row in Row) == "87654321"
    assert Row.R8 == 0
    assert Row.R1 == 7


def test_square_keys_unique_and_complete():
    """Test the 64 keys cover the grid without collisions."""
    keys = {square_key(Column(col), Row(row)) for col in range(8) for row in range(8)}
    assert len(keys) == 64
    assert keys == set(chess.SQUARE_NAMES)


def test_square_index_bijection():
    """Test square_index and square_from_index are inverses."""
    for index in range(64):
        column, row = square_from_index(index)
        assert square_index(column, row) == index
    assert SQUARE_KEYS[0] == "a8"
    assert SQUARE_KEYS[63] == "h1"
    assert len(set(SQUARE_KEYS)) == 64


@pytest.mark.parametrize("index", [-1, 64])
def test_square_from_index_out_of_range(index):
    """Test indexes outside 0..63 are rejected."""
    with pytest.raises(ValueError):
        square_from_index(index)


def test_starting_row():
    """Test back-rank order."""
    assert STARTING_ROW == [
        Piece.ROOK, Piece.KNIGHT, Piece.BISHOP, Piece.QUEEN,
        Piece.KING, Piece.BISHOP, Piece.KNIGHT, Piece.ROOK,
    ]
