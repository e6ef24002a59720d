"""Piece, file and rank enumerations with their display tables."""

from enum import IntEnum
from typing import Dict, List, Tuple

import chess


class Piece(IntEnum):
    """Kinds of piece drawn on a board, plus the blank square."""

    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5
    EMPTY = 6

    @property
    def white_glyph(self) -> str:
        return WHITE_GLYPHS[self]

    @property
    def black_glyph(self) -> str:
        return BLACK_GLYPHS[self]

    def glyph(self, color: chess.Color) -> str:
        """
        Get the glyph for this piece drawn for one side.

        :param color: chess.WHITE or chess.BLACK
        :type color: chess.Color
        :return: Single-character glyph
        :rtype: str
        """
        return self.white_glyph if color == chess.WHITE else self.black_glyph


class Column(IntEnum):
    """Board files, left to right."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @property
    def upper(self) -> str:
        return COLUMN_LABELS[self]

    @property
    def lower(self) -> str:
        return COLUMN_LABELS[self].lower()


class Row(IntEnum):
    """Board ranks, top of the display first."""

    R8 = 0
    R7 = 1
    R6 = 2
    R5 = 3
    R4 = 4
    R3 = 5
    R2 = 6
    R1 = 7

    @property
    def label(self) -> str:
        return ROW_LABELS[self]


WHITE_GLYPHS: Dict[Piece, str] = {
    Piece.KING: "♔",
    Piece.QUEEN: "♕",
    Piece.ROOK: "♖",
    Piece.BISHOP: "♗",
    Piece.KNIGHT: "♘",
    Piece.PAWN: "♙",
    Piece.EMPTY: " ",
}

BLACK_GLYPHS: Dict[Piece, str] = {
    Piece.KING: "♚",
    Piece.QUEEN: "♛",
    Piece.ROOK: "♜",
    Piece.BISHOP: "♝",
    Piece.KNIGHT: "♞",
    Piece.PAWN: "♟",
    Piece.EMPTY: " ",
}

COLUMN_LABELS: Dict[Column, str] = {column: "ABCDEFGH"[column] for column in Column}

ROW_LABELS: Dict[Row, str] = {row: "87654321"[row] for row in Row}

STARTING_ROW: List[Piece] = [
    Piece.ROOK, Piece.KNIGHT, Piece.BISHOP, Piece.QUEEN,
    Piece.KING, Piece.BISHOP, Piece.KNIGHT, Piece.ROOK,
]


def square_key(column: Column, row: Row) -> str:
    """
    Build the algebraic key of a square, e.g. 'e4'.

    :param column: File of the square
    :type column: Column
    :param row: Rank of the square
    :type row: Row
    :return: Lower-case file letter followed by the rank digit
    :rtype: str
    """
    return Column(column).lower + Row(row).label


def square_index(column: Column, row: Row) -> int:
    """
    Map a square to its 0-63 index, a8 first and h1 last.

    :param column: File of the square
    :type column: Column
    :param row: Rank of the square
    :type row: Row
    :return: Index in range 0..63
    :rtype: int
    """
    return int(row) * 8 + int(column)


def square_from_index(index: int) -> Tuple[Column, Row]:
    """
    Inverse of square_index.

    :param index: Index in range 0..63
    :type index: int
    :return: (column, row) pair
    :rtype: Tuple[Column, Row]
    :raises ValueError: If the index is outside 0..63
    """
    if not 0 <= index < 64:
        raise ValueError(f"Square index out of range: {index}")
    row, column = divmod(index, 8)
    return Column(column), Row(row)


SQUARE_KEYS: List[str] = [square_key(*square_from_index(index)) for index in range(64)]
