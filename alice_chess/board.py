"""Screen geometry and rendering of one chess board."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import chess

from alice_chess.pieces import STARTING_ROW, Column, Piece, Row, square_key
from alice_chess.scheme import ColourScheme, StyleScheme
from alice_chess.screen import Screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """Absolute display coordinate of a square's anchor cell."""

    x: int
    y: int


class Board:
    """
    One 8x8 board drawn on the screen.

    Each logical square covers x_scale by y_scale display cells; the piece
    glyph lives in the square's anchor cell. The square-to-coordinate map is
    computed once here and never changes; only the drawn glyphs do.

    :param x: Column of the board origin
    :type x: int
    :param y: Row of the board origin
    :type y: int
    :param x_scale: Display columns per square
    :type x_scale: int
    :param y_scale: Display rows per square
    :type y_scale: int
    :param screen: Screen the board is drawn on
    :type screen: Screen
    :param colour_scheme: Colour roles
    :type colour_scheme: ColourScheme
    :param style_scheme: Styles derived from the colour roles
    :type style_scheme: StyleScheme
    :param log: Diagnostic sink, defaults to the module logger
    :type log: Optional[logging.Logger]
    """

    def __init__(
        self,
        x: int,
        y: int,
        x_scale: int,
        y_scale: int,
        screen: Screen,
        colour_scheme: ColourScheme,
        style_scheme: StyleScheme,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.x = x
        self.y = y
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.screen = screen
        self.colour_scheme = colour_scheme
        self.style_scheme = style_scheme
        self.log = log or logger
        self.squares: Dict[str, Position] = {}
        for row in Row:
            for column in Column:
                self.squares[square_key(column, row)] = Position(
                    x + (column + 1) * x_scale,
                    y + (row + 1) * y_scale,
                )
        self.log.debug(f"[Board@{x},{y}] Squares: {self.squares}")

    def position(self, key: str) -> Position:
        """
        Get the anchor cell of a square.

        :param key: Algebraic square key, e.g. 'e4'
        :type key: str
        :return: Display coordinate
        :rtype: Position
        :raises KeyError: If the key does not name a square
        """
        return self.squares[key]

    def light_square(self, col: int, row: int) -> bool:
        """
        Tell whether a display cell of the board grid lies on a light square.

        :param col: 1-based display column inside the scaled grid
        :type col: int
        :param row: 1-based display row inside the scaled grid
        :type row: int
        :return: True for a light square
        :rtype: bool
        """
        return abs(col // self.x_scale - row // self.y_scale) % 2 == 0

    def clear(self) -> None:
        """Draw an empty checkerboard with file and rank labels."""
        for col in range(self.x_scale, 8 * self.x_scale + 1, self.x_scale):
            for row in range(self.y_scale, 8 * self.y_scale + 1, self.y_scale):
                style = self.style_scheme.square_style(True, self.light_square(col, row))
                for sc_col in range(self.x_scale):
                    for sc_row in range(self.y_scale):
                        self.screen.set_content(
                            self.x + col + sc_col, self.y + row + sc_row, Piece.EMPTY.white_glyph, None, style
                        )

        default = self.style_scheme.default
        for column in Column:
            self.screen.set_content(
                self.x + (column + 1) * self.x_scale, self.y + 9 * self.y_scale, column.upper, None, default
            )
        for row in Row:
            self.screen.set_content(self.x, self.y + (row + 1) * self.y_scale, row.label, None, default)

    def fill(self) -> None:
        """Draw the standard starting position over a cleared board."""
        ranks = (
            (Row.R8, chess.BLACK, STARTING_ROW),
            (Row.R7, chess.BLACK, [Piece.PAWN] * 8),
            (Row.R2, chess.WHITE, [Piece.PAWN] * 8),
            (Row.R1, chess.WHITE, STARTING_ROW),
        )
        for row, side, pieces in ranks:
            for column, piece in zip(Column, pieces):
                self.draw_piece(column, row, piece, side)

    def draw_piece(self, column: Column, row: Row, piece: Piece, side: chess.Color) -> None:
        """
        Draw a piece of one side on a square, styled for the square colour.

        :param column: File of the square
        :type column: Column
        :param row: Rank of the square
        :type row: Row
        :param piece: Piece to draw
        :type piece: Piece
        :param side: chess.WHITE or chess.BLACK
        :type side: chess.Color
        """
        light = self.light_square((column + 1) * self.x_scale, (row + 1) * self.y_scale)
        pos = self.squares[square_key(column, row)]
        style = self.style_scheme.square_style(side == chess.WHITE, light)
        self.screen.set_content(pos.x, pos.y, piece.glyph(side), None, style)

    def glyph_at(self, key: str) -> str:
        pos = self.squares[key]
        return self.screen.get_content(pos.x, pos.y)[0]
