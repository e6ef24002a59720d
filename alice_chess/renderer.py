"""Plain-text snapshots of boards as currently drawn."""

from typing import List

from alice_chess.board import Board
from alice_chess.pieces import Column, Row, square_key


class BoardRenderer:
    """
    Renders what a board shows on screen as text with algebraic coordinates.

    The glyphs are read back from the screen, so a snapshot reflects the
    display rather than any game state.
    """

    @staticmethod
    def board_state(board: Board) -> List[List[str]]:
        """
        Read the glyph drawn on every square.

        :param board: Board to read
        :type board: Board
        :return: 8x8 grid of glyphs, rank 8 first
        :rtype: List[List[str]]
        """
        return [[board.glyph_at(square_key(column, row)) for column in Column] for row in Row]

    @staticmethod
    def render(board: Board) -> str:
        """
        Render the board in a compact bordered format.

        :param board: Board to render
        :type board: Board
        :return: Multi-line snapshot
        :rtype: str
        """
        lines = []
        for row, rank in zip(Row, BoardRenderer.board_state(board)):
            lines.append(f"{row.label} |{' '.join(rank)}|")
        separator = "  +" + "-" * 15 + "+"
        lines.insert(0, separator)
        lines.append(separator)
        lines.append("   " + " ".join(column.lower for column in Column))
        return "\n".join(lines)
