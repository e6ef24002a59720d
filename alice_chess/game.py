"""Chess rules collaborator wrapping python-chess."""

import logging
from typing import List, Optional

import chess

from alice_chess.exceptions import IllegalMoveRejected, InitializationError

logger = logging.getLogger(__name__)

EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"


class ChessGame:
    """
    Game state handle backed by a python-chess board.

    :param fen: Starting position, defaults to the standard starting position
    :type fen: Optional[str]
    :raises InitializationError: If the FEN cannot be parsed
    """

    def __init__(self, fen: Optional[str] = None) -> None:
        self.starting_fen = fen or chess.STARTING_FEN
        try:
            self.board = chess.Board(self.starting_fen)
        except ValueError as e:
            raise InitializationError(f"Invalid starting position '{self.starting_fen}': {e}") from e

    def reset(self) -> None:
        """Return to the starting position this game was created with."""
        self.board.set_fen(self.starting_fen)

    def valid_moves(self) -> List[chess.Move]:
        """
        Get all legal moves in the current position.

        :return: Legal moves in generation order
        :rtype: List[chess.Move]
        """
        return list(self.board.legal_moves)

    def move(self, move: chess.Move) -> None:
        """
        Apply a move.

        :param move: Move to play
        :type move: chess.Move
        :raises IllegalMoveRejected: If the move is not legal in the current position
        """
        if not self.board.is_legal(move):
            raise IllegalMoveRejected(move, self.board.fen())
        self.board.push(move)

    def ply(self) -> int:
        """
        Number of half-moves played since the starting position.

        :return: Half-move count
        :rtype: int
        """
        return len(self.board.move_stack)

    def get_fen(self) -> str:
        return self.board.fen()

    def is_game_over(self) -> bool:
        return self.board.is_game_over()

    def get_game_over_reason(self) -> str:
        """
        Get the reason why the game is over.

        :return: Reason for game over, or empty string if game is not over
        :rtype: str
        """
        if not self.board.is_game_over():
            return ""

        if self.board.is_checkmate():
            winner = "Black" if self.board.turn else "White"
            return f"Checkmate - {winner} wins"
        if self.board.is_stalemate():
            return "Stalemate - Draw"
        if self.board.is_insufficient_material():
            return "Insufficient material - Draw"
        if self.board.is_seventyfive_moves():
            return "Seventy-five move rule - Draw"
        if self.board.is_fivefold_repetition():
            return "Fivefold repetition - Draw"

        return "Game over"

    def get_current_turn(self) -> str:
        """
        Get whose turn it is to move.

        :return: 'white' if it's white's turn, 'black' if it's black's turn
        :rtype: str
        """
        return 'white' if self.board.turn else 'black'
