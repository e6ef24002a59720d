"""Error taxonomy for the Alice Chess terminal demo."""

from typing import Optional

import chess


class AliceChessError(Exception):
    """Base class for all errors raised by this package."""


class InitializationError(AliceChessError):
    """Raised when the display or the rules engine cannot be set up."""


class ConfigurationError(InitializationError):
    """Raised when the runtime configuration fails validation."""


class IllegalMoveRejected(AliceChessError):
    """
    Raised when the rules engine refuses a move.

    Moves are only ever drawn from the engine's own legal-move list, so this
    signals a broken invariant rather than a user mistake.

    :param move: The move that was rejected
    :type move: chess.Move
    :param fen: FEN of the position the move was applied to
    :type fen: Optional[str]
    """

    def __init__(self, move: chess.Move, fen: Optional[str] = None) -> None:
        self.move = move
        self.fen = fen
        message = f"Rules engine rejected move {move.uci()}"
        if fen:
            message += f" in position {fen}"
        super().__init__(message)
