"""Two-board Alice Chess session: self-play on board 1 mirrored onto board 2."""

import logging
import random
import time
from typing import List, Optional

import chess
from rich.style import Style

from alice_chess.board import Board
from alice_chess.game import ChessGame
from alice_chess.pieces import Piece
from alice_chess.renderer import BoardRenderer
from alice_chess.scheme import ColourScheme, StyleScheme
from alice_chess.screen import Screen, emit_str

logger = logging.getLogger(__name__)

# Wide enough to blank the longest game-over reason
RESULT_WIDTH = 30


class Session:
    """
    Pairs the two boards with their game handles.

    Board 1 shows game 1, which is played by the rules engine. Board 2 shows
    game 2, the empty shadow board; its rules state is never advanced and
    only its display mirrors the moves made on board 1.

    :param board1: Board showing the live game
    :type board1: Board
    :param board2: Shadow board
    :type board2: Board
    :param game1: Game played from the standard starting position
    :type game1: ChessGame
    :param game2: Game in the empty position
    :type game2: ChessGame
    :param screen: Screen both boards are drawn on
    :type screen: Screen
    :param colour_scheme: Colour roles
    :type colour_scheme: ColourScheme
    :param style_scheme: Styles derived from the colour roles
    :type style_scheme: StyleScheme
    :param log: Diagnostic sink, defaults to the module logger
    :type log: Optional[logging.Logger]
    :param delay: Seconds to pause before each random turn
    :type delay: float
    :param rng: Source of randomness for move selection
    :type rng: Optional[random.Random]
    """

    def __init__(
        self,
        board1: Board,
        board2: Board,
        game1: ChessGame,
        game2: ChessGame,
        screen: Screen,
        colour_scheme: ColourScheme,
        style_scheme: StyleScheme,
        log: Optional[logging.Logger] = None,
        delay: float = 1.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.board1 = board1
        self.board2 = board2
        self.game1 = game1
        self.game2 = game2
        self.screen = screen
        self.colour_scheme = colour_scheme
        self.style_scheme = style_scheme
        self.log = log or logger
        self.delay = delay
        self.rng = rng or random.Random()

    def start(self) -> None:
        """Reset both games and draw a fresh starting position on board 1."""
        self.log.info("Starting new game")
        self.game1.reset()
        self.game2.reset()
        self.board1.clear()
        self.board2.clear()
        self.board1.fill()
        self.print_status("White to move.")
        self.print_result("")

    def print_status(self, text: str) -> None:
        """
        Write the instruction line under board 1.

        :param text: Status text
        :type text: str
        """
        emit_str(
            self.screen,
            self.board1.x + self.board1.x_scale,
            self.board1.y + 11 * self.board1.y_scale,
            self.style_scheme.writing_instruction,
            text,
        )

    def print_result(self, text: str) -> None:
        """
        Write the game-over line under the turn indicator, or blank it.

        :param text: Game-over reason, empty to clear the line
        :type text: str
        """
        x = self.board1.x + self.board1.x_scale
        y = self.board1.y + 11 * self.board1.y_scale + 1
        emit_str(self.screen, x, y, self.style_scheme.default, " " * RESULT_WIDTH)
        if text:
            emit_str(self.screen, x, y, self.style_scheme.writing_instruction, text)

    def print_mouse(self, mx: int, my: int) -> None:
        """
        Write the last pointer position under board 2.

        :param mx: Pointer column
        :type mx: int
        :param my: Pointer row
        :type my: int
        """
        emit_str(
            self.screen,
            self.board2.x + self.board2.x_scale,
            self.board2.y + 11 * self.board2.y_scale,
            self.style_scheme.default,
            f"Mouse: x: {mx}, y: {my}    ",
        )

    def play_random_turns(self, turns: int) -> List[chess.Move]:
        """
        Let the rules engine play random legal moves on game 1.

        Each move is mirrored onto board 2 and the screen is flushed after
        every turn. Playback stops early once the rules engine declares the
        game over, which includes drawn positions that still have legal moves.

        :param turns: Number of half-moves to play
        :type turns: int
        :return: Moves played, in order
        :rtype: List[chess.Move]
        :raises IllegalMoveRejected: If the engine refuses one of its own legal moves
        """
        played: List[chess.Move] = []
        for turn in range(1, turns + 1):
            time.sleep(self.delay)
            moves = self.game1.valid_moves()
            if self.game1.is_game_over() or not moves:
                reason = self.game1.get_game_over_reason() or "No legal moves"
                self.log.info(f"Game over after {len(played)} move(s): {reason}")
                self.print_result(reason)
                self.screen.show()
                break

            move = self.rng.choice(moves)
            self.log.info(f"Played move {turn}: {move.uci()}")
            self.game1.move(move)
            self.move_1_to_2(move, self.game1.ply())
            played.append(move)

            self.print_status(f"{self.game1.get_current_turn().capitalize()} to move.")
            self.screen.show()
            self.log.debug(f"Board 1:\n{BoardRenderer.render(self.board1)}")
            self.log.debug(f"Board 2:\n{BoardRenderer.render(self.board2)}")
        return played

    def move_1_to_2(self, move: chess.Move, turn: int) -> None:
        """
        Lift the moved piece off board 1 and drop it on board 2.

        The origin square on board 1 is blanked in its own style. On board 2
        the destination keeps its background and the piece takes the colour
        of the side that moved: white on odd turns, black on even turns.

        :param move: Move just played on game 1
        :type move: chess.Move
        :param turn: 1-based half-move number of the move
        :type turn: int
        """
        pos1 = self.board1.position(chess.square_name(move.from_square))
        pos2 = self.board2.position(chess.square_name(move.to_square))

        piece, _, st1 = self.screen.get_content(pos1.x, pos1.y)
        self.screen.set_content(pos1.x, pos1.y, Piece.EMPTY.white_glyph, None, st1)

        _, _, st2 = self.screen.get_content(pos2.x, pos2.y)
        st2 = st2 + Style(color=self.colour_scheme.piece_colour(turn % 2 == 1))
        self.screen.set_content(pos2.x, pos2.y, piece, None, st2)
