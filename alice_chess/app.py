"""Screen layout and the keyboard/mouse event loop."""

import logging
import random
from typing import Optional

from alice_chess.board import Board
from alice_chess.config import AppConfig
from alice_chess.game import EMPTY_FEN, ChessGame
from alice_chess.scheme import ColourScheme, StyleScheme
from alice_chess.screen import Event, Key, KeyEvent, MouseEvent, ResizeEvent, Screen, emit_str
from alice_chess.session import Session

logger = logging.getLogger(__name__)


def build_session(
    screen: Screen,
    config: AppConfig,
    log: Optional[logging.Logger] = None,
    colour_scheme: Optional[ColourScheme] = None,
) -> Session:
    """
    Lay out both boards and the menu, and wire up the session.

    Board 2 sits to the right of board 1 with a gap of three squares. Both
    boards are drawn empty; nothing is played until the session starts.

    :param screen: Initialized screen
    :type screen: Screen
    :param config: Runtime configuration
    :type config: AppConfig
    :param log: Diagnostic sink handed to the boards and the session
    :type log: Optional[logging.Logger]
    :param colour_scheme: Colour roles, defaults to ColourScheme()
    :type colour_scheme: Optional[ColourScheme]
    :return: Session ready to start
    :rtype: Session
    :raises InitializationError: If a game cannot be created
    """
    log = log or logger
    colour_scheme = colour_scheme or ColourScheme()
    style_scheme = StyleScheme.from_colours(colour_scheme)
    screen.set_style(style_scheme.default)
    screen.enable_mouse()
    screen.clear()

    b1 = Board(config.origin_x, config.origin_y, config.x_scale, config.y_scale,
               screen, colour_scheme, style_scheme, log)
    b2 = Board(b1.x + 11 * b1.x_scale, b1.y, b1.x_scale, b1.y_scale,
               screen, colour_scheme, style_scheme, log)
    b1.clear()
    b2.clear()
    emit_str(screen, b2.x + 11 * b2.x_scale, b2.y + b2.y_scale, style_scheme.writing_menu, "Press Esc to exit.")
    emit_str(screen, b2.x + 11 * b2.x_scale, b2.y + 2 * b2.y_scale, style_scheme.writing_menu,
             "Press S to start new game.")
    screen.show()

    g1 = ChessGame()
    g2 = ChessGame(EMPTY_FEN)
    return Session(b1, b2, g1, g2, screen, colour_scheme, style_scheme,
                   log=log, delay=config.delay, rng=random.Random(config.seed))


class App:
    """
    Single-threaded event loop.

    Playback runs synchronously inside the handler for the start key, so no
    input is read until it finishes.

    :param screen: Screen delivering events
    :type screen: Screen
    :param session: Session driven by the events
    :type session: Session
    :param turns: Random half-moves played after each start
    :type turns: int
    :param log: Diagnostic sink
    :type log: Optional[logging.Logger]
    """

    def __init__(self, screen: Screen, session: Session, turns: int = 2,
                 log: Optional[logging.Logger] = None) -> None:
        self.screen = screen
        self.session = session
        self.turns = turns
        self.log = log or logger

    def handle_event(self, event: Event) -> bool:
        """
        Dispatch one input event.

        :param event: Event to handle
        :type event: Event
        :return: False when the application should quit
        :rtype: bool
        """
        if isinstance(event, KeyEvent):
            if event.key == Key.ESCAPE:
                self.log.info("Escape pressed, quitting")
                return False
            if event.key == Key.RUNE and event.rune in ("S", "s"):
                self.session.start()
                self.screen.sync()
                self.session.play_random_turns(self.turns)
                self.screen.show()
        elif isinstance(event, MouseEvent):
            self.session.print_mouse(event.x, event.y)
            self.screen.show()
        elif isinstance(event, ResizeEvent):
            self.log.debug(f"Resized to {event.width}x{event.height}")
            self.screen.sync()
        return True

    def run(self) -> None:
        """Poll and dispatch events until quit or the screen stops delivering them."""
        while True:
            event = self.screen.poll_event()
            if event is None:
                self.log.debug("Screen closed")
                return
            if not self.handle_event(event):
                return
