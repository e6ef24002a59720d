"""Terminal cell grid: an in-memory buffer with simulated and curses front ends."""

import curses
import logging
import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Dict, Iterable, Optional, Set, Tuple, Union

from rich.cells import get_character_cell_size
from rich.color import Color, ColorSystem
from rich.style import Style

from alice_chess.exceptions import InitializationError

logger = logging.getLogger(__name__)

# xterm "any event" mouse tracking, needed to receive bare pointer motion
MOUSE_MOTION_ON = "\033[?1003h"
MOUSE_MOTION_OFF = "\033[?1003l"


class Key(Enum):
    """Keys the event loop distinguishes."""

    RUNE = "rune"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """
    A key press.

    :param key: Kind of key
    :type key: Key
    :param rune: The typed character when key is Key.RUNE
    :type rune: str
    :param code: Raw key code for Key.OTHER
    :type code: int
    """

    key: Key
    rune: str = ""
    code: int = 0


@dataclass(frozen=True)
class MouseEvent:
    """Pointer moved or clicked at a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


Event = Union[KeyEvent, MouseEvent, ResizeEvent]


@dataclass(frozen=True)
class Cell:
    """Contents of one display cell."""

    glyph: str
    combining: Tuple[str, ...]
    style: Style


class Screen:
    """
    Cell buffer shared by every display front end.

    Writes land in the buffer and are marked dirty; show() hands the dirty
    cells to _flush() and sync() hands over every cell. Reads always come
    from the buffer, so what was last written is what get_content() returns.

    :param width: Number of columns
    :type width: int
    :param height: Number of rows
    :type height: int
    """

    def __init__(self, width: int = 80, height: int = 25) -> None:
        self.width = width
        self.height = height
        self.style = Style()
        self.cells: Dict[Tuple[int, int], Cell] = {}
        self.dirty: Set[Tuple[int, int]] = set()
        self.mouse_enabled = False

    def init(self) -> None:
        """Prepare the display. The buffer needs no setup."""

    def fini(self) -> None:
        """Release the display."""

    def set_style(self, style: Style) -> None:
        """
        Set the style used for cells that were never written.

        :param style: Default cell style
        :type style: Style
        """
        self.style = style

    def enable_mouse(self) -> None:
        self.mouse_enabled = True

    def clear(self) -> None:
        """Blank every cell with the default style."""
        self.cells.clear()
        self.dirty.clear()

    def set_content(self, x: int, y: int, glyph: str, combining: Optional[Iterable[str]], style: Style) -> None:
        """
        Write one cell. Writes outside the screen are dropped.

        :param x: Column
        :type x: int
        :param y: Row
        :type y: int
        :param glyph: Primary character
        :type glyph: str
        :param combining: Zero-width characters drawn over the glyph
        :type combining: Optional[Iterable[str]]
        :param style: Cell style
        :type style: Style
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        self.cells[(x, y)] = Cell(glyph, tuple(combining or ()), style)
        self.dirty.add((x, y))

    def get_content(self, x: int, y: int) -> Tuple[str, Tuple[str, ...], Style]:
        """
        Read one cell back.

        :param x: Column
        :type x: int
        :param y: Row
        :type y: int
        :return: (glyph, combining characters, style)
        :rtype: Tuple[str, Tuple[str, ...], Style]
        """
        cell = self.cells.get((x, y))
        if cell is None:
            return " ", (), self.style
        return cell.glyph, cell.combining, cell.style

    def show(self) -> None:
        """Push the cells changed since the last flush."""
        self._flush(sorted(self.dirty))
        self.dirty.clear()

    def sync(self) -> None:
        """Push every cell."""
        self._flush(sorted(self.cells))
        self.dirty.clear()

    def poll_event(self) -> Optional[Event]:
        raise NotImplementedError

    def _flush(self, positions: Iterable[Tuple[int, int]]) -> None:
        pass


class SimulationScreen(Screen):
    """
    Screen without a terminal, fed from a queue of scripted events.

    poll_event() returns None once the queue runs dry, which the event loop
    treats like the display going away.
    """

    def __init__(self, width: int = 80, height: int = 25) -> None:
        super().__init__(width, height)
        self.events: Deque[Event] = deque()
        self.flushes = 0
        self.finalized = False

    def inject_event(self, event: Event) -> None:
        self.events.append(event)

    def poll_event(self) -> Optional[Event]:
        if not self.events:
            return None
        return self.events.popleft()

    def fini(self) -> None:
        self.finalized = True

    def text_at(self, x: int, y: int, length: int) -> str:
        """
        Read a run of glyphs from one row.

        :param x: First column
        :type x: int
        :param y: Row
        :type y: int
        :param length: Number of cells
        :type length: int
        :return: Concatenated glyphs
        :rtype: str
        """
        return "".join(self.get_content(x + offset, y)[0] for offset in range(length))

    def _flush(self, positions: Iterable[Tuple[int, int]]) -> None:
        self.flushes += 1


class CursesScreen(Screen):
    """
    Screen drawn to the controlling terminal with curses.

    Rich colours are downgraded to the terminal's palette and paired on
    demand; once curses runs out of colour pairs the default pair is reused.
    """

    def __init__(self) -> None:
        super().__init__(0, 0)
        self.stdscr = None
        self.colour_system = ColorSystem.STANDARD
        self.pairs: Dict[Tuple[int, int], int] = {}

    def init(self) -> None:
        """
        Take over the terminal.

        :raises InitializationError: If no usable terminal is attached
        """
        try:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            curses.start_color()
            curses.use_default_colors()
            curses.set_escdelay(25)
        except curses.error as e:
            self.fini()
            raise InitializationError(f"Terminal unavailable: {e}") from e
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self.height, self.width = self.stdscr.getmaxyx()
        if curses.COLORS >= 256:
            self.colour_system = ColorSystem.EIGHT_BIT
        logger.debug(f"Curses screen {self.width}x{self.height} with {curses.COLORS} colours")

    def fini(self) -> None:
        if self.stdscr is None:
            return
        if self.mouse_enabled:
            sys.stdout.write(MOUSE_MOTION_OFF)
            sys.stdout.flush()
        self.stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.stdscr = None

    def enable_mouse(self) -> None:
        super().enable_mouse()
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        curses.mouseinterval(0)
        sys.stdout.write(MOUSE_MOTION_ON)
        sys.stdout.flush()

    def set_style(self, style: Style) -> None:
        super().set_style(style)
        if self.stdscr is not None:
            self.stdscr.bkgd(" ", self._attr(style))

    def clear(self) -> None:
        super().clear()
        self.stdscr.erase()

    def sync(self) -> None:
        self.stdscr.clearok(True)
        super().sync()

    def poll_event(self) -> Optional[Event]:
        while True:
            ch = self.stdscr.get_wch()
            if isinstance(ch, str):
                if ch == "\x1b":
                    return KeyEvent(Key.ESCAPE)
                return KeyEvent(Key.RUNE, rune=ch)
            if ch == curses.KEY_MOUSE:
                try:
                    _, x, y, _, _ = curses.getmouse()
                except curses.error:
                    logger.debug("Mouse event vanished before it was read")
                    continue
                return MouseEvent(x, y)
            if ch == curses.KEY_RESIZE:
                self.height, self.width = self.stdscr.getmaxyx()
                return ResizeEvent(self.width, self.height)
            return KeyEvent(Key.OTHER, code=ch)

    def _flush(self, positions: Iterable[Tuple[int, int]]) -> None:
        for x, y in positions:
            glyph, combining, style = self.get_content(x, y)
            try:
                self.stdscr.addstr(y, x, glyph + "".join(combining), self._attr(style))
            except curses.error:
                # The bottom-right cell reports an error after it is drawn
                logger.debug(f"Curses refused cell ({x}, {y})")
        self.stdscr.noutrefresh()
        curses.doupdate()

    def _attr(self, style: Style) -> int:
        key = (self._colour_number(style.color), self._colour_number(style.bgcolor))
        pair = self.pairs.get(key)
        if pair is None:
            pair = len(self.pairs) + 1
            if pair < curses.COLOR_PAIRS:
                curses.init_pair(pair, *key)
            else:
                pair = 0
            self.pairs[key] = pair
        attr = curses.color_pair(pair)
        if style.bold:
            attr |= curses.A_BOLD
        return attr

    def _colour_number(self, colour: Optional[Color]) -> int:
        if colour is None or colour.is_default or not curses.COLORS:
            return -1
        number = colour.downgrade(self.colour_system).number
        if number is None:
            return -1
        return number % curses.COLORS


def emit_str(screen: Screen, x: int, y: int, style: Style, text: str) -> None:
    """
    Write a string one cell at a time.

    Zero-width characters are drawn on a blank cell of their own and wide
    characters take two cells.

    :param screen: Target screen
    :type screen: Screen
    :param x: Column of the first character
    :type x: int
    :param y: Row
    :type y: int
    :param style: Style for every cell
    :type style: Style
    :param text: Text to write
    :type text: str
    """
    for char in text:
        combining: Tuple[str, ...] = ()
        width = get_character_cell_size(char)
        if width == 0:
            combining = (char,)
            char = " "
            width = 1
        screen.set_content(x, y, char, combining, style)
        x += width
