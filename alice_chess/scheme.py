"""Colour roles and the display styles derived from them."""

from dataclasses import dataclass

from rich.color import Color
from rich.style import Style


@dataclass(frozen=True)
class ColourScheme:
    """
    Named colour roles used across the display.

    Defaults reproduce a brown wooden board on a slate background.
    """

    screen_text: Color = Color.parse("bright_white")
    screen_background: Color = Color.parse("#2f4f4f")
    light_square: Color = Color.parse("#f4a460")
    dark_square: Color = Color.parse("#8b4513")
    white_piece: Color = Color.parse("bright_white")
    black_piece: Color = Color.parse("black")
    menu_text: Color = Color.parse("#4682b4")
    menu_background: Color = Color.parse("#c0c0c0")
    instruction_text: Color = Color.parse("#2e8b57")
    instruction_background: Color = Color.parse("#c0c0c0")

    def piece_colour(self, white: bool) -> Color:
        return self.white_piece if white else self.black_piece


@dataclass(frozen=True)
class StyleScheme:
    """
    Styles for every rendering context.

    :param default: Plain screen text
    :type default: Style
    :param white_on_light: White piece, or empty square, on a light square
    :type white_on_light: Style
    :param white_on_dark: White piece, or empty square, on a dark square
    :type white_on_dark: Style
    :param black_on_light: Black piece on a light square
    :type black_on_light: Style
    :param black_on_dark: Black piece on a dark square
    :type black_on_dark: Style
    :param writing_menu: Menu text
    :type writing_menu: Style
    :param writing_instruction: Turn indicator and game status text
    :type writing_instruction: Style
    """

    default: Style
    white_on_light: Style
    white_on_dark: Style
    black_on_light: Style
    black_on_dark: Style
    writing_menu: Style
    writing_instruction: Style

    @classmethod
    def from_colours(cls, cs: ColourScheme) -> "StyleScheme":
        """
        Derive every style from a colour scheme.

        :param cs: Colour roles
        :type cs: ColourScheme
        :return: Style scheme built from the colour roles
        :rtype: StyleScheme
        """
        return cls(
            default=Style(color=cs.screen_text, bgcolor=cs.screen_background),
            white_on_light=Style(color=cs.white_piece, bgcolor=cs.light_square),
            white_on_dark=Style(color=cs.white_piece, bgcolor=cs.dark_square),
            black_on_light=Style(color=cs.black_piece, bgcolor=cs.light_square),
            black_on_dark=Style(color=cs.black_piece, bgcolor=cs.dark_square),
            writing_menu=Style(color=cs.menu_text, bgcolor=cs.menu_background, bold=True),
            writing_instruction=Style(color=cs.instruction_text, bgcolor=cs.instruction_background),
        )

    def square_style(self, white: bool, light: bool) -> Style:
        """
        Pick the style for a piece of one side on a square of one colour.

        :param white: True for a white piece (also used for empty squares)
        :type white: bool
        :param light: True for a light square
        :type light: bool
        :return: Matching style
        :rtype: Style
        """
        if white:
            return self.white_on_light if light else self.white_on_dark
        return self.black_on_light if light else self.black_on_dark
