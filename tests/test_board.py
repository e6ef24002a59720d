"""Tests for board geometry and rendering."""

import pytest

from alice_chess.board import Board, Position
from alice_chess.pieces import SQUARE_KEYS
from alice_chess.scheme import ColourScheme, StyleScheme
from alice_chess.screen import SimulationScreen


@pytest.fixture
def schemes():
    """Default colour and style schemes."""
    colour_scheme = ColourScheme()
    return colour_scheme, StyleScheme.from_colours(colour_scheme)


def make_board(schemes, x=2, y=1, x_scale=2, y_scale=1, screen=None):
    colour_scheme, style_scheme = schemes
    screen = screen or SimulationScreen(80, 30)
    return Board(x, y, x_scale, y_scale, screen, colour_scheme, style_scheme)


class TestBoardGeometry:
    """Test cases for the square-to-coordinate map."""

    def test_all_squares_mapped(self, schemes) -> None:
        """Test the map is fully populated at construction."""
        board = make_board(schemes)
        assert set(board.squares) == set(SQUARE_KEYS)
        assert len(set(board.squares.values())) == 64

    def test_corner_coordinates(self, schemes) -> None:
        """Test a8 and h1 positions for origin (2, 1) and scale (2, 1)."""
        board = make_board(schemes)
        assert board.position("a8") == Position(4, 2)
        assert board.position("h1") == Position(18, 9)

    def test_coordinates_scale_vertically(self, schemes) -> None:
        """Test a vertical scale spreads ranks apart."""
        board = make_board(schemes, x=0, y=0, x_scale=3, y_scale=2)
        assert board.position("a8") == Position(3, 2)
        assert board.position("a7") == Position(3, 4)
        assert board.position("b8") == Position(6, 2)

    def test_map_is_pure(self, schemes) -> None:
        """Test identical parameters give identical maps."""
        assert make_board(schemes, 5, 3, 2, 1).squares == make_board(schemes, 5, 3, 2, 1).squares

    def test_unknown_square(self, schemes) -> None:
        """Test unknown keys raise KeyError."""
        board = make_board(schemes)
        with pytest.raises(KeyError):
            board.position("i9")


class TestLightSquare:
    """Test cases for square colour."""

    @pytest.mark.parametrize("col", range(1, 7))
    @pytest.mark.parametrize("row", range(1, 7))
    def test_checkerboard_adjacency(self, schemes, col, row) -> None:
        """Test colours alternate between neighbours and repeat every two squares."""
        board = make_board(schemes, x_scale=1, y_scale=1)
        light = board.light_square(col, row)
        assert light == board.light_square(col + 2, row)
        assert light == board.light_square(col, row + 2)
        assert light != board.light_square(col + 1, row)
        assert light != board.light_square(col, row + 1)

    def test_standard_orientation(self, schemes) -> None:
        """Test a8 and h1 are light, a1 and h8 are dark."""
        board = make_board(schemes)
        assert board.light_square(1 * 2, 1) is True
        assert board.light_square(8 * 2, 8) is True
        assert board.light_square(1 * 2, 8) is False
        assert board.light_square(8 * 2, 1) is False


class TestBoardRendering:
    """Test cases for clear and fill."""

    def test_clear_paints_squares(self, schemes) -> None:
        """Test every cell of every square is blank with the square's background."""
        colour_scheme, _ = schemes
        board = make_board(schemes)
        board.clear()
        screen = board.screen

        glyph, _, style = screen.get_content(4, 2)
        assert glyph == " "
        assert style.bgcolor == colour_scheme.light_square
        _, _, style = screen.get_content(5, 2)
        assert style.bgcolor == colour_scheme.light_square
        _, _, style = screen.get_content(6, 2)
        assert style.bgcolor == colour_scheme.dark_square
        _, _, style = screen.get_content(4, 9)
        assert style.bgcolor == colour_scheme.dark_square
        _, _, style = screen.get_content(19, 9)
        assert style.bgcolor == colour_scheme.light_square

    def test_clear_draws_labels(self, schemes) -> None:
        """Test file labels below the board and rank labels on the left."""
        board = make_board(schemes)
        board.clear()
        screen = board.screen
        assert [screen.get_content(4 + 2 * i, 10)[0] for i in range(8)] == list("ABCDEFGH")
        assert [screen.get_content(2, 2 + i)[0] for i in range(8)] == list("87654321")

    def test_fill_starting_position(self, schemes) -> None:
        """Test pieces land on the right squares in the right colours."""
        colour_scheme, _ = schemes
        board = make_board(schemes)
        board.clear()
        board.fill()

        assert "".join(board.glyph_at(f"{f}8") for f in "abcdefgh") == "♜♞♝♛♚♝♞♜"
        assert "".join(board.glyph_at(f"{f}7") for f in "abcdefgh") == "♟" * 8
        assert "".join(board.glyph_at(f"{f}2") for f in "abcdefgh") == "♙" * 8
        assert "".join(board.glyph_at(f"{f}1") for f in "abcdefgh") == "♖♘♗♕♔♗♘♖"
        assert board.glyph_at("e4") == " "

        pos = board.position("e1")
        _, _, style = board.screen.get_content(pos.x, pos.y)
        assert style.color == colour_scheme.white_piece
        assert style.bgcolor == colour_scheme.dark_square

        pos = board.position("d8")
        _, _, style = board.screen.get_content(pos.x, pos.y)
        assert style.color == colour_scheme.black_piece
        assert style.bgcolor == colour_scheme.dark_square

    def test_clear_and_fill_scaled(self, schemes) -> None:
        """Test blocks, labels and anchor glyphs when a square spans 3x2 cells."""
        colour_scheme, _ = schemes
        board = make_board(schemes, x=0, y=0, x_scale=3, y_scale=2)
        board.clear()
        board.fill()
        screen = board.screen

        for x in range(3, 6):
            for y in range(2, 4):
                assert screen.get_content(x, y)[2].bgcolor == colour_scheme.light_square
        for x in range(6, 9):
            for y in range(2, 4):
                assert screen.get_content(x, y)[2].bgcolor == colour_scheme.dark_square
        assert screen.get_content(3, 4)[2].bgcolor == colour_scheme.dark_square

        assert screen.get_content(3, 2)[0] == "♜"
        assert screen.get_content(3, 4)[0] == "♟"
        assert screen.get_content(3, 14)[0] == "♙"
        assert screen.get_content(3, 16)[0] == "♖"
        assert screen.get_content(4, 3)[0] == " "
        assert screen.get_content(3, 3)[0] == " "
        _, _, style = screen.get_content(3, 16)
        assert style.color == colour_scheme.white_piece
        assert style.bgcolor == colour_scheme.dark_square

        assert [screen.get_content(3 * (i + 1), 18)[0] for i in range(8)] == list("ABCDEFGH")
        assert [screen.get_content(0, 2 * (i + 1))[0] for i in range(8)] == list("87654321")
