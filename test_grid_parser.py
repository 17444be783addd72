"""Tests for grid_parser module."""

import pytest

from ascii_render import render
from grid_parser import parse_grid
from grid_types import UNVISITED, Symbol, Visited
from turngrid import search


class TestParseGrid:
    """Tests for the glyph parser."""

    def test_single_cell(self) -> None:
        grid = parse_grid("█")
        assert grid.size == 1
        assert grid.cells[0][0] == Visited(Symbol.WALL)

    def test_pipe_separated(self) -> None:
        grid = parse_grid("█┐|─┘")
        assert grid.size == 2
        assert grid.cells[0] == (Visited(Symbol.WALL), Visited(Symbol.TURN_SW))
        assert grid.cells[1] == (Visited(Symbol.HORIZONTAL), Visited(Symbol.TURN_NW))

    def test_multiline_with_indentation(self) -> None:
        """Blank edge lines and common indentation are ignored."""
        definition = """
            █─┐
            ┌─┘
            └──
        """
        grid = parse_grid(definition)
        assert grid.size == 3
        assert grid.cells[1][0] == Visited(Symbol.TURN_SE)
        assert grid.cells[2][0] == Visited(Symbol.TURN_NE)

    def test_unvisited_markers(self) -> None:
        grid = parse_grid("█._|. │|..│")
        assert grid.cells[0] == (Visited(Symbol.WALL), UNVISITED, UNVISITED)
        assert grid.cells[1] == (UNVISITED, UNVISITED, Visited(Symbol.VERTICAL))

    def test_trimmed_trailing_spaces(self) -> None:
        """Rows shorter than the grid are padded with unvisited cells."""
        grid = parse_grid("█\n..")
        assert grid.cells[0] == (Visited(Symbol.WALL), UNVISITED)

    def test_every_glyph(self) -> None:
        grid = parse_grid("│─█|└┘┌|┐..")
        symbols = [cell.symbol for row in grid.cells for cell in row if isinstance(cell, Visited)]
        assert set(symbols) == set(Symbol)


class TestParseErrors:
    """Tests for parser error reporting."""

    def test_empty(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            parse_grid("\n  \n")

    def test_invalid_character(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            parse_grid("█x|──")
        message = str(exc_info.value)
        assert "'x'" in message
        assert "Row 0" in message
        assert "column 1" in message

    def test_too_wide(self) -> None:
        with pytest.raises(ValueError, match="not square"):
            parse_grid("█──|──")


class TestRoundTrip:
    """Rendering then parsing gives the same grid back."""

    def test_search_results(self) -> None:
        _, results = search(4, 1, 2, 8)
        assert results
        for result in results[:20]:
            assert parse_grid(render(result.grid)) == result.grid
