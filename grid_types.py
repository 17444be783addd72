"""
Shared type definitions for the turngrid system.

Grids are immutable values: every update returns a new Grid and leaves the
original untouched, so sibling branches of a search never observe each
other's writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction of travel.

    The x axis runs down the rows and the y axis runs along them.
    """

    N = "N"  # Up (decreasing x)
    S = "S"  # Down (increasing x)
    E = "E"  # Right (increasing y)
    W = "W"  # Left (decreasing y)


class Symbol(Enum):
    """Glyph drawn into a visited cell.

    Corner names list the two sides of the cell the path touches.
    """

    VERTICAL = "│"
    HORIZONTAL = "─"
    WALL = "█"  # Start cell, no incoming direction
    TURN_NE = "└"
    TURN_NW = "┘"
    TURN_SE = "┌"
    TURN_SW = "┐"


CORNER_SYMBOLS = frozenset(
    {Symbol.TURN_NE, Symbol.TURN_NW, Symbol.TURN_SE, Symbol.TURN_SW}
)


# =============================================================================
# Errors
# =============================================================================


class OutOfBounds(IndexError):
    """A coordinate fell outside the grid."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"Cell ({x}, {y}) is outside a {size}x{size} grid")
        self.x = x
        self.y = y
        self.size = size


class UndefinedTurn(ValueError):
    """A turn was requested between two directions that cannot be joined."""

    def __init__(self, from_dir: Direction | None, to_dir: Direction | None) -> None:
        def name(d: Direction | None) -> str:
            return d.name if d is not None else "<none>"

        super().__init__(f"No corner joins {name(from_dir)} -> {name(to_dir)}")
        self.from_dir = from_dir
        self.to_dir = to_dir


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Unvisited:
    """A cell the path has not reached yet."""

    pass


@dataclass(frozen=True)
class Visited:
    """A cell the path has passed through."""

    symbol: Symbol


Cell = Unvisited | Visited

UNVISITED = Unvisited()


@dataclass(frozen=True)
class Grid:
    """A square 2D grid of cells, indexed as cells[x][y]."""

    cells: tuple[tuple[Cell, ...], ...]

    @property
    def size(self) -> int:
        return len(self.cells)


# =============================================================================
# Grid Operations
# =============================================================================


def empty_grid(size: int) -> Grid:
    """Create a size x size grid with every cell unvisited."""
    if size < 1:
        raise ValueError(f"Grid size must be at least 1, got {size}")
    row = (UNVISITED,) * size
    return Grid((row,) * size)


def _check_bounds(grid: Grid, x: int, y: int) -> None:
    if not (0 <= x < grid.size and 0 <= y < grid.size):
        raise OutOfBounds(x, y, grid.size)


def get_cell(grid: Grid, x: int, y: int) -> Cell:
    """
    Get the cell at (x, y).

    Raises:
        OutOfBounds: if either coordinate is outside [0, size). Negative
            indices are rejected rather than wrapped.
    """
    _check_bounds(grid, x, y)
    return grid.cells[x][y]


def set_cell(grid: Grid, x: int, y: int, cell: Cell) -> Grid:
    """
    Return a new grid equal to `grid` except at (x, y).

    Only the touched row is rebuilt; every other row tuple is shared with the
    input, which is safe because rows are immutable.
    """
    _check_bounds(grid, x, y)
    row = grid.cells[x]
    new_row = row[:y] + (cell,) + row[y + 1 :]
    return Grid(grid.cells[:x] + (new_row,) + grid.cells[x + 1 :])


def is_visited(cell: Cell) -> bool:
    return isinstance(cell, Visited)


def is_fully_visited(grid: Grid) -> bool:
    """True iff every cell of the grid has been visited."""
    return all(is_visited(cell) for row in grid.cells for cell in row)
