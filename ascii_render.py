"""
ASCII rendering for turngrid grids.

Provides:
1. Plain rendering - one glyph per cell, rows separated by newlines
2. Colored rendering - glyphs colorized by kind (straight, corner, wall)
3. Framed panels and a flow layout that places several grids side by side
"""

from __future__ import annotations

from typing import Callable, Sequence

from simple_chalk import chalk  # type: ignore[import-untyped]

from grid_types import CORNER_SYMBOLS, Cell, Grid, Symbol, Unvisited, Visited

Colorizer = Callable[[str], str]

CORNER_COLOR: Colorizer = chalk.yellow
WALL_COLOR: Colorizer = chalk.red
STRAIGHT_COLOR: Colorizer = chalk.cyan


# =============================================================================
# Grid Rendering
# =============================================================================


def cell_char(cell: Cell, empty_char: str = " ") -> str:
    """Single character for a cell."""
    match cell:
        case Unvisited():
            return empty_char
        case Visited(symbol=symbol):
            return symbol.value
        case _:
            raise ValueError(f"Unknown cell type: {cell}")


def render(grid: Grid, empty_char: str = " ") -> str:
    """Render a grid row by row, one glyph per cell."""
    return "\n".join(
        "".join(cell_char(cell, empty_char) for cell in row) for row in grid.cells
    )


def symbol_color(symbol: Symbol) -> Colorizer:
    """Colorizer for a symbol: corners stand out from straight runs."""
    if symbol in CORNER_SYMBOLS:
        return CORNER_COLOR
    if symbol is Symbol.WALL:
        return WALL_COLOR
    return STRAIGHT_COLOR


def render_colored(grid: Grid, empty_char: str = " ") -> str:
    """Render a grid with glyphs colorized by kind."""
    lines: list[str] = []
    for row in grid.cells:
        parts: list[str] = []
        for cell in row:
            char = cell_char(cell, empty_char)
            if isinstance(cell, Visited):
                char = symbol_color(cell.symbol)(char)
            parts.append(char)
        lines.append("".join(parts))
    return "\n".join(lines)


# =============================================================================
# Framed Panels and Flow Layout
# =============================================================================


def render_framed(
    grid: Grid,
    title: str,
    color_fn: Callable[[Symbol], Colorizer] | None = None,
    empty_char: str = " ",
) -> list[str]:
    """
    Render a grid inside a box border with a centred title.

    The frame uses double-line box characters, distinct from the path glyphs.

    Args:
        grid: The grid to render
        title: Text placed in the top border (dropped if it does not fit)
        color_fn: Optional function returning a colorizer per symbol
        empty_char: Character for unvisited cells

    Returns:
        List of strings, all of the same visible width
    """
    inner_width = max(grid.size, len(title) + 2)
    padded_title = f" {title} "

    if title and len(padded_title) <= inner_width:
        left = (inner_width - len(padded_title)) // 2
        top = "╔" + "═" * left + padded_title + "═" * (inner_width - left - len(padded_title)) + "╗"
    else:
        top = "╔" + "═" * inner_width + "╗"

    lines = [top]
    padding = " " * (inner_width - grid.size)
    for row in grid.cells:
        parts: list[str] = []
        for cell in row:
            char = cell_char(cell, empty_char)
            if color_fn is not None and isinstance(cell, Visited):
                char = color_fn(cell.symbol)(char)
            parts.append(char)
        lines.append("║" + "".join(parts) + padding + "║")
    lines.append("╚" + "═" * inner_width + "╝")
    return lines


def render_flow(
    panels: Sequence[tuple[list[str], int]],
    terminal_width: int = 120,
    spacing: int = 2,
) -> str:
    """
    Lay out rendered panels left to right, wrapping onto new rows.

    Args:
        panels: (lines, visible_width) pairs. The width is passed explicitly
                because colorized lines carry ANSI codes.
        terminal_width: Maximum width of a row of panels
        spacing: Spaces between panels

    Returns:
        The combined layout as a single string
    """
    output_lines: list[str] = []
    current_row: list[tuple[list[str], int]] = []
    current_width = 0

    for lines, width in panels:
        needed = width + (spacing if current_row else 0)
        if current_row and current_width + needed > terminal_width:
            _flush_panel_row(current_row, output_lines, spacing)
            output_lines.append("")
            current_row = []
            current_width = 0
            needed = width
        current_row.append((lines, width))
        current_width += needed

    if current_row:
        _flush_panel_row(current_row, output_lines, spacing)

    return "\n".join(output_lines)


def _flush_panel_row(
    row: list[tuple[list[str], int]],
    output_lines: list[str],
    spacing: int,
) -> None:
    """Append one row of side-by-side panels to output_lines."""
    height = max(len(lines) for lines, _ in row)
    for line_idx in range(height):
        parts = [
            lines[line_idx] if line_idx < len(lines) else " " * width
            for lines, width in row
        ]
        output_lines.append((" " * spacing).join(parts).rstrip())


def framed_panel(
    grid: Grid, title: str, colored: bool = False
) -> tuple[list[str], int]:
    """Framed lines plus their visible width, ready for render_flow."""
    lines = render_framed(grid, title, symbol_color if colored else None)
    width = max(grid.size, len(title) + 2) + 2
    return (lines, width)
