"""
Grid parsing utilities for turngrid.

Reads a grid back from its rendered glyphs, which makes expected search
results easy to write down in tests and examples.
"""

from __future__ import annotations

from grid_types import UNVISITED, Cell, Grid, Symbol, Visited

__all__ = ["parse_grid"]

SYMBOLS_BY_GLYPH: dict[str, Symbol] = {symbol.value: symbol for symbol in Symbol}
EMPTY_CHARS = frozenset("._ ")


def _split_rows(text: str) -> list[str]:
    if "\n" in text:
        lines = text.split("\n")
    else:
        lines = text.split("|")

    # Drop blank leading/trailing lines, then common indentation
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    indents = [len(line) - len(line.lstrip(" ")) for line in lines if line.strip()]
    indent = min(indents) if indents else 0
    return [line[indent:] for line in lines]


def parse_grid(text: str) -> Grid:
    """
    Parse a square grid from one character per cell.

    Format:
    - Rows separated by newlines, or by | when the text is a single line
    - Any of the glyphs │ ─ █ └ ┘ ┌ ┐: visited cell with that symbol
    - '.', '_' or space: unvisited cell
    - Leading and trailing blank lines and common indentation are ignored,
      so an unvisited cell at the start of a row should be written as '.'

    Example:
        parse_grid("█┐|─┘") gives a 2x2 grid drawn by the path
        (0,0) -> (0,1) -> (1,1) -> (1,0)

    Args:
        text: The grid definition

    Returns:
        Parsed Grid

    Raises:
        ValueError: on unknown characters, ragged rows or non-square input
    """
    row_strings = _split_rows(text)
    if not row_strings:
        raise ValueError("Grid definition is empty")

    size = len(row_strings)
    rows: list[tuple[Cell, ...]] = []

    for row_idx, row_str in enumerate(row_strings):
        # Trailing spaces are unvisited cells that editors may have trimmed
        row_str = row_str.ljust(size)
        cells: list[Cell] = []
        for col_idx, char in enumerate(row_str):
            if char in SYMBOLS_BY_GLYPH:
                cells.append(Visited(SYMBOLS_BY_GLYPH[char]))
            elif char in EMPTY_CHARS:
                cells.append(UNVISITED)
            else:
                error_msg = (
                    f"Invalid cell character: '{char}'\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters:\n"
                    f"    - Path glyphs: {' '.join(SYMBOLS_BY_GLYPH)}\n"
                    f"    - '.', '_' or space: unvisited cell"
                )
                raise ValueError(error_msg)
        rows.append(tuple(cells))

    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != size]
    if mismatched:
        error_msg = (
            f"Grid is not square\n"
            f"  Expected: {size} columns (one per row)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  Grids must have as many columns as rows"
        raise ValueError(error_msg)

    return Grid(tuple(rows))
