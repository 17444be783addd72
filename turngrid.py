"""
Exhaustive turn-limited Hamiltonian path search on a square grid.

A path starts at a given cell, steps between orthogonal neighbours, visits
every cell exactly once, and may change direction at most `max_turns` times.
The search enumerates every such covering with an explicit work stack and
reports the ones using the fewest and the most turns.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from ascii_render import render
from grid_types import (
    CORNER_SYMBOLS,
    Direction,
    Grid,
    Symbol,
    UndefinedTurn,
    Visited,
    empty_grid,
    get_cell,
    is_fully_visited,
    is_visited,
    set_cell,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Direction & Symbol Rules
# =============================================================================

# Neighbour checks in enumeration order: (x_delta, y_delta, direction).
# The order fixes which coverings are found first, not which are found.
MOVES: tuple[tuple[int, int, Direction], ...] = (
    (1, 0, Direction.S),
    (-1, 0, Direction.N),
    (0, 1, Direction.E),
    (0, -1, Direction.W),
)

# (incoming direction, outgoing direction) -> corner drawn at the turning cell
TURN_SYMBOLS: dict[tuple[Direction, Direction], Symbol] = {
    (Direction.W, Direction.N): Symbol.TURN_NE,
    (Direction.E, Direction.N): Symbol.TURN_NW,
    (Direction.N, Direction.W): Symbol.TURN_SW,
    (Direction.N, Direction.E): Symbol.TURN_SE,
    (Direction.W, Direction.S): Symbol.TURN_SE,
    (Direction.E, Direction.S): Symbol.TURN_SW,
    (Direction.S, Direction.W): Symbol.TURN_NW,
    (Direction.S, Direction.E): Symbol.TURN_NE,
}


def legal_moves(grid: Grid, x: int, y: int) -> list[tuple[int, int, Direction]]:
    """
    List the unvisited in-bounds neighbours of (x, y).

    Neighbours are checked South, North, East, West.

    Returns:
        List of (next_x, next_y, direction_of_travel) tuples
    """
    moves: list[tuple[int, int, Direction]] = []
    for dx, dy, direction in MOVES:
        next_x, next_y = x + dx, y + dy
        if not (0 <= next_x < grid.size and 0 <= next_y < grid.size):
            continue
        if not is_visited(get_cell(grid, next_x, next_y)):
            moves.append((next_x, next_y, direction))
    return moves


def draw_symbol(direction: Direction | None) -> Symbol:
    """Symbol for a cell crossed in a straight line, WALL for the start cell."""
    match direction:
        case Direction.N | Direction.S:
            return Symbol.VERTICAL
        case Direction.E | Direction.W:
            return Symbol.HORIZONTAL
        case _:
            return Symbol.WALL


def draw_turn_symbol(from_dir: Direction | None, to_dir: Direction | None) -> Symbol:
    """
    Corner symbol for a cell entered moving `from_dir` and left moving `to_dir`.

    Raises:
        UndefinedTurn: for reversals, straight continuations and the start
            sentinel, none of which draw a corner.
    """
    try:
        return TURN_SYMBOLS[(from_dir, to_dir)]  # type: ignore[index]
    except KeyError:
        raise UndefinedTurn(from_dir, to_dir) from None


# =============================================================================
# Search Engine
# =============================================================================


@dataclass(frozen=True)
class SearchState:
    """
    A partially drawn path waiting on the work stack.

    The path stands on (x, y), arrived moving `direction` (None for the start
    cell) and may still change direction `turns_left` times.
    """

    grid: Grid
    x: int
    y: int
    direction: Direction | None
    turns_left: int


@dataclass(frozen=True)
class Result:
    """One complete covering of the grid."""

    turns_used: int
    grid: Grid


class SearchRun:
    """
    Iterator wrapper for iter_search() that tracks search progress.

    Usage:
        run = iter_search(5, 3, 1, 12)
        for result in run:
            print(result.turns_used)
        print(run.iterations, run.exhausted)

    Attributes:
        iterations: States popped from the work stack so far
        peak_stack: Largest work stack size seen so far
        exhausted: True once the work stack has been emptied
    """

    def __init__(self, generator: Iterator[Result]):
        self._iterator = generator
        self.iterations = 0
        self.peak_stack = 0
        self.exhausted = False

    def __iter__(self) -> Iterator[Result]:
        return self

    def __next__(self) -> Result:
        return next(self._iterator)


def iter_search(size: int, start_x: int, start_y: int, max_turns: int) -> SearchRun:
    """
    Lazily enumerate every covering reachable from (start_x, start_y).

    Results are yielded in discovery order. Stopping iteration early leaves
    the remaining branches unexplored.

    Args:
        size: Grid side length (>= 1)
        start_x: Start row
        start_y: Start column
        max_turns: Maximum number of direction changes (>= 0)

    Returns:
        SearchRun iterator yielding Result and tracking iteration count

    Raises:
        ValueError: if size < 1 or max_turns < 0
        OutOfBounds: if the start cell is outside the grid
    """
    if max_turns < 0:
        raise ValueError(f"Turn budget must be non-negative, got {max_turns}")
    initial = empty_grid(size)
    get_cell(initial, start_x, start_y)

    run = SearchRun(iter(()))
    run._iterator = _search_generator(initial, start_x, start_y, max_turns, run)
    return run


def _search_generator(
    initial: Grid,
    start_x: int,
    start_y: int,
    max_turns: int,
    run: SearchRun,
) -> Iterator[Result]:
    """Internal generator for iter_search(). Do not call directly."""
    # The extra unit pays for leaving the start cell, which has no
    # incoming direction and so always registers as a change.
    stack: list[SearchState] = [
        SearchState(initial, start_x, start_y, None, max_turns + 1)
    ]

    while stack:
        state = stack.pop()
        run.iterations += 1
        x, y, direction = state.x, state.y, state.direction
        updated = set_cell(state.grid, x, y, Visited(draw_symbol(direction)))

        if is_fully_visited(updated):
            # A single-cell grid never leaves the start, so nothing was spent
            turns_used = max_turns - state.turns_left if direction is not None else 0
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Covering with %d turns:\n%s", turns_used, render(updated))
            yield Result(turns_used, updated)
            continue

        for next_x, next_y, next_direction in legal_moves(updated, x, y):
            if next_direction == direction:
                stack.append(
                    SearchState(updated, next_x, next_y, next_direction, state.turns_left)
                )
            elif state.turns_left >= 1:
                if direction is None:
                    turned = updated  # Start cell keeps its WALL
                else:
                    corner = draw_turn_symbol(direction, next_direction)
                    turned = set_cell(updated, x, y, Visited(corner))
                stack.append(
                    SearchState(turned, next_x, next_y, next_direction, state.turns_left - 1)
                )

        if len(stack) > run.peak_stack:
            run.peak_stack = len(stack)

    run.exhausted = True
    logger.info(
        "search: iterations=%d, peak_stack=%d, size=%d, start=(%d, %d), max_turns=%d",
        run.iterations,
        run.peak_stack,
        initial.size,
        start_x,
        start_y,
        max_turns,
    )


def search(size: int, start_x: int, start_y: int, max_turns: int) -> tuple[int, list[Result]]:
    """
    Enumerate every covering and return (iteration_count, results).

    Results keep discovery order, which is deterministic for fixed inputs.
    """
    run = iter_search(size, start_x, start_y, max_turns)
    results = list(run)
    return (run.iterations, results)


# =============================================================================
# Result Selection
# =============================================================================


@dataclass(frozen=True)
class Selection:
    """The fewest-turn and most-turn coverings."""

    best: Result
    worst: Result


def select_extremes(results: Iterable[Result]) -> Selection | None:
    """
    Pick the minimum-turn and maximum-turn coverings.

    Ties keep discovery order: best is the first covering found with the
    fewest turns, worst the last found with the most.

    Returns:
        Selection, or None when there are no results
    """
    ordered = sorted(results, key=lambda r: r.turns_used)
    if not ordered:
        return None
    return Selection(best=ordered[0], worst=ordered[-1])


def count_turns(grid: Grid) -> int:
    """Number of corner symbols drawn on the grid."""
    return sum(
        1
        for row in grid.cells
        for cell in row
        if isinstance(cell, Visited) and cell.symbol in CORNER_SYMBOLS
    )


def turn_histogram(results: Sequence[Result]) -> dict[int, int]:
    """Count results per turn count, in ascending turn order."""
    counts = Counter(r.turns_used for r in results)
    return {turns: counts[turns] for turns in sorted(counts)}
