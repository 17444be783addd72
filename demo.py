"""
Command-line demo for turngrid.

Runs a search for one configuration, times it, and prints the fewest-turn and
most-turn coverings side by side.

Usage:
    python demo.py                         # default: 5x5 from (3, 1), 12 turns
    python demo.py square                  # a named preset
    python demo.py 4 0 0 6                 # size start_x start_y turns
    python demo.py -v ...                  # also log search statistics
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ascii_render import framed_panel, render, render_flow
from turngrid import Result, Selection, search, select_extremes, turn_histogram


@dataclass(frozen=True)
class SearchConfig:
    """Grid size, start cell and turn budget for one search."""

    size: int = 5
    start_x: int = 3
    start_y: int = 1
    turns: int = 12


PRESETS = dict(
    default=SearchConfig(),
    tiny=SearchConfig(size=1, start_x=0, start_y=0, turns=0),
    square=SearchConfig(size=2, start_x=0, start_y=0, turns=3),
    centre=SearchConfig(size=3, start_x=1, start_y=1, turns=0),
    corner=SearchConfig(size=4, start_x=0, start_y=0, turns=6),
)

USAGE = (
    "Accepted arguments:\n"
    "    (none)                      run the default configuration\n"
    f"    PRESET                      one of: {', '.join(PRESETS)}\n"
    "    SIZE START_X START_Y TURNS  four integers\n"
    "    -v                          log search statistics"
)


def validate(config: SearchConfig) -> SearchConfig:
    """Check a configuration against the grid bounds; return it unchanged."""
    problems: list[str] = []
    if config.size < 1:
        problems.append(f"size must be at least 1, got {config.size}")
    elif not (0 <= config.start_x < config.size and 0 <= config.start_y < config.size):
        problems.append(
            f"start ({config.start_x}, {config.start_y}) is outside a "
            f"{config.size}x{config.size} grid"
        )
    if config.turns < 0:
        problems.append(f"turns must be non-negative, got {config.turns}")
    if problems:
        raise ValueError("Invalid configuration\n" + "\n".join(f"  - {p}" for p in problems))
    return config


def parse_args(argv: list[str]) -> tuple[SearchConfig, bool]:
    """
    Parse command-line arguments (program name excluded).

    Returns:
        Tuple of (config, verbose)

    Raises:
        ValueError: with the accepted forms listed, on any invalid input
    """
    verbose = any(arg in ("-v", "--verbose") for arg in argv)
    args = [arg for arg in argv if arg not in ("-v", "--verbose")]

    if not args:
        return (validate(PRESETS["default"]), verbose)

    if len(args) == 1:
        if args[0] not in PRESETS:
            raise ValueError(f"Unknown preset: '{args[0]}'\n{USAGE}")
        return (validate(PRESETS[args[0]]), verbose)

    if len(args) == 4:
        try:
            size, start_x, start_y, turns = (int(arg) for arg in args)
        except ValueError:
            raise ValueError(f"Expected four integers, got: {' '.join(args)}\n{USAGE}") from None
        return (validate(SearchConfig(size, start_x, start_y, turns)), verbose)

    raise ValueError(f"Expected 0, 1 or 4 arguments, got {len(args)}\n{USAGE}")


# =============================================================================
# Running and Reporting
# =============================================================================


@dataclass(frozen=True)
class Report:
    """Outcome of one timed search."""

    config: SearchConfig
    iterations: int
    elapsed_ms: int
    results: list[Result]
    selection: Selection | None


def run(config: SearchConfig) -> Report:
    """Run and time a search for the configuration."""
    t0 = time.perf_counter()
    iterations, results = search(config.size, config.start_x, config.start_y, config.turns)
    elapsed = round((time.perf_counter() - t0) * 1000)
    return Report(config, iterations, elapsed, results, select_extremes(results))


def format_report(report: Report) -> str:
    """Plain-text report: counts, then the best and worst coverings."""
    lines = [
        f"Ran {report.iterations} iterations in {report.elapsed_ms} ms",
        f"Found {len(report.results)} results!",
        "",
    ]
    if report.selection is None:
        config = report.config
        lines.append(
            f"No coverings of the {config.size}x{config.size} grid from "
            f"({config.start_x}, {config.start_y}) within {config.turns} turns"
        )
        return "\n".join(lines)

    best, worst = report.selection.best, report.selection.worst
    lines.append(f"Best: {best.turns_used} turns")
    lines.append(render(best.grid))
    lines.append("")
    lines.append(f"Worst: {worst.turns_used} turns")
    lines.append(render(worst.grid))
    return "\n".join(lines)


def histogram_table(results: list[Result]) -> Table:
    """Rich table of coverings per turn count."""
    table = Table(title="Coverings by turn count", box=box.SIMPLE)
    table.add_column("Turns", justify="right")
    table.add_column("Coverings", justify="right")
    for turns, count in turn_histogram(results).items():
        table.add_row(str(turns), str(count))
    return table


def print_report(report: Report, console: Console) -> None:
    """Print a report with colored side-by-side best/worst panels."""
    console.print(
        f"Ran [bold]{report.iterations}[/bold] iterations in "
        f"[bold]{report.elapsed_ms}[/bold] ms"
    )
    console.print(f"Found [bold]{len(report.results)}[/bold] results!")
    console.print()

    if report.selection is None:
        config = report.config
        console.print(
            Text(
                f"No coverings of the {config.size}x{config.size} grid from "
                f"({config.start_x}, {config.start_y}) within {config.turns} turns",
                style="yellow",
            )
        )
        return

    best, worst = report.selection.best, report.selection.worst
    panels = [
        framed_panel(best.grid, f"Best: {best.turns_used} turns", colored=True),
        framed_panel(worst.grid, f"Worst: {worst.turns_used} turns", colored=True),
    ]
    console.print(Text.from_ansi(render_flow(panels, terminal_width=console.width)))
    console.print()
    console.print(histogram_table(report.results))


def main(argv: list[str] | None = None) -> int:
    """Run the demo; returns a process exit code."""
    console = Console()
    try:
        config, verbose = parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        console.print(Text(f"Error: {e}", style="red"))
        return 2

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    report = run(config)
    print_report(report, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
