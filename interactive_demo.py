"""
Interactive browser for turngrid search results.
Runs one search, then steps through its coverings with keyboard commands.
"""

import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_colored
from demo import Report, parse_args, run


class ResultBrowser:
    """Cursor over a report's coverings, ordered from fewest to most turns."""

    def __init__(self, report: Report) -> None:
        self.report = report
        self.results = sorted(report.results, key=lambda r: r.turns_used)
        self.index = 0
        self.console = Console()
        self.status_message = "Ready"

    def next(self) -> None:
        self.index = min(self.index + 1, max(len(self.results) - 1, 0))

    def previous(self) -> None:
        self.index = max(self.index - 1, 0)

    def first(self) -> None:
        self.index = 0

    def last(self) -> None:
        self.index = max(len(self.results) - 1, 0)

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        config = self.report.config

        if not self.results:
            status = Text()
            status.append("No coverings found!\n", style="bold red")
            status.append(
                f"{config.size}x{config.size} grid from ({config.start_x}, {config.start_y}) "
                f"within {config.turns} turns.\n"
            )
            return Panel(status, title="turngrid - No results", border_style="red")

        result = self.results[self.index]
        body = Text()
        body.append_text(Text.from_ansi(render_colored(result.grid)))
        body.append("\n\n")
        body.append("Turns: ", style="bold")
        body.append(f"{result.turns_used}\n")
        body.append("Covering: ", style="bold")
        body.append(f"{self.index + 1} of {len(self.results)}\n")
        body.append("Iterations: ", style="bold")
        body.append(f"{self.report.iterations} in {self.report.elapsed_ms} ms\n\n")
        body.append(f"{self.status_message}\n", style="dim")
        body.append("n/d next  p/a previous  b best  w worst  q quit", style="dim")
        return Panel(body, title="turngrid", border_style="cyan")

    def handle_key(self, key: str) -> bool:
        """Apply one key press; returns False when the browser should quit."""
        match key.lower():
            case "q":
                self.status_message = "Quitting..."
                return False
            case "n" | "d":
                self.next()
                self.status_message = "Next covering"
            case "p" | "a":
                self.previous()
                self.status_message = "Previous covering"
            case "b":
                self.first()
                self.status_message = "Fewest turns"
            case "w":
                self.last()
                self.status_message = "Most turns"
            case _:
                self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the interactive browser."""
        if not self.results:
            self.console.print(self.generate_display())
            return

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while self.handle_key(readchar.readkey()):
                    live.update(self.generate_display())
                live.update(self.generate_display())
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def main(argv: list[str]) -> int:
    try:
        config, _ = parse_args(argv)
    except ValueError as e:
        Console().print(Text(f"Error: {e}", style="red"))
        return 2
    ResultBrowser(run(config)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
