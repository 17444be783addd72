"""Tests for the command-line demo and the interactive result browser."""

import pytest
from rich.panel import Panel

from demo import (
    PRESETS,
    Report,
    SearchConfig,
    format_report,
    histogram_table,
    main,
    parse_args,
    run,
    validate,
)
from interactive_demo import ResultBrowser


class TestParseArgs:
    """Tests for configuration parsing."""

    def test_default(self) -> None:
        config, verbose = parse_args([])
        assert config == SearchConfig(size=5, start_x=3, start_y=1, turns=12)
        assert not verbose

    def test_preset(self) -> None:
        config, _ = parse_args(["square"])
        assert config == PRESETS["square"]

    def test_four_integers(self) -> None:
        config, _ = parse_args(["4", "0", "3", "6"])
        assert config == SearchConfig(4, 0, 3, 6)

    def test_verbose_anywhere(self) -> None:
        config, verbose = parse_args(["tiny", "-v"])
        assert verbose
        assert config == PRESETS["tiny"]

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Unknown preset: 'huge'"):
            parse_args(["huge"])

    def test_non_integer(self) -> None:
        with pytest.raises(ValueError, match="four integers"):
            parse_args(["4", "0", "x", "6"])

    @pytest.mark.parametrize("argv", [["1", "2"], ["1", "2", "3"], ["1", "2", "3", "4", "5"]])
    def test_wrong_count(self, argv: list[str]) -> None:
        with pytest.raises(ValueError, match="Expected 0, 1 or 4 arguments"):
            parse_args(argv)

    def test_out_of_range_start(self) -> None:
        with pytest.raises(ValueError, match=r"start \(3, 0\) is outside a 3x3 grid"):
            parse_args(["3", "3", "0", "2"])


class TestValidate:
    """Tests for configuration bounds."""

    def test_valid_presets(self) -> None:
        for config in PRESETS.values():
            assert validate(config) is config

    def test_collects_problems(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            validate(SearchConfig(size=0, start_x=0, start_y=0, turns=-1))
        message = str(exc_info.value)
        assert "size must be at least 1" in message
        assert "turns must be non-negative" in message


class TestRunAndReport:
    """Tests for the timed run and the plain report."""

    def test_run_square(self) -> None:
        report = run(PRESETS["square"])
        assert report.iterations == 7
        assert len(report.results) == 2
        assert report.elapsed_ms >= 0
        assert report.selection is not None
        assert report.selection.best is report.results[0]
        assert report.selection.worst is report.results[1]

    def test_format_report(self) -> None:
        report = run(PRESETS["square"])
        text = format_report(report)
        lines = text.split("\n")
        assert lines[0].startswith("Ran 7 iterations in ")
        assert lines[1] == "Found 2 results!"
        assert lines[3:] == [
            "Best: 2 turns",
            "█┐",
            "─┘",
            "",
            "Worst: 2 turns",
            "█│",
            "└┘",
        ]

    def test_format_report_no_results(self) -> None:
        report = run(PRESETS["centre"])
        assert report.selection is None
        text = format_report(report)
        assert "Found 0 results!" in text
        assert "No coverings of the 3x3 grid from (1, 1) within 0 turns" in text
        assert "Best" not in text

    def test_histogram_table(self) -> None:
        report = run(SearchConfig(4, 0, 0, 8))
        table = histogram_table(report.results)
        assert table.row_count == len({r.turns_used for r in report.results})


class TestMain:
    """Tests for the entry point."""

    def test_tiny(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["tiny"]) == 0
        out = capsys.readouterr().out
        assert "Found 1 results!" in out
        assert "Best: 0 turns" in out
        assert "█" in out

    def test_no_results(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["centre"]) == 0
        out = capsys.readouterr().out
        assert "Found 0 results!" in out
        assert "No coverings" in out

    def test_bad_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["nope"]) == 2
        assert "Error" in capsys.readouterr().out


class TestResultBrowser:
    """Tests for the interactive browser's cursor and display."""

    def make_browser(self, config: SearchConfig) -> ResultBrowser:
        return ResultBrowser(run(config))

    def test_ordered_by_turns(self) -> None:
        browser = self.make_browser(SearchConfig(4, 0, 0, 8))
        turns = [r.turns_used for r in browser.results]
        assert turns == sorted(turns)

    def test_cursor_clamps(self) -> None:
        browser = self.make_browser(PRESETS["square"])
        browser.previous()
        assert browser.index == 0
        browser.next()
        browser.next()
        assert browser.index == 1
        browser.first()
        assert browser.index == 0
        browser.last()
        assert browser.index == 1

    def test_keys(self) -> None:
        browser = self.make_browser(PRESETS["square"])
        assert browser.handle_key("n")
        assert browser.index == 1
        assert browser.handle_key("A")
        assert browser.index == 0
        assert browser.handle_key("w")
        assert browser.index == 1
        assert browser.handle_key("b")
        assert browser.index == 0
        assert browser.handle_key("?")
        assert "Unknown key" in browser.status_message
        assert not browser.handle_key("q")

    def test_display(self) -> None:
        browser = self.make_browser(PRESETS["square"])
        panel = browser.generate_display()
        assert isinstance(panel, Panel)
        assert panel.title == "turngrid"

    def test_display_without_results(self) -> None:
        browser = self.make_browser(PRESETS["centre"])
        browser.next()
        assert browser.index == 0
        panel = browser.generate_display()
        assert panel.title == "turngrid - No results"

    def test_report_type(self) -> None:
        browser = self.make_browser(PRESETS["tiny"])
        assert isinstance(browser.report, Report)
        assert len(browser.results) == 1
