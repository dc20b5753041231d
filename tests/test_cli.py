"""
Tests for the command line interface.

Runs main() end to end against a temporary results file.
"""

import sys
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from contest_rankings.__main__ import args_to_config, args_to_typed, build_parser, main
from contest_rankings.config import RunConfig
from contest_rankings.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """main() reconfigures loguru; put back a plain stderr handler afterwards."""
    yield
    logger.remove()
    _ = logger.add(sys.stderr)


@pytest.fixture
def results_file() -> Iterator[Path]:
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir) / "contest-results.jsonl"


def run(results_file: Path, *args: str) -> None:
    main(["--results-file", str(results_file), *args])


class TestCommands:
    """Subcommands end to end."""

    def test_append_result_then_show(
        self, results_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A single result is stored and shows up in the ranking."""
        # Act
        run(results_file, "append-result", "--result", "Alice 10, Bob 20")
        run(results_file, "show-rankings")

        # Assert
        out = capsys.readouterr().out
        assert "Successfully processed 1 contest result(s)." in out
        assert "1. Bob, 3 pts" in out
        assert "2. Alice, 0 pts" in out
        assert len(results_file.read_text(encoding="utf-8").splitlines()) == 1

    def test_append_result_short_option(self, results_file: Path) -> None:
        """-r is an alias of --result."""
        run(results_file, "append-result", "-r", "Alice 1, Bob 1")

        assert results_file.is_file()

    def test_append_file(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Every line of the input file is appended."""
        # Arrange
        input_file = results_file.parent / "input.txt"
        input_file.write_text("Alice 3, Bob 1\r\nBob 2, Carol 2\nCarol 0, Alice 5\n", encoding="utf-8")

        # Act
        run(results_file, "append-file", "-f", str(input_file))
        run(results_file, "show-rankings")

        # Assert
        out = capsys.readouterr().out
        assert "Successfully processed 3 contest result(s)." in out
        assert "1. Alice, 6 pts" in out
        assert "2. Bob, 1 pt" in out
        assert "2. Carol, 1 pt" in out

    def test_append_file_with_byte_order_mark(
        self, results_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A leading BOM is not part of the first contestant's name."""
        # Arrange
        input_file = results_file.parent / "input.txt"
        input_file.write_text("Alice 3, Bob 1\nBob 0, Alice 2\n", encoding="utf-8-sig")

        # Act
        run(results_file, "append-file", "--file", str(input_file))
        run(results_file, "show-rankings")

        # Assert
        out = capsys.readouterr().out
        assert "\ufeff" not in out
        assert "1. Alice, 6 pts" in out
        assert "2. Bob, 0 pts" in out

    def test_show_rankings_table(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--table prints the league table."""
        run(results_file, "append-result", "--result", "Alice 1, Bob 0")

        run(results_file, "show-rankings", "--table")

        out = capsys.readouterr().out
        assert "Played" in out
        assert "Alice" in out

    def test_show_rankings_custom_points(
        self, results_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Points overrides are applied to the ranking."""
        run(results_file, "append-result", "--result", "Alice 1, Bob 0")

        run(results_file, "show-rankings", "--win-points", "2")

        assert "1. Alice, 2 pts" in capsys.readouterr().out

    def test_show_rankings_without_data(
        self, results_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """No results file means the no-data message."""
        run(results_file, "show-rankings")

        assert "no results exist" in capsys.readouterr().out

    def test_clear_contest_results(self, results_file: Path) -> None:
        """Clearing deletes the results file."""
        run(results_file, "append-result", "--result", "Alice 1, Bob 0")

        run(results_file, "clear-contest-results")

        assert not results_file.exists()

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Running without a subcommand shows usage and succeeds."""
        main([])

        assert "append-result" in capsys.readouterr().out


class TestFailures:
    """Failures exit with code 1 and one diagnostic line on stderr."""

    def test_invalid_result(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Validation errors name the failing line."""
        # Act
        with pytest.raises(SystemExit) as exc_info:
            run(results_file, "append-result", "--result", "Alice 10,Bob 20,Charlie 30")

        # Assert
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == (
            "Error in contestant result 1: A result can only contain one , symbol.\n"
        )
        assert not results_file.exists()

    def test_invalid_line_in_file(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A bad line in a file rejects the whole file."""
        # Arrange
        input_file = results_file.parent / "input.txt"
        input_file.write_text("Alice 10, Bob 20\nBadLine\n", encoding="utf-8")

        # Act
        with pytest.raises(SystemExit):
            run(results_file, "append-file", "--file", str(input_file))

        # Assert
        err = capsys.readouterr().err
        assert err.startswith("Error in contestant result 2: A result must be separated")
        assert not results_file.exists()

    def test_missing_input_file(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing input file is reported before anything is parsed."""
        missing = results_file.parent / "missing.txt"

        with pytest.raises(SystemExit) as exc_info:
            run(results_file, "append-file", "--file", str(missing))

        assert exc_info.value.code == 1
        assert capsys.readouterr().err == f"Error: File does not exist: {missing}\n"

    def test_input_file_not_utf8(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An input file in another encoding is a one-line error, not a traceback."""
        # Arrange
        input_file = results_file.parent / "input.txt"
        input_file.write_bytes(b"Jos\xe9 3, Bob 1\n")

        # Act
        with pytest.raises(SystemExit) as exc_info:
            run(results_file, "append-file", "--file", str(input_file))

        # Assert
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == f"Error: File is not valid UTF-8 text: {input_file}\n"
        assert not results_file.exists()

    def test_results_log_not_utf8(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An undecodable results log is reported as a corrupt record."""
        # Arrange
        results_file.write_bytes(b"\xff\xfe{}\n")

        # Act
        with pytest.raises(SystemExit) as exc_info:
            run(results_file, "show-rankings")

        # Assert
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Invalid record on line 1: not valid UTF-8")
        assert err.count("\n") == 1

    def test_invalid_points(self, results_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Inconsistent points are a configuration error."""
        with pytest.raises(SystemExit):
            run(results_file, "show-rankings", "--draw-points", "5")

        assert capsys.readouterr().err.startswith("Error: points must satisfy")

    def test_missing_required_option(self, results_file: Path) -> None:
        """argparse rejects append-result without --result."""
        with pytest.raises(SystemExit) as exc_info:
            run(results_file, "append-result")

        assert exc_info.value.code == 2


class TestConfig:
    """Argument to configuration mapping."""

    def test_defaults(self) -> None:
        """Defaults map to the standard results file and 3/1/0 points."""
        args = args_to_typed(build_parser().parse_args(["show-rankings"]))

        config = args_to_config(args)

        assert config.results_path == Path("contest-results.jsonl")
        assert (config.scheme.win, config.scheme.draw, config.scheme.loss) == (3, 1, 0)

    def test_results_path_must_name_a_file(self) -> None:
        """An empty results path is rejected."""
        with pytest.raises(ConfigurationError):
            RunConfig(results_path=Path(""))
