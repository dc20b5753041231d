"""
CLI entry point for contest rankings.

Parses arguments, validates config, and wires components.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path
from typing import TypedDict, cast

from .config import DEFAULT_RESULTS_FILE, RunConfig
from .exceptions import BatchValidationError, ConfigurationError, ValidationError
from .logging_config import get_logger, setup_logging
from .processor import ResultsProcessor
from .storage.jsonl_store import JSONLStore


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    command: str | None
    results_file: str
    log_level: str
    debug: bool
    log_file: str | None
    file: str | None
    result: str | None
    table: bool
    win_points: int
    draw_points: int
    loss_points: int


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="contest-rankings",
        description="Contest Rankings - record contest results and rank contestants by league points",
    )

    _ = parser.add_argument(
        "--results-file",
        default=DEFAULT_RESULTS_FILE,
        help=f"Path to the JSONL results file (default: {DEFAULT_RESULTS_FILE})"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file (rotated at 10 MB)"
    )

    subparsers = parser.add_subparsers(dest="command")

    append_file = subparsers.add_parser(
        "append-file",
        help="Append contest results from a file, one result per line"
    )
    _ = append_file.add_argument(
        "--file", "-f",
        required=True,
        help="Path to a text file of results"
    )

    append_result = subparsers.add_parser(
        "append-result",
        help="Append a single contest result"
    )
    _ = append_result.add_argument(
        "--result", "-r",
        required=True,
        help='Result such as "Alice 10, Bob 20"; names and scores separated by a comma'
    )

    _ = subparsers.add_parser(
        "clear-contest-results",
        help="Delete all stored contest results"
    )

    show_rankings = subparsers.add_parser(
        "show-rankings",
        help="Display the ranking table"
    )
    _ = show_rankings.add_argument(
        "--table",
        action="store_true",
        help="Show a full league table with played/won/drawn/lost columns"
    )
    _ = show_rankings.add_argument(
        "--win-points",
        type=int,
        default=3,
        help="Points for a win (default: 3)"
    )
    _ = show_rankings.add_argument(
        "--draw-points",
        type=int,
        default=1,
        help="Points for a draw (default: 1)"
    )
    _ = show_rankings.add_argument(
        "--loss-points",
        type=int,
        default=0,
        help="Points for a loss (default: 0)"
    )

    return parser


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        command=ns.command,
        results_file=ns.results_file,
        log_level=ns.log_level,
        debug=ns.debug,
        log_file=ns.log_file,
        file=getattr(ns, "file", None),
        result=getattr(ns, "result", None),
        table=getattr(ns, "table", False),
        win_points=getattr(ns, "win_points", 3),
        draw_points=getattr(ns, "draw_points", 1),
        loss_points=getattr(ns, "loss_points", 0),
    )


def args_to_config(args: CLIArgs) -> RunConfig:
    """Build and validate the run configuration."""
    return RunConfig(
        results_path=Path(args["results_file"]),
        win_points=args["win_points"],
        draw_points=args["draw_points"],
        loss_points=args["loss_points"],
    )


def read_results_file(path: Path) -> list[str]:
    """Read result lines from a text file."""
    if not path.is_file():
        raise ValidationError(f"File does not exist: {path}")

    # utf-8-sig drops a leading byte-order mark
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return [line.rstrip("\n") for line in f]
    except UnicodeDecodeError as e:
        raise ValidationError(f"File is not valid UTF-8 text: {path}") from e


def run_command(args: CLIArgs, processor: ResultsProcessor) -> None:
    """Dispatch a parsed subcommand to the processor."""
    logger = get_logger("run_command")
    logger.debug(f"Running command {args['command']}")

    if args["command"] == "append-file":
        # --file is required by the subparser
        input_path = Path(cast(str, args["file"]))
        lines = read_results_file(input_path)
        logger.info(f"Read {len(lines)} lines from {input_path}")
        processor.process(lines)
    elif args["command"] == "append-result":
        processor.process([cast(str, args["result"])])
    elif args["command"] == "clear-contest-results":
        processor.clear_contest_results()
    elif args["command"] == "show-rankings":
        processor.display_ranking_table(tabular=args["table"])
    else:
        raise ValueError(f"Unknown command: {args['command']}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = args_to_typed(parser.parse_args(argv))

    setup_logging(level=args["log_level"], debug=args["debug"], log_file=args["log_file"])
    logger = get_logger("main")

    if args["command"] is None:
        parser.print_help()
        return

    try:
        config = args_to_config(args)
        logger.info(f"Results file: {config.results_path}")

        store = JSONLStore(config.results_path)
        processor = ResultsProcessor(store, scheme=config.scheme)

        run_command(args, processor)
    except BatchValidationError as e:
        logger.info(f"Batch rejected at line {e.line_number}")
        print(f"Error in contestant result {e.line_number}: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValidationError, ConfigurationError, OSError) as e:
        logger.info(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
