"""
Results processor for contest rankings.

Coordinates the result parser, the store, and the ranker: appends validated
batches of results, clears the log, and displays the ranking table.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from prettytable import PrettyTable

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import BatchValidationError, ResultInputError
from .interfaces import Store
from .logging_config import get_logger
from .models import ContestResult, RankedEntry
from .parsing.result_parser import parse_result_line
from .rankers.points_ranker import PointsRanker, PointsScheme
from .storage.records import deserialize_result, serialize_result

NO_DATA_MESSAGE = (
    "Cannot display the ranking table because no results exist in the contest "
    "results store. Please add results, then retry."
)
RANKING_HEADER = "The current ranking is:"
CLEARED_MESSAGE = "All contest results have been cleared."


class ResultsProcessor:
    """Main coordinator for appending results and displaying rankings."""

    def __init__(self, store: Store, scheme: PointsScheme | None = None):
        """Initialize processor with its store and points scheme."""
        self.store: Store = store
        self.scheme: PointsScheme = scheme if scheme is not None else PointsScheme()

        self.logger: Logger = get_logger("processor")

    def process(self, lines: Sequence[str]) -> int:
        """
        Validate a batch of result lines and append them all, or none.

        Args:
            lines: Result lines such as "Alice 10, Bob 20"

        Returns:
            Number of results appended

        Raises:
            BatchValidationError: On the first line that is not a valid result
        """
        results = list[ContestResult]()
        for line_number, line in enumerate(lines, 1):
            try:
                outcome = parse_result_line(line)
            except ResultInputError as e:
                self.logger.info(f"Rejected batch at line {line_number}: {e}")
                raise BatchValidationError(str(e), line_number) from e

            violation = outcome.first_violation
            if violation is not None:
                self.logger.info(
                    f"Rejected batch at line {line_number}: {violation.name}"
                )
                raise BatchValidationError(violation.message, line_number, violation)

            results.append(outcome.get_parsed_result())

        if not self.store.is_initialized:
            self.store.initialize()

        self.store.append_all_lines([serialize_result(result) for result in results])

        self.logger.info(f"Processed batch of {len(results)} results")
        print(f"Successfully processed {len(results)} contest result(s).")
        return len(results)

    def clear_contest_results(self) -> None:
        """Reset the store if it exists."""
        if self.store.is_initialized:
            self.store.reset()
            self.logger.info("Contest results store reset")
        else:
            self.logger.debug("Contest results store not initialized; nothing to clear")

        print(CLEARED_MESSAGE)

    def load_results(self) -> list[ContestResult]:
        """Load every persisted result, failing on the first corrupt record."""
        results = list[ContestResult]()
        for line_number, line in enumerate(self.store.read_all_lines(), 1):
            if not line.strip():
                continue
            results.append(deserialize_result(line, line_number))

        self.logger.debug(f"Loaded {len(results)} results")
        return results

    def _build_ranker(self) -> PointsRanker:
        ranker = PointsRanker(self.scheme)
        ranker.update_with_results(self.load_results())
        return ranker

    def compute_rankings(self) -> list[RankedEntry]:
        """Rank all persisted results from scratch."""
        return self._build_ranker().get_rankings()

    def display_ranking_table(self, tabular: bool = False) -> list[RankedEntry]:
        """
        Print the ranking table.

        Args:
            tabular: Print a full league table instead of one line per contestant

        Returns:
            The ranked entries that were printed (empty when there is no data)
        """
        if not self.store.is_initialized or self.store.is_empty:
            print(NO_DATA_MESSAGE)
            return []

        ranker = self._build_ranker()
        rankings = ranker.get_rankings()

        if not rankings:
            print(NO_DATA_MESSAGE)
            return []

        print(RANKING_HEADER)
        if tabular:
            print(self._build_table(ranker, rankings))
        else:
            for entry in rankings:
                print(
                    f"{entry.rank}. {entry.contestant_name}, {entry.total_points} {entry.point_label}"
                )

        self.logger.info(f"Displayed ranking of {len(rankings)} contestants")
        return rankings

    def _build_table(self, ranker: PointsRanker, rankings: Sequence[RankedEntry]) -> PrettyTable:
        table = PrettyTable()
        table.field_names = ["Rank", "Contestant", "Played", "Won", "Drawn", "Lost", "Points"]
        for column in ("Rank", "Played", "Won", "Drawn", "Lost", "Points"):
            table.align[column] = "r"
        table.align["Contestant"] = "l"

        for entry in rankings:
            record = ranker.get_record(entry.contestant_name)
            table.add_row([
                entry.rank,
                entry.contestant_name,
                record.played,
                record.won,
                record.drawn,
                record.lost,
                entry.total_points,
            ])
        return table
