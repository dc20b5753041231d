"""
League points ranker implementation.

Awards win/draw/loss points per contest result, accumulates them per
contestant name, and orders contestants with competition ("1224") ranking.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from loguru import Logger

from ..exceptions import ConfigurationError
from ..interfaces import Ranker
from ..logging_config import get_logger
from ..models import ContestantRecord, ContestResult, RankedEntry, RankingEntry


@dataclass(frozen=True)
class PointsScheme:
    """Points awarded for each contest outcome."""

    win: int = 3
    draw: int = 1
    loss: int = 0

    def __post_init__(self) -> None:
        """Validate points scheme."""
        if min(self.win, self.draw, self.loss) < 0:
            raise ConfigurationError(
                f"points must not be negative, got win={self.win}, draw={self.draw}, loss={self.loss}"
            )
        if not (self.win >= self.draw >= self.loss):
            raise ConfigurationError(
                f"points must satisfy win >= draw >= loss, got win={self.win}, draw={self.draw}, loss={self.loss}"
            )


def award_points(
    result: ContestResult, scheme: PointsScheme = PointsScheme()
) -> tuple[int, int]:
    """Return the points earned by contestant 1 and contestant 2."""
    if result.contestant1_score == result.contestant2_score:
        return scheme.draw, scheme.draw
    if result.contestant1_score > result.contestant2_score:
        return scheme.win, scheme.loss
    return scheme.loss, scheme.win


def _ranking_order(entry: RankingEntry) -> tuple[int, str]:
    return -entry.total_points, entry.contestant_name


def assign_competition_ranks(ordered: Sequence[RankingEntry]) -> list[RankedEntry]:
    """
    Label already-ordered entries with competition ranks.

    Tied entries share a rank and the next distinct points value takes its
    1-based position, so points [9, 4, 4, 3] are ranked [1, 2, 2, 4].
    """
    ranked = list[RankedEntry]()
    rank = 0
    group_size = 0
    previous_points: int | None = None

    for entry in ordered:
        if entry.total_points != previous_points:
            rank += 1 + group_size
            group_size = 0
        else:
            group_size += 1
        previous_points = entry.total_points
        ranked.append(RankedEntry(rank, entry.contestant_name, entry.total_points))

    return ranked


def rank_entries(entries: Iterable[RankingEntry]) -> list[RankedEntry]:
    """Order entries by points (descending) then name, and assign ranks."""
    return assign_competition_ranks(sorted(entries, key=_ranking_order))


class PointsRanker(Ranker):
    """
    League table ranker.

    Contestants are keyed by exact name; appearing as contestant 1 in one result
    and contestant 2 in another accumulates into the same total.
    """

    def __init__(self, scheme: PointsScheme | None = None):
        """
        Initialize points ranker.

        Args:
            scheme: Points for win/draw/loss (default 3/1/0)
        """
        self.scheme: PointsScheme = scheme if scheme is not None else PointsScheme()

        self.points = dict[str, int]()
        self.records = dict[str, ContestantRecord]()

        self.logger: Logger = get_logger("points_ranker")

    def _get_or_create_record(self, contestant_name: str) -> ContestantRecord:
        if contestant_name not in self.records:
            self.records[contestant_name] = ContestantRecord()
            self.points[contestant_name] = 0
        return self.records[contestant_name]

    @override
    def update_with_result(self, result: ContestResult) -> None:
        """Award points for one result and update both contestants' records."""
        points1, points2 = award_points(result, self.scheme)

        sides = (
            (result.contestant1_name, result.contestant1_score, result.contestant2_score, points1),
            (result.contestant2_name, result.contestant2_score, result.contestant1_score, points2),
        )
        for name, own_score, other_score, earned in sides:
            record = self._get_or_create_record(name)
            record.played += 1
            if own_score > other_score:
                record.won += 1
            elif own_score == other_score:
                record.drawn += 1
            else:
                record.lost += 1
            self.points[name] += earned

        self.logger.debug(f"Scored {result}: +{points1} / +{points2}")

    def update_with_results(self, results: Iterable[ContestResult]) -> None:
        """Fold several results in order."""
        for result in results:
            self.update_with_result(result)

    @override
    def get_points(self, contestant_name: str) -> int:
        return self.points.get(contestant_name, 0)

    @override
    def get_record(self, contestant_name: str) -> ContestantRecord:
        record = self.records.get(contestant_name)
        if record is None:
            return ContestantRecord()
        return ContestantRecord(record.played, record.won, record.drawn, record.lost)

    def get_standings(self) -> list[RankingEntry]:
        """Unranked per-contestant totals, in first-seen order."""
        return [RankingEntry(name, total) for name, total in self.points.items()]

    @override
    def get_rankings(self) -> list[RankedEntry]:
        return rank_entries(self.get_standings())
