"""
Core dataclasses for the contest rankings system.

Defines ContestResult and the ranking row models with validation.
"""

from dataclasses import dataclass

from .exceptions import ValidationError

MAX_SCORE = 65535


@dataclass(frozen=True)
class ContestResult:
    """Outcome of a single contest between two named contestants."""

    contestant1_name: str
    contestant1_score: int
    contestant2_name: str
    contestant2_score: int

    def __post_init__(self) -> None:
        """Validate contest result data."""
        for side, name in ((1, self.contestant1_name), (2, self.contestant2_name)):
            if not isinstance(name, str) or not name.strip():
                raise ValidationError(f"contestant{side}_name cannot be empty")
        for side, score in ((1, self.contestant1_score), (2, self.contestant2_score)):
            # bool is an int subclass but never a score
            if isinstance(score, bool) or not isinstance(score, int):
                raise ValidationError(f"contestant{side}_score must be an integer")
            if not 0 <= score <= MAX_SCORE:
                raise ValidationError(
                    f"contestant{side}_score must be between 0 and {MAX_SCORE}, got {score}"
                )

    def __str__(self) -> str:
        return (
            f"{self.contestant1_name} {self.contestant1_score}, "
            f"{self.contestant2_name} {self.contestant2_score}"
        )


@dataclass(frozen=True)
class RankingEntry:
    """Total points accumulated by one contestant."""

    contestant_name: str
    total_points: int


@dataclass(frozen=True)
class RankedEntry:
    """Ranking entry labelled with its competition rank."""

    rank: int
    contestant_name: str
    total_points: int

    @property
    def point_label(self) -> str:
        return "pt" if self.total_points == 1 else "pts"


@dataclass
class ContestantRecord:
    """Win/draw/loss counters for one contestant."""

    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
