"""
Result line parser.

Turns one line of input such as "Alice 10, Bob 20" into a ValidationOutcome.
Input that cannot be treated as a line at all raises a ResultInputError;
every other problem is recorded as a Violation tag on the outcome so callers
can report a single, prioritized error.
"""

import re
from dataclasses import dataclass
from enum import IntEnum

from ..exceptions import (
    BlankInputError,
    InvalidStateError,
    MultiLineInputError,
    NullInputError,
)
from ..logging_config import get_logger
from ..models import MAX_SCORE, ContestResult

# Module-level logger
logger = get_logger("result_parser")

RESULT_SEPARATOR = ","
SCORE_SEPARATOR = " "

_LINE_BREAKS = ("\r", "\n")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Violation(IntEnum):
    """
    Validation rules a result line can break.

    The value is the reporting precedence: when several rules are broken, the
    lowest value is the one shown to the user.
    """

    MULTIPLE_SEPARATORS = 1
    MISSING_SEPARATOR = 2
    NO_CONTESTANT1_RESULT = 3
    NO_CONTESTANT2_RESULT = 4
    NO_CONTESTANT1_NAME = 5
    NO_CONTESTANT1_SCORE = 6
    NO_CONTESTANT2_NAME = 7
    NO_CONTESTANT2_SCORE = 8

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Violation.MULTIPLE_SEPARATORS: f"A result can only contain one {RESULT_SEPARATOR} symbol.",
    Violation.MISSING_SEPARATOR: (
        f"A result must be separated into two parts by the {RESULT_SEPARATOR} symbol; "
        "one part for each contestant's name and score."
    ),
    Violation.NO_CONTESTANT1_RESULT: (
        "A result must include the results for both contestants. "
        "Cannot find a result for contestant 1."
    ),
    Violation.NO_CONTESTANT2_RESULT: (
        "A result must include the results for both contestants. "
        "Cannot find a result for contestant 2."
    ),
    Violation.NO_CONTESTANT1_NAME: (
        "A result must include names for both contestants. "
        "Cannot find a name for contestant 1."
    ),
    Violation.NO_CONTESTANT1_SCORE: (
        "A result must include scores for both contestants. "
        "Cannot find a score for contestant 1."
    ),
    Violation.NO_CONTESTANT2_NAME: (
        "A result must include names for both contestants. "
        "Cannot find a name for contestant 2."
    ),
    Violation.NO_CONTESTANT2_SCORE: (
        "A result must include scores for both contestants. "
        "Cannot find a score for contestant 2."
    ),
}

# Set on both sides when the line cannot be split into two halves.
_CONTESTANT_VIOLATIONS = (
    Violation.NO_CONTESTANT1_RESULT,
    Violation.NO_CONTESTANT2_RESULT,
    Violation.NO_CONTESTANT1_NAME,
    Violation.NO_CONTESTANT1_SCORE,
    Violation.NO_CONTESTANT2_NAME,
    Violation.NO_CONTESTANT2_SCORE,
)


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of validating one input line.

    Name and score fields are best-effort: empty string and zero when they
    could not be extracted. Violations are kept in precedence order.
    """

    contestant1_name: str = ""
    contestant1_score: int = 0
    contestant2_name: str = ""
    contestant2_score: int = 0
    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def has_multiple_separators(self) -> bool:
        return Violation.MULTIPLE_SEPARATORS in self.violations

    @property
    def is_missing_separator(self) -> bool:
        return Violation.MISSING_SEPARATOR in self.violations

    @property
    def has_no_contestant1_result(self) -> bool:
        return Violation.NO_CONTESTANT1_RESULT in self.violations

    @property
    def has_no_contestant2_result(self) -> bool:
        return Violation.NO_CONTESTANT2_RESULT in self.violations

    @property
    def has_no_contestant1_name(self) -> bool:
        return Violation.NO_CONTESTANT1_NAME in self.violations

    @property
    def has_no_contestant1_score(self) -> bool:
        return Violation.NO_CONTESTANT1_SCORE in self.violations

    @property
    def has_no_contestant2_name(self) -> bool:
        return Violation.NO_CONTESTANT2_NAME in self.violations

    @property
    def has_no_contestant2_score(self) -> bool:
        return Violation.NO_CONTESTANT2_SCORE in self.violations

    @property
    def first_violation(self) -> Violation | None:
        """The violation that takes precedence, if any."""
        return self.violations[0] if self.violations else None

    def get_next_error(self) -> str | None:
        """Message for the highest-precedence violation, or None when valid."""
        violation = self.first_violation
        return violation.message if violation is not None else None

    def get_parsed_result(self) -> ContestResult:
        """
        Build the contest result from a valid outcome.

        Raises:
            InvalidStateError: If the outcome is not valid
        """
        if not self.is_valid:
            raise InvalidStateError(
                "Cannot generate a valid contest result from invalid input."
            )
        return ContestResult(
            contestant1_name=self.contestant1_name,
            contestant1_score=self.contestant1_score,
            contestant2_name=self.contestant2_name,
            contestant2_score=self.contestant2_score,
        )


@dataclass(frozen=True)
class _ContestantPart:
    name: str
    score: int | None


def _parse_integer(text: str) -> int | None:
    """Parse a signed decimal integer literal, or return None."""
    text = text.strip()
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    return int(text)


def _score_in_range(value: int) -> int | None:
    return value if 0 <= value <= MAX_SCORE else None


def _parse_contestant(part: str) -> _ContestantPart:
    """
    Split one half of a result line into name and score.

    The rightmost space separates the name from the score so names may contain
    spaces. When the trailing token is not an integer the whole half is the name.
    """
    space_index = part.rfind(SCORE_SEPARATOR)

    if space_index == -1:
        value = _parse_integer(part)
        if value is None:
            return _ContestantPart(name=part, score=None)
        return _ContestantPart(name="", score=_score_in_range(value))

    value = _parse_integer(part[space_index + 1 :])
    if value is None:
        return _ContestantPart(name=part, score=None)
    return _ContestantPart(name=part[:space_index].strip(), score=_score_in_range(value))


def parse_result_line(line: str | None) -> ValidationOutcome:
    """
    Validate and parse a single result line.

    Args:
        line: Text such as "Alice 10, Bob 20"

    Returns:
        ValidationOutcome holding the extracted fields and any violations

    Raises:
        NullInputError: If line is None
        MultiLineInputError: If line contains a carriage return or line feed
        BlankInputError: If line is empty or white-space
    """
    if line is None:
        raise NullInputError()
    # Line breaks are checked first so "\n" is not reported as blank.
    if any(line_break in line for line_break in _LINE_BREAKS):
        raise MultiLineInputError()
    trimmed = line.strip()
    if not trimmed:
        raise BlankInputError()

    first_index = trimmed.find(RESULT_SEPARATOR)
    last_index = trimmed.rfind(RESULT_SEPARATOR)

    structural = list[Violation]()
    if first_index != last_index:
        structural.append(Violation.MULTIPLE_SEPARATORS)
    if first_index == -1:
        structural.append(Violation.MISSING_SEPARATOR)

    if structural:
        logger.debug(f"Rejected {trimmed!r}: {structural[0].name}")
        return ValidationOutcome(violations=(*structural, *_CONTESTANT_VIOLATIONS))

    first_part, second_part = (part.strip() for part in trimmed.split(RESULT_SEPARATOR))
    contestant1 = _parse_contestant(first_part)
    contestant2 = _parse_contestant(second_part)

    checks = (
        (Violation.NO_CONTESTANT1_RESULT, first_index == 0),
        (Violation.NO_CONTESTANT2_RESULT, last_index == len(trimmed) - 1),
        (Violation.NO_CONTESTANT1_NAME, not contestant1.name.strip()),
        (Violation.NO_CONTESTANT1_SCORE, contestant1.score is None),
        (Violation.NO_CONTESTANT2_NAME, not contestant2.name.strip()),
        (Violation.NO_CONTESTANT2_SCORE, contestant2.score is None),
    )
    violations = tuple(sorted(violation for violation, broken in checks if broken))

    outcome = ValidationOutcome(
        contestant1_name=contestant1.name,
        contestant1_score=contestant1.score if contestant1.score is not None else 0,
        contestant2_name=contestant2.name,
        contestant2_score=contestant2.score if contestant2.score is not None else 0,
        violations=violations,
    )
    logger.debug(f"Parsed {trimmed!r}: valid={outcome.is_valid}")
    return outcome
