"""
Tests for core dataclasses.
"""

import pytest

from contest_rankings.exceptions import ValidationError
from contest_rankings.models import ContestResult


class TestContestResult:
    """ContestResult validation."""

    def test_valid_result(self) -> None:
        """Valid fields construct and render in input form."""
        result = ContestResult("Alice", 10, "Bob", 20)

        assert str(result) == "Alice 10, Bob 20"

    @pytest.mark.parametrize(
        ("name1", "score1", "name2", "score2"),
        [
            ("", 1, "Bob", 2),
            ("Alice", 1, "  ", 2),
            ("Alice", -1, "Bob", 2),
            ("Alice", 1, "Bob", 65536),
            ("Alice", True, "Bob", 2),
            ("Alice", 1.5, "Bob", 2),
        ],
    )
    def test_invalid_fields_rejected(self, name1, score1, name2, score2) -> None:
        """Blank names and out-of-range or non-integer scores are rejected."""
        with pytest.raises(ValidationError):
            ContestResult(name1, score1, name2, score2)

    def test_results_are_immutable(self) -> None:
        """Results cannot be changed after construction."""
        result = ContestResult("Alice", 10, "Bob", 20)

        with pytest.raises(AttributeError):
            result.contestant1_score = 11  # type: ignore[misc]
