"""
Result line parsing.
"""

from .result_parser import (
    RESULT_SEPARATOR,
    ValidationOutcome,
    Violation,
    parse_result_line,
)

__all__ = [
    "RESULT_SEPARATOR",
    "ValidationOutcome",
    "Violation",
    "parse_result_line",
]
