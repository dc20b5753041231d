"""
Exception classes for the contest rankings system.

Centralized location for all custom exceptions to avoid circular imports.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parsing.result_parser import Violation


class ValidationError(Exception):
    """Base exception for validation-related errors."""
    pass


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""
    pass


class InvalidStateError(Exception):
    """Raised when an object is used in a state that does not support the call."""
    pass


class ResultInputError(ValidationError):
    """Base exception for result input that cannot be parsed at all."""
    pass


class NullInputError(ResultInputError):
    """Raised when no result input was supplied."""

    def __init__(self) -> None:
        super().__init__("Value cannot be None.")


class MultiLineInputError(ResultInputError):
    """Raised when result input spans more than one line."""

    def __init__(self) -> None:
        super().__init__(
            "A result must not contain any line breaks, it must be a single line."
        )


class BlankInputError(ResultInputError):
    """Raised when result input is empty or only white-space."""

    def __init__(self) -> None:
        super().__init__("Value cannot be empty or white-space.")


class BatchValidationError(ValidationError):
    """
    Raised when a batch of results is rejected.

    Attributes:
        line_number: 1-based index of the first offending line
        violation: First violated rule, or None when the line could not be parsed
    """

    def __init__(
        self, message: str, line_number: int, violation: "Violation | None" = None
    ) -> None:
        super().__init__(message)
        self.line_number: int = line_number
        self.violation: "Violation | None" = violation


class CorruptRecordError(ValidationError):
    """Raised when a persisted record cannot be turned back into a result."""

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"Invalid record on line {line_number}: {message}")
        self.line_number: int = line_number
