"""
In-memory store implementation.

Keeps records in a list; useful for tests and dry runs.
"""

from collections.abc import Sequence

from typing_extensions import override

from ..interfaces import Store


class InMemoryStore(Store):
    """Store backed by a Python list. None means uninitialized."""

    def __init__(self, lines: Sequence[str] | None = None):
        """
        Initialize in-memory store.

        Args:
            lines: Optional pre-existing records; the store starts initialized if given
        """
        self._lines: list[str] | None = list(lines) if lines is not None else None
        self.append_calls: int = 0

    @property
    @override
    def is_initialized(self) -> bool:
        return self._lines is not None

    @property
    @override
    def is_empty(self) -> bool:
        return self._lines is not None and not self._lines

    @override
    def read_all_lines(self) -> list[str]:
        if self._lines is None:
            raise FileNotFoundError("in-memory store is not initialized")
        return list(self._lines)

    @override
    def append_all_lines(self, lines: Sequence[str]) -> None:
        if self._lines is None:
            self._lines = []
        self._lines.extend(lines)
        self.append_calls += 1

    @override
    def initialize(self) -> None:
        if self._lines is None:
            self._lines = []

    @override
    def reset(self) -> None:
        self._lines = None
