"""
Abstract base classes defining the interfaces for the contest rankings system.

All interfaces are synchronous; a single process owns the results log.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import ContestantRecord, ContestResult, RankedEntry


class ReadOnlyStore(ABC):
    """Interface for reading persisted result records."""

    @property
    @abstractmethod
    def is_initialized(self) -> bool:
        """
        Whether the backing storage exists.

        Never raises; returns False if the check itself fails.
        """
        pass

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """
        Whether the backing storage exists but holds no data.

        Never raises; returns False if the check itself fails.
        """
        pass

    @abstractmethod
    def read_all_lines(self) -> list[str]:
        """
        Return every persisted record line.

        Raises:
            FileNotFoundError: If the store is not initialized
        """
        pass


class Store(ReadOnlyStore):
    """Interface for an append-only store of result records."""

    @abstractmethod
    def append_all_lines(self, lines: Sequence[str]) -> None:
        """Append record lines. Errors propagate to the caller."""
        pass

    @abstractmethod
    def initialize(self) -> None:
        """Create the backing storage if it does not exist."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Discard all data and return to the uninitialized state."""
        pass


class Ranker(ABC):
    """Interface for ranking contestants from contest results."""

    @abstractmethod
    def update_with_result(self, result: ContestResult) -> None:
        """Fold one contest result into the standings."""
        pass

    @abstractmethod
    def get_points(self, contestant_name: str) -> int:
        """Get total points for a contestant (0 if never seen)."""
        pass

    @abstractmethod
    def get_record(self, contestant_name: str) -> ContestantRecord:
        """Get win/draw/loss counters for a contestant."""
        pass

    @abstractmethod
    def get_rankings(self) -> list[RankedEntry]:
        """Get all contestants in rank order."""
        pass
