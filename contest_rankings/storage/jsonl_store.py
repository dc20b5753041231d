"""
JSONL store implementation.

Persists contest result records to an append-only JSONL file, one record per
line. Reset deletes the file.
"""

import errno
import os
from collections.abc import Sequence
from pathlib import Path

from typing_extensions import override

from ..exceptions import CorruptRecordError
from ..interfaces import Store
from ..logging_config import get_logger

# Module-level logger
logger = get_logger("jsonl_store")


class JSONLStore(Store):
    """
    File-backed store for result records.

    The file is created lazily by initialize() or the first append; existence
    checks never raise, reads and writes propagate OS errors to the caller.
    """

    path: Path

    def __init__(self, path: Path | str):
        """
        Initialize JSONL store.

        Args:
            path: Path to the JSONL results file
        """
        if not str(path).strip():
            raise ValueError("path cannot be empty or white-space")
        self.path = Path(path)
        logger.debug(f"JSONL store configured: path={self.path}")

    @property
    @override
    def is_initialized(self) -> bool:
        try:
            return self.path.is_file()
        except OSError as e:
            logger.warning(f"Could not check {self.path}: {e}")
            return False

    @property
    @override
    def is_empty(self) -> bool:
        try:
            return self.path.is_file() and self.path.stat().st_size == 0
        except OSError as e:
            logger.warning(f"Could not check {self.path}: {e}")
            return False

    @override
    def read_all_lines(self) -> list[str]:
        """Read every line of the results file."""
        if not self.path.is_file():
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(self.path)
            )

        # Decode line by line so a bad byte is reported against its record
        lines = list[str]()
        for line_number, raw in enumerate(self.path.read_bytes().splitlines(), start=1):
            try:
                lines.append(raw.decode("utf-8"))
            except UnicodeDecodeError as e:
                raise CorruptRecordError(f"not valid UTF-8 ({e.reason})", line_number) from e
        return lines

    @override
    def append_all_lines(self, lines: Sequence[str]) -> None:
        """Append record lines, each terminated by a newline."""
        with open(self.path, "a", encoding="utf-8") as f:
            for line in lines:
                f.write(line)
                f.write("\n")

        logger.info(f"Appended {len(lines)} records to {self.path}")

    @override
    def initialize(self) -> None:
        """Create the results file (and its parent directory) if missing."""
        if self.path.exists():
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch()
        logger.info(f"Created results file {self.path}")

    @override
    def reset(self) -> None:
        """Delete the results file."""
        self.path.unlink(missing_ok=True)
        logger.info(f"Removed results file {self.path}")
