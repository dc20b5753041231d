"""
Storage implementations.

Provides implementations of the Store interface for persisting contest
results.

Available implementations:
- JSONLStore: Append-only JSONL file, one result record per line
- InMemoryStore: List-backed store for tests and dry runs
"""

from .jsonl_store import JSONLStore
from .memory_store import InMemoryStore
from .records import deserialize_result, serialize_result

__all__ = ["InMemoryStore", "JSONLStore", "deserialize_result", "serialize_result"]
