"""
Contest Rankings - League Table from Pairwise Results

Records two-contestant results ("Alice 10, Bob 20") in an append-only JSONL
log and ranks contestants by win/draw/loss points with competition ranking.
"""

from .models import ContestResult, RankedEntry, RankingEntry
from .interfaces import ReadOnlyStore, Store, Ranker
from .parsing import ValidationOutcome, Violation, parse_result_line
from .processor import ResultsProcessor

__version__ = "0.1.0"
__all__ = [
    "ContestResult",
    "RankedEntry",
    "RankingEntry",
    "ReadOnlyStore",
    "Store",
    "Ranker",
    "ValidationOutcome",
    "Violation",
    "parse_result_line",
    "ResultsProcessor",
]
