"""
Ranker implementations.

Provides implementations of the Ranker interface for turning contest results
into a ranking table.

Available implementations:
- PointsRanker: League points (win/draw/loss) with competition ranking
"""

from .points_ranker import PointsRanker, PointsScheme, award_points, rank_entries

__all__ = ["PointsRanker", "PointsScheme", "award_points", "rank_entries"]
