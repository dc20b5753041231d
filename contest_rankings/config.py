"""
Run configuration for contest rankings.
"""

from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigurationError
from .rankers.points_ranker import PointsScheme

DEFAULT_RESULTS_FILE = "contest-results.jsonl"


@dataclass
class RunConfig:
    """Configuration for one CLI invocation."""

    results_path: Path = field(default_factory=lambda: Path(DEFAULT_RESULTS_FILE))
    win_points: int = 3
    draw_points: int = 1
    loss_points: int = 0

    def __post_init__(self):
        """Validate configuration."""
        self.results_path = Path(self.results_path)
        if not str(self.results_path).strip() or self.results_path.name == "":
            raise ConfigurationError(f"results_path must name a file, got {str(self.results_path)!r}")
        # PointsScheme raises ConfigurationError for inconsistent points
        _ = self.scheme

    @property
    def scheme(self) -> PointsScheme:
        return PointsScheme(win=self.win_points, draw=self.draw_points, loss=self.loss_points)
