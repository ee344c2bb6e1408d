"""Statistics and analysis result models."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from .task import AnalyzedTask


@dataclass(frozen=True)
class TasksStatistics:
    """Summary of an ordered collection of analyzed tasks.

    Durations are in minutes. ``work_time_per_day`` and
    ``work_time_per_day_deviation`` are left non-finite when their
    denominator is zero; renderers are expected to show a placeholder.
    """

    total_estimated_time: int
    total_work_time: int
    total_time_gap_ratio: Optional[float]
    work_days: int
    work_time_per_day: float
    work_time_per_day_max: int
    work_time_per_day_min: int
    work_time_per_day_median: int
    work_time_per_day_deviation: float
    work_time_per_value: Optional[float] = None
    tasks: List[AnalyzedTask] = field(default_factory=list)

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary for export."""
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything reported for one project.

    ``overall`` holds the statistics of the whole ungrouped set, the "all"
    label; ``groups`` maps each axis name to its own label buckets.
    """

    project_name: str
    external_value: Optional[int]
    overall: TasksStatistics
    groups: Dict[str, Dict[str, TasksStatistics]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON export."""
        return {
            'project_name': self.project_name,
            'external_value': self.external_value,
            'overall': self.overall.to_dict(),
            'groups': {
                axis: {label: stats.to_dict() for label, stats in buckets.items()}
                for axis, buckets in self.groups.items()
            },
        }
