"""Task and project data models."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class Project:
    """Project reference carried by a task. Equal by id."""

    id: str
    name: str = field(compare=False)


@dataclass
class Task:
    """Represents one row of a time-tracking export."""

    id: str
    name: str
    group: Optional[str] = None
    project: Optional[Project] = None
    comment: Optional[str] = None
    estimated_time: Optional[timedelta] = None
    begin_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    def belongs_to_project(self, project_id: str) -> bool:
        """Check if the task is tagged with the given project."""
        return self.project is not None and self.project.id == project_id

    def is_analyzable(self) -> bool:
        """Check if the task has both a start and an end time."""
        return self.begin_time is not None and self.end_time is not None


def _minutes(delta: timedelta) -> int:
    # Truncate toward zero so negative spans mirror positive ones.
    return int(delta.total_seconds() / 60)


@dataclass(frozen=True, eq=False)
class AnalyzedTask:
    """A task known to have both timestamps, with derived durations."""

    id: str
    name: str
    begin_time: datetime
    end_time: datetime
    group: Optional[str] = None
    comment: Optional[str] = None
    estimated_time: Optional[int] = None
    timespan: int = 0
    time_gap_ratio: Optional[float] = None

    @classmethod
    def from_task(cls, task: Task) -> "AnalyzedTask":
        """Build from an analyzable task."""
        if not task.is_analyzable():
            raise ValueError(f"Task {task.id} has no start or end time")

        timespan = _minutes(task.end_time - task.begin_time)
        estimated = _minutes(task.estimated_time) if task.estimated_time else None
        return cls(
            id=task.id,
            name=task.name,
            begin_time=task.begin_time,
            end_time=task.end_time,
            group=task.group,
            comment=task.comment,
            estimated_time=estimated,
            timespan=timespan,
            time_gap_ratio=timespan / estimated if estimated else None,
        )

    @property
    def work_date(self) -> date:
        """Calendar day the task was started on."""
        return self.begin_time.date()

    def __eq__(self, other):
        if not isinstance(other, AnalyzedTask):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __lt__(self, other: "AnalyzedTask") -> bool:
        return self.begin_time < other.begin_time
