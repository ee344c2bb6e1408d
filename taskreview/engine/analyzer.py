"""Analysis pipeline: resolve, filter, aggregate, group and assemble."""

import logging
from typing import Dict, Optional, Sequence

from ..loaders.holiday_calendar import HolidayCalendar
from ..models.result import AnalysisResult, TasksStatistics
from ..models.task import Task
from .aggregator import aggregate
from .filtering import filter_tasks, project_name
from .grouping import AXES, aggregate_groups, build_axes

logger = logging.getLogger(__name__)


def assemble(
    name: str,
    external_value: Optional[int],
    overall: TasksStatistics,
    groups: Dict[str, Dict[str, TasksStatistics]],
) -> AnalysisResult:
    """Combine project identity and statistics into one result."""
    return AnalysisResult(
        project_name=name,
        external_value=external_value,
        overall=overall,
        groups=groups,
    )


def analyze(
    tasks: Sequence[Task],
    project_id: str,
    external_value: Optional[int] = None,
    group_by: Sequence[str] = AXES,
    holidays: Optional[HolidayCalendar] = None,
) -> AnalysisResult:
    """Analyze the tasks of one project.

    Raises ProjectNotFound before any aggregation when no task references
    ``project_id``.
    """
    name = project_name(tasks, project_id)
    axes = build_axes(group_by, holidays)

    analyzed = filter_tasks(tasks, project_id)
    logger.info("Analyzing %d of %d tasks for project %s", len(analyzed), len(tasks), name)

    overall = aggregate(analyzed, external_value)
    groups = aggregate_groups(analyzed, axes, external_value)

    return assemble(name, external_value, overall, groups)
