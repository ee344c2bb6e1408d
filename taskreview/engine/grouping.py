"""Partitioning of analyzed tasks along classification axes."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from ..exceptions import ConfigError
from ..loaders.holiday_calendar import HolidayCalendar
from ..models.result import TasksStatistics
from ..models.task import AnalyzedTask
from ..utils.datetime_utils import WEEKDAY_LABELS, weekday_label
from .aggregator import aggregate

logger = logging.getLogger(__name__)

WORKDAY = 'workday'
HOLIDAY = 'holiday'
UNGROUPED = '(none)'

AXIS_HOLIDAY = 'holiday'
AXIS_WEEKDAY = 'weekday'
AXIS_GROUP = 'group'

AXES = [AXIS_HOLIDAY, AXIS_WEEKDAY, AXIS_GROUP]


@dataclass(frozen=True)
class GroupAxis:
    """A named way of labelling tasks.

    ``labels`` are always reported, even when no task falls in them.
    """

    name: str
    classify: Callable[[AnalyzedTask], str]
    labels: List[str] = field(default_factory=list)


def holiday_axis(calendar: HolidayCalendar) -> GroupAxis:
    """Split tasks into workdays and holidays by the day they started."""

    def classify(task: AnalyzedTask) -> str:
        return HOLIDAY if calendar.is_holiday(task.work_date) else WORKDAY

    return GroupAxis(AXIS_HOLIDAY, classify, [WORKDAY, HOLIDAY])


def weekday_axis() -> GroupAxis:
    """Split tasks by the weekday they started on."""
    return GroupAxis(AXIS_WEEKDAY, lambda task: weekday_label(task.work_date), list(WEEKDAY_LABELS))


def group_tag_axis() -> GroupAxis:
    """Split tasks by their free-text group tag."""
    return GroupAxis(AXIS_GROUP, lambda task: task.group or UNGROUPED)


def build_axes(names: Sequence[str], calendar: Optional[HolidayCalendar] = None) -> List[GroupAxis]:
    """Create axes by name, in the order given."""
    axes = []
    for name in names:
        if name == AXIS_HOLIDAY:
            axes.append(holiday_axis(calendar if calendar is not None else HolidayCalendar.empty()))
        elif name == AXIS_WEEKDAY:
            axes.append(weekday_axis())
        elif name == AXIS_GROUP:
            axes.append(group_tag_axis())
        else:
            raise ConfigError(f"Unknown group axis: {name} (expected one of {', '.join(AXES)})")
    return axes


def group_by(
    tasks: Sequence[AnalyzedTask],
    classify: Callable[[AnalyzedTask], str],
    labels: Sequence[str] = (),
) -> Dict[str, List[AnalyzedTask]]:
    """Partition tasks into labelled buckets.

    Buckets appear in first-appearance order, followed by any of ``labels``
    that received no task. Each bucket keeps the input order.
    """
    buckets: Dict[str, List[AnalyzedTask]] = {}
    for task in tasks:
        buckets.setdefault(classify(task), []).append(task)

    for label in labels:
        buckets.setdefault(label, [])

    return buckets


def aggregate_groups(
    tasks: Sequence[AnalyzedTask],
    axes: Sequence[GroupAxis],
    external_value: Optional[int] = None,
) -> Dict[str, Dict[str, TasksStatistics]]:
    """Run the aggregation over every bucket of every axis."""
    result = {}
    for axis in axes:
        buckets = group_by(tasks, axis.classify, axis.labels)
        logger.debug("Axis %s produced %d buckets", axis.name, len(buckets))
        result[axis.name] = {
            label: aggregate(members, external_value)
            for label, members in buckets.items()
        }
    return result
