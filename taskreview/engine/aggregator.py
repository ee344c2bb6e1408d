"""Statistics over an ordered collection of analyzed tasks."""

import math
from typing import Optional, Sequence

from ..models.result import TasksStatistics
from ..models.task import AnalyzedTask
from ..utils.datetime_utils import span_days


def divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: x/0 is infinite and 0/0 is NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def median(values: Sequence[int]) -> int:
    """Get the upper-middle element of the sorted values, or 0 when empty."""
    if not values:
        return 0
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def population_deviation(values: Sequence[int], center: float) -> float:
    """Get the population standard deviation of values around a given center."""
    squares = sum((value - center) ** 2 for value in values)
    return math.sqrt(divide(squares, len(values)))


def aggregate(tasks: Sequence[AnalyzedTask], external_value: Optional[int] = None) -> TasksStatistics:
    """Compute the statistics bundle for tasks already sorted by start time."""
    timespans = [t.timespan for t in tasks]

    total_estimated_time = sum(t.estimated_time for t in tasks if t.estimated_time is not None)
    total_work_time = sum(timespans)

    total_time_gap_ratio = None
    if total_estimated_time != 0:
        total_time_gap_ratio = total_work_time / total_estimated_time

    # Whole days from the first start to the end of the last-started task
    work_days = span_days(tasks[0].begin_time, tasks[-1].end_time) if tasks else 0

    work_time_per_day = divide(total_work_time, work_days)

    work_time_per_value = None
    if external_value:
        work_time_per_value = total_work_time / external_value

    return TasksStatistics(
        total_estimated_time=total_estimated_time,
        total_work_time=total_work_time,
        total_time_gap_ratio=total_time_gap_ratio,
        work_days=work_days,
        work_time_per_day=work_time_per_day,
        work_time_per_day_max=max(timespans, default=0),
        work_time_per_day_min=min(timespans, default=0),
        work_time_per_day_median=median(timespans),
        work_time_per_day_deviation=population_deviation(timespans, work_time_per_day),
        work_time_per_value=work_time_per_value,
        tasks=list(tasks),
    )
