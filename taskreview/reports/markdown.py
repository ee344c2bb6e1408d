"""Markdown rendering of analysis results."""

from typing import Dict, List, Optional

from ..models.result import AnalysisResult, TasksStatistics
from ..models.task import AnalyzedTask
from ..utils.timespan import PLACEHOLDER, render_approx_minutes, render_minutes

LEDGER_HEADER = "|Task|Date|Begin|End|Estimate|Actual|Actual/Estimate|Comment|"
GROUP_HEADER = "|Group|Tasks|Work time|Work days|Per day|Actual/Estimate|"


def _cell(text: Optional[str]) -> str:
    if not text:
        return ''
    return text.replace('|', '\\|').replace('\r', ' ').replace('\n', ' ')


def _ratio(value: Optional[float]) -> str:
    return PLACEHOLDER if value is None else f"{value:.2f}"


def _separator(header: str) -> str:
    return '|' + '---|' * (header.count('|') - 1)


def ledger_row(task: AnalyzedTask) -> str:
    """Format one task as a table row."""
    estimate = PLACEHOLDER if task.estimated_time is None else str(task.estimated_time)
    cells = [
        _cell(task.name),
        task.begin_time.strftime('%Y-%m-%d'),
        task.begin_time.strftime('%H:%M'),
        task.end_time.strftime('%H:%M'),
        estimate,
        str(task.timespan),
        _ratio(task.time_gap_ratio),
        _cell(task.comment),
    ]
    return '|' + '|'.join(cells) + '|'


def summary_lines(stats: TasksStatistics, external_value: Optional[int] = None,
                  value_unit: str = 'page') -> List[str]:
    """Format the statistics block."""
    ratio = PLACEHOLDER if stats.total_time_gap_ratio is None else f"x{stats.total_time_gap_ratio:.2f}"
    lines = [
        f"- Total estimated time: {render_minutes(stats.total_estimated_time)}",
        f"- Total work time: {render_minutes(stats.total_work_time)} ({ratio})",
        f"- Work days: {stats.work_days}",
        f"- Work time per day: {render_approx_minutes(stats.work_time_per_day)}",
        f"- Longest task: {render_minutes(stats.work_time_per_day_max)}",
        f"- Shortest task: {render_minutes(stats.work_time_per_day_min)}",
        f"- Median task: {render_minutes(stats.work_time_per_day_median)}",
        f"- Standard deviation: {render_approx_minutes(stats.work_time_per_day_deviation)}",
    ]
    if stats.work_time_per_value is not None:
        lines.append(
            f"- Work time per {value_unit}: {render_approx_minutes(stats.work_time_per_value)}"
            f" ({external_value} {value_unit}s)"
        )
    return lines


def group_lines(axis: str, buckets: Dict[str, TasksStatistics]) -> List[str]:
    """Format one grouping axis as a table."""
    lines = [f"## By {axis}", "", GROUP_HEADER, _separator(GROUP_HEADER)]
    for label, stats in buckets.items():
        cells = [
            _cell(label),
            str(stats.task_count),
            render_minutes(stats.total_work_time),
            str(stats.work_days),
            render_approx_minutes(stats.work_time_per_day),
            _ratio(stats.total_time_gap_ratio),
        ]
        lines.append('|' + '|'.join(cells) + '|')
    return lines


def render_markdown(result: AnalysisResult, value_unit: str = 'page') -> str:
    """Render a full review document."""
    lines = [
        f"# Review - {result.project_name}",
        "",
        LEDGER_HEADER,
        _separator(LEDGER_HEADER),
    ]
    lines.extend(ledger_row(task) for task in result.overall.tasks)

    lines.extend(["", "## Summary", ""])
    lines.extend(summary_lines(result.overall, result.external_value, value_unit))

    for axis, buckets in result.groups.items():
        lines.append("")
        lines.extend(group_lines(axis, buckets))

    return "\n".join(lines) + "\n"
