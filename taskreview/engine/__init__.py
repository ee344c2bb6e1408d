"""Analysis engine."""

from .aggregator import aggregate
from .analyzer import analyze, assemble
from .filtering import filter_tasks, list_projects, project_name
from .grouping import aggregate_groups, build_axes, group_by

__all__ = [
    'aggregate',
    'analyze',
    'assemble',
    'filter_tasks',
    'list_projects',
    'project_name',
    'aggregate_groups',
    'build_axes',
    'group_by',
]
