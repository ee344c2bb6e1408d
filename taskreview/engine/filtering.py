"""Task selection and ordering for a single project."""

import logging
from typing import Callable, Iterable, List, Sequence

from ..exceptions import ProjectNotFound
from ..models.task import AnalyzedTask, Project, Task

logger = logging.getLogger(__name__)


def belongs_to_project(project_id: str) -> Callable[[Task], bool]:
    """Build a predicate matching tasks tagged with a project."""
    return lambda task: task.belongs_to_project(project_id)


def is_analyzable(task: Task) -> bool:
    """Check if a task carries both a start and an end time."""
    return task.is_analyzable()


def is_target(task: Task, project_id: str) -> bool:
    """Check if a task should enter the analysis of a project."""
    return belongs_to_project(project_id)(task) and is_analyzable(task)


def filter_tasks(tasks: Iterable[Task], project_id: str) -> List[AnalyzedTask]:
    """Select analyzable tasks of a project, ordered by start time.

    The sort is stable, so tasks sharing a start time keep their export order.
    """
    analyzed = [AnalyzedTask.from_task(t) for t in tasks if is_target(t, project_id)]
    analyzed.sort(key=lambda t: t.begin_time)
    logger.debug("Selected %d analyzable tasks for project %s", len(analyzed), project_id)
    return analyzed


def project_name(tasks: Sequence[Task], project_id: str) -> str:
    """Get the name of a project from the first task referencing it."""
    for task in tasks:
        if task.belongs_to_project(project_id):
            return task.project.name
    raise ProjectNotFound(project_id)


def list_projects(tasks: Iterable[Task]) -> List[Project]:
    """Get the distinct projects referenced by tasks, sorted by id."""
    projects = {}
    for task in tasks:
        if task.project is not None and task.project.id not in projects:
            projects[task.project.id] = task.project
    return [projects[key] for key in sorted(projects)]
