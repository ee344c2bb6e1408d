"""Error types raised by the review pipeline."""

from typing import Optional


class TaskReviewError(Exception):
    """Base class for errors that abort an analysis."""

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ProjectNotFound(TaskReviewError):
    """Raised when no task in the export references the requested project."""

    def __init__(self, project_id: str):
        super().__init__(f"Project not found: {project_id}")
        self.project_id = project_id


class LoaderError(TaskReviewError):
    """Raised when an export cannot be read at all."""


class ConfigError(TaskReviewError):
    """Raised when configuration or CLI options are invalid."""
