"""Data models."""

from .task import Project, Task, AnalyzedTask
from .result import TasksStatistics, AnalysisResult

__all__ = ['Project', 'Task', 'AnalyzedTask', 'TasksStatistics', 'AnalysisResult']
