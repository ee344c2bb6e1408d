"""Input collaborators: task exports and holiday tables."""

from .holiday_calendar import HolidayCalendar, build_holiday_calendar
from .taskchute import TaskChuteLoader, load_tasks

__all__ = ['HolidayCalendar', 'build_holiday_calendar', 'TaskChuteLoader', 'load_tasks']
