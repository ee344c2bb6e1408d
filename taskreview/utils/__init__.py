"""Utility functions."""

from .config import load_config, get_default_config, merge_config, resolve_config
from .datetime_utils import weekday_label, span_days
from .timespan import Timespan, render_minutes, render_approx_minutes

__all__ = [
    'load_config',
    'get_default_config',
    'merge_config',
    'resolve_config',
    'weekday_label',
    'span_days',
    'Timespan',
    'render_minutes',
    'render_approx_minutes',
]
