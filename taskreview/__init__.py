"""Project review statistics for time-tracking exports."""

__version__ = "0.1.0"
