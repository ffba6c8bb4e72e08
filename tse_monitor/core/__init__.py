"""Core monitor components."""

from .config import MonitorConfig
from .errors import (
    MonitorError,
    NotInitializedError,
    NavigationError,
    NavigationExhaustedError,
    SelectionError,
    ExtractionError
)
from .scheduler import RecurringTask

__all__ = [
    'MonitorConfig',
    'MonitorError',
    'NotInitializedError',
    'NavigationError',
    'NavigationExhaustedError',
    'SelectionError',
    'ExtractionError',
    'RecurringTask'
]
