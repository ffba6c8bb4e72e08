"""Utility modules."""

from .console import ConsoleIO, format_candidate
from .retry import RetryPolicy, retry_async

__all__ = ['ConsoleIO', 'format_candidate', 'RetryPolicy', 'retry_async']
