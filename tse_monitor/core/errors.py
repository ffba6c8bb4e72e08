"""Error taxonomy for the results monitor.

Setup-phase failures escalate, prompt validation failures stay local,
and refresh-tick failures are reported and isolated per tick.
"""


class MonitorError(Exception):
    """Base class for every monitor failure."""


class NotInitializedError(MonitorError):
    """Browser session used before open()."""

    def __init__(self, message: str = "Browser page not initialized. Call open() first."):
        super().__init__(message)


class NavigationError(MonitorError):
    """Initial navigation to the portal failed (retryable)."""


class NavigationExhaustedError(MonitorError):
    """Navigation failed on every allowed attempt."""

    def __init__(self, attempts: int, cause: Exception = None):
        self.attempts = attempts
        self.cause = cause
        super().__init__(f"Failed to load the results page after {attempts} attempts")


class SelectionError(MonitorError):
    """No autocomplete option matched the requested value."""

    def __init__(self, field: str, value: str, reason: str = ""):
        self.field = field
        self.value = value
        message = f"Could not select {field} '{value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ExtractionError(MonitorError):
    """Results page unreachable during a read."""
