"""Bounded retry for a single async action."""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class RetryPolicy:
    """How often to retry and which failures count as retryable."""
    max_attempts: int = 3
    retry_on: Tuple[Type[BaseException], ...] = (Exception,)


async def retry_async(
    action: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    on_failure: Optional[Callable[[int, BaseException], None]] = None
) -> T:
    """
    Run action until it succeeds or the attempt budget is spent.

    Args:
        action: Zero-argument coroutine function
        policy: Attempt bound and retryable exception types
        on_failure: Called with (attempt number, error) after each failure

    Returns:
        The action's result

    Raises:
        The last retryable error once every attempt failed. Errors outside
        policy.retry_on propagate immediately.
    """
    if policy.max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    last_error = None
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await action()
        except policy.retry_on as e:
            last_error = e
            if on_failure:
                on_failure(attempt, e)

    raise last_error
