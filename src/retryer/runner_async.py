r"""Async entry points running an operation under a retry policy."""

from __future__ import annotations

__all__ = ["do_async", "execute_async"]

from typing import TYPE_CHECKING, Any

from retryer.policy import build_policy
from retryer.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from retryer.policy import Option, RetryPolicy


async def execute_async(
    policy: RetryPolicy, operation: Callable[[], Awaitable[Any]]
) -> BaseException | None:
    """Run the async operation under the given policy.

    Args:
        policy: The retry policy.
        operation: Zero-argument coroutine function returning an
            exception instance on failure.

    Returns:
        ``None`` on success, otherwise the terminal error.
    """
    return await AsyncRetryExecutor(policy).do(operation)


async def do_async(
    operation: Callable[[], Awaitable[Any]], *options: Option
) -> BaseException | None:
    """Run the async operation under the default policy.

    Args:
        operation: Zero-argument coroutine function returning an
            exception instance on failure.
        *options: Optional options applied on top of the default policy.

    Returns:
        ``None`` on success, otherwise the terminal error.
    """
    return await execute_async(build_policy(*options), operation)
