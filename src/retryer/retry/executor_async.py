r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a
zero-argument coroutine function under a retry policy.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any

from retryer.policy import RetryPolicy
from retryer.retry.decider import RetryDecider
from retryer.retry.executor_core import (
    Execution,
    as_error,
    attempts_label,
    exhausted_error,
    recover_fault,
)
from retryer.retry.manager import HookManager
from retryer.retry.strategy import DelayStrategy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Runs async operations under a retry policy.

    Behaves like ``RetryExecutor`` except that the operation is awaited
    and delays suspend the current task instead of blocking the thread.
    Hooks are invoked synchronously and should be fast.

    Note:
        Unlike the synchronous executor, the delay between attempts can
        be interrupted: cancelling the task awaiting ``do`` cancels the
        pending ``asyncio.sleep``. The completion hook still runs and
        receives the ``CancelledError``.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.

    Attributes:
        policy: The retry policy.
        decider: Classification of attempt errors.
        strategy: Delay applied after failed attempts.
        hooks: Manager for the policy's hooks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryer import build_policy
        >>> from retryer.options import tries
        >>> from retryer.retry import AsyncRetryExecutor
        >>> async def fetch():
        ...     return TimeoutError("slow upstream")
        ...
        >>> error = asyncio.run(AsyncRetryExecutor(build_policy(tries(2))).do(fetch))
        >>> error.attempts
        2

        ```
    """

    def __init__(self, policy: RetryPolicy | None = None) -> None:
        self.policy = policy if policy is not None else RetryPolicy()
        self.decider: RetryDecider = RetryDecider(self.policy.retry_on, self.policy.ignore)
        self.strategy: DelayStrategy = DelayStrategy(
            self.policy.sleep_duration, self.policy.sleep_fn
        )
        self.hooks: HookManager = HookManager(self.policy)

    async def do(self, operation: Callable[[], Awaitable[Any]]) -> BaseException | None:
        """Run the async operation until it succeeds or the policy stops
        it.

        Args:
            operation: Zero-argument coroutine function. It reports
                failure by returning an exception instance; an exception
                it raises is a fault.

        Returns:
            ``None`` on success, otherwise the terminal error, as for
            ``RetryExecutor.do``.
        """
        execution = await self.run(operation)
        return execution.error

    async def run(self, operation: Callable[[], Awaitable[Any]]) -> Execution:
        """Run the async operation and return the state of the execution.

        Args:
            operation: Zero-argument coroutine function, as for ``do``.

        Returns:
            The execution state holding the attempt count and the final
            error.
        """
        execution = Execution()
        try:
            execution.error = await self._attempt_loop(operation, execution)
        except BaseException as exc:
            execution.error = exc
            raise
        finally:
            self.hooks.finish(execution.error)
        return execution

    async def _attempt_loop(
        self, operation: Callable[[], Awaitable[Any]], execution: Execution
    ) -> Exception | None:
        error: Exception | None = None
        while self.policy.unbounded or execution.attempts < self.policy.max_attempts:
            execution.attempts += 1
            try:
                error = as_error(await operation())
            except Exception as exc:
                if not self.policy.recover:
                    raise
                return recover_fault(exc, execution.attempts)

            if self.decider.succeeded(error):
                return None

            logger.debug(
                f"Attempt {attempts_label(execution.attempts, self.policy)} failed: {error!r}"
            )
            self.hooks.after_each_fail(error)
            await self.strategy.adelay(execution.attempts)

        return exhausted_error(execution.attempts, error)
