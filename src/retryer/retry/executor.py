r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a zero-argument
operation under a retry policy.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

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
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Runs operations under a retry policy.

    The executor only reads its policy; every call keeps its own
    execution state, so a single executor can be reused sequentially or
    shared between threads.

    The executor orchestrates the following components:
    - RetryDecider: Classifies the error of each attempt
    - DelayStrategy: Waits between attempts
    - HookManager: Invokes the policy's hooks

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.

    Attributes:
        policy: The retry policy.
        decider: Classification of attempt errors.
        strategy: Delay applied after failed attempts.
        hooks: Manager for the policy's hooks.

    Example:
        ```pycon
        >>> from retryer import build_policy
        >>> from retryer.options import tries
        >>> from retryer.retry import RetryExecutor
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     return None if len(calls) == 3 else ConnectionError("refused")
        ...
        >>> executor = RetryExecutor(build_policy(tries(5)))
        >>> executor.do(flaky) is None
        True
        >>> len(calls)
        3

        ```
    """

    def __init__(self, policy: RetryPolicy | None = None) -> None:
        self.policy = policy if policy is not None else RetryPolicy()
        self.decider: RetryDecider = RetryDecider(self.policy.retry_on, self.policy.ignore)
        self.strategy: DelayStrategy = DelayStrategy(
            self.policy.sleep_duration, self.policy.sleep_fn
        )
        self.hooks: HookManager = HookManager(self.policy)

    def do(self, operation: Callable[[], Any]) -> BaseException | None:
        """Run the operation until it succeeds or the policy stops it.

        Args:
            operation: Zero-argument callable. It reports failure by
                returning an exception instance; an exception it raises
                is a fault.

        Returns:
            ``None`` on success, including errors classified as success.
            Otherwise an ``AttemptsExhaustedError`` or, with fault
            recovery enabled, a ``RecoveredFaultError``.

        Raises:
            Exception: Any fault raised by the operation when recovery is
                disabled, and anything raised by a hook.
        """
        return self.run(operation).error

    def run(self, operation: Callable[[], Any]) -> Execution:
        """Run the operation and return the state of the execution.

        Same as ``do`` but also reports how many attempts were made.

        Args:
            operation: Zero-argument callable, as for ``do``.

        Returns:
            The execution state holding the attempt count and the final
            error.
        """
        execution = Execution()
        try:
            execution.error = self._attempt_loop(operation, execution)
        except BaseException as exc:
            execution.error = exc
            raise
        finally:
            self.hooks.finish(execution.error)
        return execution

    def _attempt_loop(self, operation: Callable[[], Any], execution: Execution) -> Exception | None:
        error: Exception | None = None
        while self.policy.unbounded or execution.attempts < self.policy.max_attempts:
            execution.attempts += 1
            try:
                error = as_error(operation())
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
            self.strategy.delay(execution.attempts)

        return exhausted_error(execution.attempts, error)
