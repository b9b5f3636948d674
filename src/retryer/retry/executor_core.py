r"""Shared core logic for retry executors.

This module provides the per-call execution state and the helpers used
by both the synchronous and the asynchronous executors.
"""

from __future__ import annotations

__all__ = ["Execution", "as_error", "attempts_label", "exhausted_error", "recover_fault"]

import logging
import traceback
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from retryer.exceptions import AttemptsExhaustedError, RecoveredFaultError

if TYPE_CHECKING:
    from retryer.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


@dataclass
class Execution:
    """State of a single execution of a policy.

    A new instance is created by every call and never shared between
    calls, so concurrent executions of one policy do not interfere.

    Attributes:
        attempts: Number of times the operation was invoked.
        error: The final error of the execution, or ``None`` on success.
    """

    attempts: int = 0
    error: BaseException | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the execution ended without a final error.

        Errors classified as success by the policy leave ``error`` unset,
        so they count as a success too.
        """
        return self.error is None


def as_error(result: Any) -> Exception | None:
    """Return the error reported by an operation's return value.

    Operations report failure by returning an exception instance. Any
    other value, ``None`` included, is a success.

    Example:
        ```pycon
        >>> from retryer.retry.executor_core import as_error
        >>> as_error(None) is None
        True
        >>> as_error("payload") is None
        True
        >>> as_error(ValueError("boom"))
        ValueError('boom')

        ```
    """
    if isinstance(result, Exception):
        return result
    return None


def attempts_label(attempts: int, policy: RetryPolicy) -> str:
    """Format an attempt number against the policy's cap for logs.

    Example:
        ```pycon
        >>> from retryer.policy import RetryPolicy
        >>> from retryer.retry.executor_core import attempts_label
        >>> attempts_label(2, RetryPolicy(max_attempts=5))
        '2/5'
        >>> attempts_label(2, RetryPolicy(max_attempts=0))
        '2/inf'

        ```
    """
    cap = "inf" if policy.unbounded else str(policy.max_attempts)
    return f"{attempts}/{cap}"


def recover_fault(fault: Exception, attempts: int) -> RecoveredFaultError:
    """Convert a fault raised by the operation into a terminal error.

    Args:
        fault: The exception raised by the operation.
        attempts: The attempt during which the fault was raised.

    Returns:
        The error carrying the fault's description and traceback.
    """
    trace = "".join(traceback.format_exception(type(fault), fault, fault.__traceback__))
    logger.debug(f"Recovered {type(fault).__name__} raised on attempt {attempts}: {fault}")
    return RecoveredFaultError(fault, trace)


def exhausted_error(attempts: int, last_error: Exception | None) -> AttemptsExhaustedError:
    """Create the error reported when the attempt cap is reached.

    Args:
        attempts: The number of attempts made.
        last_error: The error returned by the last attempt.

    Returns:
        The attempts-exhausted error wrapping ``last_error``.
    """
    logger.debug(f"Giving up after {attempts} attempts, last error: {last_error!r}")
    return AttemptsExhaustedError(attempts, last_error)
