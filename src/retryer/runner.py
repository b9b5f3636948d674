r"""Entry points running an operation under a retry policy."""

from __future__ import annotations

__all__ = ["do", "execute"]

from typing import TYPE_CHECKING, Any

from retryer.policy import build_policy
from retryer.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryer.policy import Option, RetryPolicy


def execute(policy: RetryPolicy, operation: Callable[[], Any]) -> BaseException | None:
    """Run the operation under the given policy.

    Args:
        policy: The retry policy.
        operation: Zero-argument callable returning an exception
            instance on failure.

    Returns:
        ``None`` on success, otherwise the terminal error.

    Example:
        ```pycon
        >>> from retryer import build_policy, execute
        >>> from retryer.options import tries
        >>> error = execute(build_policy(tries(2)), lambda: OSError("disk busy"))
        >>> print(error)
        max number of retries reached: 2, last error: disk busy

        ```
    """
    return RetryExecutor(policy).do(operation)


def do(operation: Callable[[], Any], *options: Option) -> BaseException | None:
    """Run the operation under the default policy.

    Args:
        operation: Zero-argument callable returning an exception
            instance on failure.
        *options: Optional options applied on top of the default policy.

    Returns:
        ``None`` on success, otherwise the terminal error.

    Example:
        ```pycon
        >>> import retryer
        >>> retryer.do(lambda: None) is None
        True
        >>> retryer.do(lambda: ValueError("bad")).attempts
        10

        ```
    """
    return execute(build_policy(*options), operation)
