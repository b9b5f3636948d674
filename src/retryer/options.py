r"""Options composing a retry policy.

Each factory in this module returns an option: a pure function taking
the policy under construction and returning an updated copy. Options are
applied in the order given to ``build_policy``, so later options
override earlier ones that set the same field.

Example:
    ```pycon
    >>> from retryer import build_policy
    >>> from retryer.options import ignore, retry_on, sleep, tries
    >>> policy = build_policy(
    ...     tries(5),
    ...     sleep(200),
    ...     retry_on(TimeoutError, ConnectionError),
    ...     ignore(FileNotFoundError),
    ... )
    >>> policy.max_attempts
    5
    >>> policy.retry_on
    (<class 'TimeoutError'>, <class 'ConnectionError'>)

    ```
"""

from __future__ import annotations

__all__ = [
    "after_each_fail",
    "ensure",
    "ignore",
    "on_error",
    "recover",
    "retry_on",
    "sleep",
    "sleep_fn",
    "tries",
]

from typing import TYPE_CHECKING, Any

from retryer.validation import as_error_kinds, validate_attempts, validate_delay

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryer.policy import Option, RetryPolicy


def tries(attempts: int) -> Option:
    """Set the maximum number of attempts.

    Args:
        attempts: The attempt cap. ``0`` retries until the operation
            succeeds or an error is classified as a stop.

    Returns:
        The option.

    Raises:
        ValueError: If ``attempts`` is negative.
    """
    validate_attempts(attempts)

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(max_attempts=attempts)

    return apply


def sleep(milliseconds: float) -> Option:
    """Set a fixed delay applied after each failed attempt.

    Args:
        milliseconds: The delay in milliseconds. ``0`` disables it.

    Returns:
        The option.

    Raises:
        ValueError: If ``milliseconds`` is negative or not finite.
    """
    validate_delay(milliseconds, name="milliseconds")

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(sleep_duration=milliseconds / 1000)

    return apply


def sleep_fn(fn: Callable[[int], Any]) -> Option:
    """Set a custom delay function called after each failed attempt.

    The function receives the number of attempts made so far and is
    expected to block for as long as it sees fit. It takes precedence
    over ``sleep``. Backoff strategies from ``retryer.backoff`` are
    valid delay functions.

    Args:
        fn: The delay function.

    Returns:
        The option.
    """

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(sleep_fn=fn)

    return apply


def retry_on(*kinds: Any) -> Option:
    """Only retry errors of the given kinds.

    Any other error ends the loop and the execution reports success.
    Calling ``retry_on()`` without kinds clears the allow-list.

    Args:
        *kinds: Exception classes or instances.

    Returns:
        The option.
    """
    normalized = as_error_kinds(kinds)

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(retry_on=normalized)

    return apply


def ignore(*kinds: Any) -> Option:
    """Treat errors of the given kinds as success and stop retrying.

    The deny-list is checked before the allow-list set by ``retry_on``.

    Args:
        *kinds: Exception classes or instances.

    Returns:
        The option.
    """
    normalized = as_error_kinds(kinds)

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(ignore=normalized)

    return apply


def recover(enabled: bool = True) -> Option:
    """Convert faults raised by the operation into a terminal error.

    Args:
        enabled: Whether faults are recovered.

    Returns:
        The option.
    """

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(recover=enabled)

    return apply


def ensure(fn: Callable[[BaseException | None], None]) -> Option:
    """Set a hook called once at the end of every execution.

    The hook receives the final error, or ``None`` on success.

    Args:
        fn: The completion hook.

    Returns:
        The option.
    """

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(ensure=fn)

    return apply


def after_each_fail(fn: Callable[[Exception], None]) -> Option:
    """Set a hook called after each failed attempt that will be retried.

    The hook runs before the delay and receives the attempt's error.

    Args:
        fn: The per-failure hook.

    Returns:
        The option.
    """

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(after_each_fail=fn)

    return apply


def on_error(fn: Callable[[BaseException], None]) -> Option:
    """Set a hook called once when an execution ends with an error.

    It runs before the ``ensure`` hook.

    Args:
        fn: The final-failure hook.

    Returns:
        The option.
    """

    def apply(policy: RetryPolicy) -> RetryPolicy:
        return policy.merge(on_error=fn)

    return apply
