r"""Immutable retry policy and the builder applying options to it.

A policy is built from an ordered sequence of options. Each option is a
pure function returning an updated copy of the policy under
construction, so later options override earlier ones that set the same
field.
"""

from __future__ import annotations

__all__ = ["Option", "RetryPolicy", "build_policy"]

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from retryer.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_SLEEP_DURATION, UNBOUNDED_ATTEMPTS
from retryer.validation import as_error_kinds, validate_attempts, validate_delay

# An option returns an updated copy of the policy under construction
Option = Callable[["RetryPolicy"], "RetryPolicy"]


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable configuration of a retry loop.

    A policy is read-only once built and may be shared by any number of
    sequential or concurrent executions.

    Args:
        max_attempts: Maximum number of attempts. ``0`` retries until
            success or a classification stop.
        retry_on: Error kinds worth retrying. When non-empty, any other
            error ends the loop as a success.
        ignore: Error kinds treated as success. Checked before
            ``retry_on``.
        sleep_duration: Fixed delay in seconds after a failed attempt.
            ``0`` disables the delay.
        sleep_fn: Custom delay function receiving the number of attempts
            made so far. Takes precedence over ``sleep_duration``.
        recover: Whether faults raised by the operation are converted
            into a terminal ``RecoveredFaultError``.
        ensure: Hook called once at the end of every execution with the
            final error, or ``None``.
        after_each_fail: Hook called with the error of every attempt
            that is going to be retried.
        on_error: Hook called once at the end of an execution whose
            final error is not ``None``.

    Example:
        ```pycon
        >>> from retryer.policy import RetryPolicy
        >>> from retryer.options import sleep, tries
        >>> policy = RetryPolicy()
        >>> policy.max_attempts
        10
        >>> custom = policy.with_options(tries(3), sleep(50))
        >>> custom.max_attempts, custom.sleep_duration
        (3, 0.05)
        >>> policy.max_attempts  # Original unchanged
        10

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_on: tuple[type[Exception], ...] = ()
    ignore: tuple[type[Exception], ...] = ()
    sleep_duration: float = DEFAULT_SLEEP_DURATION
    sleep_fn: Callable[[int], Any] | None = None
    recover: bool = False
    ensure: Callable[[BaseException | None], None] | None = None
    after_each_fail: Callable[[Exception], None] | None = None
    on_error: Callable[[BaseException], None] | None = None

    def __post_init__(self) -> None:
        """Validate the policy fields and normalize the error kinds.

        ``retry_on`` and ``ignore`` accept the same values as the
        ``retry_on`` and ``ignore`` options: a single kind or a sequence
        of exception classes and instances.

        Raises:
            TypeError: If ``max_attempts`` is not an int or an error kind
                is not an ``Exception`` class or instance.
            ValueError: If ``max_attempts`` or ``sleep_duration`` is
                negative, or ``sleep_duration`` is not finite.
        """
        validate_attempts(self.max_attempts)
        validate_delay(self.sleep_duration, name="sleep_duration")
        # Frozen dataclass: bypass __setattr__ to store the normalized kinds
        object.__setattr__(self, "retry_on", as_error_kinds(self.retry_on))
        object.__setattr__(self, "ignore", as_error_kinds(self.ignore))

    @property
    def unbounded(self) -> bool:
        """Whether the policy retries without an attempt cap."""
        return self.max_attempts == UNBOUNDED_ATTEMPTS

    def with_options(self, *options: Option) -> RetryPolicy:
        """Return a new policy with the options applied in order.

        Args:
            *options: The options to apply on top of this policy.

        Returns:
            The derived policy. This policy is left unchanged.
        """
        policy = self
        for option in options:
            policy = option(policy)
        return policy

    def merge(self, **changes: Any) -> RetryPolicy:
        """Return a copy of the policy with the given fields replaced."""
        return replace(self, **changes)


def build_policy(*options: Option) -> RetryPolicy:
    """Build a retry policy from an ordered sequence of options.

    Building performs no I/O and cannot fail: argument checks happen
    when each option is created.

    Args:
        *options: The options to apply, in order, on top of the default
            policy.

    Returns:
        The built policy.

    Example:
        ```pycon
        >>> from retryer import build_policy
        >>> from retryer.options import sleep, tries
        >>> policy = build_policy(tries(5), sleep(100), sleep(20))
        >>> policy.max_attempts
        5
        >>> policy.sleep_duration  # The last delay option wins
        0.02
        >>> build_policy(tries(0)).unbounded
        True

        ```
    """
    return RetryPolicy().with_options(*options)
