r"""Parameter validation utilities for retry options.

This module provides validation functions used by the option factories,
the retry policy and backoff strategies so that invalid values are
rejected when the option or policy is created, long before a policy is
executed.
"""

from __future__ import annotations

__all__ = ["as_error_kinds", "validate_attempts", "validate_delay", "validate_max_delay"]

import math
from typing import Any


def as_error_kinds(kinds: Any) -> tuple[type[Exception], ...]:
    """Normalize error kinds to a tuple of exception classes.

    A kind may be an exception class, an exception instance (standing for
    its class) or a list, tuple or set of those. Only ``Exception``
    subclasses are accepted, since operations report failures by
    returning ``Exception`` instances.

    Args:
        kinds: The error kinds to normalize. A single kind is accepted
            as well as a sequence of kinds.

    Returns:
        The exception classes, in order, without duplicates.

    Raises:
        TypeError: If a kind is neither an ``Exception`` class nor an
            ``Exception`` instance.

    Example:
        ```pycon
        >>> from retryer.validation import as_error_kinds
        >>> as_error_kinds((ValueError, KeyError("missing"), [ValueError, OSError]))
        (<class 'ValueError'>, <class 'KeyError'>, <class 'OSError'>)
        >>> as_error_kinds(TimeoutError)
        (<class 'TimeoutError'>,)

        ```
    """
    if not isinstance(kinds, (list, tuple, set, frozenset)):
        kinds = (kinds,)
    normalized: list[type[Exception]] = []
    for kind in kinds:
        if isinstance(kind, (list, tuple, set, frozenset)):
            candidates = as_error_kinds(kind)
        elif isinstance(kind, type) and issubclass(kind, Exception):
            candidates = (kind,)
        elif isinstance(kind, Exception):
            candidates = (type(kind),)
        else:
            msg = f"error kinds must be Exception classes or instances, got {kind!r}"
            raise TypeError(msg)
        normalized.extend(c for c in candidates if c not in normalized)
    return tuple(normalized)


def validate_attempts(attempts: int) -> None:
    """Validate an attempt cap.

    Args:
        attempts: Maximum number of attempts. Must be >= 0. A value of 0
            means unbounded.

    Raises:
        TypeError: If ``attempts`` is not an integer.
        ValueError: If ``attempts`` is negative.

    Example:
        ```pycon
        >>> from retryer.validation import validate_attempts
        >>> validate_attempts(3)
        >>> validate_attempts(0)
        >>> validate_attempts(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: attempts must be >= 0, got -1

        ```
    """
    if isinstance(attempts, bool) or not isinstance(attempts, int):
        msg = f"attempts must be an int, got {type(attempts).__name__}"
        raise TypeError(msg)
    if attempts < 0:
        msg = f"attempts must be >= 0, got {attempts}"
        raise ValueError(msg)


def validate_delay(delay: float, name: str = "delay") -> None:
    """Validate a delay value.

    Args:
        delay: The delay to check. Must be finite and >= 0.
        name: The parameter name used in the error message.

    Raises:
        ValueError: If ``delay`` is negative, infinite or NaN.
    """
    if not math.isfinite(delay):
        msg = f"{name} must be a finite number, got {delay}"
        raise ValueError(msg)
    if delay < 0:
        msg = f"{name} must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_max_delay(max_delay: float | None) -> None:
    """Validate an optional delay cap.

    Args:
        max_delay: The delay cap in seconds, or ``None`` for no cap.
            Must be > 0 if provided.

    Raises:
        ValueError: If ``max_delay`` is provided and is not positive.
    """
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be > 0 if specified, got {max_delay}"
        raise ValueError(msg)
