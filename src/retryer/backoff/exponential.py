r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from retryer.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** (attempt - 1)), with optional
    max_delay cap, so the first failed attempt waits ``base_delay``.

    Args:
        base_delay: The delay after the first failed attempt in seconds
            (default: 0.3).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from retryer.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5)
        >>> backoff.calculate(1)
        0.5
        >>> backoff.calculate(2)
        1.0
        >>> backoff.calculate(3)
        2.0
        >>> ExponentialBackoff(base_delay=1.0, max_delay=5.0).calculate(10)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        super().__init__(base_delay=base_delay, max_delay=max_delay)

    def calculate(self, attempt: int) -> float:
        return self._cap(self.base_delay * (2 ** max(attempt - 1, 0)))
