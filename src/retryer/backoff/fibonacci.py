r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff", "fibonacci"]

from retryer.backoff.base import BaseBackoffStrategy


def fibonacci(n: int) -> int:
    r"""Return the nth Fibonacci number (1-indexed, fib(1) == fib(2) == 1).

    Example:
        ```pycon
        >>> from retryer.backoff.fibonacci import fibonacci
        >>> [fibonacci(n) for n in range(1, 8)]
        [1, 1, 2, 3, 5, 8, 13]

        ```
    """
    if n <= 0:
        return 0
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt), with optional
    max_delay cap. The delays grow 1, 1, 2, 3, 5, 8, ... times
    ``base_delay``, more gently than exponential backoff.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from retryer.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0)
        >>> [backoff.calculate(attempt) for attempt in range(1, 6)]
        [1.0, 1.0, 2.0, 3.0, 5.0]
        >>> FibonacciBackoff(base_delay=1.0, max_delay=10.0).calculate(11)
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        super().__init__(base_delay=base_delay, max_delay=max_delay)

    def calculate(self, attempt: int) -> float:
        return self._cap(self.base_delay * fibonacci(attempt))
