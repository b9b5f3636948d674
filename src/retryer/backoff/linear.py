r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from retryer.backoff.base import BaseBackoffStrategy


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * attempt, with optional max_delay cap.

    Args:
        base_delay: The delay added per attempt in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from retryer.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=0.5)
        >>> backoff.calculate(1)
        0.5
        >>> backoff.calculate(3)
        1.5
        >>> LinearBackoff(base_delay=2.0, max_delay=5.0).calculate(6)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        super().__init__(base_delay=base_delay, max_delay=max_delay)

    def calculate(self, attempt: int) -> float:
        return self._cap(self.base_delay * attempt)
