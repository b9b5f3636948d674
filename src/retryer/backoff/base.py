r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

import logging
import time
from abc import ABC, abstractmethod

from retryer.validation import validate_delay, validate_max_delay

logger: logging.Logger = logging.getLogger(__name__)


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps the number of attempts made so far to the
    number of seconds to wait before the next attempt. Strategies are
    also delay functions: calling ``strategy(attempt)`` blocks for
    ``strategy.calculate(attempt)`` seconds, so a strategy can be passed
    straight to the ``sleep_fn`` option.

    Args:
        base_delay: The base delay in seconds.
        max_delay: Optional maximum delay cap in seconds.
    """

    def __init__(self, base_delay: float, max_delay: float | None = None) -> None:
        validate_delay(base_delay, name="base_delay")
        validate_max_delay(max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def __call__(self, attempt: int) -> None:
        delay = self.calculate(attempt)
        logger.debug(f"{type(self).__name__} waiting {delay:.3f}s after attempt {attempt}")
        time.sleep(delay)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_delay={self.base_delay}, max_delay={self.max_delay})"

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay to wait after a failed attempt.

        Args:
            attempt: The number of attempts made so far (1-indexed).
                For example, attempt=1 is the delay after the first
                failed attempt.

        Returns:
            The delay in seconds before the next attempt.
        """

    def _cap(self, delay: float) -> float:
        if self.max_delay is not None:
            return min(delay, self.max_delay)
        return delay
