r"""Delay selection between attempts.

This module provides the DelayStrategy class choosing between the custom
delay function and the fixed delay of a policy.
"""

from __future__ import annotations

__all__ = ["DelayStrategy"]

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING, Any

from retryer.backoff.base import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class DelayStrategy:
    """Applies the delay configured after a failed attempt.

    The custom delay function wins over the fixed delay; with neither
    configured no delay is applied.

    Args:
        sleep_duration: Fixed delay in seconds. ``0`` disables it.
        sleep_fn: Optional custom delay function receiving the number of
            attempts made so far.
    """

    def __init__(
        self,
        sleep_duration: float = 0.0,
        sleep_fn: Callable[[int], Any] | None = None,
    ) -> None:
        self.sleep_duration = sleep_duration
        self.sleep_fn = sleep_fn

    def delay(self, attempts: int) -> None:
        """Block according to the configured delay.

        Args:
            attempts: The number of attempts made so far.
        """
        if self.sleep_fn is not None:
            self.sleep_fn(attempts)
        elif self.sleep_duration:
            logger.debug(f"Waiting {self.sleep_duration:.3f}s after attempt {attempts}")
            time.sleep(self.sleep_duration)

    async def adelay(self, attempts: int) -> None:
        """Suspend the current task according to the configured delay.

        Backoff strategies are awaited with ``asyncio.sleep`` instead of
        blocking. A custom delay function returning an awaitable is
        awaited.

        Args:
            attempts: The number of attempts made so far.
        """
        if isinstance(self.sleep_fn, BaseBackoffStrategy):
            seconds = self.sleep_fn.calculate(attempts)
            logger.debug(f"Waiting {seconds:.3f}s after attempt {attempts}")
            await asyncio.sleep(seconds)
        elif self.sleep_fn is not None:
            result = self.sleep_fn(attempts)
            if inspect.isawaitable(result):
                await result
        elif self.sleep_duration:
            logger.debug(f"Waiting {self.sleep_duration:.3f}s after attempt {attempts}")
            await asyncio.sleep(self.sleep_duration)
