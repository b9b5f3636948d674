r"""Backoff strategies for delays between attempts.

Every strategy is a delay function accepted by the ``sleep_fn`` option:
it receives the number of attempts made so far and blocks for the
computed delay.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LinearBackoff",
]

from retryer.backoff.base import BaseBackoffStrategy
from retryer.backoff.constant import ConstantBackoff
from retryer.backoff.exponential import ExponentialBackoff
from retryer.backoff.fibonacci import FibonacciBackoff
from retryer.backoff.linear import LinearBackoff
