r"""Retry engine built from small collaborating components.

Public API:
    - RetryDecider: Classification of attempt errors
    - DelayStrategy: Delay applied after failed attempts
    - HookManager: Invocation of the policy's hooks
    - Execution: Per-call execution state
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "DelayStrategy",
    "Execution",
    "HookManager",
    "RetryDecider",
    "RetryExecutor",
]

from retryer.retry.decider import RetryDecider
from retryer.retry.executor import RetryExecutor
from retryer.retry.executor_async import AsyncRetryExecutor
from retryer.retry.executor_core import Execution
from retryer.retry.manager import HookManager
from retryer.retry.strategy import DelayStrategy
