r"""retryer - Declarative retry loops for flaky operations.

This package repeatedly invokes a fallible operation until it succeeds,
an attempt budget is exhausted, or the error classification of the
policy decides to stop. Operations report failure by returning an
exception instance; exceptions they raise are faults, which can be
recovered into a terminal error.

Key Features:
    - Immutable, reusable policies built from ordered options
    - Bounded or unbounded attempt caps (``tries(0)`` retries forever)
    - Allow-list and deny-list classification by exact error class
    - Fixed delays, custom delay functions and backoff strategies
    - Fault recovery with captured traceback
    - Completion, per-failure and final-failure hooks
    - Synchronous and asyncio executors

Example:
    ```pycon
    >>> import retryer
    >>> from retryer.options import retry_on, sleep, tries
    >>> policy = retryer.build_policy(tries(3), sleep(10), retry_on(TimeoutError))
    >>> retryer.execute(policy, lambda: None) is None
    True
    >>> error = retryer.execute(policy, lambda: TimeoutError("slow"))
    >>> isinstance(error, retryer.AttemptsExhaustedError)
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptsExhaustedError",
    "DEFAULT_MAX_ATTEMPTS",
    "RecoveredFaultError",
    "RetryError",
    "RetryExecutor",
    "RetryPolicy",
    "__version__",
    "build_policy",
    "do",
    "do_async",
    "execute",
    "execute_async",
]

from importlib.metadata import PackageNotFoundError, version

from retryer.config import DEFAULT_MAX_ATTEMPTS
from retryer.exceptions import AttemptsExhaustedError, RecoveredFaultError, RetryError
from retryer.policy import RetryPolicy, build_policy
from retryer.retry import AsyncRetryExecutor, RetryExecutor
from retryer.runner import do, execute
from retryer.runner_async import do_async, execute_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
