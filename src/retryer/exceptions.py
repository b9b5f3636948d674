r"""Errors synthesized by the retry engine.

The engine never raises these errors: they are returned by
``RetryExecutor.do`` as the terminal outcome of a call. Errors produced
by the operation itself are opaque to the engine and only surface
wrapped in an ``AttemptsExhaustedError``.
"""

from __future__ import annotations

__all__ = ["AttemptsExhaustedError", "RecoveredFaultError", "RetryError"]


class RetryError(Exception):
    """Base class for the terminal errors produced by the retry engine."""


class AttemptsExhaustedError(RetryError):
    """Error returned when the attempt cap is reached without success.

    Args:
        attempts: The number of attempts made.
        last_error: The error returned by the last attempt.

    Attributes:
        attempts: The number of attempts made.
        last_error: The error returned by the last attempt. It is also
            available as ``__cause__``.

    Example:
        ```pycon
        >>> from retryer.exceptions import AttemptsExhaustedError
        >>> error = AttemptsExhaustedError(3, ValueError("boom"))
        >>> str(error)
        'max number of retries reached: 3, last error: boom'
        >>> error.attempts
        3

        ```
    """

    def __init__(self, attempts: int, last_error: Exception | None) -> None:
        super().__init__(f"max number of retries reached: {attempts}, last error: {last_error}")
        self.attempts = attempts
        self.last_error = last_error
        self.__cause__ = last_error


class RecoveredFaultError(RetryError):
    """Error returned when a fault raised by the operation was recovered.

    Args:
        fault: The exception raised by the operation.
        trace: The formatted traceback captured when the fault was caught.

    Attributes:
        fault: The exception raised by the operation. It is also
            available as ``__cause__``.
        trace: The formatted traceback of the fault.
    """

    def __init__(self, fault: Exception, trace: str) -> None:
        super().__init__(f"retryer has recovered fault: {fault}\n{trace}")
        self.fault = fault
        self.trace = trace
        self.__cause__ = fault
