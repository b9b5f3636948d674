r"""Error classification deciding whether an attempt ends the loop.

This module provides the RetryDecider class that applies the policy's
deny-list and allow-list to the error returned by an attempt.
"""

from __future__ import annotations

__all__ = ["RetryDecider", "matches_kind"]

import logging

logger: logging.Logger = logging.getLogger(__name__)


def matches_kind(error: BaseException | None, kinds: tuple[type[Exception], ...]) -> bool:
    """Return whether the error's exact class is one of the kinds.

    Subclasses do not match their parents: ``ValueError`` does not match
    ``Exception``.

    Example:
        ```pycon
        >>> from retryer.retry.decider import matches_kind
        >>> matches_kind(ValueError("boom"), (ValueError, KeyError))
        True
        >>> matches_kind(ValueError("boom"), (Exception,))
        False
        >>> matches_kind(None, (ValueError,))
        False

        ```
    """
    if error is None:
        return False
    return any(type(error) is kind for kind in kinds)


class RetryDecider:
    """Decides whether an attempt's error stops the loop.

    Args:
        retry_on: Allow-list of error kinds worth retrying.
        ignore: Deny-list of error kinds treated as success.
    """

    def __init__(
        self,
        retry_on: tuple[type[Exception], ...] = (),
        ignore: tuple[type[Exception], ...] = (),
    ) -> None:
        self.retry_on = retry_on
        self.ignore = ignore

    def succeeded(self, error: Exception | None) -> bool:
        """Return whether the loop should stop and report success.

        The deny-list is checked first, so a kind present in both lists
        stops the loop. A non-empty allow-list ends the loop on any error
        outside it. Otherwise only the absence of an error is a success.

        Args:
            error: The error returned by the attempt, or ``None``.

        Returns:
            ``True`` to stop with success, ``False`` to retry.

        Example:
            ```pycon
            >>> from retryer.retry.decider import RetryDecider
            >>> decider = RetryDecider(retry_on=(TimeoutError,), ignore=(KeyError,))
            >>> decider.succeeded(None)
            True
            >>> decider.succeeded(TimeoutError())
            False
            >>> decider.succeeded(KeyError("k"))  # Ignored kind
            True
            >>> decider.succeeded(ValueError())  # Outside the allow-list
            True

            ```
        """
        if matches_kind(error, self.ignore):
            logger.debug(f"{type(error).__name__} is ignored, stopping")
            return True
        if error is not None and self.retry_on and not matches_kind(error, self.retry_on):
            logger.debug(f"{type(error).__name__} is not retryable, stopping")
            return True
        return error is None
