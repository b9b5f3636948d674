r"""Hook manager for the lifecycle of an execution.

This module provides the HookManager class that invokes the hooks of a
policy. Hooks observe errors only: anything they raise propagates to
the caller.
"""

from __future__ import annotations

__all__ = ["HookManager"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retryer.policy import RetryPolicy


class HookManager:
    """Invokes the hooks of a retry policy.

    Attributes:
        policy: The policy holding the hooks.
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    def after_each_fail(self, error: Exception) -> None:
        """Invoke the per-failure hook with the error of a retried attempt."""
        if self.policy.after_each_fail is not None:
            self.policy.after_each_fail(error)

    def finish(self, error: BaseException | None) -> None:
        """Invoke the end-of-execution hooks.

        The final-failure hook runs first, and only when ``error`` is
        not ``None``. The completion hook always runs, even if the
        final-failure hook raised.

        Args:
            error: The final error of the execution, or ``None``.
        """
        try:
            if error is not None and self.policy.on_error is not None:
                self.policy.on_error(error)
        finally:
            if self.policy.ensure is not None:
                self.policy.ensure(error)
