r"""Shared operations and error kinds for retry tests.

Operations follow the package convention: they return an exception
instance to report a failure and raise to signal a fault.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from unittest.mock import Mock

if TYPE_CHECKING:
    from collections.abc import Callable

FAULT_MESSAGE = "explicit trigger of fault"


class ErrorTypeA(Exception):
    """First error kind used by classification tests."""


class ErrorTypeB(Exception):
    """Second error kind used by classification tests."""


class ErrorTypeC(Exception):
    """Third error kind used by classification tests."""


class SubErrorTypeA(ErrorTypeA):
    """Subclass of ErrorTypeA, a distinct kind."""


def happy() -> None:
    return None


def sad() -> Exception:
    return RuntimeError("error on primitive addition")


def faulty() -> Exception:
    raise RuntimeError(FAULT_MESSAGE)


async def happy_async() -> None:
    return None


async def sad_async() -> Exception:
    return RuntimeError("error on primitive addition")


async def faulty_async() -> Exception:
    raise RuntimeError(FAULT_MESSAGE)


@dataclass
class AttemptsBased:
    """Operation failing with ``fn()`` until its nth call succeeds.

    Attributes:
        succeed_on_nth: The call number that succeeds. ``0`` never
            succeeds.
        fn: Produces the error returned by failing calls.
        calls: Number of calls made so far.
    """

    succeed_on_nth: int
    fn: Callable[[], Exception | None] = sad
    calls: int = 0

    def __call__(self) -> Exception | None:
        self.calls += 1
        if self.succeed_on_nth and self.calls >= self.succeed_on_nth:
            return None
        return self.fn()


@dataclass
class AsyncAttemptsBased:
    """Async twin of ``AttemptsBased``."""

    succeed_on_nth: int
    fn: Callable[[], Exception | None] = sad
    calls: int = 0

    async def __call__(self) -> Exception | None:
        self.calls += 1
        if self.succeed_on_nth and self.calls >= self.succeed_on_nth:
            return None
        return self.fn()


def returning(*values: object) -> Mock:
    """Create a mock operation returning ``values`` in order.

    Unlike ``Mock(side_effect=[...])``, exception instances are returned,
    not raised, matching how operations report failures.
    """
    iterator = iter(values)
    return Mock(side_effect=lambda: next(iterator))
