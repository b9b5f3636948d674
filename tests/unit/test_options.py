r"""Unit tests for the policy options."""

from __future__ import annotations

import asyncio
from unittest.mock import Mock

import pytest

from retryer.options import (
    after_each_fail,
    ensure,
    ignore,
    on_error,
    recover,
    retry_on,
    sleep,
    sleep_fn,
    tries,
)
from retryer.policy import RetryPolicy
from tests.helpers import ErrorTypeA, ErrorTypeB, ErrorTypeC

###########################
#     Tests for tries     #
###########################


def test_tries() -> None:
    assert tries(3)(RetryPolicy()).max_attempts == 3


def test_tries_zero_is_unbounded() -> None:
    policy = tries(0)(RetryPolicy())
    assert policy.max_attempts == 0
    assert policy.unbounded


def test_tries_negative() -> None:
    with pytest.raises(ValueError, match=r"attempts must be >= 0"):
        tries(-2)


def test_option_returns_new_policy() -> None:
    policy = RetryPolicy()
    updated = tries(1)(policy)

    assert updated is not policy
    assert policy.max_attempts == 10


###########################
#     Tests for sleep     #
###########################


@pytest.mark.parametrize(("milliseconds", "seconds"), [(0, 0.0), (50, 0.05), (1500, 1.5)])
def test_sleep_converts_milliseconds(milliseconds: int, seconds: float) -> None:
    assert sleep(milliseconds)(RetryPolicy()).sleep_duration == seconds


def test_sleep_negative() -> None:
    with pytest.raises(ValueError, match=r"milliseconds must be >= 0"):
        sleep(-1)


@pytest.mark.parametrize("milliseconds", [float("inf"), float("nan")])
def test_sleep_not_finite_fails_on_creation(milliseconds: float) -> None:
    with pytest.raises(ValueError, match=r"milliseconds must be a finite number"):
        sleep(milliseconds)


def test_sleep_fn() -> None:
    delay = Mock()
    assert sleep_fn(delay)(RetryPolicy()).sleep_fn is delay


##########################################
#     Tests for retry_on and ignore      #
##########################################


def test_retry_on() -> None:
    policy = retry_on(ErrorTypeA, ErrorTypeB("b"))(RetryPolicy())
    assert policy.retry_on == (ErrorTypeA, ErrorTypeB)


def test_retry_on_accepts_list() -> None:
    policy = retry_on([ErrorTypeA, ErrorTypeC])(RetryPolicy())
    assert policy.retry_on == (ErrorTypeA, ErrorTypeC)


def test_retry_on_empty_clears_allow_list() -> None:
    policy = retry_on()(retry_on(ErrorTypeA)(RetryPolicy()))
    assert policy.retry_on == ()


def test_ignore() -> None:
    policy = ignore(ErrorTypeC)(RetryPolicy())
    assert policy.ignore == (ErrorTypeC,)


def test_retry_on_invalid_kind_fails_on_creation() -> None:
    with pytest.raises(TypeError):
        retry_on("ErrorTypeA")


@pytest.mark.parametrize("kind", [asyncio.CancelledError, KeyboardInterrupt(), SystemExit])
def test_retry_on_rejects_non_exception_kinds(kind: object) -> None:
    with pytest.raises(TypeError, match=r"error kinds must be Exception classes or instances"):
        retry_on(kind)


def test_ignore_rejects_non_exception_kinds() -> None:
    with pytest.raises(TypeError, match=r"error kinds must be Exception classes or instances"):
        ignore(asyncio.CancelledError())


###########################
#     Tests for hooks     #
###########################


def test_recover() -> None:
    assert recover()(RetryPolicy()).recover is True
    assert recover(enabled=False)(RetryPolicy(recover=True)).recover is False


def test_ensure(mock_callback: Mock) -> None:
    assert ensure(mock_callback)(RetryPolicy()).ensure is mock_callback


def test_after_each_fail(mock_callback: Mock) -> None:
    assert after_each_fail(mock_callback)(RetryPolicy()).after_each_fail is mock_callback


def test_on_error(mock_callback: Mock) -> None:
    assert on_error(mock_callback)(RetryPolicy()).on_error is mock_callback
