r"""Unit tests for LinearBackoff strategy."""

from __future__ import annotations

import pytest

from retryer.backoff import LinearBackoff


def test_linear_backoff_basic() -> None:
    backoff = LinearBackoff(base_delay=1.0)
    assert backoff.calculate(1) == 1.0
    assert backoff.calculate(2) == 2.0
    assert backoff.calculate(3) == 3.0


def test_linear_backoff_with_max_delay() -> None:
    backoff = LinearBackoff(base_delay=2.0, max_delay=5.0)
    assert backoff.calculate(1) == 2.0
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(3) == 5.0  # Would be 6.0, but capped
    assert backoff.calculate(6) == 5.0


def test_linear_backoff_default_values() -> None:
    backoff = LinearBackoff()
    assert backoff.base_delay == 1.0
    assert backoff.max_delay is None


def test_linear_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be >= 0"):
        LinearBackoff(base_delay=-1.0)


@pytest.mark.parametrize("max_delay", [0, -5.0])
def test_linear_backoff_invalid_max_delay(max_delay: float) -> None:
    with pytest.raises(ValueError, match=r"max_delay must be > 0"):
        LinearBackoff(base_delay=1.0, max_delay=max_delay)
