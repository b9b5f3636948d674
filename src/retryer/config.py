r"""Configuration defaults for retry policies.

This module provides the named constants used when a retry policy is
built without explicit values.
"""

from __future__ import annotations

__all__ = ["DEFAULT_MAX_ATTEMPTS", "DEFAULT_SLEEP_DURATION", "UNBOUNDED_ATTEMPTS"]

# Default maximum number of attempts (initial attempt included)
DEFAULT_MAX_ATTEMPTS = 10

# Attempt cap meaning "keep trying until success or a classification stop"
UNBOUNDED_ATTEMPTS = 0

# Default fixed delay in seconds between attempts (0 disables the delay)
DEFAULT_SLEEP_DURATION = 0.0
