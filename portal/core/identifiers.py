"""
Helpers for fabricating identifiers and timestamps in confirmations.
"""
from __future__ import annotations

import random
import string
import time
from datetime import datetime, timezone
from typing import Optional


_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def epoch_millis() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * 1000)


def random_suffix(length: int = 9, rng: Optional[random.Random] = None) -> str:
    """Random lowercase base-36 string, e.g. ``k3j9x0a2b``."""
    if length <= 0:
        raise ValueError("length must be greater than 0")
    source = rng or random
    return "".join(source.choice(_BASE36_ALPHABET) for _ in range(length))


def utc_now_iso() -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


__all__ = ["epoch_millis", "random_suffix", "utc_now_iso"]
