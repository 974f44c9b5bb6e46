"""Random lower-case alphanumeric strings."""

from __future__ import annotations

import random
import time

_AZ09 = "abcdefghijklmnopqrstuvwxyz0123456789"
_rng = random.Random(time.time_ns())


def rand_string_az09(n: int) -> str:
    """Return a random string of n characters from a-z and 0-9."""
    if n < 0:
        raise ValueError("length must not be negative")
    return "".join(_rng.choices(_AZ09, k=n))