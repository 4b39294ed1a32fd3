"""Presence checks shared by every interpreter."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any


def is_present(value: Any) -> bool:
    """True for a finite, non-negative real number.

    ``None``, booleans, NaN, infinities and negative numbers all count as
    absent so they degrade to the neutral result instead of a conclusion.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0


def is_positive(value: Any) -> bool:
    """Like :func:`is_present` but also excludes zero (divisors, body size)."""
    return is_present(value) and value > 0
