"""Numeric helpers shared by the engine modules"""

import math
from typing import Optional

from paycheck_insights.domain.exceptions import InvalidArgumentError


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def ensure_finite(name: str, value: float) -> float:
    """Reject NaN/inf before it reaches any arithmetic"""
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")
    return value


def ensure_non_negative(name: str, value: float) -> float:
    ensure_finite(name, value)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value!r}")
    return value


def finite_or_none(value: Optional[float]) -> Optional[float]:
    """Map infinite/undefined sentinels to None for display and JSON"""
    if value is None or not math.isfinite(value):
        return None
    return value
