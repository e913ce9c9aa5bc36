from __future__ import annotations

import math
from typing import Any, Optional


def finite_or_none(value: Any) -> Optional[float]:
    """Parse `value` as a finite float, or return None.

    Numeric strings are accepted; booleans, junk, NaN and infinities are not.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def finite_or(value: Any, default: float) -> float:
    number = finite_or_none(value)
    return default if number is None else number
