"""Boundary parsing for year and state identifiers."""
from __future__ import annotations

import math
import numbers


def as_int(value, what: str = "value") -> int:
    """Coerce an int, float or numeric string to ``int``.

    Floats are truncated toward zero, so ``2013.9`` and ``"2013.076"`` both
    give ``2013``.
    """
    if isinstance(value, bool) or value is None:
        raise TypeError(f"{what} must be a number or numeric string, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise ValueError(f"invalid {what}: {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            raise ValueError(f"invalid {what}: {value!r}")
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise ValueError(f"invalid {what}: {value!r}") from None
        if not math.isfinite(number):
            raise ValueError(f"invalid {what}: {value!r}")
        return int(number)
    raise TypeError(f"{what} must be a number or numeric string, got {type(value).__name__}")

__all__ = ["as_int"]
