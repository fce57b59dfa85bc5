import math
import re
from typing import Optional

_MIXED_RE = re.compile(r"(\d+)\s+(\d+)/(\d+)")
_FRACTION_RE = re.compile(r"(\d+)/(\d+)")
_NUMBER_PREFIX_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def _divide(num: str, denom: str, whole: str = "0") -> Optional[float]:
    try:
        d = int(denom)
        if d == 0:
            return None
        return _finite(int(whole) + int(num) / d)
    except (OverflowError, ValueError):
        # Too many digits for int() or too large for a float
        return None


def parse_quantity_text(raw: Optional[str]) -> Optional[float]:
    """Read a leading quantity run like "2", "0.5", "1/2" or "1 1/4" as a float.

    Returns None when the run is not numeric, divides by zero or does not fit
    in a float.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None

    # Fractions like "1 1/2" or "1/2"
    m = _MIXED_RE.fullmatch(value)
    if m:
        return _divide(m.group(2), m.group(3), whole=m.group(1))
    m = _FRACTION_RE.fullmatch(value)
    if m:
        return _divide(m.group(1), m.group(2))

    # Whole or decimal numbers; trailing tokens after the number are ignored
    m = _NUMBER_PREFIX_RE.match(value)
    if not m:
        return None
    return _finite(float(m.group()))
