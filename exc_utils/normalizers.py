from __future__ import annotations

import math
import numbers
import re
from typing import Any, Optional


# ---------------- Amounts ----------------

# Leading numeric prefix, the way browser number parsing reads "12.50 CAD"
# as 12.5 and "$12.50" as nothing at all.
LEADING_NUMBER_RX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_amount(raw: Any) -> Optional[float]:
    """
    Parse a statement amount cell.

    Numbers (already type-inferred by the CSV reader) pass through; strings
    are read up to the first character that can't continue a number.
    Returns None when nothing numeric is found or the value is not finite.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, numbers.Real):
        val = float(raw)
    else:
        m = LEADING_NUMBER_RX.match(str(raw))
        if not m:
            return None
        try:
            val = float(m.group(1))
        except ValueError:
            return None

    if not math.isfinite(val):
        return None
    return val


def coerce_amount(raw: Any) -> float:
    """Absolute amount; unparsable input becomes 0.0."""
    return abs(parse_amount(raw) or 0.0)


# ---------------- Text ----------------


def to_text(raw: Any) -> str:
    """Render a cell as text. Empty-ish cells (None, NaN, 0, "") become ""."""
    if raw is None or raw is False or raw == "":
        return ""
    if isinstance(raw, numbers.Real) and not isinstance(raw, bool):
        if isinstance(raw, float) and math.isnan(raw):
            return ""
        if raw == 0:
            return ""
        if isinstance(raw, float) and raw.is_integer():
            return str(int(raw))
    if raw is True:
        return "true"
    return str(raw)
