# reports/export.py
"""
Summary CSV export.

Fields are written as-is: a category name containing a comma or quote
is not escaped, so the output bytes match what earlier exports produced.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Iterable, Tuple, Union

from exc_core.models import Summary

EXPORT_FILENAME = "expense-summary.csv"
HEADER = ("Category", "Total Amount")

SummaryLike = Union[Summary, Iterable[Tuple[str, float]]]


def _pairs(summary: SummaryLike) -> Iterable[Tuple[str, float]]:
    if isinstance(summary, Summary):
        return [(r.category, r.total) for r in summary.rows]
    return summary


def format_amount(amount: float) -> str:
    """Two decimals, exact half-cent values rounded up (0.125 -> "0.13")."""
    return str(Decimal(float(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def encode_summary_csv(summary: SummaryLike) -> str:
    lines = [",".join(HEADER)]
    for category, amount in _pairs(summary):
        lines.append(f"{category},{format_amount(amount)}")
    return "\n".join(lines)


def write_summary_csv(summary: SummaryLike, path: Union[str, Path]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(encode_summary_csv(summary), encoding="utf-8")
    return p
