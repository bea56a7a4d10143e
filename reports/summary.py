# reports/summary.py
from __future__ import annotations

from typing import Dict, Iterable

import pandas as pd

from exc_core.models import UNCATEGORIZED, CategoryTotal, Summary, Transaction


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """
    Per-category totals, largest first. Categories with equal totals keep
    the order in which they were first seen.
    """
    by_cat: Dict[str, CategoryTotal] = {}
    total = 0.0
    uncategorized = 0
    for t in transactions:
        row = by_cat.get(t.category)
        if row is None:
            row = by_cat[t.category] = CategoryTotal(category=t.category, total=0.0)
        row.total += t.amount
        row.count += 1
        total += t.amount
        if t.category == UNCATEGORIZED:
            uncategorized += 1

    rows = sorted(by_cat.values(), key=lambda r: r.total, reverse=True)
    return Summary(rows=rows, total=total, uncategorized_count=uncategorized)


def summary_frame(summary: Summary) -> pd.DataFrame:
    """Tabular view of a summary for display (one row per category)."""
    df = pd.DataFrame(
        [
            {
                "category": r.category,
                "count": r.count,
                "total": r.total,
                "percentage": summary.percentage(r.total),
            }
            for r in summary.rows
        ],
        columns=["category", "count", "total", "percentage"],
    )
    return df
