# ui/formatting.py
"""
Display helpers for the Streamlit pages. Kept free of streamlit so they
can be tested without a running app.
"""
from __future__ import annotations

import html

from exc_core.models import UNCATEGORIZED, Transaction

REVIEW_ALL = "all"
REVIEW_UNCATEGORIZED = "uncategorized"
REVIEW_FILTERS = [REVIEW_ALL, REVIEW_UNCATEGORIZED]


def format_currency(value: float) -> str:
    """Format value as currency."""
    if value is None:
        return "$0.00"
    return f"${value:,.2f}"


def review_filter_label(option: str, uncategorized_count: int) -> str:
    if option == REVIEW_UNCATEGORIZED:
        return f"Uncategorized Only ({uncategorized_count})"
    return "All Transactions"


def review_row_html(txn: Transaction) -> str:
    """Description and date block for one review row; CSV text is escaped."""
    css = "review-row-uncategorized" if txn.category == UNCATEGORIZED else "review-row"
    return (
        f'<div class="{css}"><b>{html.escape(txn.description)}</b>'
        f"<br><small>{html.escape(txn.date)}</small></div>"
    )
