# ui/app.py
"""
Expense Categorizer - Streamlit front end

- CSV statement upload
- Column mapping (date / description / amount)
- Review & manual re-categorization
- Category summary with CSV export
- Category management (add / rename / delete)

The session's TransactionStore and CategoryRegistry live in
st.session_state; every page renders from their current state.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import streamlit as st

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.column_mapping import ColumnMappingAdapter  # noqa: E402
from categorizer.service import CategorizerService  # noqa: E402
from config.loader import load_config, resolve_rules_path  # noqa: E402
from exc_core.models import ColumnMapping  # noqa: E402
from exc_utils.logging_setup import setup_logging  # noqa: E402
from parser.csv_reader import StatementReadError, read_statement  # noqa: E402
from reports.export import EXPORT_FILENAME, encode_summary_csv  # noqa: E402
from reports.summary import summarize, summary_frame  # noqa: E402
from storage import CategoryRegistry, TransactionStore  # noqa: E402
from ui.formatting import (  # noqa: E402
    REVIEW_FILTERS,
    REVIEW_UNCATEGORIZED,
    format_currency,
    review_filter_label,
    review_row_html,
)

LOGGER = logging.getLogger(__name__)


def _load_settings() -> Dict[str, Any]:
    try:
        return load_config()
    except FileNotFoundError:
        LOGGER.warning("config.toml not found; using defaults")
        return {}


SETTINGS = _load_settings()
setup_logging((SETTINGS.get("logging") or {}).get("level", "INFO"))

APP_TITLE = (SETTINGS.get("app") or {}).get("title", "Expense Categorizer")
EXPORT_NAME = (SETTINGS.get("export") or {}).get("filename", EXPORT_FILENAME)

# Page configuration
st.set_page_config(
    page_title=APP_TITLE,
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    """
<style>
    .main-header {
        background: linear-gradient(135deg, #4f46e5 0%, #6366f1 100%);
        padding: 1.5rem 2rem;
        border-radius: 12px;
        margin-bottom: 2rem;
        color: white;
    }
    .main-header h1 { margin: 0; font-size: 2rem; font-weight: 700; }
    .main-header p { margin: 0.5rem 0 0 0; opacity: 0.9; }

    .total-card {
        background: #eef2ff;
        padding: 1.5rem;
        border-radius: 12px;
        margin-bottom: 1.5rem;
    }
    .total-card .label { color: #4b5563; }
    .total-card .value { font-size: 2.25rem; font-weight: 700; color: #4f46e5; }

    .review-row-uncategorized {
        background: #fefce8;
        border: 1px solid #fde68a;
        border-radius: 8px;
        padding: 0.5rem 0.75rem;
    }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
</style>
""",
    unsafe_allow_html=True,
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_registry() -> CategoryRegistry:
    """Get or create the session's CategoryRegistry (owns the TransactionStore)."""
    if "registry" not in st.session_state:
        st.session_state.registry = CategoryRegistry(transactions=TransactionStore())
    return st.session_state.registry


def get_store() -> TransactionStore:
    return get_registry().transactions


def get_categorizer() -> CategorizerService:
    if "categorizer" not in st.session_state:
        st.session_state.categorizer = CategorizerService(
            rules_path=resolve_rules_path(SETTINGS)
        )
    return st.session_state.categorizer


def header(title: str, subtitle: str) -> None:
    st.markdown(
        f"""
    <div class="main-header">
        <h1>{title}</h1>
        <p>{subtitle}</p>
    </div>
    """,
        unsafe_allow_html=True,
    )


def go(page: str) -> None:
    # Applied by main() before the navigation widget is drawn.
    st.session_state.next_page = page


# =============================================================================
# Page: Upload
# =============================================================================


def page_upload():
    header(
        "Upload Credit Card Statement",
        "Upload your CSV file and we'll auto-categorize your transactions",
    )

    uploaded = st.file_uploader(
        "Choose CSV File",
        type=["csv"],
        accept_multiple_files=False,
        help="Any column layout; you'll map the columns next.",
    )

    store = get_store()
    if len(store):
        st.caption(f"Currently managing {len(store)} transactions")

    if uploaded is None:
        return

    try:
        parsed = read_statement(uploaded.getvalue())
    except StatementReadError as e:
        st.error(f"**{uploaded.name}**: {e}")
        return

    if parsed.empty:
        st.warning(f"**{uploaded.name}** has no data rows.")
        return

    if st.session_state.get("parsed_name") != uploaded.name:
        for key in ("map_date", "map_description", "map_amount"):
            st.session_state.pop(key, None)
    st.session_state.parsed = parsed
    st.session_state.parsed_name = uploaded.name
    st.success(f"Read **{len(parsed)}** row(s) from **{uploaded.name}**")
    st.button("Map columns", type="primary", on_click=go, args=("Map Columns",))


# =============================================================================
# Page: Column Mapping
# =============================================================================


def page_mapping():
    header("Map CSV Columns", "Match your CSV columns to the required fields")

    parsed = st.session_state.get("parsed")
    if parsed is None:
        st.info("Upload a CSV statement first.")
        return

    options = [""] + parsed.headers

    def _label(h: str) -> str:
        return h or "Select column..."

    mapping = ColumnMapping(
        date=st.selectbox("Date Column", options, format_func=_label, key="map_date"),
        description=st.selectbox(
            "Description Column", options, format_func=_label, key="map_description"
        ),
        amount=st.selectbox(
            "Amount Column", options, format_func=_label, key="map_amount"
        ),
    )

    with st.expander("Preview"):
        st.dataframe(parsed.rows[:10], use_container_width=True, hide_index=True)

    if st.button(
        "Auto-Categorize Transactions",
        type="primary",
        disabled=not mapping.is_complete(),
        use_container_width=True,
    ):
        adapter = ColumnMappingAdapter(classifier=get_categorizer().classify)
        new_txns = adapter.build(rows=parsed.rows, mapping=mapping)
        added = get_store().append(new_txns)
        skipped = len(parsed) - added
        st.session_state.pop("parsed", None)
        st.session_state.flash = (
            f"Imported {added} transaction(s)"
            + (f", skipped {skipped} row(s) without an amount" if skipped else "")
        )
        go("Review")
        st.rerun()


# =============================================================================
# Page: Review
# =============================================================================


def _on_category_change(txn_id) -> None:
    get_store().set_category(txn_id, st.session_state[f"cat_{txn_id}"])


def page_review():
    header("Review & Adjust Categories", "Fix anything the rules got wrong")

    store = get_store()
    registry = get_registry()

    flash = st.session_state.pop("flash", None)
    if flash:
        st.success(flash)

    if not len(store):
        st.info("No transactions yet. Upload a statement to get started!")
        return

    n = store.uncategorized_count
    if n:
        st.warning(
            f"{n} transaction{'s' if n > 1 else ''} need{'s' if n == 1 else ''} "
            "manual categorization"
        )

    view = st.radio(
        "Show",
        REVIEW_FILTERS,
        format_func=lambda opt: review_filter_label(opt, n),
        key="review_filter",
        horizontal=True,
        label_visibility="collapsed",
    )
    txns = store.uncategorized() if view == REVIEW_UNCATEGORIZED else list(store)

    choices = registry.choices()
    for txn in txns:
        # Keep a manually-typed or since-deleted category selectable.
        opts = choices if txn.category in choices else choices + [txn.category]
        col1, col2, col3 = st.columns([5, 2, 3])
        col1.markdown(review_row_html(txn), unsafe_allow_html=True)
        col2.write(format_currency(txn.amount))
        st.session_state[f"cat_{txn.id}"] = txn.category
        col3.selectbox(
            "Category",
            opts,
            key=f"cat_{txn.id}",
            on_change=_on_category_change,
            args=(txn.id,),
            label_visibility="collapsed",
        )


# =============================================================================
# Page: Summary
# =============================================================================


def page_summary():
    store = get_store()
    summary = summarize(store)

    col_a, col_b = st.columns([4, 1])
    with col_a:
        header("Expense Summary", "Where the money went")
    with col_b:
        st.download_button(
            "Export CSV",
            data=encode_summary_csv(summary),
            file_name=EXPORT_NAME,
            mime="text/csv",
            disabled=not len(store),
            use_container_width=True,
        )

    if not len(store):
        st.info("No spending data yet. Upload a statement to see the breakdown.")
        return

    st.markdown(
        f"""
    <div class="total-card">
        <div class="label">Total Expenses</div>
        <div class="value">{format_currency(summary.total)}</div>
    </div>
    """,
        unsafe_allow_html=True,
    )

    for row in summary.rows:
        pct = summary.percentage(row.total)
        with st.container(border=True):
            c1, c2 = st.columns([4, 1])
            c1.write(f"**{row.category}**")
            c2.write(f"**{format_currency(row.total)}**")
            st.progress(min(pct / 100, 1.0))
            st.caption(f"{pct:.1f}% of total • {row.count} transaction(s)")

    st.divider()
    st.subheader("Spending Distribution")
    df = summary_frame(summary)
    st.bar_chart(df.set_index("category")["total"], use_container_width=True)


# =============================================================================
# Page: Categories
# =============================================================================


def _add_category() -> None:
    get_registry().add(st.session_state.get("new_category", ""))
    st.session_state.new_category = ""


def _save_rename(old: str) -> None:
    get_registry().rename(old, st.session_state.get(f"rename_{old}", ""))
    st.session_state.editing = None


def page_categories():
    header("Manage Categories", "Add, rename or remove spending categories")

    registry = get_registry()

    c1, c2 = st.columns([5, 1])
    c1.text_input(
        "New category name",
        key="new_category",
        on_change=_add_category,
        label_visibility="collapsed",
        placeholder="New category name",
    )
    c2.button("Add", on_click=_add_category, use_container_width=True)

    editing = st.session_state.get("editing")
    for cat in registry.names():
        with st.container(border=True):
            if editing == cat:
                e1, e2, e3 = st.columns([6, 1, 1])
                e1.text_input(
                    "Rename",
                    value=cat,
                    key=f"rename_{cat}",
                    label_visibility="collapsed",
                )
                e2.button("Save", key=f"save_{cat}", on_click=_save_rename, args=(cat,))
                e3.button(
                    "Cancel",
                    key=f"cancel_{cat}",
                    on_click=lambda: st.session_state.update(editing=None),
                )
            else:
                n1, n2, n3 = st.columns([6, 1, 1])
                n1.write(cat)
                n2.button(
                    "Edit",
                    key=f"edit_{cat}",
                    on_click=lambda c=cat: st.session_state.update(editing=c),
                )
                n3.button(
                    "Delete",
                    key=f"delete_{cat}",
                    on_click=registry.remove,
                    args=(cat,),
                )

    st.divider()
    st.caption(f"Rules loaded from: `{get_categorizer().source}`")
    if st.button("Start over (clear all transactions)"):
        get_store().clear()
        st.success("Transactions cleared.")


# =============================================================================
# Main Application
# =============================================================================


def main():
    """Main application entry point."""
    store = get_store()

    pages = {
        "Upload": page_upload,
        "Map Columns": page_mapping,
        "Review": page_review,
        "Summary": page_summary,
        "Categories": page_categories,
    }

    if "next_page" in st.session_state:
        st.session_state.page = st.session_state.pop("next_page")

    with st.sidebar:
        st.title(APP_TITLE)
        st.write("---")
        st.radio(
            "Navigation",
            list(pages.keys()),
            key="page",
            label_visibility="collapsed",
        )
        st.write("---")
        st.caption(f"Transactions: {len(store)}")
        st.caption(f"Need review: {store.uncategorized_count}")

    pages[st.session_state.page]()


if __name__ == "__main__":
    main()
