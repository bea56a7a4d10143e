from exc_core.models import UNCATEGORIZED
from ui.formatting import (
    REVIEW_ALL,
    REVIEW_FILTERS,
    REVIEW_UNCATEGORIZED,
    format_currency,
    review_filter_label,
    review_row_html,
)


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(None) == "$0.00"


def test_review_filter_values_do_not_carry_the_count():
    # Widget identity depends on the option values, so they must not change
    # as rows get categorized; only the label shows the live count.
    assert REVIEW_FILTERS == [REVIEW_ALL, REVIEW_UNCATEGORIZED]
    assert review_filter_label(REVIEW_UNCATEGORIZED, 3) == "Uncategorized Only (3)"
    assert review_filter_label(REVIEW_UNCATEGORIZED, 2) == "Uncategorized Only (2)"
    assert review_filter_label(REVIEW_ALL, 3) == "All Transactions"


def test_review_row_escapes_csv_text(make_txn):
    txn = make_txn(
        UNCATEGORIZED,
        description='<img src=x onerror="alert(1)"> & Co',
        date="<b>2024</b>",
    )
    out = review_row_html(txn)

    assert "<img" not in out
    assert "&lt;img src=x onerror=&quot;alert(1)&quot;&gt; &amp; Co" in out
    assert "&lt;b&gt;2024&lt;/b&gt;" in out
    assert 'class="review-row-uncategorized"' in out


def test_review_row_categorized_class(make_txn):
    out = review_row_html(make_txn("Meals", description="Cafe"))
    assert 'class="review-row"' in out
    assert "<b>Cafe</b>" in out
