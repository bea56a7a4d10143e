import itertools

import pytest

from exc_core.models import Transaction

STATEMENT_CSV = (
    "Date,Description,Amount\n"
    "2024-01-02,STARBUCKS #123,4.75\n"
    "\n"
    "2024-01-03,UBER *TRIP,-23.10\n"
    "2024-01-04,Mystery Vendor,abc\n"
)


@pytest.fixture
def sample_statement_csv(tmp_path):
    p = tmp_path / "statement.csv"
    p.write_text(STATEMENT_CSV, encoding="utf-8")
    return p


@pytest.fixture
def id_factory():
    seq = itertools.count(1)
    return lambda: next(seq)


@pytest.fixture
def make_txn():
    seq = itertools.count(1)

    def _make(category, amount=10.0, description="desc", date="2024-01-01"):
        return Transaction(
            id=next(seq),
            date=date,
            description=description,
            amount=amount,
            category=category,
        )

    return _make
