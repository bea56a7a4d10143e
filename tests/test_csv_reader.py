import pytest

from adapters.column_mapping import map_rows
from exc_core.models import ColumnMapping
from parser.csv_reader import StatementReadError, read_statement


def test_read_from_path(sample_statement_csv):
    parsed = read_statement(sample_statement_csv)

    assert parsed.headers == ["Date", "Description", "Amount"]
    # Blank line skipped.
    assert len(parsed) == 3
    assert parsed.rows[0]["Description"] == "STARBUCKS #123"
    assert parsed.rows[2]["Amount"] == "abc"


def test_read_from_bytes_with_numeric_inference():
    parsed = read_statement(b"when,what,how much\n2024-01-01,Lunch,12.5\n2024-01-02,,3\n")

    assert parsed.headers == ["when", "what", "how much"]
    assert parsed.rows[0]["how much"] == 12.5
    assert parsed.rows[1]["what"] is None


def test_empty_file():
    parsed = read_statement(b"")
    assert parsed.empty
    assert parsed.headers == []


def test_header_only():
    parsed = read_statement(b"a,b,c\n")
    assert parsed.headers == ["a", "b", "c"]
    assert parsed.empty


def test_all_blank_rows_dropped():
    parsed = read_statement(b"a,b\n1,2\n,\n")
    assert len(parsed) == 1


def test_unreadable_csv():
    with pytest.raises(StatementReadError):
        read_statement(b'a,b\n"unterminated,1\n')


def test_trailing_comma_rows_stay_keyed_by_header():
    parsed = read_statement(
        b"Date,Description,Amount\n2024-01-02,STARBUCKS,4.75,\n2024-01-03,UBER,-23.10,\n"
    )

    assert parsed.headers == ["Date", "Description", "Amount"]
    assert parsed.rows[0]["Date"] == "2024-01-02"
    assert parsed.rows[0]["Description"] == "STARBUCKS"
    assert parsed.rows[0]["Amount"] == 4.75

    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    assert [t.amount for t in map_rows(parsed.rows, mapping)] == [4.75, 23.1]


def test_na_like_descriptions_are_kept():
    parsed = read_statement(b"Date,Description,Amount\n2024-01-02,N/A,4.75\n2024-01-03,NULL,5\n")
    assert [r["Description"] for r in parsed.rows] == ["N/A", "NULL"]
