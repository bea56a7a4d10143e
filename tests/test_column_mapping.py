import pytest

from adapters.column_mapping import (
    ColumnMappingAdapter,
    IncompleteMappingError,
    map_rows,
)
from exc_core.models import ColumnMapping

MAPPING = ColumnMapping(date="Posted", description="Payee", amount="Amt")


def _row(amount, payee="Starbucks", posted="2024-01-02"):
    return {"Posted": posted, "Payee": payee, "Amt": amount, "Extra": "ignored"}


def test_amounts_normalized_and_bad_rows_dropped(id_factory):
    rows = [_row("12.50"), _row(-7), _row("abc"), _row(0)]
    txns = map_rows(rows, MAPPING, id_factory=id_factory)

    assert [t.amount for t in txns] == [12.5, 7.0]
    assert [t.id for t in txns] == [1, 2]


def test_fields_and_classification():
    txns = map_rows([_row("4.75", payee="STARBUCKS #9")], MAPPING)
    t = txns[0]
    assert t.date == "2024-01-02"
    assert t.description == "STARBUCKS #9"
    assert t.category == "Meals & Entertainment"


def test_order_preserved_and_ids_unique_across_imports():
    rows = [_row(1, payee="a"), _row(2, payee="b"), _row(3, payee="c")]
    first = map_rows(rows, MAPPING)
    second = map_rows(rows, MAPPING)

    assert [t.description for t in first] == ["a", "b", "c"]
    ids = [t.id for t in first + second]
    assert len(set(ids)) == len(ids)


def test_missing_column_and_empty_description():
    rows = [
        {"Posted": "2024-01-02", "Amt": "5"},  # no payee column
        {"Posted": "2024-01-02", "Payee": "x"},  # no amount column
    ]
    txns = map_rows(rows, MAPPING)

    assert len(txns) == 1
    assert txns[0].description == ""
    assert txns[0].category == "Uncategorized"


def test_numeric_cells_rendered_as_text():
    txns = map_rows([_row(9.99, payee=12345, posted=20240102.0)], MAPPING)
    assert txns[0].description == "12345"
    assert txns[0].date == "20240102"


def test_custom_classifier():
    txns = map_rows([_row(1)], MAPPING, classifier=lambda d: "Custom")
    assert txns[0].category == "Custom"


def test_malformed_rows_never_raise():
    rows = [{}, {"Amt": None}, {"Amt": object()}, {"Amt": "nan"}]
    assert map_rows(rows, MAPPING) == []


class TestAdapter:
    def test_incomplete_mapping_rejected(self):
        adapter = ColumnMappingAdapter()
        with pytest.raises(IncompleteMappingError) as exc:
            adapter.build(rows=[_row(1)], mapping=ColumnMapping(date="Posted"))
        assert exc.value.missing == ["description", "amount"]

    def test_complete_mapping(self, id_factory):
        adapter = ColumnMappingAdapter(id_factory=id_factory)
        txns = adapter.build(rows=[_row("3"), _row("x")], mapping=MAPPING)
        assert [(t.id, t.amount) for t in txns] == [(1, 3.0)]


def test_mapping_completeness():
    assert MAPPING.is_complete()
    assert not ColumnMapping().is_complete()
    assert ColumnMapping(date="d", amount="a").missing() == ["description"]
