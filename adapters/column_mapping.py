# adapters/column_mapping.py
from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from adapters.base import BaseAdapter
from categorizer.rules import classify
from exc_core.models import ColumnMapping, Transaction, TransactionId
from exc_utils.normalizers import coerce_amount, to_text

LOGGER = logging.getLogger(__name__)

Classifier = Callable[[str], str]
IdFactory = Callable[[], TransactionId]

# Process-wide so ids stay unique across repeated imports in one session.
_ID_SEQ = itertools.count(1)


def next_transaction_id() -> int:
    return next(_ID_SEQ)


class IncompleteMappingError(ValueError):
    def __init__(self, mapping: ColumnMapping):
        self.missing = mapping.missing()
        super().__init__(f"Column mapping incomplete; missing: {', '.join(self.missing)}")


def map_rows(
    rows: Sequence[Dict[str, Any]],
    mapping: ColumnMapping,
    *,
    classifier: Optional[Classifier] = None,
    id_factory: Optional[IdFactory] = None,
) -> List[Transaction]:
    """
    Normalize raw rows through a column mapping.

    Amounts are made absolute; rows whose amount is zero or unparsable
    are dropped (this also swallows blank and header-artifact rows).
    Output keeps input order.
    """
    classifier = classifier or classify
    id_factory = id_factory or next_transaction_id

    out: List[Transaction] = []
    dropped = 0
    for idx, row in enumerate(rows):
        amount = coerce_amount(row.get(mapping.amount))
        if amount == 0:
            dropped += 1
            LOGGER.debug(
                "Dropping row %d: amount %r", idx, row.get(mapping.amount)
            )
            continue
        description = to_text(row.get(mapping.description))
        out.append(
            Transaction(
                id=id_factory(),
                date=to_text(row.get(mapping.date)),
                description=description,
                amount=amount,
                category=classifier(description),
            )
        )

    if dropped:
        LOGGER.info("Imported %d transaction(s), dropped %d row(s)", len(out), dropped)
    else:
        LOGGER.info("Imported %d transaction(s)", len(out))
    return out


class ColumnMappingAdapter(BaseAdapter):
    """Adapter over map_rows that refuses to run on a partial mapping."""

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        self.classifier = classifier
        self.id_factory = id_factory

    def build(
        self,
        *,
        rows: Sequence[Dict[str, Any]],
        mapping: ColumnMapping,
    ) -> List[Transaction]:
        if not mapping.is_complete():
            raise IncompleteMappingError(mapping)
        return map_rows(
            rows,
            mapping,
            classifier=self.classifier,
            id_factory=self.id_factory,
        )
