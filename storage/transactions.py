# storage/transactions.py
"""
In-memory transaction store for one import session.

Transactions only grow (append) or change category; there is no
per-transaction delete.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional

from exc_core.models import UNCATEGORIZED, Transaction, TransactionId

LOGGER = logging.getLogger(__name__)


class TransactionStore:
    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._txns: List[Transaction] = list(transactions or [])

    def __len__(self) -> int:
        return len(self._txns)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._txns)

    def snapshot(self) -> List[Transaction]:
        """Copies of the current transactions, in import order."""
        return [replace(t) for t in self._txns]

    def get(self, txn_id: TransactionId) -> Optional[Transaction]:
        for t in self._txns:
            if t.id == txn_id:
                return t
        return None

    def append(self, new_transactions: Iterable[Transaction]) -> int:
        """Add to the end, keeping existing order and ids. Returns count added."""
        added = list(new_transactions)
        self._txns.extend(added)
        return len(added)

    def set_category(self, txn_id: TransactionId, category: str) -> bool:
        """Manually reassign one transaction. Returns True if it was found."""
        txn = self.get(txn_id)
        if txn is None:
            LOGGER.debug("set_category: no transaction with id %r", txn_id)
            return False
        txn.category = category
        return True

    def rename_category_everywhere(self, old_name: str, new_name: str) -> int:
        """Retag every transaction in old_name. Returns count changed."""
        changed = 0
        for t in self._txns:
            if t.category == old_name:
                t.category = new_name
                changed += 1
        return changed

    def clear_category_everywhere(self, name: str) -> int:
        return self.rename_category_everywhere(name, UNCATEGORIZED)

    def uncategorized(self) -> List[Transaction]:
        return [t for t in self._txns if t.category == UNCATEGORIZED]

    @property
    def uncategorized_count(self) -> int:
        return sum(1 for t in self._txns if t.category == UNCATEGORIZED)

    @property
    def total(self) -> float:
        return sum(t.amount for t in self._txns)

    def clear(self) -> None:
        """Drop the whole session (start over)."""
        self._txns = []
