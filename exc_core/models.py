from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union

UNCATEGORIZED = "Uncategorized"

TransactionId = Union[int, str]


@dataclass
class Transaction:
    id: TransactionId
    date: str
    description: str
    amount: float
    category: str = UNCATEGORIZED


@dataclass
class ColumnMapping:
    """Which source column feeds each canonical field."""

    date: str = ""
    description: str = ""
    amount: str = ""

    def is_complete(self) -> bool:
        return bool(self.date and self.description and self.amount)

    def missing(self) -> List[str]:
        return [
            name
            for name in ("date", "description", "amount")
            if not getattr(self, name)
        ]


@dataclass
class CategoryTotal:
    category: str
    total: float
    count: int = 0


@dataclass
class Summary:
    rows: List[CategoryTotal] = field(default_factory=list)
    total: float = 0.0
    uncategorized_count: int = 0

    def percentage(self, category_total: float) -> float:
        """Share of the grand total, 0.0 when nothing has been spent."""
        if not self.total:
            return 0.0
        return 100 * category_total / self.total

    def get(self, category: str) -> Optional[CategoryTotal]:
        for row in self.rows:
            if row.category == category:
                return row
        return None
