from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from exc_core.models import ColumnMapping, Transaction


class BaseAdapter(ABC):
    """Turn raw parsed statement rows into normalized Transactions."""

    @abstractmethod
    def build(
        self,
        *,
        rows: Sequence[Dict[str, Any]],
        mapping: ColumnMapping,
    ) -> List[Transaction]: ...
