# storage/categories.py
"""
Ordered, case-sensitive registry of user categories.

Renames and deletes cascade into the attached TransactionStore so no
transaction is left pointing at a category that no longer exists.
"Uncategorized" is reserved and never stored here.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from exc_core.models import UNCATEGORIZED
from exc_utils.categories import DEFAULT_CATEGORIES
from storage.transactions import TransactionStore

LOGGER = logging.getLogger(__name__)


class CategoryRegistry:
    def __init__(
        self,
        categories: Optional[Iterable[str]] = None,
        transactions: Optional[TransactionStore] = None,
    ):
        self.transactions = transactions if transactions is not None else TransactionStore()
        self._names: List[str] = []
        for name in DEFAULT_CATEGORIES if categories is None else categories:
            self.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def names(self) -> List[str]:
        return list(self._names)

    def choices(self) -> List[str]:
        """Values a transaction may be assigned: the fallback, then the registry."""
        return [UNCATEGORIZED] + self._names

    def add(self, name: str) -> bool:
        """Append a category. Empty, duplicate and reserved names are ignored."""
        name = (name or "").strip()
        if not name or name == UNCATEGORIZED or name in self._names:
            return False
        self._names.append(name)
        return True

    def rename(self, old_name: str, new_name: str) -> bool:
        """
        Rename in place and retag transactions.

        Renaming onto the reserved name is a delete. Renaming onto a
        category that already exists merges the two, keeping the
        existing entry's position. A name that is not registered (e.g. one
        assigned by a custom rule file) only retags transactions, like remove().
        """
        if not (new_name or "").strip() or new_name == old_name:
            return False
        target = new_name.strip()
        if target == old_name or old_name == UNCATEGORIZED:
            return False
        if target == UNCATEGORIZED:
            return self.remove(old_name)

        present = old_name in self._names
        if present:
            if target in self._names:
                self._names.remove(old_name)
            else:
                self._names[self._names.index(old_name)] = target
        moved = self.transactions.rename_category_everywhere(old_name, target)
        if present or moved:
            LOGGER.info("Renamed category %r -> %r (%d transaction(s))", old_name, target, moved)
        return present

    def remove(self, name: str) -> bool:
        """Delete a category; its transactions fall back to Uncategorized."""
        if name == UNCATEGORIZED:
            return False
        present = name in self._names
        if present:
            self._names.remove(name)
        cleared = self.transactions.clear_category_everywhere(name)
        if present or cleared:
            LOGGER.info("Removed category %r (%d transaction(s) uncategorized)", name, cleared)
        return present
