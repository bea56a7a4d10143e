# storage/__init__.py
"""
Session storage for the expense categorizer.

Everything lives in memory for the lifetime of one session: the imported
transactions and the user's category list.
"""

from .transactions import TransactionStore
from .categories import CategoryRegistry

__all__ = [
    "TransactionStore",
    "CategoryRegistry",
]
