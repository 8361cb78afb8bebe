"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from bizanalytics.domain.entities import Transaction


class RecordStore(ABC):
    """Abstract holder of the ordered transaction collection.

    The collection is never edited in place. Every change goes through
    ``replace_all``, which publishes a new collection value.
    """

    @abstractmethod
    def list_transactions(self) -> tuple[Transaction, ...]:
        """Return the current collection, newest first."""
        pass

    @abstractmethod
    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Replace the whole collection."""
        pass

    @property
    @abstractmethod
    def version(self) -> int:
        """Counter incremented on every replacement."""
        pass

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        for txn in self.list_transactions():
            if txn.id == transaction_id:
                return txn
        return None

    def __len__(self) -> int:
        return len(self.list_transactions())
