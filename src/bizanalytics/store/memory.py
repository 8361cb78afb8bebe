"""In-memory record store."""

import logging
from typing import Iterable

from bizanalytics.domain.entities import Transaction
from bizanalytics.store.base import RecordStore

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """Record store living for the length of one session."""

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: tuple[Transaction, ...] = tuple(transactions)
        self._version = 0

    def list_transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        self._transactions = tuple(transactions)
        self._version += 1
        logger.debug(
            "Record store replaced (version=%d, records=%d)",
            self._version,
            len(self._transactions),
        )

    @property
    def version(self) -> int:
        return self._version
