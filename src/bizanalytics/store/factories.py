"""Record store factory functions."""

import logging
import os
from typing import Iterable, Optional

from bizanalytics.domain.csv_export import read_transactions_csv
from bizanalytics.domain.entities import Transaction
from bizanalytics.store.memory import InMemoryRecordStore
from bizanalytics.store.sample_data import sample_transactions

logger = logging.getLogger(__name__)


def create_memory_store(
    transactions: Optional[Iterable[Transaction]] = None,
    data_path: Optional[str] = None,
) -> InMemoryRecordStore:
    """Create an in-memory record store.

    Args:
        transactions: Initial records. Takes precedence over ``data_path``.
        data_path: CSV file in the export layout to seed from. If None, checks
            the BIZANALYTICS_DATA environment variable, then falls back to the
            built-in sample data.

    Returns:
        InMemoryRecordStore seeded with the initial records
    """
    if transactions is not None:
        return InMemoryRecordStore(transactions)

    if data_path is None:
        data_path = os.environ.get("BIZANALYTICS_DATA")

    if data_path is None:
        return InMemoryRecordStore(sample_transactions())

    records = read_transactions_csv(data_path)
    logger.info("Loaded %d transactions from %s", len(records), data_path)
    return InMemoryRecordStore(records)
