"""Record store layer for bizanalytics."""

from bizanalytics.store.base import RecordStore
from bizanalytics.store.memory import InMemoryRecordStore
from bizanalytics.store.factories import create_memory_store
from bizanalytics.store.sample_data import sample_transactions

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
    "create_memory_store",
    "sample_transactions",
]
