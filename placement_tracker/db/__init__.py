"""
Database module - in-memory record store.
"""
from placement_tracker.db.memory import InMemoryRecordStore, get_record_store

__all__ = [
    "InMemoryRecordStore",
    "get_record_store",
]
