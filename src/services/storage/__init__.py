"""
Storage module - In-memory record collection and its seed rows.
"""

from src.services.storage.record_store import RecordStore
from src.services.storage.seed import SEED_RECORDS, seed_records

__all__ = [
    "SEED_RECORDS",
    "RecordStore",
    "seed_records",
]
