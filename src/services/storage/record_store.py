"""
Ordered in-memory collection of weighing records.

``RecordStore`` keeps records newest-first. It never persists anything;
``reset()`` swaps the whole collection, by default for the seed rows.
"""

import logging
from collections.abc import Iterable, Iterator

from src.core.exceptions import RecordNotFoundError
from src.core.models import WeighRecord
from src.services.storage.seed import seed_records

logger = logging.getLogger(__name__)


class RecordStore:
    """Data-access layer over a plain list of :class:`WeighRecord`.

    Args:
        records: Initial rows in display order. Defaults to the seed rows.
    """

    def __init__(self, records: Iterable[WeighRecord] | None = None) -> None:
        self._records: list[WeighRecord] = (
            seed_records() if records is None else [r.model_copy(deep=True) for r in records]
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WeighRecord]:
        return iter(list(self._records))

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    def all(self) -> list[WeighRecord]:
        """Return a snapshot list of records in display order."""
        return list(self._records)

    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def check_numbers(self) -> set[str]:
        return {r.check_number for r in self._records}

    def find(self, record_id: str) -> WeighRecord | None:
        """Return the record with *record_id*, or ``None``."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def get(self, record_id: str) -> WeighRecord:
        """Return a record by ID or raise :class:`RecordNotFoundError`."""
        record = self.find(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def prepend(self, record: WeighRecord) -> None:
        """Insert *record* ahead of every existing row."""
        self._records.insert(0, record)
        logger.info("Record %s created (%s)", record.id, record.plate_number)

    def replace(self, record: WeighRecord) -> int:
        """Overwrite the row sharing ``record.id``, keeping its position.

        Returns:
            The index the record occupies.

        Raises:
            RecordNotFoundError: If no row has that id.
        """
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                logger.info("Record %s updated (%s)", record.id, record.plate_number)
                return index
        raise RecordNotFoundError(record.id)

    def remove(self, record_id: str) -> bool:
        """Delete the row with *record_id*. Returns False if it was absent."""
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        removed = len(self._records) != before
        if removed:
            logger.info("Record %s deleted", record_id)
        return removed

    def reset(self, records: Iterable[WeighRecord] | None = None) -> None:
        """Replace the whole collection (fresh seed copies by default)."""
        self._records = (
            seed_records() if records is None else [r.model_copy(deep=True) for r in records]
        )
        logger.info("Record store reset to %d row(s)", len(self._records))
