"""
Hard-coded example rows shown on first load and restored by Reload.
"""

from src.core.models import WeighRecord

SEED_RECORDS: tuple[WeighRecord, ...] = (
    WeighRecord(
        id="rec-001",
        plate_number="UZ 45 A123",
        yuk_bilan=42000,
        yuksiz=16000,
        sof_vazin=26000,
        date="2024-06-15",
        summa=30000,
        check_number="CHK-9834",
    ),
    WeighRecord(
        id="rec-002",
        plate_number="KZ 90 B456",
        yuk_bilan=39800,
        yuksiz=15500,
        sof_vazin=24300,
        date="2024-06-17",
        summa=40000,
        check_number="CHK-6542",
    ),
    WeighRecord(
        id="rec-003",
        plate_number="UZ 10 Z999",
        yuk_bilan=36500,
        yuksiz=14900,
        sof_vazin=21600,
        date="2024-06-18",
        summa=28000,
        check_number="CHK-7741",
    ),
)


def seed_records() -> list[WeighRecord]:
    """Return fresh deep copies of the seed rows."""
    return [record.model_copy(deep=True) for record in SEED_RECORDS]
