"""
Pydantic v2 models shared by the record store, the controller and the UI.

WeighRecord — one saved cargo-weighing transaction
RecordDraft — raw form strings before coercion
FilteredRow, Notification, FocusRequest — view-level state
"""

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, Field

from src.core.utils import format_plain, today_iso

Amount = Annotated[int, Field(ge=0)] | Annotated[float, Field(ge=0)]

# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class WeighRecord(BaseModel):
    """A saved weighing entry.

    ``sof_vazin`` (net weight) is always derived from ``yuk_bilan`` (gross)
    and ``yuksiz`` (tare) when the record is built from a draft.
    """

    id: str
    plate_number: str
    yuk_bilan: Amount = 0
    yuksiz: Amount = 0
    sof_vazin: Amount = 0
    date: str = ""
    summa: Amount = 0
    check_number: str = ""

    def search_text(self) -> str:
        """Lower-cased, space-joined text of every field, used by search."""
        parts = [
            self.plate_number,
            format_plain(self.yuk_bilan),
            format_plain(self.yuksiz),
            format_plain(self.sof_vazin),
            self.date,
            format_plain(self.summa),
            self.check_number,
        ]
        return " ".join(parts).lower()


# ---------------------------------------------------------------------------
# Form draft
# ---------------------------------------------------------------------------

DRAFT_FIELDS: tuple[str, ...] = (
    "plate_number",
    "yuk_bilan",
    "yuksiz",
    "date",
    "summa",
    "check_number",
)


class RecordDraft(BaseModel):
    """Editable form state; every value is the raw text the operator typed."""

    plate_number: str = ""
    yuk_bilan: str = ""
    yuksiz: str = ""
    date: str = Field(default_factory=today_iso)
    summa: str = ""
    check_number: str = ""

    @classmethod
    def blank(cls, today: str | None = None) -> "RecordDraft":
        """Empty draft with the date defaulted to *today*."""
        return cls(date=today) if today is not None else cls()

    @classmethod
    def from_record(cls, record: WeighRecord) -> "RecordDraft":
        """Copy a saved record into the form, numbers rendered as text."""
        return cls(
            plate_number=record.plate_number,
            yuk_bilan=format_plain(record.yuk_bilan),
            yuksiz=format_plain(record.yuksiz),
            date=record.date,
            summa=format_plain(record.summa),
            check_number=record.check_number,
        )


# ---------------------------------------------------------------------------
# View state
# ---------------------------------------------------------------------------


class FilteredRow(BaseModel):
    """A record as shown in the table, with its search-highlight flag."""

    record: WeighRecord
    highlighted: bool = False


class Notification(BaseModel):
    """Transient status message.

    ``token`` identifies this posting; ``dismiss_at`` is the clock reading
    after which the message is gone (``None`` = stays until replaced).
    """

    message: str
    token: int
    dismiss_at: float | None = None


class FocusRequest(StrEnum):
    """Pending request to move keyboard focus to the plate-number input."""

    none = "none"
    immediate = "immediate"
    next_paint = "next_paint"
