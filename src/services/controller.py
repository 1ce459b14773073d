"""
Record store + form controller for the weighing page.

``WeighbridgeController`` owns every piece of page state (records, form
draft, selection, edit target, search query, notification, focus request)
and exposes one method per user action. The Streamlit page only forwards
widget events here and renders the resulting state.

State machine::

    idle --begin_edit--> editing(id)
    editing(id) --submit ok | delete(id) | begin_new | reload_seed | clear_form--> idle
"""

import logging
from collections.abc import Callable

from src.core.config import Settings, get_settings
from src.core.exceptions import MissingRequiredFieldError, UnknownFieldError
from src.core.models import (
    DRAFT_FIELDS,
    FilteredRow,
    FocusRequest,
    RecordDraft,
    WeighRecord,
)
from src.core.utils import Number, format_plain, net_weight, parse_number, today_iso
from src.services.identity import BaseIdProvider, RandomIdProvider, generate_check_number
from src.services.notifications import NotificationCenter
from src.services.storage.record_store import RecordStore

logger = logging.getLogger(__name__)

MSG_NEW_ENTRY = "Ready for a new entry."
MSG_RELOADED = "Data reloaded from caravan log."
MSG_RELAY = "Relay signal sent across the caravan route."
NO_MATCHES_TEXT = "No entries match the search."


class WeighbridgeController:
    """All record-management transitions for one page session.

    Args:
        store: Record collection. Defaults to a store holding the seed rows.
        id_provider: Source of record ids and check-number suffixes.
        notifications: Notification center (inject one with a fake clock in tests).
        settings: Application settings; ``get_settings()`` when omitted.
        today: Callable returning today's date as ``YYYY-MM-DD``.
    """

    def __init__(
        self,
        store: RecordStore | None = None,
        id_provider: BaseIdProvider | None = None,
        notifications: NotificationCenter | None = None,
        settings: Settings | None = None,
        today: Callable[[], str] = today_iso,
    ) -> None:
        self.store = store if store is not None else RecordStore()
        self.id_provider = id_provider if id_provider is not None else RandomIdProvider()
        self.notifications = notifications if notifications is not None else NotificationCenter()
        self.settings = settings if settings is not None else get_settings()
        self._today = today

        self.draft = RecordDraft.blank(self._today())
        self.editing_id: str | None = None
        self.selected_id: str | None = None
        self.search_query = ""
        self.focus_request = FocusRequest.none

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def submit_label(self) -> str:
        return "Save Changes" if self.is_editing else "Add Entry"

    @property
    def computed_net_weight(self) -> Number:
        """Net weight for the current draft, recomputed on every read."""
        return net_weight(parse_number(self.draft.yuk_bilan), parse_number(self.draft.yuksiz))

    @property
    def net_weight_display(self) -> str:
        """Text for the read-only net field; blank until a weight is typed."""
        if self.draft.yuk_bilan == "" and self.draft.yuksiz == "":
            return ""
        return format_plain(self.computed_net_weight)

    def filter_records(self, query: str | None = None) -> list[FilteredRow]:
        """Case-insensitive substring search over every record field.

        Args:
            query: Search text; the current ``search_query`` when omitted.

        Returns:
            All records (none highlighted) for a blank query, otherwise the
            matching records, each flagged as highlighted.
        """
        needle = (self.search_query if query is None else query).strip().lower()
        if not needle:
            return [FilteredRow(record=r, highlighted=False) for r in self.store]
        return [
            FilteredRow(record=r, highlighted=True) for r in self.store if needle in r.search_text()
        ]

    @property
    def filtered_rows(self) -> list[FilteredRow]:
        return self.filter_records()

    @property
    def notification(self) -> str | None:
        return self.notifications.message

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------

    def set_search_query(self, query: str) -> None:
        self.search_query = query

    def update_field(self, field: str, value: str) -> None:
        """Set one raw draft field.

        Raises:
            UnknownFieldError: If *field* is not a form field.
        """
        if field not in DRAFT_FIELDS:
            raise UnknownFieldError(field)
        self.draft = self.draft.model_copy(update={field: value})

    def clear_form(self) -> None:
        """Blank draft, leave edit mode, drop the selection."""
        self.draft = RecordDraft.blank(self._today())
        self.editing_id = None
        self.selected_id = None

    def consume_focus_request(self) -> FocusRequest:
        """Return the pending focus request and reset it."""
        request, self.focus_request = self.focus_request, FocusRequest.none
        return request

    def _build_record(self) -> WeighRecord:
        plate = self.draft.plate_number.strip()
        if not plate:
            raise MissingRequiredFieldError("plate_number")

        gross = parse_number(self.draft.yuk_bilan)
        tare = parse_number(self.draft.yuksiz)
        check_number = self.draft.check_number.strip() or generate_check_number(
            self.id_provider,
            existing=self.store.check_numbers(),
            prefix=self.settings.check_number_prefix,
            length=self.settings.check_number_length,
            max_attempts=self.settings.check_number_max_attempts,
        )
        record_id = self.editing_id
        if record_id is None:
            record_id = self.id_provider.new_record_id()
        return WeighRecord(
            id=record_id,
            plate_number=plate,
            yuk_bilan=gross,
            yuksiz=tare,
            sof_vazin=net_weight(gross, tare),
            date=self.draft.date,
            summa=parse_number(self.draft.summa),
            check_number=check_number,
        )

    def submit(self) -> WeighRecord | None:
        """Save the draft as a new record or over the record being edited.

        An empty plate number aborts without touching the collection and
        asks the UI to focus the plate field.

        Returns:
            The saved record, or ``None`` if the submit was aborted.
        """
        try:
            record = self._build_record()
        except MissingRequiredFieldError as exc:
            logger.debug("Submit aborted: %s", exc.detail)
            self.focus_request = FocusRequest.immediate
            return None

        if self.editing_id is not None and self.editing_id in self.store:
            self.store.replace(record)
        else:
            if self.editing_id is not None:
                logger.warning("Edit target %s vanished; saving as new row", self.editing_id)
            self.store.prepend(record)

        self.clear_form()
        return record

    # ------------------------------------------------------------------
    # Row actions
    # ------------------------------------------------------------------

    def select(self, record_id: str) -> None:
        """Toggle selection of *record_id*."""
        self.selected_id = None if self.selected_id == record_id else record_id

    def begin_edit(self, record: WeighRecord) -> None:
        """Load *record* into the form and enter edit mode."""
        self.editing_id = record.id
        self.selected_id = record.id
        self.draft = RecordDraft.from_record(record)
        self.notifications.post(f"Editing {record.plate_number}")
        self.focus_request = FocusRequest.immediate

    def delete(self, record_id: str) -> None:
        """Remove a record, leaving edit mode if it was the edit target."""
        self.store.remove(record_id)
        if self.editing_id == record_id:
            self.clear_form()
        if self.selected_id == record_id:
            self.selected_id = None

    # ------------------------------------------------------------------
    # Toolbar actions
    # ------------------------------------------------------------------

    def delete_selected(self) -> None:
        if self.selected_id is None:
            return
        self.delete(self.selected_id)

    def edit_selected(self) -> None:
        if self.selected_id is None:
            return
        record = self.store.find(self.selected_id)
        if record is None:
            logger.debug("Selected record %s no longer exists", self.selected_id)
            return
        self.begin_edit(record)

    def begin_new(self) -> None:
        self.clear_form()
        self.notifications.post(MSG_NEW_ENTRY)
        self.focus_request = FocusRequest.next_paint

    def reload_seed(self) -> None:
        """Discard every change and restore the seed rows."""
        self.store.reset()
        self.clear_form()
        self.search_query = ""
        self.notifications.post(MSG_RELOADED)

    def relay(self) -> None:
        self.notifications.post(MSG_RELAY, dismiss_after=self.settings.relay_dismiss_seconds)
