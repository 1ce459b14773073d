"""Unit tests for the shared pydantic models."""

import pytest
from pydantic import ValidationError

from src.core.models import DRAFT_FIELDS, FocusRequest, RecordDraft, WeighRecord
from src.services.storage.seed import SEED_RECORDS


class TestWeighRecord:
    def test_search_text_joins_all_fields(self):
        assert SEED_RECORDS[0].search_text() == (
            "uz 45 a123 42000 16000 26000 2024-06-15 30000 chk-9834"
        )

    def test_integral_numbers_stay_int(self):
        record = WeighRecord(id="a", plate_number="P", yuk_bilan=100)
        assert isinstance(record.yuk_bilan, int)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            WeighRecord(id="a", plate_number="P", yuksiz=-1)


class TestRecordDraft:
    def test_blank_uses_given_date(self):
        assert RecordDraft.blank("2025-01-02") == RecordDraft(date="2025-01-02")

    def test_default_date_is_set(self):
        assert RecordDraft().date != ""

    def test_from_record_renders_numbers(self):
        record = WeighRecord(id="a", plate_number="P", yuk_bilan=12.5, yuksiz=3, summa=0)
        draft = RecordDraft.from_record(record)
        assert draft.yuk_bilan == "12.5"
        assert draft.yuksiz == "3"
        assert draft.summa == "0"

    def test_fields_constant_matches_model(self):
        assert set(DRAFT_FIELDS) == set(RecordDraft.model_fields)


def test_focus_request_values():
    assert [f.value for f in FocusRequest] == ["none", "immediate", "next_paint"]
