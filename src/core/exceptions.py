"""
Caravan Weigh exception hierarchy.

All application-specific exceptions inherit from CaravanWeighError so the
UI layer can treat domain failures uniformly.
"""

from datetime import UTC, datetime


class CaravanWeighError(Exception):
    """Base exception for all Caravan Weigh errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "CARAVAN_WEIGH_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class RecordNotFoundError(CaravanWeighError):
    """Raised when a record ID does not exist in the store."""

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(
            detail=f"Record not found: {record_id}",
            code="RECORD_NOT_FOUND",
        )


class MissingRequiredFieldError(CaravanWeighError):
    """Raised when a draft is submitted without a required field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            detail=f"Required field is empty: {field}",
            code="MISSING_REQUIRED_FIELD",
        )


class UnknownFieldError(CaravanWeighError):
    """Raised when a draft update names a field the form does not have."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            detail=f"Unknown draft field: {field}",
            code="UNKNOWN_FIELD",
        )
