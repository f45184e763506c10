# barberapp/errors.py

from typing import Dict, Optional

from barberapp.i18n import Message


class BarberAppError(Exception):
    """Base class for errors raised by the catalog and appointment stores."""

    def __init__(self, message: Message):
        self.message = message
        super().__init__(message.key)


class NotFoundError(BarberAppError):
    """Raised when the referenced id has no corresponding record."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(Message("errors.not_found", {"kind": kind, "id": record_id}))

    def __str__(self) -> str:
        return f"{self.kind} {self.record_id!r} not found"


class TransientError(BarberAppError):
    """Simulated (or real) network failure; callers may retry."""

    def __init__(self, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(Message("admin_service.error_generic_desc"))

    def __str__(self) -> str:
        return f"transient failure during {self.operation or 'request'}"


class FormValidationError(BarberAppError):
    """Per-field validation failure, one message per invalid field."""

    def __init__(self, errors: Dict[str, Message]):
        self.errors = errors
        super().__init__(Message("errors.validation", {"fields": ", ".join(sorted(errors))}))

    def __str__(self) -> str:
        return "invalid fields: " + ", ".join(sorted(self.errors))


class ServiceValidationError(FormValidationError):
    pass


class BookingValidationError(FormValidationError):
    pass
