"""Form validation for service and booking payloads.

Validation collects every invalid field at once and reports one localizable
message per field; it never stops at the first failure.
"""
from datetime import date
from typing import Dict, Iterable, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from barberapp.data import AVAILABLE_TIMES
from barberapp.errors import BookingValidationError, FormValidationError, ServiceValidationError
from barberapp.i18n import Message
from barberapp.schemas import BookingCreate, ServiceCreate, ServicePublic, ServiceUpdate

SERVICE_FIELDS = ("name", "description", "duration", "price", "category", "active")
BOOKING_FIELDS = ("name", "phone", "email", "service_id", "date", "time")


def _field_errors(exc: ValidationError, prefix: str, fields: Iterable[str]) -> Dict[str, Message]:
    fields = set(fields)
    errors: Dict[str, Message] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        name = str(loc[0]) if loc else "__root__"
        if name not in fields or name in errors:
            continue
        # service_id reports as booking_form.service_error
        key = name[:-3] if name.endswith("_id") else name
        errors[name] = Message(f"{prefix}.{key}_error")
    return errors


def _validate(model: Type[BaseModel], raw: Mapping, prefix: str, fields: Iterable[str],
              error_cls: Type[FormValidationError], context: Optional[dict] = None):
    try:
        return model.model_validate(dict(raw), context=context)
    except ValidationError as exc:
        raise error_cls(_field_errors(exc, prefix, fields)) from exc


def validate_service_form(raw: Mapping) -> ServiceCreate:
    """Validate a full service form; numeric strings are coerced, ``active`` defaults to True."""
    if isinstance(raw, ServiceCreate):
        return raw
    return _validate(ServiceCreate, raw, "admin_service", SERVICE_FIELDS, ServiceValidationError)


def validate_service_patch(raw: Mapping) -> ServiceUpdate:
    if isinstance(raw, ServiceUpdate):
        return raw
    return _validate(ServiceUpdate, raw, "admin_service", SERVICE_FIELDS, ServiceValidationError)


def validate_booking_form(raw: Mapping, services: Iterable[ServicePublic], today: date,
                          available_times: Iterable[str] = AVAILABLE_TIMES) -> BookingCreate:
    context = {
        "service_ids": {s.id for s in services if s.active},
        "today": today,
        "available_times": set(available_times),
    }
    return _validate(BookingCreate, raw, "booking_form", BOOKING_FIELDS, BookingValidationError, context)
