# barberapp/booking.py

from datetime import date, datetime, timezone
from typing import Mapping, Optional

from barberapp.admin import ActionResult
from barberapp.appointments import AppointmentManager
from barberapp.catalog import ServiceCatalog
from barberapp.errors import BarberAppError
from barberapp.i18n import Message, Notification
from barberapp.logging_config import get_logger
from barberapp.validation import validate_booking_form

logger = get_logger(__name__)


async def submit_booking(raw: Mapping, catalog: ServiceCatalog, manager: AppointmentManager,
                         today: Optional[date] = None) -> ActionResult:
    """Validate a booking form and create a Pending appointment.

    Raises BookingValidationError for invalid input; store failures come
    back as a destructive notification.
    """
    services = await catalog.list_active_services()
    booking = validate_booking_form(raw, services, today or datetime.now(timezone.utc).date())
    service = next(s for s in services if s.id == booking.service_id)

    try:
        appointment = await manager.book_appointment(booking, service.name)
    except BarberAppError as exc:
        logger.warning("booking_failed", service_id=service.id, error=str(exc))
        return ActionResult(Notification(
            Message("booking_form.error_title"),
            Message("admin_service.error_generic_desc"),
            "destructive",
        ), error=exc)

    return ActionResult(Notification(
        Message("booking_form.success_title"),
        Message("booking_form.success_description", {
            "name": booking.name,
            "service_name": service.name,
            "date": booking.date.isoformat(),
            "time": booking.time,
        }),
    ), appointment)
