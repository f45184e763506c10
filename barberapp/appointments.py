# barberapp/appointments.py

from datetime import date, datetime, time, timezone
from typing import Iterable, List, Optional, Union

from barberapp.core import LatencyPolicy, new_record_id, parse_appointment_date
from barberapp.errors import NotFoundError
from barberapp.logging_config import get_logger
from barberapp.repositories import AppointmentRepository
from barberapp.schemas import AppointmentPublic, AppointmentStatus, BookingCreate

logger = get_logger(__name__)


def sorted_by_date(appointments: Iterable[AppointmentPublic]) -> List[AppointmentPublic]:
    """New list ordered by ascending timestamp; unparsable dates go last."""
    def sort_key(appointment):
        parsed = parse_appointment_date(appointment.date)
        return (parsed is None, parsed.timestamp() if parsed is not None else 0.0)

    return sorted(appointments, key=sort_key)


class AppointmentManager:

    def __init__(self, repository: AppointmentRepository, latency: Optional[LatencyPolicy] = None):
        self.repository = repository
        self.latency = latency or LatencyPolicy.none()

    async def list_appointments(self) -> List[AppointmentPublic]:
        await self.latency.wait("list_appointments")
        return self.repository.list()

    async def get_appointment(self, appointment_id: str) -> Optional[AppointmentPublic]:
        await self.latency.wait("get_appointment")
        return self.repository.get(appointment_id)

    async def appointments_on(self, day: date) -> List[AppointmentPublic]:
        """Appointments falling on ``day`` (UTC), earliest first."""
        matches = []
        for appointment in await self.list_appointments():
            parsed = parse_appointment_date(appointment.date)
            if parsed is not None and parsed.date() == day:
                matches.append(appointment)
        return sorted_by_date(matches)

    async def update_status(self, appointment_id: str,
                            new_status: Union[AppointmentStatus, str]) -> AppointmentPublic:
        # any status may follow any other
        status = AppointmentStatus(new_status)
        await self.latency.wait("update_status")

        existing = self.repository.get(appointment_id)
        if existing is None:
            raise NotFoundError("appointment", appointment_id)
        updated = existing.model_copy(update={"status": status})
        if not self.repository.replace(updated):
            raise NotFoundError("appointment", appointment_id)

        logger.info(
            "appointment_status_updated",
            appointment_id=appointment_id,
            previous=existing.status.value,
            status=status.value,
        )
        return updated

    async def book_appointment(self, booking: BookingCreate, service_name: str) -> AppointmentPublic:
        """Create a Pending appointment from an already validated booking."""
        hour, minute = (int(part) for part in booking.time.split(":"))
        starts_at = datetime.combine(booking.date, time(hour, minute), tzinfo=timezone.utc)
        await self.latency.wait("book_appointment")

        created = self.repository.add(AppointmentPublic(
            id=new_record_id("apt"),
            client_name=booking.name,
            client_phone=booking.phone,
            client_email=booking.email,
            service_name=service_name,
            date=starts_at.isoformat().replace("+00:00", "Z"),
            status=AppointmentStatus.pending,
        ))
        logger.info("appointment_booked", appointment_id=created.id, service_name=service_name)
        return created
