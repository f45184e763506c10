# barberapp/routers/appointments_routes.py

from datetime import date
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from barberapp.admin import AdminAppointmentManager
from barberapp.appointments import AppointmentManager
from barberapp.auth import get_current_admin
from barberapp.booking import submit_booking
from barberapp.catalog import ServiceCatalog
from barberapp.deps import get_appointment_manager, get_catalog, get_locale, http_error, validation_error
from barberapp.errors import BarberAppError, BookingValidationError
from barberapp.formatting import format_appointment_date
from barberapp.i18n import Message, Notification, render_notification, translate
from barberapp.schemas import (
    AppointmentActionResponse,
    AppointmentPublic,
    AppointmentStatusUpdate,
    AppointmentView,
)

router = APIRouter(
    tags=["appointments"],
)


def appointment_view(appointment: AppointmentPublic, locale: str) -> AppointmentView:
    status_key = f"admin_appointment.{appointment.status.value.lower()}"
    return AppointmentView(
        **appointment.model_dump(),
        date_display=format_appointment_date(appointment.date, locale),
        status_label=translate(Message(status_key), locale),
    )


def fetch_failed(exc: BarberAppError, locale: str):
    notification = Notification(
        Message("admin_service.fetch_error_title"),
        Message("admin_appointment.fetch_error_desc"),
        "destructive",
    )
    return http_error(notification, exc, locale)


@router.get("/admin/appointments", response_model=List[AppointmentView])
async def list_admin_appointments(
    manager: AppointmentManager = Depends(get_appointment_manager),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    view = AdminAppointmentManager(manager)
    notification = await view.refresh()
    if notification is not None:
        raise http_error(notification, None, locale)
    return [appointment_view(a, locale) for a in view.sorted]


@router.patch("/admin/appointments/{appointment_id}/status", response_model=AppointmentActionResponse)
async def change_appointment_status(
    appointment_id: str,
    update: AppointmentStatusUpdate,
    manager: AppointmentManager = Depends(get_appointment_manager),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    result = await AdminAppointmentManager(manager).update_status(appointment_id, update.status)
    if not result.ok:
        raise http_error(result.notification, result.error, locale)
    return {
        "appointment": result.record,
        "notification": render_notification(result.notification, locale),
    }


@router.post("/appointments", response_model=AppointmentActionResponse, status_code=201)
async def book_appointment(
    form: Dict[str, Any] = Body(...),
    catalog: ServiceCatalog = Depends(get_catalog),
    manager: AppointmentManager = Depends(get_appointment_manager),
    locale: str = Depends(get_locale),
):
    try:
        result = await submit_booking(form, catalog, manager)
    except BookingValidationError as exc:
        raise validation_error(exc, locale)
    except BarberAppError as exc:
        raise fetch_failed(exc, locale)

    if not result.ok:
        raise http_error(result.notification, result.error, locale)
    return {
        "appointment": result.record,
        "notification": render_notification(result.notification, locale),
    }


@router.get("/calendar", response_model=List[AppointmentView])
async def calendar_day(
    day: date,
    manager: AppointmentManager = Depends(get_appointment_manager),
    locale: str = Depends(get_locale),
):
    try:
        appointments = await manager.appointments_on(day)
    except BarberAppError as exc:
        raise fetch_failed(exc, locale)
    return [appointment_view(a, locale) for a in appointments]
