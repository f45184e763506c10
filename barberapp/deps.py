# barberapp/deps.py

from typing import Optional

from fastapi import Header, HTTPException, Query

from barberapp.appointments import AppointmentManager
from barberapp.catalog import ServiceCatalog
from barberapp.config import config
from barberapp.core import LatencyPolicy
from barberapp.data import APPOINTMENTS, SERVICES
from barberapp.errors import BarberAppError, FormValidationError, NotFoundError
from barberapp.i18n import Notification, render_notification, resolve_locale, translate
from barberapp.repositories import (
    InMemoryAppointmentRepository,
    InMemoryServiceRepository,
    SqlAppointmentRepository,
    SqlServiceRepository,
)

_stores = {}


def build_stores(storage: str = config.STORAGE, latency: Optional[LatencyPolicy] = None):
    """Create the process-wide catalog and appointment manager."""
    latency = latency or LatencyPolicy.from_config()
    if storage == "sql":
        from barberapp.db import engine, init_db

        init_db(engine)
        services = SqlServiceRepository(engine)
        services.seed(SERVICES)
        appointments = SqlAppointmentRepository(engine)
        appointments.seed(APPOINTMENTS)
    elif storage == "memory":
        services = InMemoryServiceRepository(SERVICES)
        appointments = InMemoryAppointmentRepository(APPOINTMENTS)
    else:
        raise ValueError(f"unknown storage backend {storage!r}")

    _stores["catalog"] = ServiceCatalog(services, latency)
    _stores["appointments"] = AppointmentManager(appointments, latency)
    return _stores["catalog"], _stores["appointments"]


def get_catalog() -> ServiceCatalog:
    if "catalog" not in _stores:
        build_stores()
    return _stores["catalog"]


def get_appointment_manager() -> AppointmentManager:
    if "appointments" not in _stores:
        build_stores()
    return _stores["appointments"]


def get_locale(
    locale: Optional[str] = Query(default=None),
    accept_language: Optional[str] = Header(default=None),
) -> str:
    return resolve_locale(locale or accept_language, config.DEFAULT_LOCALE)


def http_error(notification: Notification, error: Optional[BarberAppError], locale: str) -> HTTPException:
    status_code = 404 if isinstance(error, NotFoundError) else 503
    return HTTPException(status_code=status_code, detail=render_notification(notification, locale))


def validation_error(exc: FormValidationError, locale: str) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "message": translate(exc.message, locale),
            "errors": {field: translate(msg, locale) for field, msg in exc.errors.items()},
        },
    )
