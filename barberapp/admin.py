"""Admin view state for the service and appointment tables.

Each manager keeps the list the admin screen renders and reconciles it with
the store after every action. Toggling a service's ``active`` flag is
optimistic; add, edit, delete and status changes wait for the store.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from barberapp.appointments import AppointmentManager, sorted_by_date
from barberapp.catalog import ServiceCatalog
from barberapp.errors import BarberAppError, NotFoundError
from barberapp.i18n import Message, Notification
from barberapp.logging_config import get_logger
from barberapp.optimistic import OptimisticUpdate
from barberapp.schemas import AppointmentPublic, AppointmentStatus, ServicePublic, ServiceUpdate
from barberapp.validation import validate_service_form, validate_service_patch

logger = get_logger(__name__)


@dataclass
class ActionResult:
    notification: Notification
    record: Optional[Any] = None
    error: Optional[BarberAppError] = None

    @property
    def ok(self) -> bool:
        return self.notification.ok


def error_description(exc: BarberAppError) -> Message:
    if isinstance(exc, NotFoundError):
        return exc.message
    return Message("admin_service.error_generic_desc")


def failure(title_key: str, exc: BarberAppError) -> ActionResult:
    return ActionResult(Notification(Message(title_key), error_description(exc), "destructive"), error=exc)


class AdminServiceManager:

    def __init__(self, catalog: ServiceCatalog, services: Optional[List[ServicePublic]] = None):
        self.catalog = catalog
        self.services: List[ServicePublic] = list(services or [])
        # in-flight toggles only, keyed by service id
        self.actions: Dict[str, OptimisticUpdate] = {}

    def find(self, service_id: str) -> Optional[ServicePublic]:
        return next((s for s in self.services if s.id == service_id), None)

    def _put(self, service: ServicePublic):
        self.services = [service if s.id == service.id else s for s in self.services]

    def _settle(self, service_id: str, action: OptimisticUpdate) -> bool:
        """Forget a finished toggle.

        Returns False when a newer toggle on the same row is still pending;
        its optimistic value must then stay on screen.
        """
        current = self.actions.get(service_id)
        if current is action:
            del self.actions[service_id]
        return current is None or current is action

    async def refresh(self) -> Optional[Notification]:
        try:
            self.services = await self.catalog.list_services()
        except BarberAppError as exc:
            logger.error("service_fetch_failed", error=str(exc))
            return Notification(
                Message("admin_service.fetch_error_title"),
                Message("admin_service.fetch_error_desc"),
                "destructive",
            )
        return None

    async def submit(self, form: Mapping, editing_id: Optional[str] = None) -> ActionResult:
        """Add (``editing_id`` is None) or edit a service from raw form input.

        Edits accept partial input; only the fields sent are changed.

        Raises ServiceValidationError before any store call.
        """
        if editing_id is None:
            data = validate_service_form(form)
        else:
            data = validate_service_patch(form)
        try:
            if editing_id is None:
                saved = await self.catalog.add_service(data)
            else:
                saved = await self.catalog.update_service(editing_id, data)
        except BarberAppError as exc:
            logger.warning("service_submit_failed", editing_id=editing_id, error=str(exc))
            return failure("admin_service.add_error_title" if editing_id is None
                           else "admin_service.update_error_title", exc)

        params = {"service_name": saved.name}
        if editing_id is None:
            self.services.insert(0, saved)
            notification = Notification(Message("admin_service.add_success_title"),
                                        Message("admin_service.add_success_desc", params))
        else:
            self._put(saved)
            notification = Notification(Message("admin_service.update_success_title"),
                                        Message("admin_service.update_success_desc", params))
        return ActionResult(notification, saved)

    async def toggle(self, service_id: str) -> ActionResult:
        """Flip ``active`` locally first, then confirm with the store or roll back."""
        target = self.find(service_id)
        if target is None:
            return failure("admin_service.toggle_error_title", NotFoundError("service", service_id))

        action = OptimisticUpdate()
        self.actions[service_id] = action
        action.begin(target)
        new_active = not target.active
        self._put(target.model_copy(update={"active": new_active}))

        try:
            saved = await self.catalog.update_service(service_id, ServiceUpdate(active=new_active))
        except BarberAppError as exc:
            snapshot = action.rollback()
            if self._settle(service_id, action):
                self._put(snapshot)
            logger.warning("service_toggle_rolled_back", service_id=service_id, error=str(exc))
            return failure("admin_service.toggle_error_title", exc)

        action.commit()
        if self._settle(service_id, action):
            self._put(saved)
        title = ("admin_service.toggle_success_title_activated" if saved.active
                 else "admin_service.toggle_success_title_deactivated")
        status = Message("admin_service.status_active" if saved.active else "admin_service.status_inactive")
        return ActionResult(
            Notification(Message(title), Message("admin_service.toggle_success_desc",
                                                 {"service_name": saved.name, "status": status})),
            saved,
        )

    async def delete(self, service_id: str) -> ActionResult:
        target = self.find(service_id)
        name = target.name if target is not None else service_id
        try:
            await self.catalog.delete_service(service_id)
        except BarberAppError as exc:
            logger.warning("service_delete_failed", service_id=service_id, error=str(exc))
            return failure("admin_service.delete_error_title", exc)

        self.services = [s for s in self.services if s.id != service_id]
        return ActionResult(Notification(
            Message("admin_service.delete_success_title"),
            Message("admin_service.delete_success_desc", {"service_name": name}),
        ), target)


class AdminAppointmentManager:

    def __init__(self, manager: AppointmentManager, appointments: Optional[List[AppointmentPublic]] = None):
        self.manager = manager
        self.appointments: List[AppointmentPublic] = list(appointments or [])

    @property
    def sorted(self) -> List[AppointmentPublic]:
        return sorted_by_date(self.appointments)

    async def refresh(self) -> Optional[Notification]:
        try:
            self.appointments = await self.manager.list_appointments()
        except BarberAppError as exc:
            logger.error("appointment_fetch_failed", error=str(exc))
            return Notification(
                Message("admin_service.fetch_error_title"),
                Message("admin_appointment.fetch_error_desc"),
                "destructive",
            )
        return None

    async def update_status(self, appointment_id: str, new_status) -> ActionResult:
        status = AppointmentStatus(new_status)
        try:
            updated = await self.manager.update_status(appointment_id, status)
        except BarberAppError as exc:
            logger.warning("appointment_status_failed", appointment_id=appointment_id, error=str(exc))
            return failure("admin_appointment.update_error_title", exc)

        self.appointments = [updated if a.id == updated.id else a for a in self.appointments]
        return ActionResult(Notification(
            Message("admin_appointment.update_success_title"),
            Message("admin_appointment.update_success_desc", {
                "appointment_id": appointment_id,
                "new_status": Message(f"admin_appointment.{status.value.lower()}"),
            }),
        ), updated)
