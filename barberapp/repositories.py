# barberapp/repositories.py

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from barberapp.models import Appointment as AppointmentModel, Service as ServiceModel
from barberapp.schemas import AppointmentPublic, ServicePublic


class ServiceRepository(ABC):
    """Storage behind the service catalog, ordered most-recent-first."""

    @abstractmethod
    def list(self) -> List[ServicePublic]: ...

    @abstractmethod
    def get(self, service_id: str) -> Optional[ServicePublic]: ...

    @abstractmethod
    def insert_first(self, service: ServicePublic) -> ServicePublic: ...

    @abstractmethod
    def replace(self, service: ServicePublic) -> bool: ...

    @abstractmethod
    def delete(self, service_id: str) -> bool: ...

    def exists(self, service_id: str) -> bool:
        return self.get(service_id) is not None


class AppointmentRepository(ABC):

    @abstractmethod
    def list(self) -> List[AppointmentPublic]: ...

    @abstractmethod
    def get(self, appointment_id: str) -> Optional[AppointmentPublic]: ...

    @abstractmethod
    def add(self, appointment: AppointmentPublic) -> AppointmentPublic: ...

    @abstractmethod
    def replace(self, appointment: AppointmentPublic) -> bool: ...


class InMemoryServiceRepository(ServiceRepository):

    def __init__(self, seed: Iterable[dict] = ()):
        self._services: List[ServicePublic] = [ServicePublic(**item) for item in seed]

    def list(self) -> List[ServicePublic]:
        # copies, so callers cannot mutate store state
        return [s.model_copy() for s in self._services]

    def get(self, service_id: str) -> Optional[ServicePublic]:
        for s in self._services:
            if s.id == service_id:
                return s.model_copy()
        return None

    def insert_first(self, service: ServicePublic) -> ServicePublic:
        self._services.insert(0, service.model_copy())
        return service.model_copy()

    def replace(self, service: ServicePublic) -> bool:
        for i, s in enumerate(self._services):
            if s.id == service.id:
                self._services[i] = service.model_copy()
                return True
        return False

    def delete(self, service_id: str) -> bool:
        before = len(self._services)
        self._services = [s for s in self._services if s.id != service_id]
        return len(self._services) != before


class InMemoryAppointmentRepository(AppointmentRepository):

    def __init__(self, seed: Iterable[dict] = ()):
        self._appointments: List[AppointmentPublic] = [AppointmentPublic(**item) for item in seed]

    def list(self) -> List[AppointmentPublic]:
        return [a.model_copy() for a in self._appointments]

    def get(self, appointment_id: str) -> Optional[AppointmentPublic]:
        for a in self._appointments:
            if a.id == appointment_id:
                return a.model_copy()
        return None

    def add(self, appointment: AppointmentPublic) -> AppointmentPublic:
        self._appointments.append(appointment.model_copy())
        return appointment.model_copy()

    def replace(self, appointment: AppointmentPublic) -> bool:
        for i, a in enumerate(self._appointments):
            if a.id == appointment.id:
                self._appointments[i] = appointment.model_copy()
                return True
        return False


class SqlServiceRepository(ServiceRepository):

    def __init__(self, engine):
        self.engine = engine

    def seed(self, items: Iterable[dict]):
        """Insert ``items`` in listing order when the table is empty."""
        items = list(items)
        with Session(self.engine) as session:
            if session.exec(select(ServiceModel)).first() is not None:
                return
            for idx, item in enumerate(items):
                session.add(ServiceModel(**item, position=len(items) - idx))
            session.commit()

    def list(self) -> List[ServicePublic]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(ServiceModel).order_by(ServiceModel.position.desc())
            ).all()
            return [ServicePublic.model_validate(row) for row in rows]

    def get(self, service_id: str) -> Optional[ServicePublic]:
        with Session(self.engine) as session:
            row = session.get(ServiceModel, service_id)
            return ServicePublic.model_validate(row) if row is not None else None

    def insert_first(self, service: ServicePublic) -> ServicePublic:
        with Session(self.engine) as session:
            top = session.exec(select(func.max(ServiceModel.position))).one()
            row = ServiceModel(**service.model_dump(), position=(top or 0) + 1)
            session.add(row)
            session.commit()
            session.refresh(row)
            return ServicePublic.model_validate(row)

    def replace(self, service: ServicePublic) -> bool:
        with Session(self.engine) as session:
            row = session.get(ServiceModel, service.id)
            if row is None:
                return False
            for key, value in service.model_dump(exclude={"id"}).items():
                setattr(row, key, value)
            session.add(row)
            session.commit()
            return True

    def delete(self, service_id: str) -> bool:
        with Session(self.engine) as session:
            row = session.get(ServiceModel, service_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True


class SqlAppointmentRepository(AppointmentRepository):

    def __init__(self, engine):
        self.engine = engine

    def seed(self, items: Iterable[dict]):
        with Session(self.engine) as session:
            if session.exec(select(AppointmentModel)).first() is not None:
                return
            for item in items:
                session.add(AppointmentModel(**item))
            session.commit()

    def list(self) -> List[AppointmentPublic]:
        with Session(self.engine) as session:
            rows = session.exec(select(AppointmentModel)).all()
            return [AppointmentPublic.model_validate(row) for row in rows]

    def get(self, appointment_id: str) -> Optional[AppointmentPublic]:
        with Session(self.engine) as session:
            row = session.get(AppointmentModel, appointment_id)
            return AppointmentPublic.model_validate(row) if row is not None else None

    def add(self, appointment: AppointmentPublic) -> AppointmentPublic:
        with Session(self.engine) as session:
            row = AppointmentModel(**appointment.model_dump(mode="json"))
            session.add(row)
            session.commit()
            session.refresh(row)
            return AppointmentPublic.model_validate(row)

    def replace(self, appointment: AppointmentPublic) -> bool:
        with Session(self.engine) as session:
            row = session.get(AppointmentModel, appointment.id)
            if row is None:
                return False
            for key, value in appointment.model_dump(mode="json", exclude={"id"}).items():
                setattr(row, key, value)
            session.add(row)
            session.commit()
            return True
