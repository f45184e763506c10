"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from barberapp.appointments import AppointmentManager
from barberapp.catalog import ServiceCatalog
from barberapp.core import LatencyPolicy
from barberapp.data import APPOINTMENTS, SERVICES
from barberapp.deps import get_appointment_manager, get_catalog
from barberapp.main import app
from barberapp.repositories import InMemoryAppointmentRepository, InMemoryServiceRepository


@pytest.fixture
def catalog() -> ServiceCatalog:
    """Catalog over fresh seed data with no simulated latency."""
    return ServiceCatalog(InMemoryServiceRepository(SERVICES), LatencyPolicy.none())


@pytest.fixture
def appointment_manager() -> AppointmentManager:
    return AppointmentManager(InMemoryAppointmentRepository(APPOINTMENTS), LatencyPolicy.none())


@pytest.fixture
def client(catalog, appointment_manager):
    """FastAPI test client wired to the fixture stores."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_appointment_manager] = lambda: appointment_manager
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    response = client.post("/auth/login", data={"username": "admin@admin.com", "password": "123123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
