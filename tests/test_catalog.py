"""Tests for the service catalog store."""
import pytest
from structlog.testing import capture_logs

from barberapp.catalog import ServiceCatalog, services_by_category
from barberapp.core import LatencyPolicy
from barberapp.data import SERVICES
from barberapp.errors import NotFoundError, ServiceValidationError, TransientError
from barberapp.repositories import InMemoryServiceRepository
from barberapp.schemas import ServiceCreate

CLASSIC_CUT = {
    "name": "Classic Cut",
    "description": "A classic cut",
    "duration": 30,
    "price": 25,
    "category": "Haircuts",
}


@pytest.mark.asyncio
async def test_list_returns_snapshot(catalog):
    """Mutating the returned list or records must not change the store."""
    services = await catalog.list_services()
    services[0].name = "Changed"
    services.clear()

    fresh = await catalog.list_services()
    assert len(fresh) == len(SERVICES)
    assert fresh[0].name == "Classic Haircut"


@pytest.mark.asyncio
async def test_get_service(catalog):
    assert (await catalog.get_service("3")).name == "Hot Towel Shave"
    assert await catalog.get_service("does-not-exist") is None


@pytest.mark.asyncio
async def test_list_active_hides_inactive(catalog):
    active = await catalog.list_active_services()
    assert "9" not in {s.id for s in active}
    assert len(active) == len(SERVICES) - 1


class TestAddService:

    @pytest.mark.asyncio
    async def test_ids_unique_and_newest_first(self, catalog):
        created = []
        for i in range(5):
            created.append(await catalog.add_service({**CLASSIC_CUT, "name": f"Cut number {i}"}))

        ids = [s.id for s in created]
        assert len(set(ids)) == 5
        assert not set(ids) & {s["id"] for s in SERVICES}

        listed = await catalog.list_services()
        assert [s.id for s in listed[:5]] == list(reversed(ids))
        assert listed[5].id == "1"

    @pytest.mark.asyncio
    async def test_accepts_validated_model(self, catalog):
        created = await catalog.add_service(ServiceCreate(**CLASSIC_CUT, active=False))
        assert created.active is False

    @pytest.mark.asyncio
    async def test_invalid_payload_never_reaches_store(self, catalog):
        with pytest.raises(ServiceValidationError):
            await catalog.add_service({**CLASSIC_CUT, "name": "ab"})
        assert len(await catalog.list_services()) == len(SERVICES)


class TestUpdateService:

    @pytest.mark.asyncio
    async def test_update_is_a_merge(self, catalog):
        before = await catalog.get_service("1")
        updated = await catalog.update_service("1", {"active": False})

        assert updated.active is False
        assert updated.model_dump(exclude={"active"}) == before.model_dump(exclude={"active"})
        assert (await catalog.get_service("1")).active is False

    @pytest.mark.asyncio
    async def test_missing_id_raises_not_found(self, catalog):
        with pytest.raises(NotFoundError) as exc_info:
            await catalog.update_service("does-not-exist", {"name": "Ghost Cut"})
        assert exc_info.value.record_id == "does-not-exist"
        assert await catalog.get_service("does-not-exist") is None
        assert len(await catalog.list_services()) == len(SERVICES)

    @pytest.mark.asyncio
    async def test_id_cannot_be_patched(self, catalog):
        updated = await catalog.update_service("2", {"id": "other", "price": "21.50"})
        assert updated.id == "2"
        assert updated.price == 21.5
        assert await catalog.get_service("other") is None


class TestDeleteService:

    @pytest.mark.asyncio
    async def test_delete_twice(self, catalog):
        await catalog.delete_service("4")
        with capture_logs() as logs:
            await catalog.delete_service("4")

        assert len(await catalog.list_services()) == len(SERVICES) - 1
        assert any(
            entry["event"] == "delete_missing_service" and entry["log_level"] == "warning"
            for entry in logs
        )


@pytest.mark.asyncio
async def test_transient_failure_propagates():
    flaky = ServiceCatalog(InMemoryServiceRepository(SERVICES), LatencyPolicy(0, 0, failure_rate=1.0))
    with pytest.raises(TransientError):
        await flaky.list_services()


@pytest.mark.asyncio
async def test_add_then_deactivate_scenario(catalog):
    created = await catalog.add_service(CLASSIC_CUT)
    assert created.active is True

    listed = await catalog.list_services()
    assert listed[0].id == created.id

    await catalog.update_service(created.id, {"active": False})
    after = {s.id: s for s in await catalog.list_services()}
    assert after[created.id].active is False
    for original in listed[1:]:
        assert after[original.id] == original


@pytest.mark.asyncio
async def test_services_by_category(catalog):
    services = await catalog.list_active_services()
    groups = services_by_category(services)

    assert list(groups) == ["beard_care", "haircuts", "shaves", "styling"]
    assert groups["beard_care"]["name"] == "Beard Care"
    assert [s.id for s in groups["haircuts"]["services"]] == ["1", "5", "8", "10"]
