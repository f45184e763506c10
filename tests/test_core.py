"""Tests for latency policy, ids, category keys and date parsing."""
import random
from datetime import date, datetime, timedelta, timezone

import pytest

from barberapp import core
from barberapp.catalog import ServiceCatalog
from barberapp.core import LatencyPolicy, new_record_id, normalize_category, parse_appointment_date
from barberapp.data import SERVICES
from barberapp.errors import TransientError
from barberapp.repositories import InMemoryServiceRepository
from barberapp.schemas import ServiceUpdate


class TestLatencyPolicy:

    @pytest.mark.asyncio
    async def test_none_never_fails(self):
        await LatencyPolicy.none().wait()

    @pytest.mark.asyncio
    async def test_failure_rate_one_always_fails(self):
        policy = LatencyPolicy(0, 0, failure_rate=1.0)
        with pytest.raises(TransientError):
            await policy.wait("list_services")

    def test_rejects_bad_bounds(self):
        with pytest.raises(ValueError):
            LatencyPolicy(0.5, 0.1)
        with pytest.raises(ValueError):
            LatencyPolicy(0, 0, failure_rate=2)

    @pytest.mark.asyncio
    async def test_store_calls_wait_within_bounds(self, monkeypatch):
        """Every store call sleeps once for a delay drawn from the policy range."""
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr(core.asyncio, "sleep", fake_sleep)
        catalog = ServiceCatalog(InMemoryServiceRepository(SERVICES),
                                 LatencyPolicy(0.15, 0.5, rng=random.Random(7)))

        services = await catalog.list_services()
        assert len(services) == len(SERVICES)
        assert len(delays) == 1
        assert 0.15 <= delays[0] <= 0.5

        await catalog.update_service("1", ServiceUpdate(active=False))
        assert len(delays) == 2
        assert 0.15 <= delays[1] <= 0.5


def test_record_ids_are_unique():
    ids = {new_record_id("service") for _ in range(500)}
    assert len(ids) == 500
    assert all(i.startswith("service-") for i in ids)


@pytest.mark.parametrize("category, key", [
    ("Haircuts", "haircuts"),
    ("Beard Care", "beard_care"),
    ("Cuidados Básicos", "cuidados_basicos"),
    ("  Corte & Barba ", "corte__barba"),
    ("", "other_services"),
    (None, "other_services"),
])
def test_normalize_category(category, key):
    assert normalize_category(category) == key


def test_accented_variants_share_a_key():
    assert normalize_category("Barbeação") == normalize_category("Barbeacao")


class TestParseAppointmentDate:

    def test_zulu_timestamp(self):
        parsed = parse_appointment_date("2024-09-15T10:00:00Z")
        assert parsed == datetime(2024, 9, 15, 10, 0, tzinfo=timezone.utc)

    def test_date_only_is_midnight_utc(self):
        assert parse_appointment_date("2024-01-02") == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self):
        parsed = parse_appointment_date("2024-09-15T12:00:00+02:00")
        assert parsed == datetime(2024, 9, 15, 10, 0, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_naive_datetime_anchored_to_utc(self):
        assert parse_appointment_date(datetime(2024, 1, 1, 9)).tzinfo == timezone.utc

    def test_date_object(self):
        assert parse_appointment_date(date(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["not-a-date", "", "2024-13-45", None, 12345, object()])
    def test_invalid_input_returns_none(self, value):
        assert parse_appointment_date(value) is None
