# barberapp/core.py

import asyncio
import random
import re
import secrets
import time
import unicodedata
from datetime import date, datetime, time as dt_time, timezone
from typing import Any, Optional

from barberapp.config import config
from barberapp.errors import TransientError


class LatencyPolicy:
    """Simulated network latency (and optional failures) for store calls."""

    def __init__(self, min_delay: float = 0.15, max_delay: float = 0.5,
                 failure_rate: float = 0.0, rng: Optional[random.Random] = None):
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError("expected 0 <= min_delay <= max_delay")
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()

    @classmethod
    def none(cls) -> "LatencyPolicy":
        return cls(0.0, 0.0)

    @classmethod
    def from_config(cls) -> "LatencyPolicy":
        return cls(
            config.LATENCY_MIN_MS / 1000,
            config.LATENCY_MAX_MS / 1000,
            config.LATENCY_FAILURE_RATE,
        )

    async def wait(self, operation: str = "request"):
        delay = self.rng.uniform(self.min_delay, self.max_delay)
        if delay > 0:
            await asyncio.sleep(delay)
        if self.failure_rate and self.rng.random() < self.failure_rate:
            raise TransientError(operation)


def new_record_id(prefix: str) -> str:
    # nanosecond timestamp + random suffix
    return f"{prefix}-{time.time_ns()}-{secrets.token_hex(3)}"


def normalize_category(category: Optional[str]) -> str:
    """Grouping key for a free-text category: "Cuidados Básicos" -> "cuidados_basicos"."""
    key = (category or "other_services").strip().lower()
    key = unicodedata.normalize("NFD", key)
    key = "".join(ch for ch in key if not unicodedata.combining(ch))
    key = re.sub(r"\s+", "_", key)
    key = re.sub(r"[^\w-]+", "", key)
    return key or "other_services"


def parse_appointment_date(value: Any) -> Optional[datetime]:
    """Parse an appointment timestamp as an aware UTC datetime.

    Returns None for anything that is not a valid date instead of raising.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, dt_time.min)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
