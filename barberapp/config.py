# barberapp/config.py

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration from environment variables."""

    # Storage backend: "memory" (seeded mock data) or "sql"
    STORAGE: str = os.getenv("BARBERAPP_STORAGE", "memory")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./barber.db")

    # Simulated network latency for store operations
    LATENCY_MIN_MS: int = int(os.getenv("LATENCY_MIN_MS", "150"))
    LATENCY_MAX_MS: int = int(os.getenv("LATENCY_MAX_MS", "500"))
    LATENCY_FAILURE_RATE: float = float(os.getenv("LATENCY_FAILURE_RATE", "0"))

    # Localization
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Admin login (hardcoded credential check)
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@admin.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "123123")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me-later")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))


config = Config()
