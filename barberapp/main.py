# barberapp/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI

from barberapp.config import config
from barberapp.deps import get_catalog
from barberapp.logging_config import get_logger, setup_logging
from barberapp.routers import appointments_routes, auth_routes, services_routes

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    get_catalog()  # build the stores (and seed SQL storage) on startup
    logger.info("barberapp_started", storage=config.STORAGE, locale=config.DEFAULT_LOCALE)
    yield


app = FastAPI(title="BarberApp", lifespan=lifespan)

app.include_router(auth_routes.router)
app.include_router(services_routes.router)
app.include_router(appointments_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
