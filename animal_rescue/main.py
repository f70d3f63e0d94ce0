"""Animal Rescue backend - FastAPI entry point."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from . import config
from .database import init_db, seed_db
from .logging_config import configure_logging
from .middleware import AuthMiddleware
from .routes.animals import router as animals_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging(config.LOG_LEVEL, json_logs=config.JSON_LOGS)
    init_db()
    if config.SEED_DATA:
        seed_db()
    logger.info("application_started")
    yield
    logger.info("application_stopped")


app = FastAPI(title="Animal Rescue", lifespan=lifespan)

app.add_middleware(AuthMiddleware)

app.include_router(animals_router)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}
