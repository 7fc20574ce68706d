"""Application lifespan: startup and shutdown.

Startup configures logging; shutdown disposes the SQL engine if one was
created. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from bizdirectory.core.config import get_settings
from bizdirectory.infrastructure.persistence import database
from bizdirectory.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()
    logger.info("%s %s starting", settings.app_name, settings.app_version)

    yield

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
