"""Serverless entry point: exposes the FastAPI ``app`` to the hosting runtime."""

import logging

from app.core.config import get_settings
from app.main import app

# Serverless hosts may skip the lifespan hook, so logging is configured here too
logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

logger.info("Movie catalog entry point loaded (database: %s)", get_settings().database_url.split(":", 1)[0])

__all__ = ["app"]
