# /icp_assistant/utils/lifecycle.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from icp_assistant.utils.logging import setup_logging
from icp_assistant.services.ai_service import ai_service
from icp_assistant.services.conversation_store import conversation_store
from icp_assistant.config.settings import settings

# This file manages the application's lifespan, handling startup tasks like
# logging setup and shutdown tasks like closing the Redis connection pool.

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    setup_logging()

    logger.info(f"ICP onboarding assistant starting up ({settings.environment})...")
    if not ai_service.is_configured:
        logger.warning("No AI provider configured; text classification will use local fallbacks.")

    logger.info("Application startup complete. Ready to accept requests.")

    yield  # Application is now running

    logger.info("Application shutting down...")
    await conversation_store.close()
