"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from riskgate.api.dependencies import get_classifier
from riskgate.api.routers import api_router
from riskgate.config.settings import get_settings
from riskgate.infrastructure.logging.logger import setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    # Resolve the classifier config eagerly so a bad config file fails at startup
    classifier = get_classifier()
    if not classifier.config.active:
        logger.warning("Classifier is inactive, all text will be accepted")

    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(
    title="RiskGate",
    description="Layered heuristic text-risk classifier",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")
