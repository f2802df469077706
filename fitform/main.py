"""
FastAPI application factory.

Creates and configures the FastAPI application instance.  On startup the
database tables are created, any day rollover missed while the process
was down is applied, and the midnight scheduler is armed.
"""

import datetime
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session

from fitform.api.v1.router import api_router
from fitform.core.config import settings
from fitform.core.logging_config import setup_logging
from fitform.db.init_db import init_db
from fitform.db.session import engine
from fitform.session.scheduler import MidnightScheduler
from fitform.session.state import SessionManager, session_lock
from fitform.storage.sql import SQLModelStore

logger = logging.getLogger(__name__)


def run_rollover() -> bool:
    """Apply the day rollover against the database."""
    with session_lock, Session(engine) as db:
        return SessionManager.from_store(SQLModelStore(db)).roll_over()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    run_rollover()

    scheduler = None
    if settings.MIDNIGHT_SCHEDULER_ENABLED:
        scheduler = MidnightScheduler(run_rollover)
        scheduler.start()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    if scheduler is not None:
        scheduler.cancel()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Workout session, streak and AI plan backend.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "FitForm AI API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "OK",
        "service": "fitform-api",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat()
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
