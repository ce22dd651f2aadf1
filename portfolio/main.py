"""
FastAPI Application - Resume Site Contact Service
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.config import settings
from portfolio.database import Base, engine, ensure_sqlite_directory, get_db
from portfolio.middleware.security import SecurityHeadersMiddleware
from portfolio.models.contact import ContactMessage  # noqa: F401 - needed for metadata
from portfolio.observability.logging import configure_logging
from portfolio.routers.contact import router as contact_router

logger = logging.getLogger(__name__)


def init_database() -> None:
    ensure_sqlite_directory(settings.resolved_database_url)
    Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting contact service (environment=%s)", settings.environment)
    init_database()
    yield
    logger.info("Shutting down contact service")


configure_logging(settings.log_level.upper(), json_format=settings.is_production)
IS_PROD = settings.is_production

app = FastAPI(
    title="Resume Contact Service",
    description="Contact form endpoint for the resume website",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None if IS_PROD else "/docs",
    redoc_url=None if IS_PROD else "/redoc",
    openapi_url=None if IS_PROD else "/openapi.json",
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")
# CORS: strict allowlist
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Accept", "Content-Type"],
    )


@app.get("/healthz", tags=["system"], summary="Health check", response_model=dict)
def health_check(db: Session = Depends(get_db)) -> dict:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Health check failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="unhealthy"
        ) from exc
    if IS_PROD:
        return {"status": "healthy"}
    return {"status": "healthy", "database": "connected", "version": app.version}


app.include_router(contact_router)
