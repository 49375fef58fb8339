"""
Main application for FindClo billing service
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from findclo.core.config.settings import settings
from findclo.core.database import (
    check_engine_health,
    close_engine,
    reset_session_factory,
)
from findclo.core.exceptions import DatabaseConnectionError
from findclo.core.logging import get_logger
from findclo.domains.billing.api import router as billing_router
from findclo.domains.billing.api.error_handlers import register_exception_handlers
from findclo.shared.helpers import now_utc

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Checking database connectivity...")
    if not await check_engine_health():
        raise DatabaseConnectionError("Database is not available")
    logger.info("Database connection verified")

    yield

    await close_engine()
    reset_session_factory()
    logger.info("Database engine closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Usage-based billing for FindClo marketplace brands",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.include_router(billing_router)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Service and database health"""
    database_ok = await check_engine_health()
    return {
        "status": "healthy" if database_ok else "degraded",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "timestamp": now_utc().isoformat(),
        "checks": {"database": database_ok},
    }


if __name__ == "__main__":
    uvicorn.run(
        "findclo.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
