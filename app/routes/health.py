"""Health check and status endpoints"""
from fastapi import APIRouter, Depends
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.schemas import HealthCheck
from app.db.session import get_session, ping
from app.core.config import settings

router = APIRouter(tags=["Health"])


@router.get("/", summary="Root Endpoint")
async def root():
    """Root endpoint - API welcome message"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health",
        "users": f"{settings.API_V1_PREFIX}/users"
    }


@router.get("/health", response_model=HealthCheck, summary="Health Check")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    Check API health and database availability.

    **Returns:**
    - Service status (`healthy` or `degraded`)
    - Whether the database answered
    - API version
    - Current timestamp
    """
    connected = await ping(session)
    return HealthCheck(
        status="healthy" if connected else "degraded",
        timestamp=datetime.now(timezone.utc),
        database_connected=connected,
        version=settings.VERSION
    )


@router.get("/status", summary="Detailed Status")
async def status(session: AsyncSession = Depends(get_session)):
    """Service status with database and endpoint details."""
    connected = await ping(session)

    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "operational" if connected else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {
            "connected": connected,
            "dialect": session.bind.dialect.name
        },
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "users": f"{settings.API_V1_PREFIX}/users"
        }
    }
