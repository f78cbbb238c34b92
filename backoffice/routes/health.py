"""Health check endpoints."""
from datetime import datetime
from typing import Dict, Any
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice import __version__
from backoffice.adapters.base import ProviderRegistry
from backoffice.config import settings
from backoffice.deps import get_request_id, get_db
from backoffice.storage.db import check_db_connection
from backoffice.app_logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/ping")
async def ping(request_id: str = Depends(get_request_id)) -> Dict[str, Any]:
    """Simple health check."""
    logger.debug(f"Health check requested - request_id: {request_id}")
    return {
        "status": "ok",
        "message": "Competition back-office API is running",
        "timestamp": datetime.utcnow().isoformat(),
        "version": __version__,
        "environment": settings.ENVIRONMENT,
    }


@router.get("/health")
def health(
    request_id: str = Depends(get_request_id),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """Detailed health check."""
    database_ok = check_db_connection(db)
    provider_ok = settings.WEATHER_PROVIDER in ProviderRegistry.list_providers()
    health_status = {
        "status": "healthy" if database_ok and provider_ok else "degraded",
        "timestamp": datetime.utcnow().isoformat(),
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "services": {
            "api": "healthy",
            "database": "healthy" if database_ok else "unhealthy",
            "weather_provider": settings.WEATHER_PROVIDER if provider_ok else "unknown",
        },
    }

    status_value = health_status["status"]
    logger.info(f"Health check completed - {status_value}", extra={"request_id": request_id})
    return health_status
