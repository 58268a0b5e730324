from fastapi import APIRouter, Request

from api.dependencies.rate_limits import SYSTEM_RATE_LIMIT, get_limiter
from infrastructure.services import SettingsDep, get_services

router = APIRouter(tags=["System"])
limiter = get_limiter()


@router.get("/version")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_health(request: Request):
    """Healthcheck endpoint with database and cache status."""
    services = get_services(request)
    connected = services.database.is_connected
    return {
        "status": "ok" if connected else "degraded",
        "database": {"connected": connected},
        "cache": services.cache.get_stats(),
    }
