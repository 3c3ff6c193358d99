"""System router for non-versioned endpoints (root, health, config)."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from apihub.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service banner."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check for load balancers."""
    return {"status": "healthy"}


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Sanitized configuration (development only).

    Returns:
        JSONResponse: Configuration details, or 403 outside development.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "database": {
                "url": "<redacted>",
                "echo": settings.db_echo,
            },
            "cors": {
                "origins": settings.cors_origin_list,
                "allow_credentials": settings.cors_allow_credentials,
            },
            "test_requests": {
                "follow_redirects": settings.test_request_follow_redirects,
            },
        }
    )
