"""Health resource handler."""

from apihub.core.config import settings
from apihub.schemas.common_schemas import HealthResponse


async def get_health() -> HealthResponse:
    """Liveness probe.

    GET /api/v1/health → 200 OK
    """
    return HealthResponse(status="healthy", version=settings.app_version)
