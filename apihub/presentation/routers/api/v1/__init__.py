"""API v1 routers.

All routes are generated from ROUTE_REGISTRY (routes/registry.py).

Resources:
    /api/v1/apis               - Catalog, detail, featured, comparisons
    /api/v1/apis/{id}/reviews  - Reviews of one API
    /api/v1/categories         - Categories with counts
    /api/v1/reviews            - Review creation and votes
    /api/v1/test-requests      - Outbound test requests
    /api/v1/history            - Request history
    /api/v1/api-keys           - API key vault
    /api/v1/api-key-services   - Services with stored keys
    /api/v1/health             - Liveness
"""

from fastapi import APIRouter

from apihub.core.config import settings
from apihub.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from apihub.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
