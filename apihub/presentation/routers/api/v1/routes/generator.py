"""Route generator for the API route registry.

Usage:
    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter

from apihub.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from apihub.presentation.routers.api.v1.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: APIRouter to register routes on
        registry: RouteMetadata entries

    Raises:
        ValueError: If two entries share the same method and path.
    """
    seen: set[tuple[str, str]] = set()

    for metadata in registry:
        key = (metadata.method.value, metadata.path)
        if key in seen:
            msg = f"Duplicate route in registry: {key[0]} {key[1]}"
            raise ValueError(msg)
        seen.add(key)

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI responses dict from error specifications.

    Every error is documented with the ProblemDetails model unless the spec
    names its own.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="API not found")])
        {404: {'description': 'API not found', 'model': ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
