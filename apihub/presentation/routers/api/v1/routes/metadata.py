"""Route metadata types.

Every v1 endpoint is described by one RouteMetadata entry in
registry.py; generator.py turns the entries into FastAPI routes with
their OpenAPI documentation.

Usage:
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews",
        handler=create_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Create review",
        response_model=ReviewResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        errors=[ErrorSpec(status=404, description="API or user not found")],
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """Verbs served by the v1 router (outbound test requests use HttpMethod)."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """Idempotency class of an endpoint (RFC 9110 section 9.2)."""

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Documented error response of an endpoint.

    model defaults to ProblemDetails when left empty.
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """One v1 endpoint.

    Attributes:
        method: HTTP verb.
        path: Path below the v1 prefix, e.g. "/apis/{api_id}/reviews".
        handler: Async endpoint function from the resource module.
        resource: Resource the endpoint belongs to ("apis", "api-keys", ...).
        tags: OpenAPI tags.
        summary: One-line OpenAPI summary.
        description: Longer OpenAPI description.
        operation_id: Stable OpenAPI operation id.
        response_model: Success body model; None for 204 responses.
        status_code: Success status.
        errors: Documented error responses.
        idempotency: Whether repeating the call changes state.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]
    resource: str
    tags: Sequence[str]
    summary: str
    idempotency: IdempotencyLevel
    description: str | None = None
    operation_id: str | None = None
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None
