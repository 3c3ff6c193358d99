"""API key vault resource handlers.

Handlers:
    list_api_keys         - Stored keys (metadata only)
    create_api_key        - Encrypt and store a key
    get_api_key           - One key (metadata only)
    update_api_key        - Partial update
    delete_api_key        - Remove a key
    reveal_api_key        - Decrypt a key, recording the use
    list_api_key_services - Services with their key count
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from apihub.application.commands.api_key_commands import (
    CreateApiKey,
    DeleteApiKey,
    RevealApiKey,
    UpdateApiKey,
)
from apihub.application.commands.handlers.api_key_handlers import (
    CreateApiKeyHandler,
    DeleteApiKeyHandler,
    RevealApiKeyHandler,
    UpdateApiKeyHandler,
)
from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.application.queries.api_key_queries import (
    GetApiKey,
    ListApiKeys,
    ListApiKeyServices,
)
from apihub.application.queries.handlers.api_key_handlers import (
    GetApiKeyHandler,
    ListApiKeyServicesHandler,
    ListApiKeysHandler,
)
from apihub.core.container import (
    get_create_api_key_handler,
    get_delete_api_key_handler,
    get_get_api_key_handler,
    get_list_api_key_services_handler,
    get_list_api_keys_handler,
    get_reveal_api_key_handler,
    get_update_api_key_handler,
)
from apihub.core.result import Failure
from apihub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from apihub.presentation.routers.api.v1.errors import ErrorResponseBuilder
from apihub.schemas.api_key_schemas import (
    ApiKeyCreateRequest,
    ApiKeyListResponse,
    ApiKeyResponse,
    ApiKeyServiceListResponse,
    ApiKeyUpdateRequest,
    RevealedApiKeyResponse,
)
from apihub.schemas.common_schemas import GroupCountResponse


# =============================================================================
# Error Mapping (String → ApplicationError)
# =============================================================================


def _map_api_key_error(error: str) -> ApplicationError:
    """Map handler string error to ApplicationError.

    Args:
        error: Error string from handler.

    Returns:
        ApplicationError with appropriate code and message.
    """
    error_lower = error.lower()

    if "not found" in error_lower:
        return ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message=error)
    if "must be" in error_lower or "required" in error_lower:
        return ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=error,
        )

    # Encryption and decryption failures
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message=error,
    )


def _error_response(request: Request, error: str) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=_map_api_key_error(error),
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Handlers
# =============================================================================


async def list_api_keys(
    request: Request,
    service: Annotated[str | None, Query(description="Exact service")] = None,
    environment: Annotated[str | None, Query(description="Exact environment")] = None,
    handler: ListApiKeysHandler = Depends(get_list_api_keys_handler),
) -> ApiKeyListResponse | JSONResponse:
    """List stored keys, newest first.

    GET /api/v1/api-keys → 200 OK
    """
    result = await handler.handle(
        ListApiKeys(service=service or None, environment=environment or None)
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return ApiKeyListResponse.from_dto(result.value)


async def create_api_key(
    request: Request,
    data: ApiKeyCreateRequest,
    handler: CreateApiKeyHandler = Depends(get_create_api_key_handler),
) -> ApiKeyResponse | JSONResponse:
    """Encrypt and store a key.

    POST /api/v1/api-keys → 201 Created

    Args:
        request: FastAPI request object.
        data: Key to store.
        handler: Create API key handler (injected).

    Returns:
        ApiKeyResponse (no secret).
        JSONResponse with RFC 9457 error on failure.
    """
    result = await handler.handle(
        CreateApiKey(
            name=data.name,
            service=data.service,
            key=data.key,
            environment=data.environment,
            expires_at=data.expires_at,
        )
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return ApiKeyResponse.from_dto(result.value)


async def get_api_key(
    request: Request,
    api_key_id: Annotated[UUID, Path(description="API key UUID")],
    handler: GetApiKeyHandler = Depends(get_get_api_key_handler),
) -> ApiKeyResponse | JSONResponse:
    """Get one stored key.

    GET /api/v1/api-keys/{api_key_id} → 200 OK
    """
    result = await handler.handle(GetApiKey(api_key_id=api_key_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return ApiKeyResponse.from_dto(result.value)


async def update_api_key(
    request: Request,
    api_key_id: Annotated[UUID, Path(description="API key UUID")],
    data: ApiKeyUpdateRequest,
    handler: UpdateApiKeyHandler = Depends(get_update_api_key_handler),
) -> ApiKeyResponse | JSONResponse:
    """Update a stored key.

    PATCH /api/v1/api-keys/{api_key_id} → 200 OK
    """
    result = await handler.handle(
        UpdateApiKey(
            api_key_id=api_key_id,
            name=data.name,
            key=data.key,
            environment=data.environment,
            expires_at=data.expires_at,
        )
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return ApiKeyResponse.from_dto(result.value)


async def delete_api_key(
    request: Request,
    api_key_id: Annotated[UUID, Path(description="API key UUID")],
    handler: DeleteApiKeyHandler = Depends(get_delete_api_key_handler),
) -> Response:
    """Delete a stored key.

    DELETE /api/v1/api-keys/{api_key_id} → 204 No Content
    """
    result = await handler.handle(DeleteApiKey(api_key_id=api_key_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def reveal_api_key(
    request: Request,
    api_key_id: Annotated[UUID, Path(description="API key UUID")],
    handler: RevealApiKeyHandler = Depends(get_reveal_api_key_handler),
) -> RevealedApiKeyResponse | JSONResponse:
    """Decrypt a stored key and record the use.

    POST /api/v1/api-keys/{api_key_id}/reveals → 200 OK
    """
    result = await handler.handle(RevealApiKey(api_key_id=api_key_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return RevealedApiKeyResponse.from_dto(result.value)


async def list_api_key_services(
    request: Request,
    handler: ListApiKeyServicesHandler = Depends(get_list_api_key_services_handler),
) -> ApiKeyServiceListResponse | JSONResponse:
    """List services that have stored keys.

    GET /api/v1/api-key-services → 200 OK
    """
    result = await handler.handle(ListApiKeyServices())

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return ApiKeyServiceListResponse(
        items=[GroupCountResponse.from_dto(group) for group in result.value]
    )
