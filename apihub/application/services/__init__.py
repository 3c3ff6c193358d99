"""Application services."""

from apihub.application.services.request_normalizer import (
    build_auth_header,
    is_absolute_url,
    merge_headers,
    normalize_request,
    with_query_params,
)

__all__ = [
    "build_auth_header",
    "is_absolute_url",
    "merge_headers",
    "normalize_request",
    "with_query_params",
]
