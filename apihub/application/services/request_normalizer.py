"""Request normalizer.

Turns the loosely-structured form data of a test request (method, URL,
header rows, query parameter rows, auth selection, body, timeout) into a
single immutable RequestDescriptor. Pure functions only: no I/O, no
logging, no clock.

Rules:
    - Method is required and must be one of the seven supported verbs
      (case-insensitive).
    - URL is required. Enabled query parameters with a non-empty key are
      appended in order, percent-encoded. A URL that cannot be parsed as
      absolute is returned unchanged; rejecting it is the caller's job
      (see is_absolute_url).
    - Header rows are applied in order, skipping disabled rows and blank
      keys. A later header replaces an earlier one with the same name
      (case-insensitive). The auth-derived header is applied last.
    - Body is kept only for POST, PUT and PATCH.
    - Timeout defaults to 30s and is clamped to [1s, 60s].

Usage:
    match normalize_request(method="get", url="https://api.example.com"):
        case Success(value=descriptor):
            ...
        case Failure(error=validation_error):
            ...
"""

import base64
from collections.abc import Iterable
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from apihub.core.constants import (
    API_KEY_HEADER,
    AUTHORIZATION_HEADER,
    TEST_REQUEST_TIMEOUT_DEFAULT_MS,
    TEST_REQUEST_TIMEOUT_MAX_MS,
    TEST_REQUEST_TIMEOUT_MIN_MS,
)
from apihub.core.enums import ErrorCode
from apihub.core.errors import ValidationError
from apihub.core.result import Failure, Result, Success
from apihub.domain.enums import AuthScheme, HttpMethod
from apihub.domain.value_objects import (
    AuthSpec,
    HeaderEntry,
    QueryParam,
    RequestDescriptor,
)

_DISPATCHABLE_SCHEMES = frozenset({"http", "https"})


def normalize_request(
    *,
    method: str | HttpMethod | None,
    url: str | None,
    headers: Iterable[HeaderEntry] = (),
    params: Iterable[QueryParam] = (),
    auth: AuthSpec | None = None,
    body: str | None = None,
    timeout_ms: int | None = None,
) -> Result[RequestDescriptor, ValidationError]:
    """Build a RequestDescriptor from raw test request input.

    Args:
        method: HTTP verb, any case.
        url: Target URL, possibly without the query parameters.
        headers: Header rows in user order.
        params: Query parameter rows in user order.
        auth: Auth selection (defaults to no auth).
        body: Raw body text.
        timeout_ms: Requested timeout; None means the default.

    Returns:
        Success(RequestDescriptor) when method and URL are usable.
        Failure(ValidationError) when the method or URL is missing, or the
        method is not supported.
    """
    method_result = parse_method(method)
    if isinstance(method_result, Failure):
        return method_result
    http_method = method_result.value

    if url is None or not url.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.MISSING_URL,
                message="URL is required",
                field="url",
            )
        )

    merged = merge_headers(headers)
    auth_header = build_auth_header(auth or AuthSpec())
    if auth_header is not None:
        _put_header(merged, *auth_header)

    return Success(
        value=RequestDescriptor(
            method=http_method,
            url=with_query_params(url.strip(), params),
            headers=merged,
            body_text=body if http_method.carries_body and body else None,
            timeout_ms=clamp_timeout(timeout_ms),
        )
    )


def parse_method(method: str | HttpMethod | None) -> Result[HttpMethod, ValidationError]:
    """Parse an HTTP verb case-insensitively.

    Args:
        method: Raw method.

    Returns:
        Success(HttpMethod) or Failure(ValidationError).
    """
    if isinstance(method, HttpMethod):
        return Success(value=method)

    if method is None or not method.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.MISSING_HTTP_METHOD,
                message="HTTP method is required",
                field="method",
            )
        )

    try:
        return Success(value=HttpMethod(method.strip().upper()))
    except ValueError:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_HTTP_METHOD,
                message=(
                    f"Unsupported HTTP method '{method}'. "
                    f"Expected one of: {', '.join(HttpMethod.values())}"
                ),
                field="method",
            )
        )


def merge_headers(entries: Iterable[HeaderEntry]) -> dict[str, str]:
    """Merge header rows into an ordered mapping.

    Args:
        entries: Header rows in user order.

    Returns:
        dict: Headers with case-insensitively unique names. The most
        recent row for a name wins and keeps its own spelling.
    """
    merged: dict[str, str] = {}
    for entry in entries:
        if not entry.enabled:
            continue
        name = entry.key.strip()
        if not name:
            continue
        _put_header(merged, name, entry.value)
    return merged


def build_auth_header(auth: AuthSpec) -> tuple[str, str] | None:
    """Derive the single header implied by an auth selection.

    Args:
        auth: Scheme and credential value.

    Returns:
        (name, value) pair, or None for AuthScheme.NONE or an empty value.

    Example:
        >>> build_auth_header(AuthSpec(scheme=AuthScheme.BASIC, value="u:p"))
        ('Authorization', 'Basic dTpw')
    """
    if not auth.value:
        return None

    match auth.scheme:
        case AuthScheme.BEARER:
            return AUTHORIZATION_HEADER, f"Bearer {auth.value}"
        case AuthScheme.BASIC:
            encoded = base64.b64encode(auth.value.encode("utf-8")).decode("ascii")
            return AUTHORIZATION_HEADER, f"Basic {encoded}"
        case AuthScheme.API_KEY:
            return API_KEY_HEADER, auth.value
        case _:
            return None


def with_query_params(url: str, params: Iterable[QueryParam]) -> str:
    """Append enabled query parameters to a URL.

    Existing query string and fragment are preserved. If the URL does not
    parse as absolute, it is returned unchanged.

    Args:
        url: Base URL.
        params: Parameter rows in user order.

    Returns:
        str: URL with parameters appended, or the input URL.

    Example:
        >>> with_query_params("https://x.io/a?b=1", [QueryParam("q", "a b")])
        'https://x.io/a?b=1&q=a%20b'
    """
    active = [(param.key, param.value) for param in params if param.enabled and param.key]
    if not active:
        return url

    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    if not parts.scheme or not parts.netloc:
        return url

    encoded = urlencode(active, quote_via=quote)
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=query))


def is_absolute_url(url: str) -> bool:
    """Check that a URL can be dispatched (http/https with a host).

    Args:
        url: Candidate URL.

    Returns:
        bool: True if the URL is absolute.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme.lower() in _DISPATCHABLE_SCHEMES and bool(parts.netloc)


def clamp_timeout(timeout_ms: int | None) -> int:
    """Clamp a timeout into the allowed range.

    Args:
        timeout_ms: Requested timeout, or None for the default.

    Returns:
        int: Timeout between 1000 and 60000 milliseconds.
    """
    if timeout_ms is None:
        return TEST_REQUEST_TIMEOUT_DEFAULT_MS
    return max(TEST_REQUEST_TIMEOUT_MIN_MS, min(TEST_REQUEST_TIMEOUT_MAX_MS, timeout_ms))


def _put_header(headers: dict[str, str], name: str, value: str) -> None:
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value
