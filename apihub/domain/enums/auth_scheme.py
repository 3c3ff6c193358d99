"""Authentication schemes the request tester can attach to a request.

Each scheme (except NONE) produces exactly one extra header:

    BEARER   -> Authorization: Bearer <value>
    BASIC    -> Authorization: Basic <base64(value)>
    API_KEY  -> X-API-Key: <value>
"""

from enum import Enum


class AuthScheme(str, Enum):
    """Authentication scheme for an outbound test request."""

    NONE = "none"
    BEARER = "bearer"
    BASIC = "basic"
    API_KEY = "api_key"
