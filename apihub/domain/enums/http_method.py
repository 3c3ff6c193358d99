"""HTTP methods supported by the outbound request tester."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verb of an outbound test request.

    String Enum:
        Inherits from str so values serialize directly into JSON and
        history rows. Values are uppercase, matching the wire format.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @property
    def carries_body(self) -> bool:
        """Whether requests with this method are sent with a body."""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)

    @classmethod
    def values(cls) -> list[str]:
        """Get all method values as strings.

        Returns:
            list[str]: e.g. ["GET", "POST", ...].
        """
        return [method.value for method in cls]
