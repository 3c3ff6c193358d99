"""Value objects describing an outbound test request.

The user-facing form data (header rows, query parameter rows, auth
selection) is expressed with HeaderEntry, QueryParam and AuthSpec. The
request normalizer folds them into a single immutable RequestDescriptor,
which is the only thing the HTTP executor ever sees.
"""

from dataclasses import dataclass, field

from apihub.domain.enums import AuthScheme, HttpMethod


@dataclass(frozen=True, slots=True)
class HeaderEntry:
    """One header row as entered by the user.

    Rows that are disabled or whose key is blank are ignored.
    """

    key: str
    value: str = ""
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class QueryParam:
    """One query parameter row as entered by the user.

    Rows that are disabled or whose key is blank are ignored.
    """

    key: str
    value: str = ""
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class AuthSpec:
    """Authentication selection.

    Attributes:
        scheme: Which header to derive (see AuthScheme).
        value: Token, "user:password" credential, or API key. An empty
            value adds no header regardless of scheme.
    """

    scheme: AuthScheme = AuthScheme.NONE
    value: str = ""


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Fully normalized outbound request.

    Attributes:
        method: HTTP verb.
        url: Final URL with enabled query parameters appended.
        headers: Ordered headers. Names keep their original case but are
            unique case-insensitively.
        body_text: Raw body; always None for methods that carry no body.
        timeout_ms: Timeout in milliseconds, within the allowed bounds.
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body_text: str | None = None
    timeout_ms: int = 30000
