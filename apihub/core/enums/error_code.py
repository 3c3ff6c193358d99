"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Encryption errors (ENCRYPTION_*, DECRYPTION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_INPUT = "invalid_input"
    INVALID_HTTP_METHOD = "invalid_http_method"
    INVALID_URL = "invalid_url"
    MISSING_HTTP_METHOD = "missing_http_method"
    MISSING_URL = "missing_url"

    # Resource errors
    API_NOT_FOUND = "api_not_found"
    REVIEW_NOT_FOUND = "review_not_found"
    USER_NOT_FOUND = "user_not_found"
    HISTORY_ENTRY_NOT_FOUND = "history_entry_not_found"
    API_KEY_NOT_FOUND = "api_key_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Encryption errors
    ENCRYPTION_KEY_INVALID = "encryption_key_invalid"
    ENCRYPTION_FAILED = "encryption_failed"
    DECRYPTION_FAILED = "decryption_failed"
