"""Core error types.

Usage:
    from apihub.core.errors import DomainError, ValidationError
"""

from apihub.core.errors.common_errors import ValidationError
from apihub.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
]
