"""Domain enums.

Usage:
    from apihub.domain.enums import HttpMethod, AuthScheme
"""

from apihub.domain.enums.auth_scheme import AuthScheme
from apihub.domain.enums.failure_kind import FailureKind
from apihub.domain.enums.http_method import HttpMethod
from apihub.domain.enums.review_sort import ReviewSort
from apihub.domain.enums.vote_direction import VoteDirection

__all__ = [
    "AuthScheme",
    "FailureKind",
    "HttpMethod",
    "ReviewSort",
    "VoteDirection",
]
