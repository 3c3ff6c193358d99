"""Domain value objects.

Usage:
    from apihub.domain.value_objects import RequestDescriptor, CursorPage
"""

from apihub.domain.value_objects.execution_result import (
    ExecutionFailure,
    ExecutionResult,
    ExecutionSuccess,
)
from apihub.domain.value_objects.group_count import GroupCount
from apihub.domain.value_objects.page import CursorPage
from apihub.domain.value_objects.rating import RatingSummary
from apihub.domain.value_objects.request_descriptor import (
    AuthSpec,
    HeaderEntry,
    QueryParam,
    RequestDescriptor,
)

__all__ = [
    "AuthSpec",
    "CursorPage",
    "ExecutionFailure",
    "ExecutionResult",
    "ExecutionSuccess",
    "GroupCount",
    "HeaderEntry",
    "QueryParam",
    "RatingSummary",
    "RequestDescriptor",
]
