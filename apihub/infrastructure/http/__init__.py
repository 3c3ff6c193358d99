"""Outbound HTTP execution for test requests."""

from apihub.infrastructure.http.httpx_executor import HttpxExecutor
from apihub.infrastructure.http.response_classifier import (
    classify_exception,
    classify_response,
)

__all__ = ["HttpxExecutor", "classify_exception", "classify_response"]
