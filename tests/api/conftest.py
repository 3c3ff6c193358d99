"""Fixtures for HTTP-level tests.

Handlers are replaced through app.dependency_overrides, so these tests
exercise routing, request validation, schema conversion and error
mapping without a database.
"""

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apihub.main import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client without lifespan (no database connection is opened)."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override() -> Iterator[Callable[[Callable[..., Any], Any], AsyncMock]]:
    """Replace a handler factory with a mock whose handle() returns ``result``.

    Usage:
        handler = override(get_get_api_handler, Failure(error="API not found"))
    """

    def _override(factory: Callable[..., Any], result: Any) -> AsyncMock:
        handler = AsyncMock()
        handler.handle.return_value = result
        app.dependency_overrides[factory] = lambda: handler
        return handler

    yield _override
    app.dependency_overrides.clear()
