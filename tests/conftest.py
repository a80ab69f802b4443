"""Shared fixtures for the academy test suite."""

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from academy.content.registry import ContentRegistry, get_registry
from academy.deps import get_http_client
from academy.main import app


@pytest.fixture
def registry() -> ContentRegistry:
    return get_registry()


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_upstream() -> Callable[[Callable[[httpx.Request], httpx.Response]], None]:
    """Route the same-origin API client through an httpx.MockTransport.

    Returns a function that installs the given request handler.
    """

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> None:
        async def override():
            async with httpx.AsyncClient(
                base_url="http://testserver", transport=httpx.MockTransport(handler)
            ) as c:
                yield c

        app.dependency_overrides[get_http_client] = override

    return install
