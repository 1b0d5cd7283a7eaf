import pathlib
import sys
from typing import Any, Callable, Dict, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so `import lemon3...` works
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

ENCLOSED_CID = "bafybeiaudiopayload"
ARTWORK_CID = "bafybeiartworkimage"


@pytest.fixture
def full_descriptor() -> Dict[str, Any]:
    return {
        "title": "Night Swim",
        "description": "A **calm** track recorded at night.\n\nSee [the label](https://example.com).",
        "enclosed": {"/": ENCLOSED_CID},
        "artwork": {"/": ARTWORK_CID},
        "filename": "night-swim.mp3",
        "size": 2097152,
        "type": "audio/mpeg",
    }


@pytest.fixture
def gateway_routes() -> Dict[str, Callable[[httpx.Request], httpx.Response]]:
    """Map of request path -> handler; tests register what the fake gateway serves."""
    return {}


@pytest.fixture
def gateway_requests() -> list:
    return []


@pytest.fixture
def settings():
    from lemon3.server.settings import Settings

    return Settings(IPFS_GATEWAY="https://gw.test", CORS_ORIGINS=["*"])


@pytest.fixture
def make_client(gateway_routes, gateway_requests):
    from lemon3.server.api import get_http_client
    from lemon3.server.main import create_app

    def handler(request: httpx.Request) -> httpx.Response:
        gateway_requests.append(request)
        route = gateway_routes.get(request.url.path)
        if route is None:
            return httpx.Response(404)
        return route(request)

    def factory(settings) -> TestClient:
        app = create_app(settings)
        mock_http = httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
        app.dependency_overrides[get_http_client] = lambda: mock_http
        return TestClient(app)

    return factory


@pytest.fixture
def client(make_client, settings) -> Generator[TestClient, None, None]:
    with make_client(settings) as c:
        yield c
