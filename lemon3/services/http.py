from __future__ import annotations

import httpx


def create_http_client(timeout_seconds: float = 30.0) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds, connect=10.0), follow_redirects=True)
