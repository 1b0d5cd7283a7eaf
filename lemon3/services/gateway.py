from __future__ import annotations

import logging
from typing import Any

import httpx

from ..server.errors import UpstreamError

logger = logging.getLogger("lemon3.gateway")


def descriptor_url(gateway: str, cid: str) -> str:
    return f"{gateway}/ipfs/{cid}?format=dag-json"


def content_url(gateway: str, cid: str) -> str:
    return f"{gateway}/ipfs/{cid}"


async def fetch_descriptor(http: httpx.AsyncClient, gateway: str, cid: str) -> Any:
    """GET the DAG-JSON descriptor for `cid` and return the decoded document.

    Raises UpstreamError on a non-2xx status. Transport and decode errors
    propagate unchanged.
    """
    url = descriptor_url(gateway, cid)
    logger.debug("fetching descriptor %s", url)
    resp = await http.get(url)
    if not resp.is_success:
        logger.warning("gateway returned %s %s for %s", resp.status_code, resp.reason_phrase, url)
        raise UpstreamError(resp.status_code, resp.reason_phrase)
    return resp.json()
