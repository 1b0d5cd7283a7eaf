from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Request
from starlette.responses import HTMLResponse, JSONResponse

from ..render.page import AppChrome, render_page
from ..schemas.manifest import build_manifest
from ..services.pipeline import resolve
from .errors import BadRequest, InternalError, ViewerError
from .settings import Settings

logger = logging.getLogger("lemon3.api")

MANIFEST_PATH = "/.well-known/farcaster.json"
CID_PREFIX = "bafy"

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http


def first_segment(path: str) -> Optional[str]:
    for part in path.split("/"):
        if part:
            return part
    return None


@router.get(MANIFEST_PATH)
async def farcaster_manifest(settings: Settings = Depends(get_settings)):
    return JSONResponse(build_manifest(settings))


@router.get("/{path:path}")
async def view_content(
    request: Request,
    path: str,
    settings: Settings = Depends(get_settings),
    http: httpx.AsyncClient = Depends(get_http_client),
):
    cid = first_segment(path)
    if not cid or not cid.startswith(CID_PREFIX):
        logger.info("rejecting path %r: no bafy CID", request.url.path)
        raise BadRequest()

    gw = request.query_params.get("gw")
    gateway = settings.IPFS_GATEWAY if gw is None else gw
    try:
        model = await resolve(http, cid=cid, gateway=gateway, page_url=str(request.url))
        html = render_page(model, AppChrome.from_settings(settings), escape=settings.ESCAPE_HTML)
    except ViewerError:
        raise
    except Exception as exc:
        logger.exception("failed to render %s via %s", cid, gateway)
        raise InternalError() from exc
    return HTMLResponse(html)
