from __future__ import annotations

from typing import Any, Optional

import httpx

from ..schemas.descriptor import ContentDescriptor
from ..schemas.render import MediaKind, RenderModel
from .gateway import content_url, fetch_descriptor
from .markdown_render import render_markdown

NO_DESCRIPTION_HTML = "<p>No description.</p>"
OG_DESCRIPTION_FALLBACK = "Media from IPFS"
OG_DESCRIPTION_LIMIT = 200
MEBIBYTE = 1024 * 1024


def format_size(size: Optional[float]) -> str:
    if size is None:
        return "unknown"
    return f"{size / MEBIBYTE:.2f} MB"


def classify_media(mime_type: str, download_url: Optional[str]) -> MediaKind:
    # Playable media needs a payload to point the player at; video wins over audio
    if download_url is None:
        return "none"
    if mime_type.startswith("video/"):
        return "video"
    if mime_type.startswith("audio/"):
        return "audio"
    return "none"


def build_render_model(raw: Any, *, cid: str, gateway: str, page_url: str) -> RenderModel:
    descriptor = ContentDescriptor.from_raw(raw)

    download_url = content_url(gateway, descriptor.enclosed) if descriptor.enclosed else None
    artwork_url = content_url(gateway, descriptor.artwork) if descriptor.artwork else None

    if descriptor.description:
        description_html = render_markdown(descriptor.description)
    else:
        description_html = NO_DESCRIPTION_HTML

    if descriptor.description is None:
        og_description = OG_DESCRIPTION_FALLBACK
    else:
        og_description = descriptor.description[:OG_DESCRIPTION_LIMIT]

    return RenderModel(
        title=descriptor.title,
        description_html=description_html,
        og_description=og_description,
        download_url=download_url,
        artwork_url=artwork_url,
        filename=descriptor.filename,
        size_label=format_size(descriptor.size),
        mime_type=descriptor.type,
        media_kind=classify_media(descriptor.type, download_url),
        cid=cid,
        page_url=page_url,
        raw_json=raw,
    )


async def resolve(http: httpx.AsyncClient, *, cid: str, gateway: str, page_url: str) -> RenderModel:
    """Fetch the descriptor for `cid` through `gateway` and derive its render model."""
    raw = await fetch_descriptor(http, gateway, cid)
    return build_render_model(raw, cid=cid, gateway=gateway, page_url=page_url)
