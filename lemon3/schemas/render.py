from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


MediaKind = Literal["video", "audio", "none"]


class RenderModel(BaseModel):
    """Everything the page template needs, derived from one descriptor."""

    model_config = ConfigDict(frozen=True)

    title: str
    description_html: str
    og_description: str = Field(..., description="Raw description truncated for link previews")
    download_url: Optional[str] = None
    artwork_url: Optional[str] = None
    filename: str
    size_label: str
    mime_type: str
    media_kind: MediaKind = "none"
    cid: str
    page_url: str
    raw_json: Any = Field(default=None, description="Descriptor exactly as fetched, for the debug panel")
