from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Optional[str]:
    # Scalars are shown as text; objects and arrays fall back to the field default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_link(value: Any) -> Optional[str]:
    # DAG-JSON links are encoded as {"/": "<cid>"}
    if isinstance(value, dict):
        target = value.get("/")
        if isinstance(target, str) and target:
            return target
    return None


def _as_size(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    if not isinstance(value, (str, int, float)):
        return None
    try:
        size = float(value)
    except (ValueError, OverflowError):
        # Integers beyond float range are treated like any other unusable size
        return None
    if not math.isfinite(size) or size == 0:
        return None
    return size


class ContentDescriptor(BaseModel):
    """Descriptor document published next to a piece of content on IPFS.

    The document is publisher-controlled; every field is optional and
    unexpected shapes fall back to the defaults instead of failing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="Untitled", description="Human title of the content")
    description: Optional[str] = Field(default=None, description="Markdown description")
    enclosed: Optional[str] = Field(default=None, description="CID of the primary payload")
    artwork: Optional[str] = Field(default=None, description="CID of the preview image")
    filename: str = Field(default="unknown file", description="Original file name of the payload")
    size: Optional[float] = Field(default=None, description="Payload size in bytes")
    type: str = Field(default="unknown", description="MIME type of the payload")

    @field_validator("title", "filename", "type", mode="before")
    @classmethod
    def _text_or_default(cls, value: Any, info) -> Any:
        text = _as_text(value)
        if text is None:
            return cls.model_fields[info.field_name].default
        return text

    @field_validator("description", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("enclosed", "artwork", mode="before")
    @classmethod
    def _link(cls, value: Any) -> Optional[str]:
        return _as_link(value)

    @field_validator("size", mode="before")
    @classmethod
    def _size(cls, value: Any) -> Optional[float]:
        return _as_size(value)

    @classmethod
    def from_raw(cls, raw: Any) -> "ContentDescriptor":
        """Normalize a decoded JSON document; non-object documents yield all defaults."""
        if not isinstance(raw, dict):
            return cls()
        fields: Dict[str, Any] = {name: raw[name] for name in cls.model_fields if raw.get(name) is not None}
        return cls.model_validate(fields)
