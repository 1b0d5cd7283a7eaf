from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..server.settings import Settings


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AccountAssociation(_CamelModel):
    """JFS-signed proof that the hosting domain belongs to a Farcaster account."""

    header: str
    payload: str
    signature: str


class FrameMetadata(_CamelModel):
    version: str = "1"
    name: str
    icon_url: str
    home_url: str
    image_url: str
    button_title: str = "Open"
    splash_image_url: str
    splash_background_color: str


class Manifest(_CamelModel):
    """Document served at /.well-known/farcaster.json."""

    account_association: AccountAssociation
    frame: FrameMetadata = Field(..., description="Mini-app launch metadata")


def build_manifest(settings: Settings) -> Dict[str, Any]:
    manifest = Manifest(
        account_association=AccountAssociation(
            header=settings.FARCASTER_HEADER,
            payload=settings.FARCASTER_PAYLOAD,
            signature=settings.FARCASTER_SIGNATURE,
        ),
        frame=FrameMetadata(
            name=settings.APP_NAME,
            icon_url=settings.APP_ICON_URL,
            home_url=settings.APP_HOME_URL,
            image_url=settings.APP_ICON_URL,
            splash_image_url=settings.APP_ICON_URL,
            splash_background_color=settings.APP_SPLASH_BACKGROUND,
        ),
    )
    return manifest.model_dump(by_alias=True)
