from __future__ import annotations

import json
from dataclasses import dataclass

from jinja2 import Environment, StrictUndefined
from markupsafe import Markup

from ..schemas.render import RenderModel
from ..server.settings import LEMON3_ICON, Settings
from .templates import PAGE_STYLE, PAGE_TEMPLATE

FRAME_NAME = "IPFS Viewer"
FRAME_BUTTON_TITLE = "Open"


@dataclass(frozen=True)
class AppChrome:
    """Static branding shared by every rendered page."""

    name: str = "lemon3 viewer"
    icon_url: str = LEMON3_ICON
    splash_background: str = "#F9E231"
    sdk_url: str = "https://esm.sh/@farcaster/frame-sdk"

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppChrome":
        return cls(
            name=settings.APP_NAME,
            icon_url=settings.APP_ICON_URL,
            splash_background=settings.APP_SPLASH_BACKGROUND,
            sdk_url=settings.FRAME_SDK_URL,
        )


# Values are interpolated verbatim unless escaping is requested; the
# description is already sanitized by the markdown converter.
_RAW_ENV = Environment(undefined=StrictUndefined, autoescape=False)
_ESCAPING_ENV = Environment(undefined=StrictUndefined, autoescape=True)
_RAW_PAGE = _RAW_ENV.from_string(PAGE_TEMPLATE)
_ESCAPING_PAGE = _ESCAPING_ENV.from_string(PAGE_TEMPLATE)


def frame_embed(model: RenderModel, chrome: AppChrome) -> str:
    """JSON payload of the fc:frame meta tag that turns the page into a launchable mini-app."""
    payload = {
        "version": "next",
        "imageUrl": model.artwork_url or chrome.icon_url,
        "button": {
            "title": FRAME_BUTTON_TITLE,
            "action": {
                "type": "launch_frame",
                "url": model.page_url,
                "name": FRAME_NAME,
                "splashImageUrl": chrome.icon_url,
                "splashBackgroundColor": chrome.splash_background,
            },
        },
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def debug_json(raw: object) -> str:
    return json.dumps(raw, indent=2, ensure_ascii=False)


def render_page(model: RenderModel, chrome: AppChrome | None = None, *, escape: bool = False) -> str:
    chrome = chrome or AppChrome()
    template = _ESCAPING_PAGE if escape else _RAW_PAGE
    return template.render(
        m=model,
        app=chrome,
        frame_embed=frame_embed(model, chrome),
        debug_json=debug_json(model.raw_json),
        description_html=Markup(model.description_html),
        style=Markup(PAGE_STYLE),
    )
