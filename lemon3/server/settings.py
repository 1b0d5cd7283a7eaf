from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

try:
    from dotenv import load_dotenv  # type: ignore
    # Load default .env and optional ENV_FILE override for local runs
    load_dotenv()
    env_file_override = os.getenv("ENV_FILE")
    if env_file_override:
        load_dotenv(env_file_override, override=False)
except ImportError:
    # dotenv is optional; ignore if unavailable
    pass


LEMON3_ICON = "https://lemon3-assets.s3.amazonaws.com/lemon3.png"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_csv(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once from the environment at startup."""

    # Core
    PORT: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # Gateway
    IPFS_GATEWAY: str = field(default_factory=lambda: os.getenv("IPFS_GATEWAY", "https://ipfs.io"))
    GATEWAY_TIMEOUT_SECONDS: float = field(default_factory=lambda: float(os.getenv("GATEWAY_TIMEOUT_SECONDS", "30")))

    # Rendering
    ESCAPE_HTML: bool = field(default_factory=lambda: _env_bool("ESCAPE_HTML"))
    FRAME_SDK_URL: str = field(default_factory=lambda: os.getenv("FRAME_SDK_URL", "https://esm.sh/@farcaster/frame-sdk"))

    # Mini-app identity
    APP_NAME: str = field(default_factory=lambda: os.getenv("APP_NAME", "lemon3 viewer"))
    APP_HOME_URL: str = field(default_factory=lambda: os.getenv("APP_HOME_URL", "https://lemon3.vrypan.workers.dev/"))
    APP_ICON_URL: str = field(default_factory=lambda: os.getenv("APP_ICON_URL", LEMON3_ICON))
    APP_SPLASH_BACKGROUND: str = field(default_factory=lambda: os.getenv("APP_SPLASH_BACKGROUND", "#F9E231"))

    # Farcaster account association (signed by the custody address of the app owner)
    FARCASTER_HEADER: str = field(default_factory=lambda: os.getenv(
        "FARCASTER_HEADER",
        "eyJmaWQiOjI4MCwidHlwZSI6ImN1c3RvZHkiLCJrZXkiOiIweGQwNUQ2MGI1NzYyNzI4NDY2QjQzZGQ5NGJBODgyRDA1MGI2MEFGNjcifQ",
    ))
    FARCASTER_PAYLOAD: str = field(default_factory=lambda: os.getenv(
        "FARCASTER_PAYLOAD",
        "eyJkb21haW4iOiJsZW1vbjMudnJ5cGFuLndvcmtlcnMuZGV2In0",
    ))
    FARCASTER_SIGNATURE: str = field(default_factory=lambda: os.getenv(
        "FARCASTER_SIGNATURE",
        "MHg5MWQ5MTQ4MjBlZDhlOWU1OTE4MGZjNjMyMTUyNzU5YmI2NTAxMmZlNmI2ZjIwZjMwZWJjYWRiYTQ4NjI4ZDQ0MTBmYjJkM2JhMTUzYzRjZDI4MzgxODNmYmQ2ZmM5NTlhOTkwZjI5NTFkYjFmN2JkYzcwMTA3Zjk0NDkwZmRmZDFi",
    ))

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: _env_csv("CORS_ORIGINS", "*"))


settings = Settings()
