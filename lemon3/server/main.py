from __future__ import annotations

import logging
import logging.config
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from ..services.http import create_http_client
from .api import router as api_router
from .errors import add_error_handlers
from .middleware import add_cors, add_request_logging
from .settings import Settings, settings as default_settings


def configure_logging(level: str = "INFO") -> None:
    # Application logging goes to stdout so it appears in container logs
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"}
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.error": {"level": level},
            "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "lemon3": {"handlers": ["default"], "level": level, "propagate": False},
            "": {"handlers": ["default"], "level": level},  # root logger
        },
    })


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.http = create_http_client(settings.GATEWAY_TIMEOUT_SECONDS)
        try:
            yield
        finally:
            await app.state.http.aclose()

    app = FastAPI(title="lemon3 viewer", lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    @app.get("/healthz")
    async def healthz():
        return {"ok": True}

    app.include_router(api_router)
    add_error_handlers(app)
    add_cors(app, settings)
    add_request_logging(app)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("lemon3.server.main:app", host="0.0.0.0", port=default_settings.PORT)
