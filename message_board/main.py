from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from message_board.api.messages import router as messages_router
from message_board.api.middleware import (
    BodySizeLimitMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from message_board.application.ports.message_store import MessageStorePort
from message_board.application.ports.rate_limiter import RateLimiterPort
from message_board.core.config import Settings, get_settings
from message_board.wiring.dependencies import build_message_store, build_rate_limiter


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("path", "client", "status", "error", "message_id", "length"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


def create_app(
    settings: Settings | None = None,
    store: MessageStorePort | None = None,
    rate_limiter: RateLimiterPort | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    store = store or build_message_store(settings)
    rate_limiter = rate_limiter or build_rate_limiter(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await store.close()

    app = FastAPI(title="Contact Board Message Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.message_store = store
    app.state.rate_limiter = rate_limiter

    app.include_router(messages_router, tags=["messages"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    if settings.STATIC_DIR:
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="site")

    # last added runs first: security headers, CORS, rate limit, body size
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.MAX_BODY_BYTES)
    app.add_middleware(
        RateLimitMiddleware,
        limiter=rate_limiter,
        trust_proxy_headers=settings.TRUST_PROXY_HEADERS,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.ALLOWED_ORIGIN.split(",") if origin.strip()],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        allow_credentials=True,
    )
    app.add_middleware(SecurityHeadersMiddleware)

    return app
