"""uuid47 — FastAPI gateway application.

The boundary between agents and storage ids.
Storage keeps time-ordered v7 ids; agents only ever see v4 facades.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from uuid47 import __version__
from uuid47.auth import make_api_key_checker
from uuid47.config import Uuid47Config, load_config
from uuid47.decoder import DecoderRing
from uuid47.errors import Uuid47Error
from uuid47.routes import ids, meta

logger = logging.getLogger("uuid47")
audit_logger = logging.getLogger("uuid47.audit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the decoder ring from the configured key."""
    config: Uuid47Config = app.state.config
    app.state.decoder = DecoderRing.from_config(config)
    logger.info("uuid47 gateway ready (auth %s)", "on" if config.api_key else "off")
    yield
    logger.info("uuid47 gateway shut down")


def create_app(config: Uuid47Config | None = None) -> FastAPI:
    """Application factory."""
    if config is None:
        config = load_config()

    app = FastAPI(
        title="uuid47",
        description="Gateway translating time-ordered storage ids to random-looking facades",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config

    check_key = make_api_key_checker(config.api_key)

    # ── Exception handlers ────────────────────────────────────

    @app.exception_handler(Uuid47Error)
    async def bad_id_handler(request: Request, exc: Uuid47Error):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start
        # route template when matched; raw paths can carry internal ids
        route = request.scope.get("route")
        path = getattr(route, "path", request.url.path)
        audit_logger.info(
            "%s %s %d %.3fs",
            request.method,
            path,
            response.status_code,
            elapsed,
        )
        return response

    # ── Routers ───────────────────────────────────────────────

    app.include_router(meta.router, dependencies=[Depends(check_key)])
    app.include_router(ids.router, dependencies=[Depends(check_key)])

    return app
