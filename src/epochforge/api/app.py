"""FastAPI application wiring for Epoch Forge."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from epochforge import __version__
from epochforge.api import routes
from epochforge.api.runtime import ApiState, build_state
from epochforge.config import get_settings

logger = logging.getLogger(__name__)


def create_app(*, state_factory: Callable[[], ApiState] = build_state) -> FastAPI:
    """Build the API; match state is created on startup and released on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = state_factory()
        app.state.api_state = state
        logger.info(
            "epoch forge %s ready (catalog %s, up to %d players, matches in %s)",
            __version__,
            state.settings.catalog_version,
            state.rules.max_players,
            state.settings.data_dir,
        )
        try:
            yield
        finally:
            await state.shutdown()
            app.state.api_state = None

    settings = get_settings()
    app = FastAPI(
        title="Epoch Forge API",
        description="Seeded civilization loadouts for multiplayer matches",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    return app


app = create_app()
