"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from import_map import __version__
from import_map.web.api import router
from import_map.web.state import AppState


def create_app() -> FastAPI:
    app = FastAPI(title="import-map", version=__version__)
    app.state.analyses = AppState()
    app.include_router(router)
    return app
