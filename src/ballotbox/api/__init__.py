from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings
from ..core.store import RegistryStore
from .routes import mount_candidates_api, mount_proposals_api, mount_users_api


def create_api_app(store: RegistryStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the HTTP API around a single store.

    The store is the one piece of shared state; handlers reach it through
    `app.state.store`. Passing `store=None` creates a fresh, empty one.
    """

    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = RegistryStore()

    app = FastAPI(title="ballotbox", version="0.1.0")
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_users_api(app)
    mount_candidates_api(app)
    mount_proposals_api(app)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events() -> dict[str, int]:
        # Minimal polling endpoint.
        return {"globalRevision": store.global_revision()}

    return app
