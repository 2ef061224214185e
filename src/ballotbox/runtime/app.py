from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..config import Settings
from ..core.store import RegistryStore


def create_app(store: RegistryStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Composition root: one store, one settings object, one app."""
    return create_api_app(store=store, settings=settings)
