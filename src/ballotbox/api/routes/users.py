from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Query

from ...core.store import RegistryStore
from ..parsing import caller_identity, parse_str_field, store_from
from ..serializers import user_to_item, vote_to_item


def mount_users_api(app: FastAPI) -> None:
    # Identities are opaque and may contain "/", so lookups take them as a
    # query parameter rather than a path segment.

    @app.post("/api/users")
    def register_user(
        body: Any = Body(None),
        identity: str = Depends(caller_identity),
        store: RegistryStore = Depends(store_from),
    ) -> dict:
        name = parse_str_field(body, "name")
        return {"ok": store.register_user(identity, name)}

    @app.get("/api/users")
    def get_user(
        identity: str = Query(...),
        store: RegistryStore = Depends(store_from),
    ) -> dict:
        user = store.get_user(identity)
        if user is None:
            raise HTTPException(status_code=404, detail="Unknown user")
        return user_to_item(user)

    @app.get("/api/users/votes")
    def get_user_votes(
        identity: str = Query(...),
        store: RegistryStore = Depends(store_from),
    ) -> list[dict]:
        return [vote_to_item(v) for v in store.get_user_votes(identity)]
