from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException

from ...core.store import RegistryStore
from ..parsing import caller_identity, parse_str_field, store_from
from ..serializers import candidate_to_item


def mount_candidates_api(app: FastAPI) -> None:
    @app.post("/api/candidates")
    def register_candidate(
        body: Any = Body(None),
        identity: str = Depends(caller_identity),
        store: RegistryStore = Depends(store_from),
    ) -> dict:
        name = parse_str_field(body, "name")
        manifesto = parse_str_field(body, "manifesto", allow_empty=True)
        candidate_id = store.register_candidate(identity, name, manifesto)
        return {"ok": candidate_id is not None, "id": candidate_id}

    @app.get("/api/candidates")
    def list_candidates(store: RegistryStore = Depends(store_from)) -> list[dict]:
        return [candidate_to_item(c) for c in store.list_candidates()]

    @app.get("/api/candidates/{candidate_id}")
    def get_candidate(candidate_id: int, store: RegistryStore = Depends(store_from)) -> dict:
        candidate = store.get_candidate(candidate_id)
        if candidate is None:
            raise HTTPException(status_code=404, detail="Unknown candidate")
        return candidate_to_item(candidate)
