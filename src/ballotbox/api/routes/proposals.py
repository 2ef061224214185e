from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException

from ...core.store import RegistryStore
from ..parsing import caller_identity, parse_str_field, store_from
from ..serializers import proposal_to_item


def mount_proposals_api(app: FastAPI) -> None:
    @app.post("/api/proposals")
    def create_proposal(
        body: Any = Body(None),
        identity: str = Depends(caller_identity),
        store: RegistryStore = Depends(store_from),
    ) -> dict:
        description = parse_str_field(body, "description")
        proposal_id = store.create_proposal(identity, description)
        return {"ok": proposal_id is not None, "id": proposal_id}

    @app.get("/api/proposals")
    def list_proposals(store: RegistryStore = Depends(store_from)) -> list[dict]:
        return [proposal_to_item(p) for p in store.list_proposals()]

    @app.get("/api/proposals/{proposal_id}")
    def get_proposal(proposal_id: int, store: RegistryStore = Depends(store_from)) -> dict:
        proposal = store.get_proposal(proposal_id)
        if proposal is None:
            raise HTTPException(status_code=404, detail="Unknown proposal")
        return proposal_to_item(proposal)

    @app.get("/api/proposals/{proposal_id}/votes")
    def get_vote_count(proposal_id: int, store: RegistryStore = Depends(store_from)) -> dict:
        # Unknown proposals report 0, same as a proposal nobody voted on.
        return {"proposalId": proposal_id, "votes": store.get_vote_count(proposal_id)}

    @app.post("/api/proposals/{proposal_id}/votes")
    def cast_vote(
        proposal_id: int,
        identity: str = Depends(caller_identity),
        store: RegistryStore = Depends(store_from),
    ) -> dict:
        return {"ok": store.cast_vote(identity, proposal_id)}
