from __future__ import annotations

from typing import Any

import httpx

from ..api.serializers import (
    candidate_from_item,
    proposal_from_item,
    user_from_item,
    vote_from_item,
)
from ..config import DEFAULT_IDENTITY_HEADER
from ..core.records import Candidate, Proposal, User, Vote


class BallotboxClient:
    """HTTP client for a running ballotbox server.

    Mirrors the `RegistryStore` operations with the same return conventions:
    rejections come back as False / None, unknown single records as None.
    Mutating calls need a caller identity, given either at construction or via
    `as_identity()`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        identity: str | None = None,
        identity_header: str = DEFAULT_IDENTITY_HEADER,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.identity = identity
        self.identity_header = identity_header
        self.timeout_s = float(timeout_s)

    def as_identity(self, identity: str) -> "BallotboxClient":
        """Return a client that acts as another caller against the same server."""
        return BallotboxClient(
            self.base_url,
            identity=identity,
            identity_header=self.identity_header,
            timeout_s=self.timeout_s,
        )

    def _headers(self) -> dict[str, str]:
        if not self.identity:
            raise ValueError("This operation needs a caller identity; use as_identity() or identity=...")
        return {self.identity_header: self.identity}

    def _request(
        self,
        method: str,
        path: str,
        *,
        identified: bool = False,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        headers = self._headers() if identified else None
        with httpx.Client(base_url=self.base_url, timeout=self.timeout_s) as client:
            return client.request(method, path, json=json, params=params, headers=headers)

    @staticmethod
    def _ok(res: httpx.Response, what: str) -> Any:
        if res.status_code >= 400:
            raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")
        return res.json()

    @staticmethod
    def _ok_or_none(res: httpx.Response, what: str) -> Any:
        if res.status_code == 404:
            return None
        if res.status_code >= 400:
            raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")
        return res.json()

    def healthy(self) -> bool:
        try:
            res = self._request("GET", "/healthz")
            if res.status_code != 200:
                return False
            data = res.json()
        except (httpx.HTTPError, ValueError):
            return False
        return isinstance(data, dict) and bool(data.get("ok"))

    def global_revision(self) -> int:
        data = self._ok(self._request("GET", "/api/events"), "Events poll")
        return int(data["globalRevision"])

    # Users

    def register_user(self, name: str) -> bool:
        data = self._ok(self._request("POST", "/api/users", identified=True, json={"name": name}), "Register user")
        return bool(data.get("ok"))

    def get_user(self, identity: str) -> User | None:
        data = self._ok_or_none(self._request("GET", "/api/users", params={"identity": identity}), "Get user")
        return user_from_item(data) if data is not None else None

    def get_user_votes(self, identity: str) -> list[Vote]:
        data = self._ok(self._request("GET", "/api/users/votes", params={"identity": identity}), "Get user votes")
        return [vote_from_item(item) for item in data]

    # Candidates

    def register_candidate(self, name: str, manifesto: str) -> int | None:
        body = {"name": name, "manifesto": manifesto}
        data = self._ok(self._request("POST", "/api/candidates", identified=True, json=body), "Register candidate")
        cid = data.get("id")
        return int(cid) if cid is not None else None

    def get_candidate(self, candidate_id: int) -> Candidate | None:
        data = self._ok_or_none(self._request("GET", f"/api/candidates/{int(candidate_id)}"), "Get candidate")
        return candidate_from_item(data) if data is not None else None

    def list_candidates(self) -> list[Candidate]:
        data = self._ok(self._request("GET", "/api/candidates"), "List candidates")
        return [candidate_from_item(item) for item in data]

    # Proposals and votes

    def create_proposal(self, description: str) -> int | None:
        body = {"description": description}
        data = self._ok(self._request("POST", "/api/proposals", identified=True, json=body), "Create proposal")
        pid = data.get("id")
        return int(pid) if pid is not None else None

    def cast_vote(self, proposal_id: int) -> bool:
        path = f"/api/proposals/{int(proposal_id)}/votes"
        data = self._ok(self._request("POST", path, identified=True), "Cast vote")
        return bool(data.get("ok"))

    def list_proposals(self) -> list[Proposal]:
        data = self._ok(self._request("GET", "/api/proposals"), "List proposals")
        return [proposal_from_item(item) for item in data]

    def get_proposal(self, proposal_id: int) -> Proposal | None:
        data = self._ok_or_none(self._request("GET", f"/api/proposals/{int(proposal_id)}"), "Get proposal")
        return proposal_from_item(data) if data is not None else None

    def get_vote_count(self, proposal_id: int) -> int:
        data = self._ok(self._request("GET", f"/api/proposals/{int(proposal_id)}/votes"), "Get vote count")
        return int(data.get("votes", 0))
