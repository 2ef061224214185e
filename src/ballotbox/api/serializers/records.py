from __future__ import annotations

from typing import Any

from ...core.records import Candidate, Proposal, User, Vote


def user_to_item(u: User) -> dict[str, Any]:
    return {
        "identity": u.identity,
        "name": u.name,
        "registered": bool(u.registered),
        "createdAt": float(u.created_at),
    }


def candidate_to_item(c: Candidate) -> dict[str, Any]:
    return {
        "id": int(c.id),
        "name": c.name,
        "manifesto": c.manifesto,
        "createdAt": float(c.created_at),
    }


def proposal_to_item(p: Proposal) -> dict[str, Any]:
    return {
        "id": int(p.id),
        "description": p.description,
        "votes": int(p.votes),
        "createdAt": float(p.created_at),
    }


def vote_to_item(v: Vote) -> dict[str, Any]:
    return {
        "proposalId": int(v.proposal_id),
        "voter": v.voter,
        "castAt": float(v.cast_at),
    }


# Decoders are used by the SDK client to rebuild records from responses.


def user_from_item(item: dict[str, Any]) -> User:
    return User(
        identity=str(item["identity"]),
        name=str(item["name"]),
        registered=bool(item.get("registered", True)),
        created_at=float(item.get("createdAt", 0.0)),
    )


def candidate_from_item(item: dict[str, Any]) -> Candidate:
    return Candidate(
        id=int(item["id"]),
        name=str(item["name"]),
        manifesto=str(item["manifesto"]),
        created_at=float(item.get("createdAt", 0.0)),
    )


def proposal_from_item(item: dict[str, Any]) -> Proposal:
    return Proposal(
        id=int(item["id"]),
        description=str(item["description"]),
        votes=int(item.get("votes", 0)),
        created_at=float(item.get("createdAt", 0.0)),
    )


def vote_from_item(item: dict[str, Any]) -> Vote:
    return Vote(
        proposal_id=int(item["proposalId"]),
        voter=str(item["voter"]),
        cast_at=float(item.get("castAt", 0.0)),
    )
