from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class User:
    """A registered caller.

    Notes:
    - `identity` is the opaque, externally-verified caller token.
    - `registered` is set at creation and never changes. There is no approval tier.
    """

    identity: str
    name: str
    registered: bool = True
    created_at: float = 0.0


@dataclass(frozen=True, kw_only=True)
class Candidate:
    id: int
    name: str
    manifesto: str
    created_at: float = 0.0


@dataclass(frozen=True, kw_only=True)
class Proposal:
    id: int
    description: str
    votes: int = 0
    created_at: float = 0.0


@dataclass(frozen=True, kw_only=True)
class Vote:
    proposal_id: int
    voter: str
    cast_at: float = 0.0
