from __future__ import annotations

from .records import (
    candidate_from_item,
    candidate_to_item,
    proposal_from_item,
    proposal_to_item,
    user_from_item,
    user_to_item,
    vote_from_item,
    vote_to_item,
)

__all__ = [
    "user_to_item",
    "candidate_to_item",
    "proposal_to_item",
    "vote_to_item",
    "user_from_item",
    "candidate_from_item",
    "proposal_from_item",
    "vote_from_item",
]
