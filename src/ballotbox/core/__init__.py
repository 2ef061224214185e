from __future__ import annotations

from .records import Candidate, Proposal, User, Vote
from .store import RegistryStore

__all__ = [
    "User",
    "Candidate",
    "Proposal",
    "Vote",
    "RegistryStore",
]
