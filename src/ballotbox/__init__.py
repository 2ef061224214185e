from __future__ import annotations

from .config import Settings
from .core import Candidate, Proposal, RegistryStore, User, Vote
from .runtime.server import BallotboxServer, run
from .sdk.client import BallotboxClient

__all__ = [
    "run",
    "BallotboxServer",
    "BallotboxClient",
    "RegistryStore",
    "Settings",
    "User",
    "Candidate",
    "Proposal",
    "Vote",
]
