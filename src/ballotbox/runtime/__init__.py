from __future__ import annotations

from .app import create_app
from .server import BallotboxServer, run

__all__ = ["create_app", "BallotboxServer", "run"]
