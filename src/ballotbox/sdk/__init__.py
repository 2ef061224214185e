from __future__ import annotations

from .client import BallotboxClient

__all__ = ["BallotboxClient"]
