from __future__ import annotations

from .candidates import mount_candidates_api
from .proposals import mount_proposals_api
from .users import mount_users_api

__all__ = [
    "mount_users_api",
    "mount_candidates_api",
    "mount_proposals_api",
]
