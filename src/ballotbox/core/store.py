from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace

from .records import Candidate, Proposal, User, Vote

logger = logging.getLogger(__name__)


class RegistryStore:
    """In-memory users, candidates, proposals and votes.

    Every public method holds the same lock for its whole body, so the four maps
    and both id counters behave as a single serialized unit. Rejections are
    return values (False / None), never exceptions.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: dict[str, User] = {}
        self._candidates: dict[int, Candidate] = {}
        self._proposals: dict[int, Proposal] = {}
        self._votes: dict[str, list[Vote]] = {}
        self._next_candidate_id = 0
        self._next_proposal_id = 0
        self._global_revision = 0

    @staticmethod
    def _check_identity(identity: str) -> str:
        if not isinstance(identity, str):
            raise TypeError(f"identity must be a str, got {type(identity).__name__}")
        return identity

    def _registered_user_locked(self, identity: str) -> User | None:
        user = self._users.get(identity)
        if user is None:
            return None
        # `registered` is always True once a user exists; kept as a guard.
        if not user.registered:
            return None
        return user

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    # Users

    def register_user(self, identity: str, name: str) -> bool:
        identity = self._check_identity(identity)
        with self._lock:
            if identity in self._users:
                logger.debug("register_user rejected: %r already registered", identity)
                return False
            self._users[identity] = User(
                identity=identity,
                name=str(name),
                registered=True,
                created_at=time.time(),
            )
            self._global_revision += 1
            logger.info("Registered user %r", identity)
            return True

    def get_user(self, identity: str) -> User | None:
        with self._lock:
            return self._users.get(identity)

    # Candidates

    def register_candidate(self, identity: str, name: str, manifesto: str) -> int | None:
        identity = self._check_identity(identity)
        with self._lock:
            if self._registered_user_locked(identity) is None:
                logger.debug("register_candidate rejected: %r is not registered", identity)
                return None
            candidate_id = self._next_candidate_id
            self._candidates[candidate_id] = Candidate(
                id=candidate_id,
                name=str(name),
                manifesto=str(manifesto),
                created_at=time.time(),
            )
            self._next_candidate_id += 1
            self._global_revision += 1
            logger.info("Candidate %d registered by %r", candidate_id, identity)
            return candidate_id

    def get_candidate(self, candidate_id: int) -> Candidate | None:
        with self._lock:
            return self._candidates.get(int(candidate_id))

    def list_candidates(self) -> list[Candidate]:
        with self._lock:
            return list(self._candidates.values())

    # Proposals and votes

    def create_proposal(self, identity: str, description: str) -> int | None:
        identity = self._check_identity(identity)
        with self._lock:
            if self._registered_user_locked(identity) is None:
                logger.debug("create_proposal rejected: %r is not registered", identity)
                return None
            proposal_id = self._next_proposal_id
            self._proposals[proposal_id] = Proposal(
                id=proposal_id,
                description=str(description),
                votes=0,
                created_at=time.time(),
            )
            self._next_proposal_id += 1
            self._global_revision += 1
            logger.info("Proposal %d created by %r", proposal_id, identity)
            return proposal_id

    def cast_vote(self, identity: str, proposal_id: int) -> bool:
        identity = self._check_identity(identity)
        proposal_id = int(proposal_id)
        with self._lock:
            if self._registered_user_locked(identity) is None:
                logger.debug("cast_vote rejected: %r is not registered", identity)
                return False
            proposal = self._proposals.get(proposal_id)
            if proposal is None:
                logger.debug("cast_vote rejected: unknown proposal %d", proposal_id)
                return False
            cast = self._votes.get(identity, [])
            if any(v.proposal_id == proposal_id for v in cast):
                logger.debug("cast_vote rejected: %r already voted on %d", identity, proposal_id)
                return False

            # Both writes happen under the lock: the vote record and the counter.
            self._votes[identity] = [*cast, Vote(proposal_id=proposal_id, voter=identity, cast_at=time.time())]
            self._proposals[proposal_id] = replace(proposal, votes=proposal.votes + 1)
            self._global_revision += 1
            logger.info("Vote by %r on proposal %d accepted", identity, proposal_id)
            return True

    def list_proposals(self) -> list[Proposal]:
        with self._lock:
            return list(self._proposals.values())

    def get_proposal(self, proposal_id: int) -> Proposal | None:
        with self._lock:
            return self._proposals.get(int(proposal_id))

    def get_vote_count(self, proposal_id: int) -> int:
        with self._lock:
            proposal = self._proposals.get(int(proposal_id))
            return proposal.votes if proposal is not None else 0

    def get_user_votes(self, identity: str) -> list[Vote]:
        with self._lock:
            return list(self._votes.get(identity, ()))
