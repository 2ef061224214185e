from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..config import DEFAULT_IDENTITY_HEADER, Settings, normalize_base_url
from ..core.records import Candidate, Proposal, User, Vote
from ..core.store import RegistryStore
from ..sdk.client import BallotboxClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BallotboxServer:
    """Handle to a server started in this process.

    Operations go straight to the in-process store; `_as_client()` gives the
    HTTP view of the same server.
    """

    host: str
    port: int
    url: str
    store: RegistryStore = field(repr=False)
    identity_header: str = DEFAULT_IDENTITY_HEADER

    def _as_client(self, identity: str | None = None) -> BallotboxClient:
        return BallotboxClient(self.url.rstrip("/"), identity=identity, identity_header=self.identity_header)

    def register_user(self, identity: str, name: str) -> bool:
        return self.store.register_user(identity, name)

    def get_user(self, identity: str) -> User | None:
        return self.store.get_user(identity)

    def register_candidate(self, identity: str, name: str, manifesto: str) -> int | None:
        return self.store.register_candidate(identity, name, manifesto)

    def get_candidate(self, candidate_id: int) -> Candidate | None:
        return self.store.get_candidate(candidate_id)

    def list_candidates(self) -> list[Candidate]:
        return self.store.list_candidates()

    def create_proposal(self, identity: str, description: str) -> int | None:
        return self.store.create_proposal(identity, description)

    def cast_vote(self, identity: str, proposal_id: int) -> bool:
        return self.store.cast_vote(identity, proposal_id)

    def list_proposals(self) -> list[Proposal]:
        return self.store.list_proposals()

    def get_proposal(self, proposal_id: int) -> Proposal | None:
        return self.store.get_proposal(proposal_id)

    def get_vote_count(self, proposal_id: int) -> int:
        return self.store.get_vote_count(proposal_id)

    def get_user_votes(self, identity: str) -> list[Vote]:
        return self.store.get_user_votes(identity)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort check that a ballotbox server is reachable."""
    return BallotboxClient(base_url, timeout_s=timeout_s).healthy()


def run(
    *,
    host: str | None = None,
    port: int = 0,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 5.0,
    store: RegistryStore | None = None,
    settings: Settings | None = None,
) -> BallotboxServer | BallotboxClient:
    """Start ballotbox with a single Python call.

    Behavior:
    - If BALLOTBOX_URL is set, we *attach* to that existing server (client mode)
      unless `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at
      http://{host}:{port}, we attach to it unless `new_server=True`.
    - Otherwise we start a new server in a daemon thread and return a
      `BallotboxServer`.

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - Uvicorn's per-request access log is off by default.
    """

    if settings is None:
        settings = Settings.from_env()
    if host is None:
        host = settings.host
    if log_level is None:
        log_level = settings.log_level

    # 1) Try attaching to an explicitly provided server.
    if settings.url and not new_server:
        if _is_server_alive(settings.url, timeout_s=connect_timeout_s):
            logger.info("Attaching to existing server at %s", settings.url)
            return BallotboxClient(settings.url, identity_header=settings.identity_header)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to existing server at %s", default_url)
            return BallotboxClient(default_url, identity_header=settings.identity_header)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    if store is None:
        store = RegistryStore()
    app = create_app(store=store, settings=settings)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Wait for the socket to be bound so an immediate client call doesn't race startup.
    deadline = time.monotonic() + startup_timeout_s
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError(f"ballotbox server failed to start on {host}:{port}")
        if time.monotonic() > deadline:
            raise RuntimeError(f"ballotbox server did not start within {startup_timeout_s}s")
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("ballotbox serving at %s", url)
    return BallotboxServer(host=host, port=port, url=url, store=store, identity_header=settings.identity_header)
