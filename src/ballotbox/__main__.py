from __future__ import annotations

import argparse
import logging

import uvicorn

from .config import LOG_LEVELS, Settings
from .core.store import RegistryStore
from .runtime.app import create_app


def main(argv: list[str] | None = None) -> None:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise SystemExit(f"ballotbox: {e}")

    p = argparse.ArgumentParser(prog="ballotbox", description="ballotbox: minimal registry-and-tally service")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--log-level", default=settings.log_level, choices=list(LOG_LEVELS))
    p.add_argument("--access-log", action="store_true", help="enable uvicorn's per-request access log")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(store=RegistryStore(), settings=settings)
    # Blocks until interrupted, like a normal CLI server.
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level, access_log=args.access_log)


if __name__ == "__main__":
    main()
