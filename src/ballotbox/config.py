from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)
DEFAULT_IDENTITY_HEADER = "X-Ballotbox-Identity"
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_CORS_ORIGINS
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class Settings:
    """Process settings, read from `BALLOTBOX_*` environment variables."""

    url: str = ""
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    identity_header: str = DEFAULT_IDENTITY_HEADER
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        port_raw = os.getenv("BALLOTBOX_PORT", "8000")
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"BALLOTBOX_PORT must be an integer, got {port_raw!r}") from None

        log_level = os.getenv("BALLOTBOX_LOG_LEVEL", "info").strip().lower() or "info"
        if log_level not in LOG_LEVELS:
            raise ValueError(f"BALLOTBOX_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            url=normalize_base_url(os.getenv("BALLOTBOX_URL", "")),
            host=os.getenv("BALLOTBOX_HOST", "127.0.0.1"),
            port=port,
            cors_origins=_split_origins(os.getenv("BALLOTBOX_CORS_ORIGINS")),
            identity_header=os.getenv("BALLOTBOX_IDENTITY_HEADER", "").strip() or DEFAULT_IDENTITY_HEADER,
            log_level=log_level,
        )
