from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from ..core.store import RegistryStore


def store_from(request: Request) -> RegistryStore:
    return request.app.state.store


def caller_identity(request: Request) -> str:
    """Read the caller identity header.

    The value is an opaque token already verified by whatever sits in front of
    the service; it is only checked for presence here. Used as a dependency:
    `identity: str = Depends(caller_identity)`.
    """

    header = request.app.state.settings.identity_header
    identity = (request.headers.get(header) or "").strip()
    if not identity:
        raise HTTPException(status_code=401, detail=f"Missing caller identity header: {header}")
    return identity


def parse_str_field(body: Any, key: str, *, allow_empty: bool = False) -> str:
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    if key not in body:
        raise HTTPException(status_code=400, detail=f"Missing field: {key}")
    value = body.get(key)
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"Field {key} must be a string")
    if not allow_empty and not value.strip():
        raise HTTPException(status_code=400, detail=f"Field {key} must not be empty")
    return value
