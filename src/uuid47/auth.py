"""X-API-Key check for the translation endpoints.

Anyone who can call /decode can map facades back to time-ordered ids,
so production deployments set an api_key. Empty key = development mode.
"""

from __future__ import annotations

import secrets

from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def make_api_key_checker(expected_key: str):
    """Return a FastAPI dependency comparing X-API-Key to expected_key."""

    async def check_api_key(
        api_key: str | None = Security(_api_key_header),
    ) -> str | None:
        if not expected_key:
            return None
        if api_key is None or not secrets.compare_digest(
            api_key.encode(), expected_key.encode()
        ):
            raise HTTPException(status_code=401, detail="Invalid or missing API key")
        return api_key

    return check_api_key
