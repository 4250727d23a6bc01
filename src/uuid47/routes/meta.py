"""Meta endpoints — health, version."""

from __future__ import annotations

from fastapi import APIRouter

from uuid47 import __version__

router = APIRouter(prefix="/api/v1", tags=["meta"])


@router.get("/health")
def health():
    return {"status": "ok", "service": "uuid47"}


@router.get("/version")
def version():
    return {
        "gateway": __version__,
        "scheme": "uuidv47",
    }
