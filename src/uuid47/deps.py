"""FastAPI dependencies for uuid47 routes."""

from __future__ import annotations

from fastapi import Request

from uuid47.decoder import DecoderRing


def get_decoder(request: Request) -> DecoderRing:
    """Get the decoder ring from app state."""
    return request.app.state.decoder
