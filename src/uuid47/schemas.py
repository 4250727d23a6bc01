"""Request/response bodies for the batch endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_BATCH = 1000


class IdBatch(BaseModel):
    """A list of identifiers, compact or hyphenated. Order is preserved."""

    ids: list[str] = Field(default_factory=list, max_length=MAX_BATCH)


class IdPair(BaseModel):
    internal: str
    external: str
