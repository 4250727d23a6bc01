"""Identifier endpoints — translate between storage and external ids.

encode: internal (v7, storage) -> external (v4 facade)
decode: external (v4 facade) -> internal (v7, storage)

Malformed ids raise InvalidFormat, mapped to 400 by the app.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from uuid47.decoder import DecoderRing
from uuid47.deps import get_decoder
from uuid47.identifier import Identifier
from uuid47.schemas import IdBatch, IdPair

router = APIRouter(prefix="/api/v1", tags=["ids"])


@router.get("/encode/{internal_id}", response_model=IdPair)
def encode_one(internal_id: str, decoder: DecoderRing = Depends(get_decoder)):
    internal = Identifier.parse(internal_id)
    return IdPair(internal=str(internal), external=str(decoder.encode(internal)))


@router.get("/decode/{external_id}", response_model=IdPair)
def decode_one(external_id: str, decoder: DecoderRing = Depends(get_decoder)):
    external = Identifier.parse(external_id)
    return IdPair(internal=str(decoder.decode(external)), external=str(external))


@router.post("/encode", response_model=IdBatch)
def encode_batch(batch: IdBatch, decoder: DecoderRing = Depends(get_decoder)):
    return IdBatch(ids=[decoder.encode(i) for i in batch.ids])


@router.post("/decode", response_model=IdBatch)
def decode_batch(batch: IdBatch, decoder: DecoderRing = Depends(get_decoder)):
    return IdBatch(ids=[decoder.decode(i) for i in batch.ids])
