"""The decoder ring: internal (v7) ids in storage, facade (v4) ids outside.

A DecoderRing holds one Key for the lifetime of a session and converts in
both directions. It accepts an Identifier, a uuid.UUID or text, and hands
back the same kind it was given. Text always comes back hyphenated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar, Union
from uuid import UUID

from uuid47 import codec
from uuid47.identifier import Identifier
from uuid47.key import Key

if TYPE_CHECKING:
    from uuid47.config import Uuid47Config

logger = logging.getLogger("uuid47.decoder")

IdLike = TypeVar("IdLike", Identifier, UUID, str)


class DecoderRing:
    """Keyed mapping between storage ids and agent-visible ids."""

    def __init__(self, key: Key | None = None):
        if key is None:
            logger.warning(
                "No codec key configured; using a random per-process key. "
                "External ids will not survive a restart."
            )
            key = Key.new_random()
        self._key = key

    @classmethod
    def from_config(cls, config: Uuid47Config) -> DecoderRing:
        if not config.codec_key:
            return cls()
        return cls(Key.from_hex(config.codec_key))

    def encode(self, internal_id: IdLike) -> IdLike:
        """Map a storage (v7) id to its agent-visible facade."""
        return self._convert(internal_id, codec.encode)

    def decode(self, external_id: IdLike) -> IdLike:
        """Map an agent-visible facade back to its storage (v7) id."""
        return self._convert(external_id, codec.decode)

    def _convert(
        self,
        value: Union[Identifier, UUID, str],
        transform: Callable[[Identifier, Key], Identifier],
    ):
        if isinstance(value, Identifier):
            return transform(value, self._key)
        if isinstance(value, UUID):
            return transform(Identifier.from_uuid(value), self._key).to_uuid()
        if isinstance(value, str):
            logger.debug("%s from text", transform.__name__)
            return str(transform(Identifier.parse(value), self._key))
        raise TypeError(f"expected Identifier, UUID or str, got {type(value).__name__}")
