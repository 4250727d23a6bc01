"""UUIDv7 <-> UUIDv4 facade codec.

encode() XORs the 48-bit time field of a time-ordered (v7) identifier with
a keyed SipHash-2-4 mask and retags it as version 4. decode() recomputes
the same mask and XORs it back out, retagging as version 7.

The mask is derived from the fingerprint: the ten payload bytes 6-15 with
the version nibble and the variant bits cleared. encode() and decode()
rewrite only the time field and exactly those tag bits, so a source and
its facade share a fingerprint and therefore a mask.

Both functions are total over any 16-byte Identifier. A wrong key is not
detected; it just decodes to a different identifier.
"""

from __future__ import annotations

from uuid47.identifier import Identifier
from uuid47.key import Key
from uuid47.siphash import siphash24

FACADE_VERSION = 4
SOURCE_VERSION = 7

FINGERPRINT_SIZE = 10
_MASK48 = 0x0000FFFFFFFFFFFF
_VARIANT_RFC4122 = 0x80


def read_time_field(identifier: Identifier) -> int:
    """The 48-bit value in bytes 0-5, most significant byte first."""
    return int.from_bytes(identifier.bytes[:6], "big")


def fingerprint(identifier: Identifier) -> bytes:
    """Bytes 6-15 with the 4 version bits and 2 variant bits masked out."""
    raw = identifier.bytes
    return bytes((raw[6] & 0x0F, raw[7], raw[8] & 0x3F)) + raw[9:16]


def _compute_timestamp_mask(key: Key, identifier: Identifier) -> int:
    """Low 48 bits of SipHash-2-4(key, fingerprint). Internal; tests use it."""
    return siphash24(key.k0, key.k1, fingerprint(identifier)) & _MASK48


def _rebuild(identifier: Identifier, time_field: int, version: int) -> Identifier:
    raw = bytearray(identifier.bytes)
    raw[0:6] = time_field.to_bytes(6, "big")
    raw[6] = (raw[6] & 0x0F) | ((version & 0x0F) << 4)
    raw[8] = (raw[8] & 0x3F) | _VARIANT_RFC4122
    return Identifier(raw)


def encode(source: Identifier, key: Key) -> Identifier:
    """Disguise a time-ordered identifier as a random-looking version 4 one."""
    masked = read_time_field(source) ^ _compute_timestamp_mask(key, source)
    return _rebuild(source, masked, FACADE_VERSION)


def decode(facade: Identifier, key: Key) -> Identifier:
    """Recover the time-ordered identifier behind a facade."""
    # the facade's fingerprint equals the source's, so this is the same mask
    original = read_time_field(facade) ^ _compute_timestamp_mask(key, facade)
    return _rebuild(facade, original, SOURCE_VERSION)
