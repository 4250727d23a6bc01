"""The 128-bit codec key.

Byte form (to_bytes/from_bytes/hex/from_hex): 16 bytes, the first eight
are k0 and the next eight are k1, each half little-endian. This is the
SipHash reference key layout, so key bytes 00..0f give
k0 = 0x0706050403020100 and k1 = 0x0f0e0d0c0b0a0908. Swapping the halves
or their byte order yields a different, incompatible transform.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from uuid47.errors import InvalidFormat, InvalidLength
from uuid47.identifier import is_hex

KEY_SIZE = 16
_MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True, repr=False)
class Key:
    """SipHash key as two unsigned 64-bit words. Immutable."""

    k0: int
    k1: int

    def __post_init__(self):
        for name in ("k0", "k1"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= _MASK64:
                raise ValueError(f"{name} must fit in 64 unsigned bits")

    @classmethod
    def new_random(cls) -> Key:
        """Fresh key from the OS CSPRNG."""
        return cls.from_bytes(secrets.token_bytes(KEY_SIZE))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Key:
        raw = memoryview(data).tobytes()
        if len(raw) != KEY_SIZE:
            raise InvalidLength(len(raw), KEY_SIZE)
        return cls(int.from_bytes(raw[:8], "little"), int.from_bytes(raw[8:], "little"))

    @classmethod
    def from_hex(cls, text: str) -> Key:
        """Parse the 32-hex-digit rendering of to_bytes()."""
        if not isinstance(text, str) or len(text) != 2 * KEY_SIZE or not is_hex(text):
            raise InvalidFormat("<key>", "key must be 32 hex digits")
        return cls.from_bytes(bytes.fromhex(text))

    def to_bytes(self) -> bytes:
        return self.k0.to_bytes(8, "little") + self.k1.to_bytes(8, "little")

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __repr__(self) -> str:
        # never render key material
        return "Key(<redacted>)"
