"""The 128-bit identifier value type.

An Identifier is exactly 16 bytes in UUID (big-endian) field order:

    bytes 0-5   48-bit time field
    byte  6     version tag (high nibble) + payload (low nibble)
    byte  7     payload
    byte  8     variant tag (top 2 bits) + payload (low 6 bits)
    bytes 9-15  payload

Instances are immutable. Modified copies are built with with_byte() and
with_prefix(); nothing mutates in place.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import TYPE_CHECKING

from uuid47.errors import BufferTooSmall, InvalidFormat, InvalidLength

if TYPE_CHECKING:
    from uuid47.key import Key

SIZE = 16
COMPACT_LENGTH = 32
HYPHENATED_LENGTH = 36

_HYPHEN_POSITIONS = (8, 13, 18, 23)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Style(str, Enum):
    """Textual forms of an identifier."""

    COMPACT = "compact"
    HYPHENATED = "hyphenated"

    @property
    def length(self) -> int:
        return COMPACT_LENGTH if self is Style.COMPACT else HYPHENATED_LENGTH


_STYLE_ALIASES = {
    "": Style.HYPHENATED,
    "d": Style.HYPHENATED,
    "hyphenated": Style.HYPHENATED,
    "n": Style.COMPACT,
    "compact": Style.COMPACT,
}


def _resolve_style(style: Style | str) -> Style:
    if isinstance(style, Style):
        return style
    if isinstance(style, str):
        resolved = _STYLE_ALIASES.get(style.lower())
        if resolved is not None:
            return resolved
    raise InvalidFormat(style, "unsupported format style")


def is_hex(text: str) -> bool:
    """True if every character is an ASCII hex digit."""
    return all(c in _HEX_DIGITS for c in text)


def _decode_text(text: object) -> bytes | None:
    if not isinstance(text, str):
        return None
    if len(text) == HYPHENATED_LENGTH:
        if any(text[i] != "-" for i in _HYPHEN_POSITIONS):
            return None
        hex_text = text[0:8] + text[9:13] + text[14:18] + text[19:23] + text[24:36]
    elif len(text) == COMPACT_LENGTH:
        hex_text = text
    else:
        return None
    # bytes.fromhex() skips whitespace, so validate digits first
    if not is_hex(hex_text):
        return None
    return bytes.fromhex(hex_text)


class Identifier:
    """Immutable 16-byte identifier with structural equality."""

    __slots__ = ("_bytes",)

    EMPTY: Identifier

    def __init__(self, data: bytes | bytearray | memoryview):
        # memoryview rejects ints, which bytes() would turn into zero bytes
        raw = memoryview(data).tobytes()
        if len(raw) != SIZE:
            raise InvalidLength(len(raw), SIZE)
        object.__setattr__(self, "_bytes", raw)

    # ── Construction ──────────────────────────────────────────

    @classmethod
    def empty(cls) -> Identifier:
        return cls(bytes(SIZE))

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse 32-char compact or 36-char hyphenated hex, case-insensitive.

        Raises InvalidFormat for anything that does not map losslessly
        onto 16 bytes.
        """
        raw = _decode_text(text)
        if raw is None:
            raise InvalidFormat(text)
        return cls(raw)

    @classmethod
    def try_parse(cls, text: str | None) -> Identifier | None:
        """Like parse(), but returns None instead of raising."""
        raw = _decode_text(text)
        return None if raw is None else cls(raw)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> Identifier:
        return cls(value.bytes)

    # ── Views ─────────────────────────────────────────────────

    @property
    def bytes(self) -> bytes:
        return self._bytes

    def to_bytes(self) -> bytes:
        return self._bytes

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self._bytes)

    def copy_to(self, buffer: bytearray | memoryview) -> None:
        """Copy the 16 bytes into the start of a writable buffer."""
        if len(buffer) < SIZE:
            raise BufferTooSmall(SIZE, len(buffer))
        buffer[:SIZE] = self._bytes

    @property
    def version(self) -> int:
        return self._bytes[6] >> 4

    @property
    def variant_bits(self) -> int:
        return self._bytes[8] >> 6

    # ── Modified copies ───────────────────────────────────────

    def with_byte(self, index: int, value: int) -> Identifier:
        raw = bytearray(self._bytes)
        raw[index] = value
        return Identifier(raw)

    def with_prefix(self, data: bytes | bytearray) -> Identifier:
        """Copy with the leading len(data) bytes replaced."""
        if len(data) > SIZE:
            raise InvalidLength(len(data), SIZE)
        raw = bytearray(self._bytes)
        raw[: len(data)] = data
        return Identifier(raw)

    # ── Formatting ────────────────────────────────────────────

    def format(self, style: Style | str = Style.HYPHENATED) -> str:
        hex_text = self._bytes.hex()
        if _resolve_style(style) is Style.COMPACT:
            return hex_text
        return "-".join(
            (hex_text[0:8], hex_text[8:12], hex_text[12:16], hex_text[16:20], hex_text[20:32])
        )

    def format_into(
        self, buffer: bytearray | memoryview, style: Style | str = Style.HYPHENATED
    ) -> int:
        """Write ASCII text into buffer and return the number of chars written.

        Raises BufferTooSmall, leaving buffer untouched, if it cannot hold
        the whole output.
        """
        required = _resolve_style(style).length
        if len(buffer) < required:
            raise BufferTooSmall(required, len(buffer))
        buffer[:required] = self.format(style).encode("ascii")
        return required

    def try_format_into(
        self, buffer: bytearray | memoryview, style: Style | str = Style.HYPHENATED
    ) -> int | None:
        """Like format_into(), but returns None for an unknown style or a
        buffer that is too small.
        """
        try:
            required = _resolve_style(style).length
        except InvalidFormat:
            return None
        if len(buffer) < required:
            return None
        return self.format_into(buffer, style)

    # ── Codec sugar ───────────────────────────────────────────

    def to_facade(self, key: Key) -> Identifier:
        from uuid47.codec import encode

        return encode(self, key)

    def from_facade(self, key: Key) -> Identifier:
        from uuid47.codec import decode

        return decode(self, key)

    # ── Protocols ─────────────────────────────────────────────

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return SIZE

    def __getitem__(self, index):
        return self._bytes[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Identifier):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __str__(self) -> str:
        return self.format(Style.HYPHENATED)

    def __format__(self, spec: str) -> str:
        return self.format(spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __setattr__(self, name, value):
        raise TypeError("Identifier objects are immutable")

    def __delattr__(self, name):
        raise TypeError("Identifier objects are immutable")

    def __reduce__(self):
        return (Identifier, (self._bytes,))


Identifier.EMPTY = Identifier.empty()
