"""Error types for uuid47.

All of them are ValueError subclasses: a malformed identifier is a bad
value, nothing more. There is nothing transient here to retry.
"""

from __future__ import annotations


class Uuid47Error(ValueError):
    """Base class for every error raised by uuid47."""


class InvalidLength(Uuid47Error):
    """A byte buffer that should hold an identifier or key has the wrong size."""

    def __init__(self, length: int, expected: int = 16):
        self.length = length
        self.expected = expected
        super().__init__(f"expected {expected} bytes, got {length}")


class InvalidFormat(Uuid47Error):
    """Text that does not map losslessly onto 16 bytes."""

    def __init__(self, text: object, reason: str = "invalid UUID format"):
        self.text = text
        self.reason = reason
        shown = repr(text)
        if len(shown) > 60:
            shown = shown[:57] + "..."
        super().__init__(f"{reason}: {shown}")


class BufferTooSmall(Uuid47Error):
    """Caller-provided storage cannot hold the requested output."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"buffer too small: need {required}, have {available}")
