"""SipHash-2-4.

Keyed 64-bit pseudorandom function over arbitrary-length input, bit-for-bit
compatible with the reference implementation by Aumasson and Bernstein.
Integers here are Python ints held to 64 bits with _MASK64.
"""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF

# "somepseudorandomlygeneratedbytes"
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573

_COMPRESSION_ROUNDS = 2
_FINALIZATION_ROUNDS = 4


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & _MASK64


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def siphash24(k0: int, k1: int, data: bytes | bytearray | memoryview) -> int:
    """Return the 64-bit SipHash-2-4 of data under the key (k0, k1).

    k0 and k1 are the two 64-bit key words, i.e. the first and second
    eight key bytes read little-endian.
    """
    if not 0 <= k0 <= _MASK64 or not 0 <= k1 <= _MASK64:
        raise ValueError("SipHash key words must be unsigned 64-bit integers")

    data = memoryview(data).tobytes()
    v0 = _INIT_V0 ^ k0
    v1 = _INIT_V1 ^ k1
    v2 = _INIT_V2 ^ k0
    v3 = _INIT_V3 ^ k1

    length = len(data)
    full_blocks = length & ~0x7
    for offset in range(0, full_blocks, 8):
        m = int.from_bytes(data[offset : offset + 8], "little")
        v3 ^= m
        for _ in range(_COMPRESSION_ROUNDS):
            v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= m

    # trailing 0-7 bytes, with the length (mod 256) in the top byte
    b = ((length & 0xFF) << 56) | int.from_bytes(data[full_blocks:], "little")
    v3 ^= b
    for _ in range(_COMPRESSION_ROUNDS):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= b

    v2 ^= 0xFF
    for _ in range(_FINALIZATION_ROUNDS):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3
