"""uuid47 — keyed UUIDv7 <-> UUIDv4 facade codec.

Keep time-ordered v7 ids internally (good database keys) and expose only
v4-looking facades. The facade's time field is XOR-masked with a keyed
SipHash-2-4 value, so without the key it is indistinguishable from random.

Usage:
    from uuid47 import Identifier, Key, encode, decode
    key = Key(0x0123456789ABCDEF, 0xFEDCBA9876543210)
    v7 = Identifier.parse("018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6f")
    facade = encode(v7, key)      # 2463c780-7fca-4def-8c3f-7b1a2c4d5e6f
    assert decode(facade, key) == v7
"""

__version__ = "0.1.0"

from uuid47.codec import decode, encode
from uuid47.decoder import DecoderRing
from uuid47.errors import BufferTooSmall, InvalidFormat, InvalidLength, Uuid47Error
from uuid47.identifier import Identifier, Style
from uuid47.key import Key
from uuid47.siphash import siphash24

__all__ = [
    "BufferTooSmall",
    "DecoderRing",
    "Identifier",
    "InvalidFormat",
    "InvalidLength",
    "Key",
    "Style",
    "Uuid47Error",
    "decode",
    "encode",
    "siphash24",
]
