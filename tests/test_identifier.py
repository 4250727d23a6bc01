"""Tests for the Identifier value type: construction, text forms, bridge."""

from __future__ import annotations

import pickle
import random
import uuid

import pytest

from uuid47 import BufferTooSmall, Identifier, InvalidFormat, InvalidLength, Style

SAMPLE = "018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6f"
SAMPLE_COMPACT = "018f2d9f9a2a7def8c3f7b1a2c4d5e6f"


def _random_identifier(seed: int) -> Identifier:
    return Identifier(random.Random(seed).randbytes(16))


class TestConstruction:
    def test_from_16_bytes(self):
        raw = bytes(range(16))
        ident = Identifier(raw)
        assert ident.bytes == raw
        assert bytes(ident) == raw
        assert len(ident) == 16

    def test_accepts_bytearray_and_memoryview(self):
        raw = bytearray(range(16))
        assert Identifier(raw) == Identifier(memoryview(raw))

    @pytest.mark.parametrize("length", [0, 1, 15, 17, 32])
    def test_wrong_length_raises(self, length):
        with pytest.raises(InvalidLength) as excinfo:
            Identifier(bytes(length))
        assert excinfo.value.length == length

    @pytest.mark.parametrize("value", [16, 0, "0" * 16])
    def test_rejects_non_buffer(self, value):
        # an int length must not become 16 zero bytes
        with pytest.raises(TypeError):
            Identifier(value)

    def test_source_buffer_is_copied(self):
        raw = bytearray(16)
        ident = Identifier(raw)
        raw[0] = 0xFF
        assert ident[0] == 0

    def test_empty(self):
        assert Identifier.EMPTY == Identifier(bytes(16))
        assert Identifier.empty() == Identifier.EMPTY
        assert str(Identifier.EMPTY) == "00000000-0000-0000-0000-000000000000"

    def test_immutable(self):
        ident = Identifier.parse(SAMPLE)
        with pytest.raises(TypeError):
            ident._bytes = bytes(16)
        with pytest.raises(TypeError):
            del ident._bytes


class TestParse:
    def test_hyphenated(self):
        ident = Identifier.parse(SAMPLE)
        assert ident.bytes.hex() == SAMPLE_COMPACT

    def test_compact(self):
        assert Identifier.parse(SAMPLE_COMPACT) == Identifier.parse(SAMPLE)

    def test_case_insensitive(self):
        assert Identifier.parse(SAMPLE.upper()) == Identifier.parse(SAMPLE)
        assert Identifier.parse(SAMPLE_COMPACT.upper()) == Identifier.parse(SAMPLE)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not-a-uuid",
            "a" * 31,
            "a" * 33,
            "a" * 35,
            "a" * 37,
            SAMPLE.replace("-", ":"),
            # hyphens present but shifted one place
            "018f2d9-f9a2a-7def-8c3f-7b1a2c4d5e6f",
            "018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6g",
            "018f2d9f9a2a7def8c3f7b1a2c4d5e6z",
            # whitespace would be skipped by bytes.fromhex
            "018f2d9f 9a2a7def8c3f7b1a2c4d5e6",
            # non-ASCII digits
            "٠" * 32,
            "018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6" + "é",
        ],
    )
    def test_rejects(self, text):
        with pytest.raises(InvalidFormat):
            Identifier.parse(text)
        assert Identifier.try_parse(text) is None

    @pytest.mark.parametrize("position", [8, 13, 18, 23])
    def test_rejects_non_hyphen_at_separator(self, position):
        text = SAMPLE[:position] + "0" + SAMPLE[position + 1 :]
        assert Identifier.try_parse(text) is None

    def test_try_parse_none(self):
        assert Identifier.try_parse(None) is None

    def test_parse_non_string_raises_invalid_format(self):
        with pytest.raises(InvalidFormat):
            Identifier.parse(SAMPLE_COMPACT.encode())

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            Identifier.parse("abc")


class TestFormat:
    def test_default_is_hyphenated(self):
        ident = Identifier.parse(SAMPLE_COMPACT)
        assert str(ident) == SAMPLE
        assert ident.format() == SAMPLE

    def test_compact(self):
        ident = Identifier.parse(SAMPLE)
        assert ident.format(Style.COMPACT) == SAMPLE_COMPACT
        assert ident.format("N") == SAMPLE_COMPACT
        assert ident.format("compact") == SAMPLE_COMPACT

    def test_output_is_lowercase(self):
        ident = Identifier.parse(SAMPLE.upper())
        assert ident.format(Style.HYPHENATED) == SAMPLE

    def test_fstring_specifiers(self):
        ident = Identifier.parse(SAMPLE)
        assert f"{ident}" == SAMPLE
        assert f"{ident:n}" == SAMPLE_COMPACT
        assert f"{ident:D}" == SAMPLE

    def test_unknown_style(self):
        with pytest.raises(InvalidFormat):
            Identifier.EMPTY.format("x")

    def test_repr(self):
        assert repr(Identifier.parse(SAMPLE)) == f"Identifier('{SAMPLE}')"

    @pytest.mark.parametrize("seed", range(20))
    def test_text_roundtrip(self, seed):
        ident = _random_identifier(seed)
        for style in Style:
            text = ident.format(style)
            assert len(text) == style.length
            assert Identifier.parse(text) == ident


class TestFormatInto:
    def test_writes_hyphenated(self):
        buf = bytearray(40)
        written = Identifier.parse(SAMPLE).format_into(buf)
        assert written == 36
        assert buf[:36].decode("ascii") == SAMPLE
        assert buf[36:] == bytearray(4)

    def test_writes_compact_into_exact_buffer(self):
        buf = bytearray(32)
        written = Identifier.parse(SAMPLE).format_into(buf, Style.COMPACT)
        assert written == 32
        assert buf.decode("ascii") == SAMPLE_COMPACT

    def test_memoryview(self):
        backing = bytearray(b"#" * 36)
        Identifier.parse(SAMPLE).format_into(memoryview(backing))
        assert backing.decode("ascii") == SAMPLE

    @pytest.mark.parametrize("style,size", [(Style.HYPHENATED, 35), (Style.COMPACT, 31), (Style.HYPHENATED, 10)])
    def test_too_small_raises_without_writing(self, style, size):
        buf = bytearray(b"#" * size)
        with pytest.raises(BufferTooSmall) as excinfo:
            Identifier.parse(SAMPLE).format_into(buf, style)
        assert excinfo.value.required == style.length
        assert excinfo.value.available == size
        assert buf == bytearray(b"#" * size)

    def test_try_format_into(self):
        ident = Identifier.parse(SAMPLE)
        small = bytearray(10)
        assert ident.try_format_into(small) is None
        assert ident.try_format_into(small, "N") is None
        assert small == bytearray(10)
        assert ident.try_format_into(bytearray(32), "N") == 32

    def test_try_format_into_unknown_style(self):
        buf = bytearray(b"#" * 40)
        assert Identifier.parse(SAMPLE).try_format_into(buf, "x") is None
        assert buf == bytearray(b"#" * 40)


class TestBytesAccess:
    def test_copy_to(self):
        ident = Identifier.parse(SAMPLE)
        buf = bytearray(20)
        ident.copy_to(buf)
        assert bytes(buf[:16]) == ident.bytes

    def test_copy_to_too_small(self):
        with pytest.raises(BufferTooSmall):
            Identifier.EMPTY.copy_to(bytearray(15))

    def test_indexing(self):
        ident = Identifier.parse(SAMPLE)
        assert ident[0] == 0x01
        assert ident[15] == 0x6F
        assert ident[0:2] == b"\x01\x8f"

    def test_version_and_variant(self):
        ident = Identifier.parse(SAMPLE)
        assert ident.version == 7
        assert ident.variant_bits == 0b10

    def test_with_byte_returns_copy(self):
        ident = Identifier.EMPTY
        changed = ident.with_byte(3, 0xAB)
        assert changed[3] == 0xAB
        assert ident == Identifier.EMPTY

    def test_with_prefix(self):
        changed = Identifier.EMPTY.with_prefix(b"\xff\xff\xff")
        assert str(changed) == "ffffff00-0000-0000-0000-000000000000"

    def test_with_prefix_too_long(self):
        with pytest.raises(InvalidLength):
            Identifier.EMPTY.with_prefix(bytes(17))


class TestEquality:
    def test_equal_and_hash(self):
        raw = random.Random(789).randbytes(16)
        a = Identifier(raw)
        b = Identifier(raw)
        assert a == b
        assert not a != b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_single_byte_difference(self):
        raw = bytearray(random.Random(789).randbytes(16))
        a = Identifier(raw)
        raw[15] ^= 0x01
        assert a != Identifier(raw)

    def test_not_equal_to_other_types(self):
        ident = Identifier.parse(SAMPLE)
        assert ident != SAMPLE
        assert ident != ident.bytes
        assert ident != uuid.UUID(SAMPLE)

    def test_pickle(self):
        ident = Identifier.parse(SAMPLE)
        assert pickle.loads(pickle.dumps(ident)) == ident


class TestUuidBridge:
    def test_big_endian_order(self):
        ident = Identifier.parse(SAMPLE)
        native = ident.to_uuid()
        assert isinstance(native, uuid.UUID)
        assert str(native) == SAMPLE
        assert native.version == 7

    @pytest.mark.parametrize("seed", range(5))
    def test_roundtrip(self, seed):
        ident = _random_identifier(seed)
        assert Identifier.from_uuid(ident.to_uuid()) == ident

    def test_from_uuid4(self):
        native = uuid.uuid4()
        assert str(Identifier.from_uuid(native)) == str(native)
