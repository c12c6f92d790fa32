"""Tests for whole-buffer conversion."""

import pytest

from codepage_437 import (
    CP437_CONTROL,
    CP437_WINGDINGS,
    CodePageTable,
    Cp437Error,
    InvalidByteError,
    from_cp437,
    to_cp437,
)
from codepage_437.dialects import DIALECT_ENV_VAR

NEWS_CP437 = bytes([
    0x4C, 0x6F, 0x63, 0x61, 0x6C, 0x20, 0x6E, 0x65, 0x77, 0x73, 0x20, 0x72, 0x65,
    0x70, 0x6F, 0x72, 0x74, 0x73, 0x20, 0x74, 0x68, 0x61, 0x74, 0x20, 0x74, 0x68,
    0x65, 0x20, 0x9E, 0xAB, 0x20, 0x6D, 0x69, 0x6C, 0x6C, 0x69, 0x6F, 0x6E, 0x20,
    0x41, 0x69, 0x72, 0x20, 0x4D, 0x65, 0x6C, 0x61, 0x6E, 0x65, 0x73, 0x69, 0x91,
    0x20, 0x61, 0x69, 0x72, 0x63, 0x72, 0x61, 0x66, 0x74, 0x20, 0x68, 0x61, 0x73,
    0x20, 0x63, 0x72, 0x61, 0x73, 0x68, 0x65, 0x64, 0x20, 0x74, 0x68, 0x69, 0x73,
    0x20, 0x6D, 0x6F, 0x72, 0x6E, 0x69, 0x6E, 0x67, 0x20, 0x61, 0x72, 0x6F, 0x75,
    0x6E, 0x64, 0x20, 0x39, 0x3A, 0x30, 0x30, 0x61, 0x6D, 0x2E,
])
NEWS_UNICODE = (
    "Local news reports that the ₧½ million Air Melanesiæ aircraft "
    "has crashed this morning around 9:00am."
)


class TestFromCp437:
    """Tests for decoding byte buffers."""

    def test_mixed_buffer(self) -> None:
        assert from_cp437(NEWS_CP437, CP437_CONTROL) == NEWS_UNICODE
        assert from_cp437(NEWS_CP437, CP437_WINGDINGS) == NEWS_UNICODE

    def test_ascii_buffer(self) -> None:
        assert from_cp437(b"Local news", CP437_CONTROL) == "Local news"

    def test_empty(self) -> None:
        assert from_cp437(b"", CP437_WINGDINGS) == ""

    def test_full_range(self, dialect: CodePageTable) -> None:
        decoded = from_cp437(bytes(range(256)), dialect)
        assert decoded == "".join(dialect.forward)

    def test_bytearray(self) -> None:
        assert from_cp437(bytearray(b"\x01\x02"), CP437_WINGDINGS) == "☺☻"

    def test_control_bytes_by_dialect(self) -> None:
        assert from_cp437(b"\x03\x7f", CP437_CONTROL) == "\x03\x7f"
        assert from_cp437(b"\x03\x7f", CP437_WINGDINGS) == "♥⌂"

    def test_out_of_range_values(self) -> None:
        with pytest.raises(InvalidByteError):
            from_cp437([-1], CP437_CONTROL)
        with pytest.raises(InvalidByteError):
            from_cp437([0x41, 256], CP437_WINGDINGS)

    def test_default_dialect(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert from_cp437(b"\x02") == "\x02"
        monkeypatch.setenv(DIALECT_ENV_VAR, "cp437_wingdings")
        assert from_cp437(b"\x02") == "☻"


class TestToCp437:
    """Tests for encoding strings."""

    def test_mixed_string(self) -> None:
        assert to_cp437(NEWS_UNICODE, CP437_CONTROL) == NEWS_CP437

    def test_ascii_string(self) -> None:
        assert to_cp437("Some string.", CP437_CONTROL) == b"Some string."

    def test_full_range(self, dialect: CodePageTable) -> None:
        assert to_cp437("".join(dialect.forward), dialect) == bytes(range(256))

    def test_variants(self) -> None:
        assert to_cp437("✓ β", CP437_WINGDINGS) == b"\xfb \xe1"

    def test_unrepresentable(self) -> None:
        with pytest.raises(Cp437Error) as exc_info:
            to_cp437("Jurek je żurek w żupanie.", CP437_CONTROL)
        assert exc_info.value.representable_up_to == 9
        assert exc_info.value.text == "Jurek je żurek w żupanie."
        assert "U+017C" in str(exc_info.value)

    def test_unrepresentable_second_character(self) -> None:
        with pytest.raises(Cp437Error) as exc_info:
            to_cp437("Eżektor", CP437_CONTROL)
        assert exc_info.value.representable_up_to == 1

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            to_cp437("ź", CP437_CONTROL)

    def test_control_characters_by_dialect(self) -> None:
        assert to_cp437("\x01", CP437_CONTROL) == b"\x01"
        with pytest.raises(Cp437Error):
            to_cp437("\x01", CP437_WINGDINGS)

    def test_replace(self) -> None:
        assert to_cp437("żurek", CP437_CONTROL, errors="replace") == b"?urek"

    def test_ignore(self) -> None:
        assert to_cp437("żurek", CP437_CONTROL, errors="ignore") == b"urek"

    def test_unknown_error_mode(self) -> None:
        with pytest.raises(ValueError, match="Unknown error mode"):
            to_cp437("abc", CP437_CONTROL, errors="xmlcharrefreplace")

    def test_default_dialect(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(DIALECT_ENV_VAR, "cp437_wingdings")
        assert to_cp437("☻") == b"\x02"
