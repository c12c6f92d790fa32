"""CodePageTable - bidirectional byte/character lookup for one dialect."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from codepage_437.core.constants import TABLE_SIZE

if TYPE_CHECKING:
    from rich.table import Table

logger = logging.getLogger(__name__)


class InvalidByteError(IndexError):
    """Raised when a value outside 0x00-0xFF is used as a code point."""


def _check_byte(byte: int) -> int:
    if not isinstance(byte, int) or not 0 <= byte < TABLE_SIZE:
        raise InvalidByteError(f"Byte must be an integer 0-255, got {byte!r}")
    return byte


def _check_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError(f"Expected a single character, got {char!r}")
    return char


@dataclass(frozen=True)
class CodePageTable:
    """
    An immutable 8-bit code page.

    ``forward`` is the decode table: 256 characters indexed by byte, so
    decoding is total. ``backward`` is its curated inverse: when a
    character appears at more than one byte the first one in byte order
    wins, so encoding is a partial function.

    ``variants`` lists alternate glyphs historically documented for a
    byte. They encode to that byte but are never returned by decode.

    Example:
        >>> table = CodePageTable.from_tables("demo", [chr(b) for b in range(256)])
        >>> table.decode(0x41)
        'A'
        >>> table.encode('Ÿ') is None
        True
    """
    name: str
    forward: tuple[str, ...] = field(repr=False)
    variants: tuple[tuple[int, str], ...] = field(default=(), repr=False)

    # Derived at construction, excluded from comparison and hashing
    backward: Mapping[str, int] = field(init=False, repr=False, compare=False)
    variant_backward: Mapping[str, int] = field(init=False, repr=False, compare=False)
    overlap: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.forward) != TABLE_SIZE:
            raise ValueError(
                f"Code page {self.name!r} needs {TABLE_SIZE} entries, got {len(self.forward)}"
            )
        for byte, char in enumerate(self.forward):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(
                    f"Code page {self.name!r}: entry 0x{byte:02X} must be one character, got {char!r}"
                )

        backward: dict[str, int] = {}
        for byte, char in enumerate(self.forward):
            # First occurrence in byte order is the canonical byte
            backward.setdefault(char, byte)

        variant_backward: dict[str, int] = {}
        for byte, char in self.variants:
            if not isinstance(byte, int) or not 0 <= byte < TABLE_SIZE:
                raise ValueError(
                    f"Code page {self.name!r}: variant byte must be 0-255, got {byte!r}"
                )
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(
                    f"Code page {self.name!r}: variant for 0x{byte:02X} must be one character, got {char!r}"
                )
            if char in backward or char in variant_backward:
                logger.warning(
                    "Code page %s: ignoring variant U+%04X for 0x%02X, already mapped",
                    self.name, ord(char), byte,
                )
                continue
            variant_backward[char] = byte

        object.__setattr__(self, "backward", MappingProxyType(backward))
        object.__setattr__(self, "variant_backward", MappingProxyType(variant_backward))
        object.__setattr__(self, "overlap", frozenset(
            byte for byte, char in enumerate(self.forward) if ord(char) == byte
        ))
        logger.debug(
            "Built code page %s: %d characters, %d variants",
            self.name, len(backward), len(variant_backward),
        )

    @classmethod
    def from_tables(
        cls,
        name: str,
        forward: Sequence[str],
        variants: Iterable[tuple[int, str]] = (),
    ) -> CodePageTable:
        """Build a table from a 256-entry decode sequence and variant pairs."""
        return cls(
            name=name,
            forward=tuple(forward),
            variants=tuple((byte, char) for byte, char in variants),
        )

    def decode(self, byte: int) -> str:
        """Decode a single byte. Total over 0-255."""
        return self.forward[_check_byte(byte)]

    def encode(self, char: str) -> int | None:
        """Encode a single character, or return None if it has no byte."""
        _check_char(char)
        byte = self.backward.get(char)
        if byte is None:
            byte = self.variant_backward.get(char)
        return byte

    def alternates(self, byte: int) -> tuple[str, ...]:
        """Variant glyphs that encode to ``byte`` besides its primary one."""
        _check_byte(byte)
        return tuple(char for char, b in self.variant_backward.items() if b == byte)

    def overlaps_byte(self, byte: int) -> bool:
        """True if ``byte`` decodes to the character with the same code point."""
        return _check_byte(byte) in self.overlap

    def overlaps_char(self, char: str) -> bool:
        """True if ``char`` encodes to the byte with the same code point."""
        return self.encode(char) == ord(char)

    def remap(self, byte: int, char: str) -> CodePageTable:
        """
        Return a copy where ``byte`` decodes to ``char``.

        ``char`` then encodes to ``byte`` unless it also decodes from a
        lower byte. The glyph previously at ``byte`` is kept as a variant,
        so it keeps encoding to ``byte``. This table is left unchanged.
        """
        _check_byte(byte)
        _check_char(char)
        previous = self.forward[byte]

        forward = list(self.forward)
        forward[byte] = char

        variants = [(b, c) for b, c in self.variants if c != char]
        if previous != char and previous not in forward:
            variants = [(b, c) for b, c in variants if c != previous]
            variants.append((byte, previous))

        return CodePageTable.from_tables(self.name, forward, variants)

    def __rich__(self) -> Table:
        from codepage_437.render.chart import chart
        return chart(self)
