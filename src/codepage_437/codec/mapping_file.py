"""
Load code page tables from tab-separated mapping files.

Each file has a header row followed by one record per line::

    cp437	unicode	comment
    0x01	0x263A	WHITE SMILING FACE
    0x02	0x263B	BLACK SMILING FACE

A values file gives the primary decode table. Bytes it does not list
decode to the character with the same code point. An optional variants
file lists alternate glyphs accepted when encoding.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from codepage_437.core.constants import TABLE_SIZE
from codepage_437.core.table import CodePageTable

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class Mapping:
    """One byte/character record from a mapping file."""
    code: int
    char: str
    comment: str = ""


def _parse_hex(value: str, field_name: str, max_digits: int) -> int:
    if value[:2] != "0x":
        raise ValueError(f"Invalid {field_name} code prefix ({value[:2]!r}, should be '0x')")
    digits = value[2:]
    if not digits or not set(digits) <= HEX_DIGITS:
        raise ValueError(f"{field_name} code {value!r} not hex")
    if len(digits) > max_digits:
        raise ValueError(f"{field_name} code {value!r} too big")
    return int(digits, 16)


def parse_record(fields: Sequence[str]) -> Mapping:
    """Validate and convert a single (byte, code point, comment) record."""
    if len(fields) != 3:
        raise ValueError(f"Invalid record length ({len(fields)}, should be 3)")

    code_field, char_field, comment = fields
    code = _parse_hex(code_field, "cp437", 2)
    code_point = _parse_hex(char_field, "Unicode", 8)
    if code_point > MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        raise ValueError(f"Unicode code 0x{code_point:X} out of range")

    return Mapping(code=code, char=chr(code_point), comment=comment)


def read_mappings(path: str | Path) -> list[Mapping]:
    """Read every record of a mapping file, skipping the header row."""
    path = Path(path)
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.reader(f, delimiter='\t')
        next(reader, None)
        mappings = []
        for line_number, row in enumerate(reader, start=2):
            if not row:
                continue
            try:
                mappings.append(parse_record(row))
            except ValueError as e:
                raise ValueError(f"{path.name}:{line_number}: {e}") from e
    return mappings


def load_table(
    name: str,
    values_path: str | Path,
    variants_path: str | Path | None = None,
) -> CodePageTable:
    """Build a CodePageTable from a values file and an optional variants file."""
    forward = [chr(code) for code in range(TABLE_SIZE)]
    for mapping in read_mappings(values_path):
        forward[mapping.code] = mapping.char

    variants: list[tuple[int, str]] = []
    if variants_path is not None:
        variants = [(m.code, m.char) for m in read_mappings(variants_path)]

    return CodePageTable.from_tables(name, forward, variants)
