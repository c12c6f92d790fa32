"""Encoding/decoding helpers built on CodePageTable."""

from codepage_437.codec.cp437 import Cp437Error, from_cp437, to_cp437
from codepage_437.codec.mapping_file import Mapping, load_table, read_mappings
from codepage_437.codec.registry import register

__all__ = [
    "Cp437Error",
    "from_cp437",
    "to_cp437",
    "Mapping",
    "load_table",
    "read_mappings",
    "register",
]
