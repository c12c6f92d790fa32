"""
codepage-437: conversion to and from IBM PC code page 437

Each dialect is an immutable lookup table between the 256 byte values and
Unicode characters. Decoding a byte always succeeds; encoding a character
returns None when the dialect cannot represent it.

Quick Start:
    >>> from codepage_437 import CP437_CONTROL, CP437_WINGDINGS
    >>> CP437_CONTROL.decode(0x91)
    'æ'
    >>> CP437_WINGDINGS.encode('☻')
    2
    >>> CP437_CONTROL.encode('ź') is None
    True

Features:
    - CP437 control and wingdings dialects with documented variant glyphs
    - Whole-buffer conversion with positional encode errors
    - Registration with Python's codecs for bytes.decode()/str.encode()
    - Tables loaded from tab-separated mapping files
    - 16x16 chart rendering with rich
"""

__version__ = "0.1.0"

# Core types
from codepage_437.core.table import CodePageTable, InvalidByteError

# Dialects
from codepage_437.dialects import (
    CP437_CONTROL,
    CP437_WINGDINGS,
    DIALECTS,
    default_dialect,
    get_dialect,
)

# Conversion
from codepage_437.codec.cp437 import Cp437Error, from_cp437, to_cp437
from codepage_437.codec.mapping_file import Mapping, load_table
from codepage_437.codec.registry import register

__all__ = [
    # Version
    "__version__",
    # Core types
    "CodePageTable",
    "InvalidByteError",
    # Dialects
    "CP437_CONTROL",
    "CP437_WINGDINGS",
    "DIALECTS",
    "default_dialect",
    "get_dialect",
    # Conversion
    "Cp437Error",
    "from_cp437",
    "to_cp437",
    "Mapping",
    "load_table",
    "register",
]
