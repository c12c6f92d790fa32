"""
Built-in CP437 dialects.

Each dialect is a module-level CodePageTable constant. They share most of
their contents but no storage:

- ``CP437_CONTROL``: Microsoft's cp437_DOSLatinUS. 0x00-0x7F are ASCII,
  control characters and DEL included.
- ``CP437_WINGDINGS``: the page as drawn by PC text mode. 0x01-0x1F are
  the smiley/card-suit/arrow glyphs and 0x7F is the house glyph.

Set ``CODEPAGE_437_DIALECT`` to choose which dialect the buffer helpers
use when none is passed.
"""

import os
from types import MappingProxyType

from codepage_437.core.constants import (
    CP437_CONTROL_TABLE,
    CP437_CONTROL_VARIANTS,
    CP437_WINGDINGS_TABLE,
    CP437_WINGDINGS_VARIANTS,
)
from codepage_437.core.table import CodePageTable

DIALECT_ENV_VAR = "CODEPAGE_437_DIALECT"
DEFAULT_DIALECT_NAME = "cp437_control"

CP437_CONTROL = CodePageTable.from_tables(
    "cp437_control", CP437_CONTROL_TABLE, CP437_CONTROL_VARIANTS,
)

CP437_WINGDINGS = CodePageTable.from_tables(
    "cp437_wingdings", CP437_WINGDINGS_TABLE, CP437_WINGDINGS_VARIANTS,
)

DIALECTS = MappingProxyType({
    table.name: table for table in (CP437_CONTROL, CP437_WINGDINGS)
})


def normalize_name(name: str) -> str:
    """Normalize a dialect name: lowercase, '-' and ' ' become '_'."""
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def get_dialect(name: str) -> CodePageTable:
    """Look up a built-in dialect by name."""
    key = normalize_name(name)
    if key not in DIALECTS:
        known = ", ".join(sorted(DIALECTS))
        raise KeyError(f"Unknown dialect: {name!r} (known: {known})")
    return DIALECTS[key]


def default_dialect() -> CodePageTable:
    """Dialect named by $CODEPAGE_437_DIALECT, or cp437_control."""
    return get_dialect(os.environ.get(DIALECT_ENV_VAR) or DEFAULT_DIALECT_NAME)
