"""Core data structures for code page lookup."""

from codepage_437.core.table import CodePageTable, InvalidByteError

__all__ = ["CodePageTable", "InvalidByteError"]
