"""Pytest configuration and shared fixtures."""

import pytest

from codepage_437.core.table import CodePageTable
from codepage_437.dialects import DIALECTS, DIALECT_ENV_VAR


@pytest.fixture(params=sorted(DIALECTS), ids=str)
def dialect(request: pytest.FixtureRequest) -> CodePageTable:
    """Each built-in dialect in turn."""
    return DIALECTS[request.param]


@pytest.fixture
def identity_table() -> CodePageTable:
    """A Latin-1 style table where every byte maps to its own code point."""
    return CodePageTable.from_tables("identity", [chr(b) for b in range(256)])


@pytest.fixture(autouse=True)
def clear_dialect_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's $CODEPAGE_437_DIALECT out of the tests."""
    monkeypatch.delenv(DIALECT_ENV_VAR, raising=False)
