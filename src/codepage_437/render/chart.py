"""Render a code page as a 16x16 chart.

Example:
    from rich import print
    from codepage_437 import CP437_WINGDINGS

    print(CP437_WINGDINGS)  # uses CodePageTable.__rich__
"""

from codepage_437.core.table import CodePageTable

try:
    from rich.table import Table
    from rich.text import Text
    HAS_RICH = True
except ImportError:
    HAS_RICH = False


HEX = "0123456789ABCDEF"
DEL = 0x7F


def _check_rich() -> None:
    """Raise ImportError if rich is not available."""
    if not HAS_RICH:
        raise ImportError(
            "rich is required for chart rendering. "
            "Install with: uv pip install codepage-437[render]"
        )


def printable(char: str) -> str:
    """Substitute Unicode control pictures for C0 controls and DEL."""
    code = ord(char)
    if code < 0x20:
        return chr(0x2400 + code)
    if code == DEL:
        return '␡'
    return char


def chart_text(table: CodePageTable) -> str:
    """Plain-text chart: a header row, then one row per high nibble."""
    lines = ["   " + " ".join(f"_{d}" for d in HEX)]
    for high in range(16):
        cells = (printable(table.forward[high * 16 + low]) for low in range(16))
        lines.append(f"{HEX[high]}_ " + " ".join(f"{c} " for c in cells).rstrip())
    return "\n".join(lines)


def chart(table: CodePageTable) -> "Table":
    """
    Build a rich Table for a code page.

    Bytes that decode to the same code point are dimmed; bytes with
    variant glyphs are shown in bold.
    """
    _check_rich()

    grid = Table(title=table.name, show_lines=False)
    grid.add_column("", style="bold cyan", justify="right")
    for low in HEX:
        grid.add_column(f"_{low}", justify="center")

    for high in range(16):
        row: list[Text] = []
        for low in range(16):
            byte = high * 16 + low
            style = ""
            if byte in table.overlap:
                style = "dim"
            elif table.alternates(byte):
                style = "bold"
            row.append(Text(printable(table.forward[byte]), style=style))
        grid.add_row(f"{HEX[high]}_", *row)

    return grid
