"""CP437 buffer conversion built on the single-byte table lookups."""

from codepage_437.core.constants import REPLACEMENT_BYTE
from codepage_437.core.table import CodePageTable
from codepage_437.dialects import default_dialect

ERROR_MODES = ("strict", "replace", "ignore")


class Cp437Error(ValueError):
    """
    Raised when text cannot be represented in a code page.

    ``representable_up_to`` is the index of the first character that has
    no byte, so ``text[:representable_up_to]`` would have encoded.
    """

    def __init__(self, text: str, representable_up_to: int, dialect: str) -> None:
        self.text = text
        self.representable_up_to = representable_up_to
        self.dialect = dialect
        char = text[representable_up_to]
        super().__init__(
            f"Character {char!r} (U+{ord(char):04X}) at index {representable_up_to} "
            f"has no encoding in {dialect}"
        )


def from_cp437(data: bytes, dialect: CodePageTable | None = None) -> str:
    """Convert code page bytes to a Unicode string."""
    table = dialect or default_dialect()
    if table.overlap.issuperset(data):
        return bytes(data).decode('latin-1')
    return ''.join(table.decode(b) for b in data)


def to_cp437(
    text: str,
    dialect: CodePageTable | None = None,
    errors: str = "strict",
) -> bytes:
    """
    Convert a Unicode string to code page bytes.

    Args:
        text: String to encode
        dialect: Table to use, defaults to default_dialect()
        errors: "strict" raises Cp437Error on the first unmappable
            character, "replace" writes '?' instead, "ignore" drops it

    Returns:
        The encoded bytes
    """
    if errors not in ERROR_MODES:
        raise ValueError(f"Unknown error mode: {errors!r} (expected one of {ERROR_MODES})")

    table = dialect or default_dialect()
    if all(table.overlaps_char(char) for char in text):
        return text.encode('latin-1')

    result = bytearray()
    for index, char in enumerate(text):
        byte = table.encode(char)
        if byte is not None:
            result.append(byte)
        elif errors == "strict":
            raise Cp437Error(text, index, table.name)
        elif errors == "replace":
            result.append(REPLACEMENT_BYTE)
    return bytes(result)
