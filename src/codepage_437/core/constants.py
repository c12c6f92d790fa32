"""Literal mapping data for the CP437 dialects."""

# Number of code points in a single-byte code page
TABLE_SIZE = 256

# Bytes 0x80-0xFF, shared by every CP437 dialect
# Source: http://www.unicode.org/Public/MAPPINGS/VENDORS/MICSFT/PC/CP437.TXT
CP437_HIGH: tuple[str, ...] = (
    # 0x80-0x9F: Accented letters and currency
    '\u00C7', '\u00FC', '\u00E9', '\u00E2', '\u00E4', '\u00E0', '\u00E5', '\u00E7',
    '\u00EA', '\u00EB', '\u00E8', '\u00EF', '\u00EE', '\u00EC', '\u00C4', '\u00C5',
    '\u00C9', '\u00E6', '\u00C6', '\u00F4', '\u00F6', '\u00F2', '\u00FB', '\u00F9',
    '\u00FF', '\u00D6', '\u00DC', '\u00A2', '\u00A3', '\u00A5', '\u20A7', '\u0192',
    # 0xA0-0xAF: Accented letters and punctuation
    '\u00E1', '\u00ED', '\u00F3', '\u00FA', '\u00F1', '\u00D1', '\u00AA', '\u00BA',
    '\u00BF', '\u2310', '\u00AC', '\u00BD', '\u00BC', '\u00A1', '\u00AB', '\u00BB',
    # 0xB0-0xDF: Shades, box drawing and blocks
    '\u2591', '\u2592', '\u2593', '\u2502', '\u2524', '\u2561', '\u2562', '\u2556',
    '\u2555', '\u2563', '\u2551', '\u2557', '\u255D', '\u255C', '\u255B', '\u2510',
    '\u2514', '\u2534', '\u252C', '\u251C', '\u2500', '\u253C', '\u255E', '\u255F',
    '\u255A', '\u2554', '\u2569', '\u2566', '\u2560', '\u2550', '\u256C', '\u2567',
    '\u2568', '\u2564', '\u2565', '\u2559', '\u2558', '\u2552', '\u2553', '\u256B',
    '\u256A', '\u2518', '\u250C', '\u2588', '\u2584', '\u258C', '\u2590', '\u2580',
    # 0xE0-0xFF: Greek letters and mathematical symbols
    '\u03B1', '\u00DF', '\u0393', '\u03C0', '\u03A3', '\u03C3', '\u00B5', '\u03C4',
    '\u03A6', '\u0398', '\u03A9', '\u03B4', '\u221E', '\u03C6', '\u03B5', '\u2229',
    '\u2261', '\u00B1', '\u2265', '\u2264', '\u2320', '\u2321', '\u00F7', '\u2248',
    '\u00B0', '\u2219', '\u00B7', '\u221A', '\u207F', '\u00B2', '\u25A0', '\u00A0',
)

# 0x00-0x1F as drawn by the PC text mode instead of C0 controls
# Source: https://en.wikipedia.org/wiki/Code_page_437
WINGDINGS_LOW: tuple[str, ...] = (
    '\u0000', '\u263A', '\u263B', '\u2665', '\u2666', '\u2663', '\u2660', '\u2022',
    '\u25D8', '\u25CB', '\u25D9', '\u2642', '\u2640', '\u266A', '\u266B', '\u263C',
    '\u25BA', '\u25C4', '\u2195', '\u203C', '\u00B6', '\u00A7', '\u25AC', '\u21A8',
    '\u2191', '\u2193', '\u2192', '\u2190', '\u221F', '\u2194', '\u25B2', '\u25BC',
)

HOUSE = '\u2302'  # 0x7F in the wingdings dialect

# 0x00-0x7F: ASCII, C0 controls and DEL included
ASCII_LOW: tuple[str, ...] = tuple(chr(code) for code in range(0x80))

CP437_CONTROL_TABLE: tuple[str, ...] = ASCII_LOW + CP437_HIGH

CP437_WINGDINGS_TABLE: tuple[str, ...] = (
    WINGDINGS_LOW + ASCII_LOW[0x20:0x7F] + (HOUSE,) + CP437_HIGH
)

# Alternate glyphs documented for the upper half.
# Accepted when encoding, never produced when decoding.
CP437_HIGH_VARIANTS: tuple[tuple[int, str], ...] = (
    (0xE1, '\u03B2'),  # β GREEK SMALL LETTER BETA (for ß)
    (0xE3, '\u220F'),  # ∏ N-ARY PRODUCT (for π)
    (0xE4, '\u2211'),  # ∑ N-ARY SUMMATION (for Σ)
    (0xE6, '\u03BC'),  # μ GREEK SMALL LETTER MU (for µ)
    (0xEA, '\u2126'),  # Ω OHM SIGN (for Ω)
    (0xEB, '\u00F0'),  # ð LATIN SMALL LETTER ETH (for δ)
    (0xED, '\u03D5'),  # ϕ GREEK PHI SYMBOL (for φ)
    (0xED, '\u2205'),  # ∅ EMPTY SET
    (0xED, '\u2300'),  # ⌀ DIAMETER SIGN
    (0xED, '\u00F8'),  # ø LATIN SMALL LETTER O WITH STROKE
    (0xEE, '\u2208'),  # ∈ ELEMENT OF (for ε)
    (0xEE, '\u20AC'),  # € EURO SIGN
    (0xFB, '\u2713'),  # ✓ CHECK MARK (for √)
)

WINGDINGS_LOW_VARIANTS: tuple[tuple[int, str], ...] = (
    (0x0E, '\u266C'),  # ♬ BEAMED SIXTEENTH NOTES (for ♫)
    (0x1C, '\u2319'),  # ⌙ TURNED NOT SIGN (for ∟)
)

CP437_CONTROL_VARIANTS = CP437_HIGH_VARIANTS
CP437_WINGDINGS_VARIANTS = WINGDINGS_LOW_VARIANTS + CP437_HIGH_VARIANTS

# Replacement byte for unmappable characters ('?')
REPLACEMENT_BYTE = 0x3F
