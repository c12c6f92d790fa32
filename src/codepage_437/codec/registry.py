"""
Python codec registration for the CP437 dialects.

After ``register()``, every built-in dialect works with the standard
string methods and their ``errors=`` handlers::

    >>> import codepage_437
    >>> codepage_437.register()
    >>> b'\\x02 \\x91'.decode('cp437_wingdings')
    '☻ æ'
    >>> '✓'.encode('cp437-wingdings')
    b'\\xfb'
"""
# pylint: disable=redefined-builtin

import codecs
import logging
from functools import lru_cache

from codepage_437.core.table import CodePageTable
from codepage_437.dialects import DIALECTS, normalize_name

logger = logging.getLogger(__name__)

_registered = False


@lru_cache(maxsize=None)
def decoding_table(table: CodePageTable) -> str:
    """The 256-character string used by codecs.charmap_decode."""
    return ''.join(table.forward)


@lru_cache(maxsize=None)
def encoding_table(table: CodePageTable) -> dict[int, int]:
    """Code point to byte map used by codecs.charmap_encode, variants included."""
    encoding = {ord(char): byte for char, byte in table.variant_backward.items()}
    encoding.update((ord(char), byte) for char, byte in table.backward.items())
    return encoding


@lru_cache(maxsize=None)
def _codec_info(table: CodePageTable) -> codecs.CodecInfo:
    decoding = decoding_table(table)
    encoding = encoding_table(table)

    class Codec(codecs.Codec):
        """Character map codec for one dialect."""

        def encode(self, input, errors='strict'):
            return codecs.charmap_encode(input, errors, encoding)

        def decode(self, input, errors='strict'):
            return codecs.charmap_decode(input, errors, decoding)

    class IncrementalEncoder(codecs.IncrementalEncoder):
        def encode(self, input, final=False):
            return codecs.charmap_encode(input, self.errors, encoding)[0]

    class IncrementalDecoder(codecs.IncrementalDecoder):
        def decode(self, input, final=False):
            return codecs.charmap_decode(input, self.errors, decoding)[0]

    return codecs.CodecInfo(
        name=table.name,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
    )


def lookup(name: str) -> codecs.CodecInfo | None:
    """Codec search function: resolve a dialect name or return None."""
    table = DIALECTS.get(normalize_name(name))
    if table is None:
        return None
    logger.debug("Resolved codec %r to dialect %s", name, table.name)
    return _codec_info(table)


def register() -> None:
    """Install the codec search function. Safe to call more than once."""
    global _registered
    if not _registered:
        codecs.register(lookup)
        _registered = True
