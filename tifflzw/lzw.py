#
# LZW decoder for TIFF strips, based on TIFF Revision 6.0 section 13
# "LZW Compression".
#

import logging
from collections.abc import Iterator

from tifflzw import settings
from tifflzw.lzwexceptions import (
    LZWInvalidCodeError,
    LZWTableOverflowError,
    LZWTruncatedStreamError,
)

log = logging.getLogger(__name__)

CLEAR = 256  # ClearCode
EOI = 257  # EndOfInformation
FIRST_CODE = 258  # first dynamic table slot
MIN_CODE_WIDTH = 9
MAX_TABLE_SIZE = 4096

# TIFF "early change": the width grows when the table reaches these lengths,
# one entry before the next code actually needs the extra bit.
WIDTH_STEPS = {511: 10, 1023: 11, 2047: 12}

# Entries 0-255, shared read-only by every decoder.
LITERALS = tuple(bytes((c,)) for c in range(256))

ACCUMULATOR_MASK = 0xFFFFFFFF


class BitReader:
    """Reads most-significant-bit-first codes of 9 to 12 bits."""

    def __init__(self, data: bytes, strict: bool = False) -> None:
        self.data = memoryview(data).cast("B")
        self.strict = strict
        self.pos = 0
        self.buff = 0
        # number of unconsumed low-order bits in buff
        self.nbits = 0

    def read(self, width: int) -> int:
        while self.nbits < width:
            if self.pos >= len(self.data):
                return self._truncated()
            self.buff = ((self.buff << 8) | self.data[self.pos]) & ACCUMULATOR_MASK
            self.pos += 1
            self.nbits += 8
        self.nbits -= width
        return (self.buff >> self.nbits) & ((1 << width) - 1)

    def _truncated(self) -> int:
        if self.strict:
            raise LZWTruncatedStreamError(
                "Strip ended after %d bytes without an EOI code" % self.pos
            )
        log.warning(
            "Strip ended after %d bytes without an EOI code, "
            "keeping the data decoded so far",
            self.pos,
        )
        return EOI


##  LZWDecoder
##
class LZWDecoder:
    """Expands the codes of one strip.

    A decoder owns its string table and is meant to be used for a single
    strip. Codes are read with the width the table currently requires,
    which starts at 9 bits and is reset by every clear code.
    """

    def __init__(self, data: bytes, strict: bool | None = None) -> None:
        if strict is None:
            strict = settings.STRICT
        self.reader = BitReader(data, strict=strict)
        self.table: list[bytes] = list(LITERALS)
        self.table.extend(b"" for _ in range(len(LITERALS), MAX_TABLE_SIZE))
        self.table_length = FIRST_CODE
        self.code_width = MIN_CODE_WIDTH
        # None until the first code after a clear has been read
        self.prevbuf: bytes | None = None

    def reset(self) -> None:
        self.table_length = FIRST_CODE
        self.code_width = MIN_CODE_WIDTH
        self.prevbuf = None

    def lookup(self, code: int) -> bytes:
        """Returns the byte string of a code currently in the table."""
        if code in (CLEAR, EOI) or not 0 <= code < self.table_length:
            raise LZWInvalidCodeError(
                "Code %d is not in the table (length %d)" % (code, self.table_length)
            )
        return self.table[code]

    def add(self, entry: bytes) -> None:
        if self.table_length >= MAX_TABLE_SIZE:
            raise LZWTableOverflowError(
                "String table is full (%d entries) and no clear code was sent"
                % MAX_TABLE_SIZE
            )
        self.table[self.table_length] = entry
        self.table_length += 1
        self.code_width = WIDTH_STEPS.get(self.table_length, self.code_width)

    def feed(self, code: int) -> bytes:
        """Expands a data code and grows the table."""
        if self.prevbuf is None:
            # no string to extend yet
            if code >= CLEAR:
                raise LZWInvalidCodeError(
                    "First code after a clear must be a literal, got %d" % code
                )
            x = self.table[code]
        elif code < self.table_length:
            x = self.table[code]
            self.add(self.prevbuf + x[:1])
        elif code == self.table_length:
            # KwKwK: the code being defined is the one just read
            x = self.prevbuf + self.prevbuf[:1]
            self.add(x)
        else:
            raise LZWInvalidCodeError(
                "Code %d is beyond the next table slot %d" % (code, self.table_length)
            )
        self.prevbuf = x
        return x

    def run(self, debug: bool = False) -> Iterator[bytes]:
        while True:
            width = self.code_width
            code = self.reader.read(width)
            if debug:
                log.debug(
                    "code=%d, nbits=%d, table_length=%d",
                    code,
                    width,
                    self.table_length,
                )
            if code == EOI:
                break
            if code == CLEAR:
                self.reset()
                continue
            yield self.feed(code)

    def decode(self, debug: bool = False) -> bytes:
        out = bytearray()
        for x in self.run(debug=debug):
            out += x
        return bytes(out)


def lzwdecode(data: bytes, debug: bool = False, strict: bool | None = None) -> bytes:
    """Decodes one LZW compressed TIFF strip or tile.

    :param data: the compressed bytes of exactly one strip.
    :param debug: log every code read, at DEBUG level.
    :param strict: raise LZWTruncatedStreamError when the strip has no EOI
        code instead of returning what was decoded. Defaults to
        `tifflzw.settings.STRICT`.
    :raises LZWDecodeError: on invalid codes or a table overflow.
    """
    return LZWDecoder(data, strict=strict).decode(debug=debug)


decompress = lzwdecode
