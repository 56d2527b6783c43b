"""Builders for LZW compressed test strips.

`lzwencode` follows the encoder side of TIFF 6.0 section 13 the way libtiff
does: the code width grows as soon as the next free code needs another bit,
and a clear code is sent when the next free code reaches 4094.
"""

from collections.abc import Iterable

from tifflzw.lzw import CLEAR, EOI, FIRST_CODE, MAX_TABLE_SIZE, MIN_CODE_WIDTH


class CodeWriter:
    """Packs codes most-significant-bit first."""

    def __init__(self):
        self.buff = 0
        self.nbits = 0
        self.out = bytearray()

    def write(self, code, width):
        assert 0 <= code < (1 << width), (code, width)
        self.buff = (self.buff << width) | code
        self.nbits += width
        while self.nbits >= 8:
            self.nbits -= 8
            self.out.append((self.buff >> self.nbits) & 0xFF)
        self.buff &= (1 << self.nbits) - 1

    def close(self) -> bytes:
        # pad the last byte with zero bits
        if self.nbits:
            self.out.append((self.buff << (8 - self.nbits)) & 0xFF)
            self.buff = 0
            self.nbits = 0
        return bytes(self.out)


def pack_codes(codes: Iterable[tuple[int, int]]) -> bytes:
    """Packs (code, width) pairs into a strip."""
    writer = CodeWriter()
    for code, width in codes:
        writer.write(code, width)
    return writer.close()


def code_width(table_length: int) -> int:
    """Width of the next code a decoder reads at the given table length."""
    if table_length < 511:
        return 9
    if table_length < 1023:
        return 10
    if table_length < 2047:
        return 11
    return 12


def lzwencode(data: bytes) -> bytes:
    writer = CodeWriter()
    width = MIN_CODE_WIDTH
    literals = {bytes((c,)): c for c in range(256)}
    table = dict(literals)
    next_code = FIRST_CODE

    def grow():
        nonlocal table, next_code, width
        next_code += 1
        if next_code == MAX_TABLE_SIZE - 2:
            writer.write(CLEAR, width)
            table = dict(literals)
            next_code = FIRST_CODE
            width = MIN_CODE_WIDTH
        elif next_code == 1 << width:
            width += 1

    writer.write(CLEAR, width)
    prefix = b""
    for c in data:
        s = bytes((c,))
        if prefix + s in table:
            prefix += s
            continue
        writer.write(table[prefix], width)
        table[prefix + s] = next_code
        grow()
        prefix = s
    if prefix:
        # the decoder still adds an entry for the last code
        writer.write(table[prefix], width)
        grow()
    writer.write(EOI, width)
    return writer.close()
