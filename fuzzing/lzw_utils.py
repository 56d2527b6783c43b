"""Utilities shared across the LZW fuzzing harnesses"""

import logging

import atheris

from tifflzw.lzw import CLEAR

# First byte of a strip starting with a clear code, 1000 0000 0...
CLEAR_PREFIX = bytes((CLEAR >> 1,))


def prepare_tifflzw_fuzzing() -> None:
    """Used to disable logging of the tifflzw module"""
    logging.getLogger("tifflzw").setLevel(logging.CRITICAL)


@atheris.instrument_func  # type: ignore[misc]
def with_clear_prefix(fdp: atheris.FuzzedDataProvider, data: bytes) -> bytes:
    """Half of the inputs get a leading clear code so that the decoder gets
    past the first code more often.
    """
    if fdp.ConsumeBool():
        return CLEAR_PREFIX + data
    return data
