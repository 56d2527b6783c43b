import sys

import atheris

from fuzz_helpers import EnhancedFuzzedDataProvider

with atheris.instrument_imports():
    from lzw_utils import prepare_tifflzw_fuzzing, with_clear_prefix
    from tifflzw.lzw import lzwdecode

from tifflzw.lzwexceptions import LZWDecodeError


def fuzz_one_input(data: bytes) -> None:
    fdp = EnhancedFuzzedDataProvider(data)
    strict = fdp.ConsumeBool()
    strip = with_clear_prefix(fdp, fdp.ConsumeRemainingBytes())

    try:
        lzwdecode(strip, strict=strict)
    except LZWDecodeError:
        return


if __name__ == "__main__":
    prepare_tifflzw_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
