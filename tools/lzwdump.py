#!/usr/bin/env python3
"""Decode LZW compressed TIFF strips to raw bytes"""

import logging
import sys
from argparse import ArgumentParser
from collections.abc import Sequence

import tifflzw
from tifflzw.lzw import lzwdecode
from tifflzw.lzwexceptions import LZWDecodeError

logging.basicConfig()

log = logging.getLogger(__name__)


def read_strip(path: str, offset: int = 0, length: int | None = None) -> bytes:
    with open(path, "rb") as fp:
        fp.seek(offset)
        if length is None:
            return fp.read()
        return fp.read(length)


def dumpstrips(
    outfp,
    files: Sequence[str],
    offset: int = 0,
    length: int | None = None,
    trace: bool = False,
    strict: bool = False,
) -> int:
    """Writes the decoded strips to outfp and returns the number of failures."""
    failures = 0
    for path in files:
        data = read_strip(path, offset, length)
        try:
            outfp.write(lzwdecode(data, debug=trace, strict=strict))
        except LZWDecodeError as e:
            log.error("%s: %s", path, e)
            failures += 1
    return failures


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "files",
        type=str,
        default=None,
        nargs="+",
        help="One or more files holding one LZW compressed strip each.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"tifflzw v{tifflzw.__version__}",
    )
    parser.add_argument(
        "--debug",
        "-d",
        default=False,
        action="store_true",
        help="Use debug logging level.",
    )
    parser.add_argument(
        "--trace",
        "-t",
        default=False,
        action="store_true",
        help="Log every code read from the strip.",
    )
    parser.add_argument(
        "--strict",
        default=False,
        action="store_true",
        help="Fail on strips that end without an end-of-information code.",
    )

    strip_params = parser.add_argument_group(
        "Strip", description="Used to locate the strip inside each file."
    )
    strip_params.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Byte offset of the strip, e.g. from the StripOffsets tag.",
    )
    strip_params.add_argument(
        "--length",
        type=int,
        default=None,
        help="Byte count of the strip, e.g. from the StripByteCounts tag. "
        "Reads to the end of the file if omitted.",
    )

    output_params = parser.add_argument_group(
        "Output", description="Used during output generation."
    )
    output_params.add_argument(
        "--outfile",
        "-o",
        type=str,
        default="-",
        help='Path to file where output is written. Or "-" (default) to '
        "write to stdout.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.trace:
        logging.getLogger("tifflzw").setLevel(logging.DEBUG)

    if args.outfile == "-":
        outfp = sys.stdout.buffer
        failures = dumpstrips(
            outfp, args.files, args.offset, args.length, args.trace, args.strict
        )
        outfp.flush()
    else:
        with open(args.outfile, "wb") as fp:
            failures = dumpstrips(
                fp, args.files, args.offset, args.length, args.trace, args.strict
            )

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
