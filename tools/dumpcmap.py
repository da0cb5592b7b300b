#!/usr/bin/env python3
"""Dump the commands of CMap content streams, one per line"""

import logging
import re
import sys
from argparse import ArgumentParser
from typing import Any, TextIO

from cmapcontent import settings
from cmapcontent.cmapobject import CMapObject
from cmapcontent.contentparser import CMapContentParser
from cmapcontent.decoders import decode_cmap_object
from cmapcontent.utils import decode_guessed

logging.basicConfig()

logger = logging.getLogger(__name__)

ESC_PAT = re.compile(rb"[\000-\037()\134\177-\377]")
TEXT_ESC_PAT = re.compile(r"[()\134]")
BINARY_PAT = re.compile(rb"[\000-\010\013\016-\037\177]")


def escape_string(data: bytes) -> str:
    """Literal string body with delimiters and non-ASCII bytes escaped."""

    def esc(m: "re.Match[bytes]") -> bytes:
        c = m.group(0)
        if c in b"()\\":
            return b"\\" + c
        return b"\\%03o" % ord(c)

    return ESC_PAT.sub(esc, data).decode("ascii")


def string_text(data: bytes) -> str:
    """Literal string body, decoded when the bytes look like text."""
    if data.isascii() or BINARY_PAT.search(data):
        return escape_string(data)
    text = decode_guessed(data)
    if text is None:
        return escape_string(data)
    return TEXT_ESC_PAT.sub(lambda m: "\\" + m.group(0), text)


def to_text(obj: CMapObject, unicode: bool = False) -> str:
    """Render an object back in CMap syntax."""
    if obj.is_dictionary():
        assert isinstance(obj.value, dict)
        items = " ".join(
            f"/{k} {to_text(v, unicode)}" for (k, v) in obj.value.items()
        )
        return f"<< {items} >>"
    if obj.is_array():
        assert isinstance(obj.value, list)
        return "[" + " ".join(to_text(v, unicode) for v in obj.value) + "]"
    if obj.is_hex_string():
        if unicode:
            return repr(decode_cmap_object(obj))
        return "<" + obj.to_bytes().hex() + ">"
    if obj.is_string():
        return "(" + string_text(obj.to_bytes()) + ")"
    if obj.is_name():
        return f"/{obj.value}"
    return str(obj.value)


def dumpcmap(outfp: TextIO, fname: str, unicode: bool = False) -> None:
    with open(fname, "rb") as fp:
        parser = CMapContentParser.from_bytes(fp)
        for command in parser:
            outfp.write(" ".join(to_text(obj, unicode) for obj in command))
            outfp.write("\n")


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "files",
        type=str,
        default=None,
        nargs="+",
        help="One or more paths to CMap files.",
    )
    parser.add_argument(
        "--debug",
        "-d",
        default=False,
        action="store_true",
        help="Use debug logging level.",
    )
    parser.add_argument(
        "--strict",
        "-s",
        default=False,
        action="store_true",
        help="Fail on invalid hex digits instead of reading them as zero.",
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
    output_params.add_argument(
        "--unicode",
        "-u",
        default=False,
        action="store_true",
        help="Show hex strings as the UTF-16BE text they encode.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args: Any = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.strict:
        settings.STRICT = True

    if args.outfile == "-":
        outfp = sys.stdout
    else:
        outfp = open(args.outfile, "w", encoding="utf-8")

    try:
        for fname in args.files:
            logger.debug("dumpcmap: %r", fname)
            dumpcmap(outfp, fname, unicode=args.unicode)
    finally:
        if outfp is not sys.stdout:
            outfp.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
