#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Command line front end for the base24 codec.

  base24 encode -i blob.bin          raw bytes -> Base24 text
  base24 encode --hex < key.hex      hex string -> Base24 text
  base24 decode -i code.txt -o out   Base24 text -> raw bytes
  base24 decode --hex                Base24 text -> hex string
"""

from __future__ import annotations

import argparse
import binascii
import logging
import sys
from typing import List, Optional

from . import __version__
from .codec import decode, encode
from .errors import Base24Error

logger = logging.getLogger(__name__)


def _read_input(path: Optional[str]) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(path: Optional[str], data: bytes) -> None:
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


def _run_encode(args: argparse.Namespace) -> bytes:
    raw = _read_input(args.input)
    logger.debug("encode: read %d bytes", len(raw))
    if args.hex:
        hex_text = _strip_whitespace(raw.decode("ascii", errors="strict"))
        raw = binascii.unhexlify(hex_text)
        logger.debug("encode: %d bytes after hex parsing", len(raw))
    text = encode(raw)
    return (text + "\n").encode("ascii")


def _run_decode(args: argparse.Namespace) -> bytes:
    raw = _read_input(args.input)
    text = _strip_whitespace(raw.decode("utf-8", errors="strict"))
    logger.debug("decode: %d symbols", len(text))
    data = decode(text)
    if args.hex:
        return (data.hex() + "\n").encode("ascii")
    return data


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="base24",
        description="Encode binary data as Base24 text and back.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    ap_enc = sub.add_parser("encode", help="bytes -> Base24 text (input length must be a multiple of 4)")
    ap_enc.add_argument("--hex", action="store_true", help="input is a hex string instead of raw bytes")
    ap_enc.set_defaults(handler=_run_encode)

    ap_dec = sub.add_parser("decode", help="Base24 text -> bytes (whitespace is ignored)")
    ap_dec.add_argument("--hex", action="store_true", help="write a hex string instead of raw bytes")
    ap_dec.set_defaults(handler=_run_decode)

    for p in (ap_enc, ap_dec):
        p.add_argument("-i", "--input", default=None, help="input file (default: stdin)")
        p.add_argument("-o", "--output", default=None, help="output file (default: stdout)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        out = args.handler(args)
        _write_output(args.output, out)
    except (Base24Error, binascii.Error, UnicodeDecodeError) as e:
        logger.debug("%s failed: %r", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("%s I/O failure: %r", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
