"""cidenc command-line interface.

Usage:
    printf 'Hello World' | cidenc encode --codec raw --hash sha2-256
    cidenc encode --codec dag-pb --hash identity --input node.bin --base base16
    cidenc varint 300
    cidenc version
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import CidError, __version__, codec, to_base16, varint
from ._constants import CODECS, HASHES

logger = logging.getLogger(__name__)

_BASES = ("hex", "base16")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cidenc",
        description="cidenc — deterministic CID and IPLD block encoders",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug details to stderr")
    sub = parser.add_subparsers(dest="command")

    # ── encode ──
    enc_p = sub.add_parser("encode", help="Prefix data as a CIDv1 block")
    enc_p.add_argument("--codec", "-c", choices=sorted(CODECS), default="raw",
                       help="Multicodec for the block (default: raw)")
    enc_p.add_argument("--hash", "-H", dest="hash_name", choices=sorted(HASHES),
                       default="sha2-256",
                       help="Multihash function (default: sha2-256)")
    enc_p.add_argument("--input", "-i", metavar="FILE",
                       help="Read bytes from FILE instead of stdin")
    enc_p.add_argument("--base", choices=_BASES, default="hex",
                       help="hex: plain hex; base16: multibase 'f' prefix")

    # ── varint ──
    var_p = sub.add_parser("varint", help="Encode an integer as a varint (hex)")
    var_p.add_argument("value", type=int)

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _read_input(filepath: Optional[str]) -> bytes:
    """Read raw bytes from a file or stdin."""
    if filepath:
        with open(filepath, "rb") as f:
            return f.read()
    if sys.stdin.isatty():
        print("cidenc: reading from stdin (Ctrl-D to end)...", file=sys.stderr)
    return sys.stdin.buffer.read()


def _render(cid: bytes, base: str) -> str:
    if base == "base16":
        return to_base16(cid)
    return cid.hex()


def _cmd_encode(args: argparse.Namespace) -> None:
    data = _read_input(args.input)
    logger.debug("encoding %d byte(s) as %s/%s", len(data), args.codec, args.hash_name)
    cid = codec(args.codec).encode_with(args.hash_name, data)
    print(_render(cid, args.base))


def _cmd_varint(args: argparse.Namespace) -> None:
    print(varint.encode(args.value).hex())


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"cidenc {__version__}")
        return

    try:
        if args.command == "encode":
            _cmd_encode(args)
        elif args.command == "varint":
            _cmd_varint(args)
    except CidError as e:
        print(f"cidenc: error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)
    except OSError as e:
        print(f"cidenc: cannot read input: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
