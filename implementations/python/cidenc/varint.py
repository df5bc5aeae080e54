"""Unsigned varint codec (multiformats flavour of LEB128).

Each byte carries seven bits of the value, least-significant group first.
The high bit is set on every byte except the last.  Encoding always uses
the minimum number of bytes and is capped at four bytes (n < 2^28); the
decoder exists for verification and accepts any length.

    >>> encode(300).hex()
    'ac02'
    >>> decode(bytes.fromhex("ac02"))
    (300, 2)
"""

from __future__ import annotations

from typing import Tuple

from ._constants import VARINT_LIMIT
from ._errors import MalformedVarint, ValueTooLarge


def encode(n: int) -> bytes:
    """Encode 0 <= n < 2^28 as a 1–4 byte varint."""
    # bool is an int subclass; True would silently encode as 0x01.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("varint value must be an int, got {}".format(type(n).__name__))
    if n < 0 or n >= VARINT_LIMIT:
        raise ValueTooLarge("varint value {} outside [0, {})".format(n, VARINT_LIMIT))

    out = bytearray()
    while True:
        group = n & 0x7F
        n >>= 7
        if n:
            out.append(group | 0x80)
        else:
            out.append(group)
            return bytes(out)


def decode(buf: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode one varint starting at `offset`.

    Returns (value, number of bytes consumed).
    """
    value = 0
    shift = 0
    pos = offset
    while pos < len(buf):
        b = buf[pos]
        pos += 1
        value |= (b & 0x7F) << shift
        if b < 0x80:
            return value, pos - offset
        shift += 7
    raise MalformedVarint("varint truncated after {} byte(s)".format(pos - offset))

