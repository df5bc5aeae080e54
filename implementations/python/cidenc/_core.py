"""Shared helpers: bytes coercion and base16 multibase rendering."""

from __future__ import annotations

from typing import Union

from ._constants import MULTIBASE_BASE16

BytesLike = Union[bytes, bytearray, memoryview]


def as_bytes(data: BytesLike) -> bytes:
    """Return `data` as immutable bytes.

    str is rejected rather than guessed at: the caller decides the text
    encoding.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError("expected bytes-like data, got {}".format(type(data).__name__))


def to_base16(cid: BytesLike) -> str:
    """Render binary CID bytes as a lowercase base16 multibase string."""
    return MULTIBASE_BASE16 + as_bytes(cid).hex()
