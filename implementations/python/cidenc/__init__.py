"""cidenc — deterministic encoders for CIDs and IPLD blocks.

Pure functions that turn bytes into content-addressed byte layouts:
varints, multihashes, CIDv1-prefixed blocks for raw / json / dag-cbor /
dag-pb / dag-json, DAG-CBOR and DAG-PB node bodies, DAG-JSON link
objects and UnixFS nodes.  Nothing here decodes (apart from a varint
reader for verification), does I/O, or keeps state.

Quick start:
    >>> from cidenc import RAW
    >>> RAW.encode(b"Hello World").hex()
    '0155000b48656c6c6f20576f726c64'
    >>> RAW.encode_sha256(b"Hello World").hex()[:12]
    '01551220a591'

Building a directory node and wrapping it:
    >>> from cidenc import DAG_PB, dagpb
    >>> child = RAW.encode(b"Hello IPFS")
    >>> node = dagpb.directory([dagpb.link(child, "hello.txt", 10)])
    >>> DAG_PB.encode(node).hex()[:8]
    '01700023'
"""

from __future__ import annotations

from . import dagcbor, dagjson, dagpb, multihash, unixfs, varint
from ._codec import BY_NAME, DAG_CBOR, DAG_JSON, DAG_PB, JSON_UTF8, RAW, Multicodec
from ._core import as_bytes, to_base16
from ._errors import (
    ERR_INVALID_NODE,
    ERR_MALFORMED_VARINT,
    ERR_VALUE_TOO_LARGE,
    CidError,
    InvalidNode,
    MalformedVarint,
    ValueTooLarge,
)
from .unixfs import UnixFSType

__version__ = "1.0.0"

__all__ = [
    # Format modules
    "varint",
    "multihash",
    "dagcbor",
    "dagpb",
    "dagjson",
    "unixfs",
    # Codec families
    "Multicodec",
    "RAW",
    "JSON_UTF8",
    "DAG_CBOR",
    "DAG_PB",
    "DAG_JSON",
    "codec",
    "UnixFSType",
    # Helpers
    "as_bytes",
    "to_base16",
    # Exceptions
    "CidError",
    "ValueTooLarge",
    "MalformedVarint",
    "InvalidNode",
    # Error codes
    "ERR_VALUE_TOO_LARGE",
    "ERR_MALFORMED_VARINT",
    "ERR_INVALID_NODE",
]


def codec(name: str) -> Multicodec:
    """Look up a codec family by its multicodec name ("raw", "dag-pb", ...)."""
    try:
        return BY_NAME[name]
    except KeyError:
        raise KeyError("unsupported codec: {!r}".format(name)) from None
