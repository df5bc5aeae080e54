"""DAG-CBOR encoder — the subset of RFC 8949 needed for IPLD nodes.

Values are built bottom-up as already-encoded byte strings and
concatenated.  Every header uses the shortest additional-info form, which
is what DAG-CBOR's canonical numeric rule requires:

    length < 24      one byte   (major | length)
    length < 2^8     major|24, 1 byte
    length < 2^16    major|25, 2 bytes big-endian
    length < 2^32    major|26, 4 bytes big-endian

There is no 64-bit path; lengths of 2^32 or more are rejected.

Links (CIDs) are always emitted as tag 42 over a byte string whose first
byte is the multibase identity prefix 0x00.  Map keys are written in the
order given, without sorting or duplicate detection.
"""

from __future__ import annotations

import struct
from typing import List, Sequence, Tuple

from . import _codec
from ._constants import (
    CBOR_INFO_UINT8,
    CBOR_INFO_UINT16,
    CBOR_INFO_UINT32,
    CBOR_LENGTH_LIMIT,
    CBOR_TAG_CID,
    MAJOR_ARRAY,
    MAJOR_BYTES,
    MAJOR_MAP,
    MAJOR_TAG,
    MAJOR_TEXT,
    MAJOR_UNSIGNED,
    MULTIBASE_IDENTITY,
)
from ._core import BytesLike, as_bytes
from ._errors import InvalidNode, ValueTooLarge

KeyValue = Tuple[str, BytesLike]

# Map keys used by node_cbor when a node has both payload and children.
KEY_DATA = "Data"
KEY_LINKS = "Links"


def encode_length(length: int, major_type: int) -> bytes:
    """Encode a CBOR head: major type plus minimal-width argument.

    `major_type` is the pre-shifted constant (MAJOR_TEXT == 0x60, ...).
    """
    if length < 0 or length >= CBOR_LENGTH_LIMIT:
        raise ValueTooLarge("CBOR length {} outside [0, 2^32)".format(length))
    if length < CBOR_INFO_UINT8:
        return bytes([major_type | length])
    if length < 0x100:
        return bytes([major_type | CBOR_INFO_UINT8, length])
    if length < 0x10000:
        return bytes([major_type | CBOR_INFO_UINT16]) + struct.pack(">H", length)
    return bytes([major_type | CBOR_INFO_UINT32]) + struct.pack(">I", length)


# ── Scalars ──────────────────────────────────────────────────

def encode_uint(n: int) -> bytes:
    """Unsigned integer (major type 0), up to 2^32 - 1."""
    return encode_length(n, MAJOR_UNSIGNED)


def encode_byte_string(data: BytesLike) -> bytes:
    raw = as_bytes(data)
    return encode_length(len(raw), MAJOR_BYTES) + raw


def encode_text(text: str) -> bytes:
    raw = text.encode("utf-8")
    return encode_length(len(raw), MAJOR_TEXT) + raw


# ── Links ────────────────────────────────────────────────────

def _tag_cid() -> bytes:
    # 42 > 23, so the tag number goes in one following byte: d8 2a.
    return bytes([MAJOR_TAG | CBOR_INFO_UINT8, CBOR_TAG_CID])


def encode_cid(data: BytesLike) -> bytes:
    """Embed binary CID bytes as an IPLD link (tag 42)."""
    raw = as_bytes(data)
    return (
        _tag_cid()
        + encode_length(len(raw) + 1, MAJOR_BYTES)
        + bytes([MULTIBASE_IDENTITY])
        + raw
    )


# ── Containers ───────────────────────────────────────────────

def array_cbor(cids: Sequence[BytesLike]) -> bytes:
    """Array of links, in input order."""
    parts: List[bytes] = [encode_length(len(cids), MAJOR_ARRAY)]
    for cid in cids:
        parts.append(encode_cid(cid))
    return b"".join(parts)


def map_cbor(entries: Sequence[KeyValue]) -> bytes:
    """Map of text keys to links, in input order.

    Canonical DAG-CBOR wants keys sorted length-first then bytewise; that
    ordering is the caller's responsibility.
    """
    parts: List[bytes] = [encode_length(len(entries), MAJOR_MAP)]
    for key, value in entries:
        parts.append(encode_text(key))
        parts.append(encode_cid(value))
    return b"".join(parts)


def node_cbor(data: BytesLike, links: Sequence[BytesLike]) -> bytes:
    """Compose a DAG node from an encoded payload and child links.

        data only   -> data unchanged (file)
        links only  -> array_cbor(links) (directory)
        both        -> {"Data": link(data), "Links": array_cbor(links)}

    The combined form wraps `data` in tag 42 like a real child CID, even
    though it is arbitrary payload.  Existing content identifiers depend on
    this layout, so it is kept as is.
    """
    raw = as_bytes(data)
    if not raw and not links:
        raise InvalidNode("Empty node")
    if not raw:
        return array_cbor(links)
    if not links:
        return raw
    return (
        encode_length(2, MAJOR_MAP)
        + encode_text(KEY_DATA)
        + encode_cid(raw)
        + encode_text(KEY_LINKS)
        + array_cbor(links)
    )


# ── Prefixed blocks ──────────────────────────────────────────

def encode(data: BytesLike) -> bytes:
    """01 71 00 <varint len> <data>."""
    return _codec.DAG_CBOR.encode(data)


def encode_sha256(data: BytesLike) -> bytes:
    return _codec.DAG_CBOR.encode_sha256(data)


def encode_keccak256(data: BytesLike) -> bytes:
    return _codec.DAG_CBOR.encode_keccak256(data)
