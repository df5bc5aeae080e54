"""DAG-PB encoder — a fixed-shape subset of the protobuf wire format.

Only two wire types appear: 0 (varint) and 2 (length-delimited).  A field
key is varint((field_number << 3) | wire_type).

Field order is significant for content addressing and matches the
reference JS implementation rather than protobuf's field-number order:

    PBLink   1 Hash, 2 Name, 3 Tsize (omitted when 0)
    PBNode   2 Links (each, in input order), then the Data bytes

PBNode data is appended verbatim, not wrapped in a field here; callers that
want a tagged Data field (UnixFS) serialise it themselves first, as
DIRECTORY_MARKER does.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

from . import _codec, varint
from ._constants import (
    DIRECTORY_MARKER,
    PB_LINK_HASH,
    PB_LINK_NAME,
    PB_LINK_TSIZE,
    PB_NODE_LINKS,
    WIRE_LENGTH_DELIMITED,
    WIRE_VARINT,
)
from ._core import BytesLike, as_bytes


def encode_tag(field_number: int, wire_type: int) -> bytes:
    return varint.encode((field_number << 3) | wire_type)


# ── Scalar fields ────────────────────────────────────────────

def encode_bytes(field_number: int, value: BytesLike) -> bytes:
    raw = as_bytes(value)
    return encode_tag(field_number, WIRE_LENGTH_DELIMITED) + varint.encode(len(raw)) + raw


def encode_string(field_number: int, value: str) -> bytes:
    return encode_bytes(field_number, value.encode("utf-8"))


def encode_uint64(field_number: int, value: int) -> bytes:
    return encode_tag(field_number, WIRE_VARINT) + varint.encode(value)


# ── Messages ─────────────────────────────────────────────────

def link(hash: BytesLike, name: str, tsize: int = 0) -> bytes:
    """Serialise a PBLink.  tsize=0 means "no Tsize field"."""
    out = encode_bytes(PB_LINK_HASH, hash) + encode_string(PB_LINK_NAME, name)
    if tsize > 0:
        out += encode_uint64(PB_LINK_TSIZE, tsize)
    return out


class PBLink(NamedTuple):
    """Structured form of a link; `encode()` gives the same bytes as link()."""

    hash: bytes
    name: str = ""
    tsize: int = 0

    def encode(self) -> bytes:
        return link(self.hash, self.name, self.tsize)


def encode_pb_node(data: BytesLike, links: Sequence[BytesLike]) -> bytes:
    """Serialise a PBNode from pre-serialised links and raw data bytes."""
    parts: List[bytes] = [encode_bytes(PB_NODE_LINKS, lnk) for lnk in links]
    parts.append(as_bytes(data))
    return b"".join(parts)


def encode_pb_links(links: Sequence[PBLink]) -> List[bytes]:
    return [lnk.encode() for lnk in links]


def directory(links: Sequence[BytesLike]) -> bytes:
    """A UnixFS directory node: the given links plus the directory marker."""
    return encode_pb_node(DIRECTORY_MARKER, links)


# ── Prefixed blocks ──────────────────────────────────────────

def encode(data: BytesLike) -> bytes:
    """01 70 00 <varint len> <data>."""
    return _codec.DAG_PB.encode(data)


def encode_sha256(data: BytesLike) -> bytes:
    return _codec.DAG_PB.encode_sha256(data)


def encode_keccak256(data: BytesLike) -> bytes:
    return _codec.DAG_PB.encode_keccak256(data)
