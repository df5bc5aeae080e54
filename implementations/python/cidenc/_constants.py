"""Protocol constants — multicodec and multihash codes, CBOR major types,
protobuf wire types and field numbers, UnixFS node types.

Every magic byte used by an encoder is defined here exactly once.  None of
these values are configurable; they are fixed by the multiformats table,
RFC 8949, the protobuf wire format and the UnixFS schema.
"""

from __future__ import annotations

from typing import Dict

# ── CID ───────────────────────────────────────────────────────
CID_V1: int = 0x01

# ── Multicodec table (codec name → code) ─────────────────────
# json (0x0200) and dag-json (0x0129) need two varint bytes on the wire,
# the others fit in one.
CODEC_RAW: int = 0x55
CODEC_JSON: int = 0x0200
CODEC_DAG_PB: int = 0x70
CODEC_DAG_CBOR: int = 0x71
CODEC_DAG_JSON: int = 0x0129

CODECS: Dict[str, int] = {
    "raw": CODEC_RAW,
    "json": CODEC_JSON,
    "dag-pb": CODEC_DAG_PB,
    "dag-cbor": CODEC_DAG_CBOR,
    "dag-json": CODEC_DAG_JSON,
}

# ── Multihash table (hash name → code) ───────────────────────
HASH_IDENTITY: int = 0x00
HASH_SHA2_256: int = 0x12
HASH_KECCAK_256: int = 0x1B

HASHES: Dict[str, int] = {
    "identity": HASH_IDENTITY,
    "sha2-256": HASH_SHA2_256,
    "keccak-256": HASH_KECCAK_256,
}

# ── Varint domain ────────────────────────────────────────────
# Four 7-bit groups at most.  Decoding has no such cap.
VARINT_MAX_BYTES: int = 4
VARINT_LIMIT: int = 1 << (7 * VARINT_MAX_BYTES)   # 268435456

# ── CBOR (RFC 8949) ──────────────────────────────────────────
# Major types are stored pre-shifted into the top three bits so they can
# be OR-ed directly with the additional-info bits.
MAJOR_UNSIGNED: int = 0x00
MAJOR_NEGATIVE: int = 0x20
MAJOR_BYTES: int = 0x40
MAJOR_TEXT: int = 0x60
MAJOR_ARRAY: int = 0x80
MAJOR_MAP: int = 0xA0
MAJOR_TAG: int = 0xC0

CBOR_INFO_UINT8: int = 24
CBOR_INFO_UINT16: int = 25
CBOR_INFO_UINT32: int = 26
CBOR_LENGTH_LIMIT: int = 1 << 32

# Tag 42 is the IPLD link tag; in one-byte-follows form it is d8 2a.
CBOR_TAG_CID: int = 42
# Multibase "identity" prefix carried inside every tag-42 byte string.
MULTIBASE_IDENTITY: int = 0x00

# ── Protobuf wire format ─────────────────────────────────────
WIRE_VARINT: int = 0
WIRE_LENGTH_DELIMITED: int = 2

# PBNode
PB_NODE_DATA: int = 1
PB_NODE_LINKS: int = 2
# PBLink
PB_LINK_HASH: int = 1
PB_LINK_NAME: int = 2
PB_LINK_TSIZE: int = 3

# ── UnixFS Data message ──────────────────────────────────────
UNIXFS_TYPE: int = 1
UNIXFS_DATA: int = 2
UNIXFS_FILESIZE: int = 3
UNIXFS_BLOCKSIZES: int = 4

# Pre-serialised PBNode.Data for a directory: field 1 (length-delimited,
# two bytes) wrapping the UnixFS message {Type: Directory} = 08 01.
DIRECTORY_MARKER: bytes = b"\x0a\x02\x08\x01"

# Compact UnixFS Data emitted for directories by encode_unixfs_data.
UNIXFS_DIRECTORY_DATA: bytes = b"\x01"

# ── DAG-JSON ─────────────────────────────────────────────────
# Multibase prefix for lowercase base16.
MULTIBASE_BASE16: str = "f"
