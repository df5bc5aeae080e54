"""Multicodec families — CIDv1-style prefixed blocks.

Every codec exposes the same three entry points:

    encode(data)            01 <codec> 00 <varint len> <data>
    encode_sha256(data)     01 <codec> 12 20 <sha-256 digest>
    encode_keccak256(data)  01 <codec> 1b 20 <keccak-256 digest>

The hashed forms carry no payload length; the digest length is implied by
the hash code.  The codec bytes are the varint encoding of the codec code,
so raw is the single byte 55 while json (0x0200) becomes 80 04.

dag-json is the exception: its identity form has no 00 hash code,

    01 a9 02 <varint len> <data>
"""

from __future__ import annotations

from typing import Dict

from . import multihash, varint
from ._constants import CID_V1, CODECS
from ._core import BytesLike, as_bytes


class Multicodec:
    """One row of the multicodec table plus its prefixed encoders."""

    __slots__ = ("name", "code", "prefix", "identity_code")

    def __init__(self, name: str, code: int, identity_code: bool = True) -> None:
        self.name = name
        self.code = code
        self.prefix = bytes([CID_V1]) + varint.encode(code)
        # dag-json blocks omit the 0x00 identity code and go straight to
        # the payload length.
        self.identity_code = identity_code

    def __repr__(self) -> str:
        return "Multicodec({!r}, 0x{:x})".format(self.name, self.code)

    def encode(self, data: BytesLike) -> bytes:
        """Identity-hashed block: the payload is inlined."""
        if not self.identity_code:
            raw = as_bytes(data)
            return self.prefix + varint.encode(len(raw)) + raw
        return self.prefix + multihash.identity(data)

    def encode_sha256(self, data: BytesLike) -> bytes:
        return self.prefix + multihash.sha256(data)

    def encode_keccak256(self, data: BytesLike) -> bytes:
        return self.prefix + multihash.keccak256(data)

    def encode_with(self, hash_name: str, data: BytesLike) -> bytes:
        """Dispatch on a multihash function name ("identity", "sha2-256", ...)."""
        if hash_name == "identity":
            return self.encode(data)
        return self.prefix + multihash.digest(hash_name, data)


RAW = Multicodec("raw", CODECS["raw"])
JSON_UTF8 = Multicodec("json", CODECS["json"])
DAG_PB = Multicodec("dag-pb", CODECS["dag-pb"])
DAG_CBOR = Multicodec("dag-cbor", CODECS["dag-cbor"])
DAG_JSON = Multicodec("dag-json", CODECS["dag-json"], identity_code=False)

BY_NAME: Dict[str, Multicodec] = {
    c.name: c for c in (RAW, JSON_UTF8, DAG_PB, DAG_CBOR, DAG_JSON)
}
