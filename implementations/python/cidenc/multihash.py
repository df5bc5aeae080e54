"""Multihash wrappers.

A multihash is `<code><varint digest length><digest>`.  Three functions
are supported:

    sha2-256    12 20 <32-byte digest>
    keccak-256  1b 20 <32-byte digest>
    identity    00 <varint len> <payload, unhashed>

Hashing itself is delegated: SHA-256 comes from hashlib, Keccak-256 (the
original Keccak padding used by Ethereum, not FIPS-202 SHA3-256) from
pycryptodome.
"""

from __future__ import annotations

import hashlib
from typing import Callable, Dict

from Crypto.Hash import keccak as _keccak

from . import varint
from ._constants import (
    HASH_IDENTITY,
    HASH_KECCAK_256,
    HASH_SHA2_256,
)
from ._core import as_bytes

DigestFunction = Callable[[bytes], bytes]


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def keccak256_digest(data: bytes) -> bytes:
    h = _keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()


def _wrap_fixed(code: int, digest_fn: DigestFunction, data: bytes) -> bytes:
    digest = digest_fn(as_bytes(data))
    return bytes([code]) + varint.encode(len(digest)) + digest


def sha256(data: bytes) -> bytes:
    """SHA-256 multihash (34 bytes)."""
    return _wrap_fixed(HASH_SHA2_256, sha256_digest, data)


def keccak256(data: bytes) -> bytes:
    """Keccak-256 multihash (34 bytes)."""
    return _wrap_fixed(HASH_KECCAK_256, keccak256_digest, data)


def identity(data: bytes) -> bytes:
    """Identity multihash: the payload is carried verbatim."""
    raw = as_bytes(data)
    return bytes([HASH_IDENTITY]) + varint.encode(len(raw)) + raw


# Name → wrapper.  Names follow the multicodec table.
FUNCTIONS: Dict[str, Callable[[bytes], bytes]] = {
    "identity": identity,
    "sha2-256": sha256,
    "keccak-256": keccak256,
}


def digest(name: str, data: bytes) -> bytes:
    """Build the multihash for `data` using the function called `name`.

    Raises KeyError for a name that isn't in FUNCTIONS.
    """
    try:
        fn = FUNCTIONS[name]
    except KeyError:
        raise KeyError("unsupported multihash function: {!r}".format(name)) from None
    return fn(data)
