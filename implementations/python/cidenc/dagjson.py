"""DAG-JSON encoder.

This is string templating, not a JSON serialiser.  Keys are inserted
verbatim: a key containing a quote, backslash or control character yields
invalid JSON.  Links are rendered as base16 multibase strings:

    {"<key>":{"/":"f<lowercase hex>"}}
"""

from __future__ import annotations

from typing import Sequence, Tuple

from . import _codec
from ._core import BytesLike, to_base16

KeyValue = Tuple[str, BytesLike]


def _link_entry(key: str, cid: BytesLike) -> str:
    return '"{}":{{"/":"{}"}}'.format(key, to_base16(cid))


def link(key: str, cid: BytesLike) -> str:
    """A single-entry object holding one link."""
    return "{" + _link_entry(key, cid) + "}"


def map_dag_json(entries: Sequence[KeyValue]) -> str:
    """An object of links in input order; "{}" when there are none."""
    return "{" + ",".join(_link_entry(k, v) for k, v in entries) + "}"


# ── Prefixed blocks ──────────────────────────────────────────

def encode(data: BytesLike) -> bytes:
    """01 a9 02 <varint len> <data>."""
    return _codec.DAG_JSON.encode(data)


def encode_sha256(data: BytesLike) -> bytes:
    return _codec.DAG_JSON.encode_sha256(data)


def encode_keccak256(data: BytesLike) -> bytes:
    return _codec.DAG_JSON.encode_keccak256(data)
