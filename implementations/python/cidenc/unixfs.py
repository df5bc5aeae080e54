"""UnixFS node encoder.

Builds the UnixFS `Data` protobuf message and hands it to the DAG-PB node
encoder.  Fields, in emission order:

    1 Type        varint, always present
    2 Data        bytes, only when non-empty
    3 filesize    varint, only when > 0
    4 blocksizes  varint, repeated, zero entries dropped

Directories are special-cased: encode_unixfs_data returns the single byte
0x01 for them and ignores every other argument.  Full directory nodes go
through directory(), which uses the DAG-PB directory marker.

Two inputs are accepted leniently rather than rejected, see
live_blocksizes() and pair_links().
"""

from __future__ import annotations

import enum
from typing import List, Optional, Sequence, Tuple

from . import dagpb
from ._constants import (
    UNIXFS_BLOCKSIZES,
    UNIXFS_DATA,
    UNIXFS_DIRECTORY_DATA,
    UNIXFS_FILESIZE,
    UNIXFS_TYPE,
)
from ._core import BytesLike, as_bytes


class UnixFSType(enum.IntEnum):
    RAW = 0
    DIRECTORY = 1
    FILE = 2
    METADATA = 3
    SYMLINK = 4


def live_blocksizes(blocksizes: Sequence[int]) -> List[int]:
    """Drop zero-valued block sizes; they are never put on the wire."""
    return [size for size in blocksizes if size > 0]


def pair_links(hashes: Sequence[BytesLike], names: Sequence[str]) -> List[Tuple[BytesLike, str]]:
    """Pair hashes with names, keeping only min(len(hashes), len(names)) pairs.

    Surplus entries on the longer side are ignored, not reported.
    """
    count = min(len(hashes), len(names))
    return [(hashes[i], names[i]) for i in range(count)]


def encode_unixfs_data(node_type: UnixFSType,
                       data: Optional[BytesLike] = None,
                       filesize: int = 0,
                       blocksizes: Sequence[int] = ()) -> bytes:
    """Serialise a UnixFS Data message."""
    if node_type == UnixFSType.DIRECTORY:
        return UNIXFS_DIRECTORY_DATA

    parts: List[bytes] = [dagpb.encode_uint64(UNIXFS_TYPE, int(node_type))]
    if data:
        parts.append(dagpb.encode_bytes(UNIXFS_DATA, as_bytes(data)))
    if filesize > 0:
        parts.append(dagpb.encode_uint64(UNIXFS_FILESIZE, filesize))
    for size in live_blocksizes(blocksizes):
        parts.append(dagpb.encode_uint64(UNIXFS_BLOCKSIZES, size))
    return b"".join(parts)


def _leaf(node_type: UnixFSType, data: Optional[BytesLike],
          filesize: int, blocksizes: Sequence[int]) -> bytes:
    # A node with no links is just its data bytes.
    return dagpb.encode_pb_node(encode_unixfs_data(node_type, data, filesize, blocksizes), [])


def raw(data: BytesLike, filesize: int = 0, blocksizes: Sequence[int] = ()) -> bytes:
    return _leaf(UnixFSType.RAW, data, filesize, blocksizes)


def file(data: BytesLike, filesize: int = 0, blocksizes: Sequence[int] = ()) -> bytes:
    return _leaf(UnixFSType.FILE, data, filesize, blocksizes)


def metadata(data: BytesLike, filesize: int = 0, blocksizes: Sequence[int] = ()) -> bytes:
    return _leaf(UnixFSType.METADATA, data, filesize, blocksizes)


def symlink(target: BytesLike, filesize: int = 0, blocksizes: Sequence[int] = ()) -> bytes:
    """Symlink node; `target` is the link path as bytes."""
    return _leaf(UnixFSType.SYMLINK, target, filesize, blocksizes)


def directory(hashes: Sequence[BytesLike], names: Sequence[str]) -> bytes:
    """Directory node linking each (hash, name) pair, Tsize omitted."""
    links = [dagpb.link(h, n) for h, n in pair_links(hashes, names)]
    return dagpb.directory(links)
