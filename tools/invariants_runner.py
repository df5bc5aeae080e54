#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Determinism invariants (property tests) for the cidenc encoders.
#
# This runner:
# - generates random integers, payloads, links and UnixFS descriptors
# - checks varint round-trip and minimality, encoder determinism,
#   multihash shape, CBOR head minimality and UnixFS directory invariance
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, random
from typing import Any, Dict, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(ROOT, "implementations", "python"))

from cidenc._codec import BY_NAME as BY_NAME_CODECS
from cidenc import (
    UnixFSType,
    dagcbor,
    dagpb,
    multihash,
    unixfs,
    varint,
)

SEED = int(os.environ.get("CIDENC_SEED", "1337"))
TRIALS = int(os.environ.get("CIDENC_TRIALS", "2000"))
MAX_BYTES = int(os.environ.get("CIDENC_GEN_MAX_BYTES", "300"))
MAX_LINKS = int(os.environ.get("CIDENC_GEN_MAX_LINKS", "6"))

random.seed(SEED)

VARINT_LIMIT = 1 << 28


def rand_bytes(nmax: int = MAX_BYTES) -> bytes:
    return bytes(random.getrandbits(8) for _ in range(random.randint(0, nmax)))

def rand_name() -> str:
    return "".join(chr(random.randint(0x61, 0x7A)) for _ in range(random.randint(0, 12)))

def rand_varint_value() -> int:
    # Bias toward group boundaries where off-by-one errors live.
    bits = random.choice([7, 14, 21, 28])
    r = random.random()
    if r < 0.3:
        return (1 << bits) - 1
    if r < 0.5 and bits < 28:
        return 1 << bits
    return random.randint(0, (1 << bits) - 1)

def min_varint_len(n: int) -> int:
    size = 1
    while n >= 0x80:
        n >>= 7
        size += 1
    return size

def fail(label: str, context: Dict[str, Any]) -> int:
    print("INVARIANT FAIL:", label)
    print("CTX:", repr(context)[:2000])
    return 1

def main() -> int:
    for t in range(TRIALS):
        # (1) Varint round-trip and minimality
        n = rand_varint_value()
        enc = varint.encode(n)
        if varint.decode(enc) != (n, len(enc)):
            return fail("varint round-trip", {"trial": t, "n": n})
        if len(enc) != min_varint_len(n):
            return fail("varint minimality", {"trial": t, "n": n, "enc": enc.hex()})

        # (2) Determinism + multihash shape across every codec family
        payload = rand_bytes()
        for name, c in BY_NAME_CODECS.items():
            for fn in (c.encode, c.encode_sha256, c.encode_keccak256):
                if fn(payload) != fn(payload):
                    return fail("codec determinism", {"trial": t, "codec": name})
            for mh in (multihash.sha256(payload), multihash.keccak256(payload)):
                if len(mh) != 34:
                    return fail("multihash length", {"trial": t, "mh": mh.hex()})

        # (3) CBOR head minimality: the header never uses a wider form
        #     than the value needs.
        length = random.choice([random.randint(0, 23), random.randint(24, 255),
                                random.randint(256, 65535), random.randint(65536, 2**32 - 1)])
        head = dagcbor.encode_length(length, 0x60)
        want = 1 if length < 24 else 2 if length < 256 else 3 if length < 65536 else 5
        if len(head) != want:
            return fail("cbor head minimality", {"trial": t, "length": length})

        # (4) DAG-PB: tsize 0 and omitted tsize agree; links precede data
        h = rand_bytes(40)
        nm = rand_name()
        if dagpb.link(h, nm, 0) != dagpb.link(h, nm):
            return fail("pb tsize omission", {"trial": t})
        links: List[bytes] = [dagpb.link(rand_bytes(40), rand_name(), random.randint(0, 1000))
                              for _ in range(random.randint(0, MAX_LINKS))]
        node = dagpb.encode_pb_node(payload, links)
        if not node.endswith(payload):
            return fail("pb data last", {"trial": t})

        # (5) UnixFS directory invariance
        blocksizes = [random.randint(0, 5) for _ in range(random.randint(0, 5))]
        got = unixfs.encode_unixfs_data(UnixFSType.DIRECTORY, payload,
                                        random.randint(0, 10**6), blocksizes)
        if got != b"\x01":
            return fail("unixfs directory invariance", {"trial": t})

    # (6) Domain boundary
    try:
        varint.encode(VARINT_LIMIT)
    except Exception as e:
        if getattr(e, "code", None) != "ERR_VALUE_TOO_LARGE":
            return fail("varint boundary error kind", {"err": repr(e)})
    else:
        return fail("varint boundary accepted 2^28", {})

    print(f"OK: invariants passed for TRIALS={TRIALS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
