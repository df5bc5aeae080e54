#!/usr/bin/env python3
# tools/fuzz_runner.py
#
# Random-input fuzzing for the cidenc encoders and the varint decoder.
#
# Fuzz categories:
#   A) random byte strings -> varint.decode (value or ERR_MALFORMED_VARINT only)
#   B) random payloads and links -> DAG-CBOR node composition
#   C) random UnixFS descriptors and mismatched directory pairings
#
# Anything other than a documented CidError prints a repro and exits non-zero.

import os, sys, random
from typing import Any, Dict

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(ROOT, "implementations", "python"))

from cidenc import CidError, RAW, UnixFSType, dagcbor, dagpb, unixfs, varint

SEED = int(os.environ.get("CIDENC_SEED", "4242"))
ROUNDS = int(os.environ.get("CIDENC_FUZZ_ROUNDS", "5000"))

random.seed(SEED)

def crash(label: str, exc: BaseException, ctx: Dict[str, Any]) -> None:
    print("UNEXPECTED:", label)
    print("EXC:", repr(exc))
    print("CTX:", repr(ctx)[:4000])
    raise SystemExit(1)

def rand_bytes(nmax: int) -> bytes:
    return bytes(random.getrandbits(8) for _ in range(random.randint(0, nmax)))

def main() -> int:
    for i in range(ROUNDS):
        r = random.random()

        # A) varint decoder on arbitrary bytes
        if r < 0.40:
            buf = rand_bytes(8)
            try:
                value, used = varint.decode(buf)
            except CidError as e:
                if e.code != "ERR_MALFORMED_VARINT" or any(b < 0x80 for b in buf):
                    crash("A varint.decode", e, {"round": i, "buf": buf.hex()})
                continue
            except Exception as e:
                crash("A varint.decode", e, {"round": i, "buf": buf.hex()})
            if used < 1 or buf[used - 1] >= 0x80:
                crash("A varint.decode length", ValueError(used), {"round": i, "buf": buf.hex()})
            continue

        # B) DAG-CBOR node dispatch
        if r < 0.75:
            data = rand_bytes(64) if random.random() < 0.7 else b""
            links = [RAW.encode(rand_bytes(16)) for _ in range(random.randint(0, 3))]
            try:
                dagcbor.node_cbor(data, links)
            except CidError as e:
                if e.code != "ERR_INVALID_NODE" or data or links:
                    crash("B node_cbor", e, {"round": i, "data": data.hex(), "links": len(links)})
            except Exception as e:
                crash("B node_cbor", e, {"round": i})
            continue

        # C) UnixFS descriptors and lenient directory pairing
        node_type = random.choice(list(UnixFSType))
        try:
            unixfs.encode_unixfs_data(node_type, rand_bytes(32), random.randint(0, 10**6),
                                      [random.randint(0, 1 << 20) for _ in range(random.randint(0, 4))])
            hashes = [RAW.encode(rand_bytes(8)) for _ in range(random.randint(0, 4))]
            names = ["n{}".format(k) for k in range(random.randint(0, 4))]
            got = unixfs.directory(hashes, names)
            want = dagpb.directory([dagpb.link(h, n) for h, n in zip(hashes, names)])
            if got != want:
                crash("C unixfs.directory pairing", ValueError("mismatch"), {"round": i})
        except Exception as e:
            crash("C unixfs", e, {"round": i, "type": node_type})

    print(f"OK: fuzz rounds={ROUNDS} seed={SEED} (no unexpected errors)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
