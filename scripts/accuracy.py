#!/usr/bin/env python3
"""Accuracy checks for both engines against published vectors."""
from __future__ import annotations

import argparse
import hashlib
import random
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from md5isaac.config import ENGINES
from md5isaac.isaac import RANDSIZ, IsaacContext
from md5isaac.md5 import MD5Context
from md5isaac.verify import run_all


def check_vectors(engine: str) -> bool:
    ok_all = True
    for name, (ok, bad) in run_all(engine).items():
        print(f"{name}[{engine}]: {'PASS' if ok else 'FAIL'}" + ("" if ok else f" bad={bad}"))
        ok_all &= ok
    return ok_all


def check_random_streams(trials: int, seed: int, engine: str) -> bool:
    rng = random.Random(seed)
    fails = 0
    for _ in range(trials):
        msg = rng.randbytes(rng.randrange(0, 2048))
        ctx = MD5Context(engine=engine)
        pos = 0
        while pos < len(msg):
            step = rng.randrange(1, 200)
            ctx.update(msg[pos : pos + step])
            pos += step
        if ctx.finalize() != hashlib.md5(msg).digest():
            fails += 1
    ok = fails == 0
    print(f"md5_random_streams[{engine}]: {'PASS' if ok else 'FAIL'} fails={fails}/{trials}")
    return ok


def check_isaac_engines_agree(seed: int) -> bool:
    rng = random.Random(seed)
    words = [rng.getrandbits(32) for _ in range(RANDSIZ)]
    py = IsaacContext(words, engine="python")
    nb = IsaacContext(words, engine="numba")
    ok = py.random_bytes(1 << 14) == nb.random_bytes(1 << 14)
    print(f"isaac_engines_agree: {'PASS' if ok else 'FAIL'}")
    return ok


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--trials", type=int, default=50)
    ap.add_argument("--seed", type=int, default=123)
    args = ap.parse_args()

    ok = True
    for engine in ENGINES:
        ok &= check_vectors(engine)
        ok &= check_random_streams(args.trials, args.seed, engine)
    ok &= check_isaac_engines_agree(args.seed)

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
