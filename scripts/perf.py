#!/usr/bin/env python3
"""Performance micro-benchmarks for the MD5 and ISAAC engines."""
from __future__ import annotations

import argparse
import time
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from md5isaac.config import ENGINES
from md5isaac.isaac import IsaacContext
from md5isaac.md5 import MD5Context


def bench_md5(size: int, engine: str) -> None:
    data = bytes(range(256)) * (size // 256 + 1)
    data = data[:size]
    # warm up (JIT compile)
    MD5Context(engine=engine).update(b"\x00" * 64)
    start = time.time()
    ctx = MD5Context(engine=engine)
    ctx.update(data)
    ctx.finalize()
    elapsed = time.time() - start
    rate = size / elapsed / (1 << 20) if elapsed else 0.0
    print(f"md5[{engine}]: bytes={size} time={elapsed:.3f}s rate={rate:.2f} MiB/s")


def bench_isaac(batches: int, engine: str) -> None:
    ctx = IsaacContext(engine=engine)
    start = time.time()
    for _ in range(batches):
        ctx.step()
    elapsed = time.time() - start
    rate = batches * 256 / elapsed if elapsed else 0.0
    print(f"isaac_step[{engine}]: batches={batches} time={elapsed:.3f}s rate={rate:.0f} words/s")

    start = time.time()
    ctx.random_bytes(batches * 1024)
    elapsed = time.time() - start
    rate = batches * 1024 / elapsed / (1 << 20) if elapsed else 0.0
    print(f"isaac_fill[{engine}]: bytes={batches * 1024} time={elapsed:.3f}s rate={rate:.2f} MiB/s")


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=1 << 20)
    ap.add_argument("--batches", type=int, default=1000)
    ap.add_argument("--engine", choices=ENGINES, action="append", default=None)
    args = ap.parse_args()

    for engine in args.engine or ENGINES:
        bench_md5(args.size, engine)
        bench_isaac(args.batches, engine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
