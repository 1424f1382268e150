from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import ENGINES, resolve_engine
from .errors import Md5IsaacError
from .isaac import RANDSIZ, IsaacContext
from .md5 import MD5Context, md5_file


def _md5_stdin(engine: str, chunk_size: int) -> bytes:
    ctx = MD5Context(engine=engine)
    stream = sys.stdin.buffer
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        ctx.update(chunk)
    return ctx.finalize()


def cmd_md5(ns: argparse.Namespace) -> int:
    if ns.string is not None:
        ctx = MD5Context(engine=ns.engine)
        ctx.update(ns.string.encode("utf-8"))
        print(f'{ctx.finalize().hex()}  "{ns.string}"')
        return 0
    status = 0
    for name in ns.files or ["-"]:
        if name == "-":
            digest = _md5_stdin(ns.engine, ns.chunk_size)
        else:
            try:
                digest = md5_file(name, ns.chunk_size, engine=ns.engine)
            except OSError as exc:
                print(f"md5: {name}: {exc.strerror or exc}")
                status = 1
                continue
        print(f"{digest.hex()}  {name}")
    return status


def _parse_seed_hex(text: str) -> List[int]:
    s = "".join(text.split()).lower()
    if s.startswith("0x"):
        s = s[2:]
    if not s or len(s) % 8 or len(s) > RANDSIZ * 8:
        raise ValueError(f"seed must be 1..{RANDSIZ} words of 8 hex digits")
    words = [int(s[i : i + 8], 16) for i in range(0, len(s), 8)]
    return words + [0] * (RANDSIZ - len(words))


def cmd_isaac(ns: argparse.Namespace) -> int:
    if ns.seed_hex is not None:
        try:
            seed = _parse_seed_hex(ns.seed_hex)
        except ValueError as exc:
            print(f"isaac: {exc}")
            return 1
        ctx = IsaacContext(seed, engine=ns.engine)
    elif ns.seed_text is not None:
        ctx = IsaacContext.from_bytes(ns.seed_text.encode("utf-8"), engine=ns.engine)
    else:
        ctx = IsaacContext(engine=ns.engine)

    with ctx:
        if ns.bytes is not None:
            print(ctx.random_bytes(ns.bytes).hex())
            return 0
        line: List[str] = []
        for _ in range(ns.count):
            if ns.signed:
                line.append(str(ctx.next_int32()))
            else:
                line.append(f"{ctx.next_value():08x}")
            if len(line) == ns.per_line:
                print(" ".join(line))
                line = []
        if line:
            print(" ".join(line))
    return 0


def cmd_verify_core(ns: argparse.Namespace) -> int:
    from .verify import run_all

    ok_all = True
    for name, (ok, bad) in run_all(ns.engine).items():
        print(f"{name}: {'PASS' if ok else 'FAIL'}" + ("" if ok else f" bad={bad}"))
        ok_all &= ok
    print(f"verify-core[{ns.engine}]:", "PASS" if ok_all else "FAIL")
    return 0 if ok_all else 1


def _positive(text: str) -> int:
    v = int(text, 0)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return v


def _non_negative(text: str) -> int:
    v = int(text, 0)
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {text}")
    return v


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="md5isaac")
    p.add_argument("--engine", choices=ENGINES, default=None, help="compute engine (default: $MD5ISAAC_ENGINE or python)")
    sub = p.add_subparsers(dest="cmd", required=True)

    s1 = sub.add_parser("md5", help="print MD5 digests of files, stdin or a string")
    s1.add_argument("files", nargs="*", help="files to hash; '-' or nothing reads stdin")
    s1.add_argument("--string", "-s", default=None, help="hash this UTF-8 string instead")
    s1.add_argument("--chunk-size", type=_positive, default=1 << 16)
    s1.set_defaults(func=cmd_md5)

    s2 = sub.add_parser("isaac", help="emit ISAAC output")
    seed = s2.add_mutually_exclusive_group()
    seed.add_argument("--seed-hex", default=None, help="up to 256 32-bit words as hex, zero padded")
    seed.add_argument("--seed-text", default=None, help="seed from UTF-8 text (at most 1024 bytes)")
    s2.add_argument("--count", type=_non_negative, default=RANDSIZ)
    s2.add_argument("--bytes", type=_non_negative, default=None, help="print this many random bytes as hex")
    s2.add_argument("--signed", action="store_true", help="print values as signed 32-bit integers")
    s2.add_argument("--per-line", type=_positive, default=8)
    s2.set_defaults(func=cmd_isaac)

    s3 = sub.add_parser("verify-core", help="check both engines against published vectors")
    s3.set_defaults(func=cmd_verify_core)

    args = p.parse_args(argv)
    try:
        args.engine = resolve_engine(args.engine)
        return int(args.func(args))
    except (Md5IsaacError, ValueError) as exc:
        print(f"{args.cmd}: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
