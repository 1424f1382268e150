"""
ISAAC pseudo-random number generator (Bob Jenkins, 1996), RANDSIZL = 8.

The context keeps the current batch of 256 results, the 256-word pool and
the a/b/c accumulators. Values are handed out from the top of the batch
downwards; when the batch is exhausted a new one is generated first.

Reference outputs:
- http://www.burtleburtle.net/bob/rand/randvect.txt
- http://www.burtleburtle.net/bob/rand/randseed.txt
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

import numpy as np

from .config import resolve_engine
from .core import MASK32, to_int32, u32
from .errors import InvalidArgumentError, MisuseError, byte_view, require_context

RANDSIZL = 8
RANDSIZ = 1 << RANDSIZL
SEED_BYTES = RANDSIZ * 4

# the golden ratio
GOLDEN_RATIO = 0x9E3779B9

# (left?, amount) applied to `a` at positions i % 4
_SHIFTS = ((True, 13), (False, 6), (True, 2), (False, 16))


def mix(s: List[int]) -> None:
    """Scramble eight registers in place."""
    a, b, c, d, e, f, g, h = s
    a ^= (b << 11) & MASK32; d = u32(d + a); b = u32(b + c)  # noqa: E702
    b ^= c >> 2;             e = u32(e + b); c = u32(c + d)  # noqa: E702
    c ^= (d << 8) & MASK32;  f = u32(f + c); d = u32(d + e)  # noqa: E702
    d ^= e >> 16;            g = u32(g + d); e = u32(e + f)  # noqa: E702
    e ^= (f << 10) & MASK32; h = u32(h + e); f = u32(f + g)  # noqa: E702
    f ^= g >> 4;             a = u32(a + f); g = u32(g + h)  # noqa: E702
    g ^= (h << 8) & MASK32;  b = u32(b + g); h = u32(h + a)  # noqa: E702
    h ^= a >> 9;             c = u32(c + h); a = u32(a + b)  # noqa: E702
    s[:] = a, b, c, d, e, f, g, h


def generate(mem: List[int], rsl: List[int], a: int, b: int, c: int) -> tuple[int, int, int]:
    """One batch: updates ``mem`` and ``rsl`` in place, returns (a, b, c)."""
    c = u32(c + 1)
    b = u32(b + c)
    for i in range(RANDSIZ):
        x = mem[i]
        left, k = _SHIFTS[i & 3]
        a ^= ((a << k) & MASK32) if left else (a >> k)
        a = u32(a + mem[i ^ (RANDSIZ // 2)])
        mem[i] = y = u32(mem[(x >> 2) & (RANDSIZ - 1)] + a + b)
        rsl[i] = b = u32(mem[(y >> (RANDSIZL + 2)) & (RANDSIZ - 1)] + x)
    return a, b, c


def _isaac_kernel(engine: str) -> Optional[Callable]:
    if engine == "numba":
        from .numba_kernels import isaac_generate_u32

        return isaac_generate_u32
    return None


def _coerce_seed(words: Iterable[int]) -> List[int]:
    if words is None:
        raise InvalidArgumentError("seed is None")
    if isinstance(words, (bytes, bytearray, memoryview, str)):
        raise InvalidArgumentError("seed must be 256 integer words; use seed_bytes() for byte keys")
    try:
        out = [int(w) for w in words]
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"seed must be 256 integer words: {exc}") from exc
    if len(out) != RANDSIZ:
        raise InvalidArgumentError(f"seed must have {RANDSIZ} words, got {len(out)}")
    for w in out:
        if not 0 <= w <= MASK32:
            raise InvalidArgumentError(f"seed word out of range: {w:#x}")
    return out


class IsaacContext:
    """ISAAC generator state.

    ``IsaacContext()`` uses the fixed default initialisation (no external
    seed); ``IsaacContext(words)`` seeds from 256 32-bit words.
    """

    def __init__(self, seed: Optional[Iterable[int]] = None, *, engine: Optional[str] = None) -> None:
        self.engine = resolve_engine(engine)
        self._kernel = _isaac_kernel(self.engine)
        self.results = np.zeros(RANDSIZ, dtype=np.uint32)
        self.pool = np.zeros(RANDSIZ, dtype=np.uint32)
        self.a = self.b = self.c = 0
        self.count = 0
        self.generations = 0
        self.freed = False
        if seed is None:
            self._randinit(None)
        else:
            self._randinit(_coerce_seed(seed))

    @classmethod
    def from_bytes(cls, key, *, engine: Optional[str] = None) -> "IsaacContext":
        ctx = cls(engine=engine)
        ctx.seed_bytes(key)
        return ctx

    def __enter__(self) -> "IsaacContext":
        self._check_live("enter")
        return self

    def __exit__(self, *exc) -> None:
        if not self.freed:
            self.free()

    def _check_live(self, op: str) -> None:
        if self.freed:
            raise MisuseError(f"{op} on a freed ISAAC context")

    def _randinit(self, seed: Optional[List[int]]) -> None:
        self.a = self.b = self.c = 0
        s = [GOLDEN_RATIO] * 8
        for _ in range(4):
            mix(s)

        mem = [0] * RANDSIZ
        if seed is not None:
            # two passes so every seed word affects every pool word
            for src in (seed, mem):
                for i in range(0, RANDSIZ, 8):
                    s[:] = [u32(v + src[i + j]) for j, v in enumerate(s)]
                    mix(s)
                    mem[i : i + 8] = s
        else:
            for i in range(0, RANDSIZ, 8):
                mix(s)
                mem[i : i + 8] = s

        self.pool[:] = mem
        self.results[:] = 0
        self.generations = 0
        self._generate()
        self.count = RANDSIZ

    def _generate(self) -> None:
        if self._kernel is not None:
            a, b, c = self._kernel(self.pool, self.results, self.a, self.b, self.c)
            self.a, self.b, self.c = int(a), int(b), int(c)
        else:
            mem = [int(v) for v in self.pool.tolist()]
            rsl = [0] * RANDSIZ
            self.a, self.b, self.c = generate(mem, rsl, self.a, self.b, self.c)
            self.pool[:] = mem
            self.results[:] = rsl
        self.generations += 1

    def seed(self, words: Iterable[int]) -> None:
        self._check_live("seed")
        self._randinit(_coerce_seed(words))

    def seed_bytes(self, key) -> None:
        """Seed from up to 1024 key bytes, zero padded, read as little-endian words."""
        self._check_live("seed_bytes")
        view = byte_view(key, None)
        if len(view) > SEED_BYTES:
            raise InvalidArgumentError(f"key must be at most {SEED_BYTES} bytes, got {len(view)}")
        padded = bytes(view) + bytes(SEED_BYTES - len(view))
        self._randinit(np.frombuffer(padded, dtype="<u4").tolist())

    def step(self) -> None:
        """Generate a fresh batch and rewind extraction to its top."""
        self._check_live("step")
        self._generate()
        self.count = RANDSIZ

    def next_value(self) -> int:
        self._check_live("next_value")
        if self.count == 0:
            self._generate()
            self.count = RANDSIZ - 1
        else:
            self.count -= 1
        return int(self.results[self.count])

    def next_int32(self) -> int:
        return to_int32(self.next_value())

    def fill_buffer(self, out, count: Optional[int] = None) -> None:
        """Write ``count`` random bytes into ``out``, four per little-endian word.

        A trailing partial word is truncated; its unused bytes are dropped.
        """
        self._check_live("fill_buffer")
        view = byte_view(out, count, writable=True)
        n = len(view)
        pos = 0
        while pos < n:
            word = self.next_value().to_bytes(4, "little")
            take = min(4, n - pos)
            view[pos : pos + take] = word[:take]
            pos += take

    def random_bytes(self, count: int) -> bytes:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidArgumentError(f"count must be a non-negative int, got {count!r}")
        buf = bytearray(count)
        self.fill_buffer(buf)
        return bytes(buf)

    def free(self) -> None:
        if self.freed:
            raise MisuseError("ISAAC context already freed")
        self.results[:] = 0
        self.pool[:] = 0
        self.a = self.b = self.c = 0
        self.count = 0
        self.freed = True


# Call-style interface mirroring the C library surface.


def isaac_init(seed: Optional[Iterable[int]] = None, *, engine: Optional[str] = None) -> IsaacContext:
    return IsaacContext(seed, engine=engine)


def isaac_seed(ctx: IsaacContext, words: Iterable[int]) -> None:
    require_context(ctx, IsaacContext)
    ctx.seed(words)


def isaac_step(ctx: IsaacContext) -> None:
    require_context(ctx, IsaacContext)
    ctx.step()


def isaac_long(ctx: IsaacContext) -> int:
    require_context(ctx, IsaacContext)
    return ctx.next_int32()


def isaac_buff(ctx: IsaacContext, buffer, size: Optional[int] = None) -> None:
    require_context(ctx, IsaacContext)
    ctx.fill_buffer(buffer, size)


def isaac_free(ctx: IsaacContext) -> None:
    require_context(ctx, IsaacContext)
    ctx.free()
