from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Union

import numpy as np

from .config import resolve_engine
from .core import (
    MASK32,
    MD5_IV,
    PADDING,
    bytes_to_words_le,
    compress,
    pad_length,
    u32,
    words_to_bytes_le,
)
from .errors import InvalidArgumentError, MisuseError, byte_view, require_context

BLOCK_SIZE = 64
DIGEST_SIZE = 16


def _md5_kernel(engine: str) -> Optional[Callable]:
    if engine == "numba":
        from .numba_kernels import md5_transform_u32

        return md5_transform_u32
    return None


class MD5Context:
    """Streaming MD5 state: init, update*, finalize.

    ``state`` holds the four chaining words, ``count`` the 64-bit bit
    counter as ``[low, high]`` and ``buffer`` the 0..63 bytes not yet
    compressed. ``finalize`` wipes all three; the context must then be
    re-initialised before it can be used again.
    """

    def __init__(self, *, engine: Optional[str] = None) -> None:
        self.engine = resolve_engine(engine)
        # resolved up front so an unavailable kernel fails before any state exists
        self._kernel = _md5_kernel(self.engine)
        self.state: List[int] = [0, 0, 0, 0]
        self.count: List[int] = [0, 0]
        self.buffer = bytearray(BLOCK_SIZE)
        self.finalized = False
        self.init()

    def init(self) -> None:
        self.count[0] = self.count[1] = 0
        # load magic initialization constants
        self.state[:] = MD5_IV
        self.buffer[:] = bytes(BLOCK_SIZE)
        self.finalized = False

    def _check_live(self, op: str) -> None:
        if self.finalized:
            raise MisuseError(f"{op} on a finalized MD5 context; call init() first")

    @property
    def buffered(self) -> int:
        return (self.count[0] >> 3) & 0x3F

    @property
    def bit_length(self) -> int:
        return (self.count[1] << 32) | self.count[0]

    def transform(self, block) -> None:
        self._check_live("transform")
        view = byte_view(block, None)
        if len(view) != BLOCK_SIZE:
            raise InvalidArgumentError(f"block must be {BLOCK_SIZE} bytes, got {len(view)}")
        self._transform(view)

    def _transform(self, block: memoryview) -> None:
        if self._kernel is not None:
            st = np.array(self.state, dtype=np.uint32)
            self._kernel(st, np.frombuffer(block, dtype="<u4").astype(np.uint32))
            self.state[:] = [int(v) for v in st]
            return
        self.state[:] = compress(tuple(self.state), bytes_to_words_le(block))

    def update(self, data, length: Optional[int] = None) -> None:
        self._check_live("update")
        view = byte_view(data, length)
        n = len(view)
        index = self.buffered

        # update number of bits, carrying into the high word
        low_add = (n << 3) & MASK32
        self.count[0] = u32(self.count[0] + low_add)
        if self.count[0] < low_add:
            self.count[1] = u32(self.count[1] + 1)
        self.count[1] = u32(self.count[1] + (n >> 29))

        part_len = BLOCK_SIZE - index
        i = 0
        # transform as many times as possible
        if n >= part_len:
            self.buffer[index:] = view[:part_len]
            self._transform(memoryview(self.buffer))
            i = part_len
            while i + BLOCK_SIZE <= n:
                self._transform(view[i : i + BLOCK_SIZE])
                i += BLOCK_SIZE
            index = 0

        # buffer remaining input
        self.buffer[index : index + n - i] = view[i:n]

    def finalize(self, digest_out=None) -> bytes:
        self._check_live("finalize")
        out_view = None
        if digest_out is not None:
            out_view = byte_view(digest_out, None, writable=True)
            if len(out_view) < DIGEST_SIZE:
                raise InvalidArgumentError(f"digest buffer must hold {DIGEST_SIZE} bytes, got {len(out_view)}")

        bits = words_to_bytes_le(self.count)
        index = self.buffered
        self.update(PADDING, pad_length(index))
        self.update(bits)
        digest = words_to_bytes_le(self.state)

        self._wipe()
        if out_view is not None:
            out_view[:DIGEST_SIZE] = digest
        return digest

    def _wipe(self) -> None:
        self.state[:] = [0, 0, 0, 0]
        self.count[:] = [0, 0]
        self.buffer[:] = bytes(BLOCK_SIZE)
        self.finalized = True


# Call-style interface mirroring the C library surface.


def init(ctx: MD5Context) -> None:
    require_context(ctx, MD5Context)
    ctx.init()


def update(ctx: MD5Context, data, length: Optional[int] = None) -> None:
    require_context(ctx, MD5Context)
    ctx.update(data, length)


def transform(ctx: MD5Context, block) -> None:
    require_context(ctx, MD5Context)
    ctx.transform(block)


def finalize(ctx: MD5Context, digest_out=None) -> bytes:
    require_context(ctx, MD5Context)
    return ctx.finalize(digest_out)


def md5_bytes(data, *, engine: Optional[str] = None) -> bytes:
    ctx = MD5Context(engine=engine)
    ctx.update(data)
    return ctx.finalize()


def md5_hex(data, *, engine: Optional[str] = None) -> str:
    return md5_bytes(data, engine=engine).hex()


def md5_file(
    path: Union[str, Path],
    chunk_size: int = 1 << 16,
    *,
    engine: Optional[str] = None,
) -> bytes:
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be positive, got {chunk_size}")
    ctx = MD5Context(engine=engine)
    with open(path, "rb") as fh:
        while True:
            chunk = fh.read(chunk_size)
            if not chunk:
                break
            ctx.update(chunk)
    return ctx.finalize()
