"""
Numba JIT kernels for the MD5 compression function and the ISAAC batch.

State lives in ``numpy.uint32`` arrays; arithmetic is done in int64 and
masked back to 32 bits before every store so that numba's integer
promotion rules never leak into the results.
"""

from __future__ import annotations

import numpy as np
from numba import njit

from .core import AC, RC, WT

# Numba sometimes behaves unexpectedly when indexing numpy global arrays inside `@njit`
# functions on some platforms. Keep tuple-based copies for deterministic typing.
_MD5_AC_T = tuple(int(x) for x in AC)
_MD5_RC_T = tuple(int(x) for x in RC)
_MD5_G_T = tuple(int(x) for x in WT)

_M32 = 0xFFFFFFFF


@njit(cache=True)
def md5_transform_u32(state: np.ndarray, block: np.ndarray) -> None:
    """Compress 16 little-endian words into ``state`` (4 words) in place."""
    a0 = np.int64(state[0])
    b0 = np.int64(state[1])
    c0 = np.int64(state[2])
    d0 = np.int64(state[3])
    a = a0
    b = b0
    c = c0
    d = d0
    for i in range(64):
        if i < 16:
            f = d ^ (b & (c ^ d))
        elif i < 32:
            f = c ^ (d & (b ^ c))
        elif i < 48:
            f = b ^ c ^ d
        else:
            f = c ^ (b | (d ^ _M32))
        s = _MD5_RC_T[i]
        tmp = (a + f + _MD5_AC_T[i] + np.int64(block[_MD5_G_T[i]])) & _M32
        tmp = ((tmp << s) | (tmp >> (32 - s))) & _M32
        tmp = (tmp + b) & _M32
        a, d, c, b = d, c, b, tmp
    state[0] = np.uint32((a0 + a) & _M32)
    state[1] = np.uint32((b0 + b) & _M32)
    state[2] = np.uint32((c0 + c) & _M32)
    state[3] = np.uint32((d0 + d) & _M32)


@njit(cache=True)
def isaac_generate_u32(mem: np.ndarray, rsl: np.ndarray, a: int, b: int, c: int) -> tuple[int, int, int]:
    """One ISAAC batch over ``mem`` (pool) writing 256 words into ``rsl``."""
    a = np.int64(a)
    c = (np.int64(c) + 1) & _M32
    b = (np.int64(b) + c) & _M32
    for i in range(256):
        x = np.int64(mem[i])
        k = i & 3
        if k == 0:
            a = a ^ ((a << 13) & _M32)
        elif k == 1:
            a = a ^ (a >> 6)
        elif k == 2:
            a = a ^ ((a << 2) & _M32)
        else:
            a = a ^ (a >> 16)
        a = (a + np.int64(mem[i ^ 128])) & _M32
        y = (np.int64(mem[(x >> 2) & 0xFF]) + a + b) & _M32
        mem[i] = np.uint32(y)
        b = (np.int64(mem[(y >> 10) & 0xFF]) + x) & _M32
        rsl[i] = np.uint32(b)
    return a, b, c
