from __future__ import annotations

import math
from typing import List, Tuple

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def u32(x: int) -> int:
    return x & MASK32


def rl(x: int, s: int) -> int:
    x &= MASK32
    return ((x << s) | (x >> (32 - s))) & MASK32


def to_int32(x: int) -> int:
    x &= MASK32
    return x - (1 << 32) if x & 0x80000000 else x


# Rotation constants (RC_t), RFC 1321
RC: Tuple[int, ...] = tuple(
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)


def _mk_AC() -> Tuple[int, ...]:
    # AC_t = floor(2^32 * abs(sin(t+1)))
    return tuple(int(abs(math.sin(i + 1)) * (1 << 32)) & MASK32 for i in range(64))


AC: Tuple[int, ...] = _mk_AC()


def wt_index(t: int) -> int:
    if 0 <= t < 16:
        return t
    if 16 <= t < 32:
        return (5 * t + 1) % 16
    if 32 <= t < 48:
        return (3 * t + 5) % 16
    if 48 <= t < 64:
        return (7 * t) % 16
    raise ValueError("t out of range")


WT: Tuple[int, ...] = tuple(wt_index(t) for t in range(64))


def ft(t: int, X: int, Y: int, Z: int) -> int:
    X, Y, Z = u32(X), u32(Y), u32(Z)
    if 0 <= t < 16:
        # F: (X & Y) | (~X & Z)
        return u32((X & Y) | ((~X) & Z))
    if 16 <= t < 32:
        # G: (X & Z) | (Y & ~Z)
        return u32((X & Z) | (Y & (~Z)))
    if 32 <= t < 48:
        # H: X ^ Y ^ Z
        return u32(X ^ Y ^ Z)
    if 48 <= t < 64:
        # I: Y ^ (X | ~Z)
        return u32(Y ^ (X | (~Z)))
    raise ValueError("t out of range")


# MD5 initial value
MD5_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

PADDING = b"\x80" + b"\x00" * 63


def pad_length(index: int) -> int:
    """Bytes of PADDING needed after ``index`` buffered bytes to reach 56 mod 64."""
    return 56 - index if index < 56 else 120 - index


def md5_padding(msg_len_bytes: int) -> bytes:
    """Padding suffix appended to a message of ``msg_len_bytes`` bytes.

    0x80, then zeros up to 56 mod 64, then the 64-bit little-endian bit
    length. An index in 56..63 spills into a whole extra block.
    """
    bit_len = (msg_len_bytes * 8) & MASK64
    return PADDING[: pad_length(msg_len_bytes % 64)] + bit_len.to_bytes(8, "little")


def compress(state: Tuple[int, int, int, int], m: List[int]) -> Tuple[int, int, int, int]:
    """One MD5 compression over 16 message words; returns the new state."""
    if len(m) != 16:
        raise ValueError("m must have 16 words")
    A, B, C, D = (u32(state[0]), u32(state[1]), u32(state[2]), u32(state[3]))
    a, b, c, d = A, B, C, D
    for t in range(64):
        tmp = u32(a + ft(t, b, c, d) + m[WT[t]] + AC[t])
        a, d, c, b = d, c, b, u32(b + rl(tmp, RC[t]))
    return (u32(A + a), u32(B + b), u32(C + c), u32(D + d))


def bytes_to_words_le(block: bytes) -> List[int]:
    if len(block) % 4:
        raise ValueError("length must be a multiple of 4")
    return [int.from_bytes(block[i : i + 4], "little") for i in range(0, len(block), 4)]


def words_to_bytes_le(words) -> bytes:
    return b"".join(u32(w).to_bytes(4, "little") for w in words)
