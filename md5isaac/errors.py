from __future__ import annotations


class Md5IsaacError(Exception):
    """Base class for every error raised by the MD5 and ISAAC engines."""


class InvalidArgumentError(Md5IsaacError, ValueError):
    """A missing context, a missing buffer with a non-zero length, or a
    malformed argument (wrong block size, bad seed, short output buffer)."""


class MisuseError(Md5IsaacError, RuntimeError):
    """An operation on a context that was finalized or freed."""


def require_context(ctx, kind: type) -> None:
    if ctx is None:
        raise InvalidArgumentError("context is None")
    if not isinstance(ctx, kind):
        raise InvalidArgumentError(f"expected {kind.__name__}, got {type(ctx).__name__}")


def byte_view(data, length: int | None, *, writable: bool = False) -> memoryview:
    """Return a flat byte view over ``data`` limited to ``length`` bytes.

    ``None`` is accepted only together with a zero (or omitted) length.
    """
    if length is not None:
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidArgumentError(f"length must be an int, got {type(length).__name__}")
        if length < 0:
            raise InvalidArgumentError(f"negative length: {length}")
    if data is None:
        if length:
            raise InvalidArgumentError(f"buffer is None but length is {length}")
        return memoryview(b"")
    if isinstance(data, str):
        raise InvalidArgumentError("expected a bytes-like object, got str")
    try:
        view = memoryview(data)
    except TypeError as exc:
        raise InvalidArgumentError(f"expected a bytes-like object, got {type(data).__name__}") from exc
    if writable and view.readonly:
        raise InvalidArgumentError("output buffer is read-only")
    if view.format != "B" or view.ndim != 1:
        try:
            view = view.cast("B")
        except TypeError as exc:
            raise InvalidArgumentError("buffer must be C-contiguous") from exc
    if length is None:
        return view
    if length > len(view):
        raise InvalidArgumentError(f"length {length} exceeds buffer size {len(view)}")
    return view[:length]
