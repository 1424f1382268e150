from __future__ import annotations

import os
from typing import Optional

ENGINE_ENV = "MD5ISAAC_ENGINE"
NO_NUMBA_ENV = "MD5ISAAC_NO_NUMBA"

ENGINES = ("python", "numba")


def resolve_engine(engine: Optional[str] = None) -> str:
    """Pick the compute engine: explicit argument, else environment, else python.

    The name is validated first; MD5ISAAC_NO_NUMBA=1 then wins over a valid
    choice so JIT can be switched off without touching call sites.
    """
    value = engine if engine is not None else os.getenv(ENGINE_ENV, "python")
    value = value.strip().lower()
    if value not in ENGINES:
        raise ValueError(f"unknown engine {value!r}, expected one of {', '.join(ENGINES)}")
    if os.getenv(NO_NUMBA_ENV) == "1":
        return "python"
    return value
