from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional

from loom.errors import LoomError


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched by `load`/`run` after the working directory."""
    return paths_from_env('LOOM_PATH', [])


def get_random_seed() -> Optional[int]:
    raw = os.environ.get('LOOM_SEED')
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise LoomError(f"LOOM_SEED must be an integer, got {raw!r}")
