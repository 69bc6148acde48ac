from __future__ import annotations

import random
import secrets
import threading
from typing import Optional, Protocol


class IndexSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Return a uniformly distributed integer in ``[0, n)``."""
        ...


def _require_positive_bound(n: int) -> None:
    if n <= 0:
        raise ValueError(f"upper bound must be > 0, got {n}")


class SystemIndexSource:
    """OS CSPRNG via `secrets`; holds no Python-level state between draws."""

    def randbelow(self, n: int) -> int:
        _require_positive_bound(n)
        return secrets.randbelow(n)


class SeededIndexSource:
    """Reproducible index stream for tests and repeatable runs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def randbelow(self, n: int) -> int:
        _require_positive_bound(n)
        with self._lock:
            return self._random.randrange(n)


SYSTEM_INDEX_SOURCE = SystemIndexSource()
