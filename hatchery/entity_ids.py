"""Identity issuing for dragons.

Dragons are identified by plain non-negative integers in save data. Instead of
a module-level counter, ids come from an injected :class:`IdIssuer` so the
genetics core holds no hidden state and tests can control numbering.

Usage:
------
    issuer = SequentialIdIssuer()
    dragon = Dragon.create_random(catalog, rng=rng, ids=issuer)
    dragon.id  # 1

    # After loading a save, continue numbering where it left off
    issuer = SequentialIdIssuer(start=save["next_dragon_id"])
"""

import threading
from typing import Protocol, runtime_checkable

DragonId = int


@runtime_checkable
class IdIssuer(Protocol):
    """Anything that hands out fresh dragon ids."""

    def issue(self) -> DragonId:
        ...


class SequentialIdIssuer:
    """Issues 1, 2, 3, ... (or from a restored starting point).

    Thread-safe, so one issuer may back concurrent request handlers.
    """

    def __init__(self, start: int = 1) -> None:
        if start < 0:
            raise ValueError(f"ID start must be non-negative, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def issue(self) -> DragonId:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    @property
    def next_id(self) -> int:
        """The id the next call to :meth:`issue` will return (for persistence)."""
        return self._next

    def __repr__(self) -> str:
        return f"SequentialIdIssuer(next={self._next})"
