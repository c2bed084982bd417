"""Bait (food) items and the store that holds them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bait:
    """A piece of food on the map."""

    x: float
    y: float
    color: str
    size: float


class BaitStore:
    """Ordered collection of baits addressed by position."""

    def __init__(self) -> None:
        self._baits: list[Bait] = []

    def create(self, x: float, y: float, color: str, size: float) -> Bait:
        """Add a new bait and return it."""
        bait = Bait(x, y, color, size)
        self._baits.append(bait)
        return bait

    def get(self, index: int) -> Bait | None:
        """Return the bait at ``index``, or None if there is none."""
        if 0 <= index < len(self._baits):
            return self._baits[index]
        return None

    def remove(self, index: int) -> None:
        """Remove the bait at ``index``; later baits shift down. Out of range is ignored."""
        if 0 <= index < len(self._baits):
            del self._baits[index]

    def keys(self) -> list[int]:
        """Indices of all stored baits."""
        return list(range(len(self._baits)))

    def __len__(self) -> int:
        return len(self._baits)