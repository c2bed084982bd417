"""Axis-aligned rectangle collision checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; y grows downwards."""

    top: float
    left: float
    right: float
    bottom: float

    @classmethod
    def centered(cls, x: float, y: float, half: float) -> Rect:
        """Square of half-width ``half`` centred on (x, y)."""
        return cls(top=y - half, left=x - half, right=x + half, bottom=y + half)

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles overlap or touch."""
        return not (
            other.left > self.right
            or other.right < self.left
            or other.top > self.bottom
            or other.bottom < self.top
        )


def rect_intersect(r1: Rect, r2: Rect) -> bool:
    """True when the two rectangles overlap or touch."""
    return r1.intersects(r2)