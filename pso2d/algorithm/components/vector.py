"""Immutable 2D vector used for particle positions and velocities.

Arithmetic is exposed as plain functions (add, sub, scale) that always
return new Vector2 instances; nothing here mutates its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass

# Coordinates closer to zero than this print as exactly 0.
TOLERANCE = 1e-6


@dataclass(frozen=True, eq=False)
class Vector2:
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return display(self)


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def scale(k: float, v: Vector2) -> Vector2:
    return Vector2(k * v.x, k * v.y)


def _snap(value: float) -> float:
    return 0.0 if abs(value) < TOLERANCE else value


def display(v: Vector2) -> str:
    """Format as ``(x, y)`` with 6 decimals, snapping near-zero noise to 0."""
    return f"({_snap(v.x):.6f}, {_snap(v.y):.6f})"
