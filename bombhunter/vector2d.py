"""Immutable two-dimensional vector used for positions, sizes and velocities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

_EPSILON = 1e-6

Number = Union[int, float]


@dataclass(frozen=True, init=False, repr=False, eq=False)
class Vector2D:
    """A 2D vector of floats.

    ``Vector2D()`` is the zero vector, ``Vector2D(s)`` sets both components
    to ``s`` and ``Vector2D(x, y)`` sets them separately. Division by a
    value whose magnitude is below 1e-6 yields the zero vector.
    """

    __slots__ = ("x", "y")

    x: float
    y: float

    def __init__(self, x: Number = 0.0, y: Number | None = None) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(x if y is None else y))

    def __repr__(self) -> str:
        return f"Vector2D({self.x!r}, {self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __mul__(self, other: Vector2D | Number) -> Vector2D:
        if isinstance(other, Vector2D):
            return Vector2D(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2D:
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Vector2D | Number) -> Vector2D:
        if isinstance(other, Vector2D):
            if abs(other.x) < _EPSILON or abs(other.y) < _EPSILON:
                return Vector2D()
            return Vector2D(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            if abs(other) < _EPSILON:
                return Vector2D()
            return Vector2D(self.x / other, self.y / other)
        return NotImplemented

    def copy(self) -> Vector2D:
        """Return an equal, separate vector."""
        return Vector2D(self.x, self.y)

    def to_int(self) -> tuple[int, int]:
        """Return both components truncated toward zero."""
        return int(self.x), int(self.y)