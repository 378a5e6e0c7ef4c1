"""Vectors and the body record shared by every part of the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector in this direction; a zero vector yields NaN components."""
        length = self.length()
        if length == 0.0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / length, self.y / length)


class Kind(Enum):
    """The role a body plays in the simulation."""

    BODY = "body"
    GHOST = "ghost"
    SUN = "sun"
    MOON = "moon"


@dataclass
class Body:
    """A massive particle with a position, a velocity and a drawn size."""

    mass: float = 1.0
    radius: float = 10.0
    velocity: Vec2 = field(default_factory=Vec2)
    position: Vec2 = field(default_factory=Vec2)
    scale: float = 1.0
    kind: Kind = Kind.BODY
    sprite: str | None = None