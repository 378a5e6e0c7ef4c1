"""Creation of the initial field of bodies and the special bodies."""

from __future__ import annotations

import math
import random

from .body import Body, Kind, Vec2

IS_FUN_BUILD = True
SPAWN_DENSITY = 48 if IS_FUN_BUILD else 28

PERLIN_SEED = 42
SPACING = 64.0
JITTER = 20.0
BASE_SPEED = 5.0
FAST_FACTOR = 13.0
SPRITE_SCALE = 0.01

_DIAGONAL = 1.0 / math.sqrt(2.0)
_GRADIENTS = (
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
    (_DIAGONAL, _DIAGONAL),
    (-_DIAGONAL, _DIAGONAL),
    (_DIAGONAL, -_DIAGONAL),
    (-_DIAGONAL, -_DIAGONAL),
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


class Perlin:
    """Seeded two-dimensional gradient noise with values in [-1, 1]."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        table = list(range(256))
        random.Random(seed).shuffle(table)
        self._perm = table * 2

    def _gradient_dot(self, ix: int, iy: int, dx: float, dy: float) -> float:
        gx, gy = _GRADIENTS[self._perm[self._perm[ix] + iy] & 7]
        return gx * dx + gy * dy

    def get(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        fx = x - x0
        fy = y - y0
        xi = x0 & 255
        yi = y0 & 255
        u = _fade(fx)
        v = _fade(fy)
        bottom = _lerp(
            self._gradient_dot(xi, yi, fx, fy),
            self._gradient_dot(xi + 1, yi, fx - 1.0, fy),
            u,
        )
        top = _lerp(
            self._gradient_dot(xi, yi + 1, fx, fy - 1.0),
            self._gradient_dot(xi + 1, yi + 1, fx - 1.0, fy - 1.0),
            u,
        )
        value = _lerp(bottom, top, v) * math.sqrt(2.0)
        return max(-1.0, min(1.0, value))


def _one_in(rng: random.Random, n: int) -> bool:
    return rng.randrange(n) == 0


def spawn_body(position: Vec2, velocity: Vec2, rng: random.Random) -> Body:
    """Create one field body with a randomly varied size and density."""
    radius = 2.0
    density = 1.0
    if _one_in(rng, 100):
        radius *= 2.3
    if _one_in(rng, 10):
        density += 0.1
    if _one_in(rng, 2):
        radius += 0.5
    if _one_in(rng, 5):
        radius *= 1.5
    if _one_in(rng, 100):
        radius *= 0.5

    return Body(
        mass=density * radius**3,
        radius=radius,
        velocity=velocity,
        position=position,
        scale=radius * 2.0,
    )


def spawn_bodies(rng: random.Random) -> list[Body]:
    """Create the jittered grid of bodies that fills the scene."""
    perlin = Perlin(PERLIN_SEED)
    count_x = SPAWN_DENSITY
    count_y = SPAWN_DENSITY - 2
    offset = Vec2(-(count_x * SPACING) / 2.0, -(count_y * SPACING) / 2.0)

    bodies = []
    for y in range(count_y):
        for x in range(count_x):
            base = Vec2(x * SPACING, y * SPACING) + offset
            jitter = Vec2(
                perlin.get(x * 0.2, y * 0.2) * JITTER,
                perlin.get(y * 0.2, x * 0.2) * JITTER,
            )
            velocity = Vec2(
                perlin.get(x * 0.3 + 100.0, y * 0.3 + 100.0) * BASE_SPEED,
                perlin.get(y * 0.3 + 200.0, x * 0.3 + 200.0) * BASE_SPEED,
            )
            if _one_in(rng, 10):
                velocity = velocity * FAST_FACTOR
            bodies.append(spawn_body(base + jitter, velocity, rng))
    return bodies


def _spawn_special(
    kind: Kind, sprite: str, radius: float, density: float, velocity: Vec2, position: Vec2
) -> Body:
    return Body(
        mass=density * radius**3,
        radius=radius,
        velocity=velocity,
        position=position,
        scale=radius * 2.0 * SPRITE_SCALE,
        kind=kind,
        sprite=sprite,
    )


def spawn_ghost() -> Body:
    """Create the ghost that chases the camera."""
    return _spawn_special(
        Kind.GHOST, "sprites/ghost.png", 2.1, 0.5, Vec2(100.0, 0.0), Vec2(30.0, -110.0)
    )


def spawn_sun() -> Body:
    """Create the heavy sun near the origin."""
    return _spawn_special(
        Kind.SUN, "sprites/sun.png", 2.0, 4.0, Vec2(0.001, 0.00002), Vec2(1.0, 0.1)
    )


def spawn_moon() -> Body:
    """Create the moon above the sun."""
    return _spawn_special(
        Kind.MOON, "sprites/moon.png", 2.0, 1.0, Vec2(110.0, 0.0), Vec2(0.0, 100.1)
    )