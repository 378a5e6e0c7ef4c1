"""Pairwise Newtonian gravity and position integration."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Iterable

from .body import Body, Vec2

G = 425.0
MIN_DISTANCE_SQUARED = 25.0
INTEGRATION_STEP = 0.016


def _force_components(
    ax: float, ay: float, mass_a: float, bx: float, by: float, mass_b: float
) -> tuple[float, float]:
    dx = bx - ax
    dy = by - ay
    raw_sq = dx * dx + dy * dy
    length = math.sqrt(raw_sq)
    if length == 0.0:
        return math.nan, math.nan
    # The clamp keeps close encounters from blowing up.
    magnitude = G * mass_a * mass_b / max(raw_sq, MIN_DISTANCE_SQUARED)
    return dx / length * magnitude, dy / length * magnitude


def gravitational_force(pos_a: Vec2, mass_a: float, pos_b: Vec2, mass_b: float) -> Vec2:
    """Return the gravitational force pulling the body at ``pos_a`` towards ``pos_b``."""
    return Vec2(*_force_components(pos_a.x, pos_a.y, mass_a, pos_b.x, pos_b.y, mass_b))


def apply_gravity(bodies: Iterable[Body], dt: float) -> None:
    """Accelerate every body by the pull of every other body over ``dt`` seconds."""
    bodies = list(bodies)
    accelerations = [[0.0, 0.0] for _ in bodies]
    for (i, a), (j, b) in combinations(enumerate(bodies), 2):
        fx, fy = _force_components(
            a.position.x, a.position.y, a.mass, b.position.x, b.position.y, b.mass
        )
        accelerations[i][0] += fx / a.mass
        accelerations[i][1] += fy / a.mass
        accelerations[j][0] -= fx / b.mass
        accelerations[j][1] -= fy / b.mass
    for body, (ax, ay) in zip(bodies, accelerations):
        body.velocity = body.velocity + Vec2(ax * dt, ay * dt)


def integrate(bodies: Iterable[Body]) -> None:
    """Move every body along its velocity by one fixed frame step."""
    for body in bodies:
        body.position = body.position + body.velocity * INTEGRATION_STEP