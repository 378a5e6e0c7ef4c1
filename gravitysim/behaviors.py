"""Special steering for the sun, the moon and the camera-following ghost."""

from __future__ import annotations

from typing import Iterable, Sequence

from .body import Body, Kind, Vec2

SUN_SPEED = 1.0
SUN_REST_DISTANCE_SQUARED = 3.0
MOON_GRAVITY = 200.0
MOON_MIN_DISTANCE_SQUARED = 0.001
GHOST_SPEED = 9.0
GHOST_REST_DISTANCE_SQUARED = 1.0


def _single(bodies: Iterable[Body], kind: Kind) -> Body | None:
    """Return the only body of ``kind``, or None if there is not exactly one."""
    matches = [body for body in bodies if body.kind is kind]
    return matches[0] if len(matches) == 1 else None


def sun_behavior(bodies: Sequence[Body], dt: float) -> None:
    """Steer the sun towards the centre of mass of everything else."""
    sun = _single(bodies, Kind.SUN)
    if sun is None:
        return

    weighted_sum = Vec2()
    total_mass = 0.0
    for body in bodies:
        if body.kind is Kind.SUN:
            continue
        weighted_sum = weighted_sum + body.position * body.mass
        total_mass += body.mass

    if total_mass == 0.0:
        sun.velocity = Vec2()
        return

    direction = weighted_sum / total_mass - sun.position
    if direction.length_squared() > SUN_REST_DISTANCE_SQUARED:
        sun.velocity = sun.velocity + direction.normalize() * SUN_SPEED * dt
    else:
        sun.velocity = Vec2()


def moon_behavior(bodies: Sequence[Body], dt: float) -> None:
    """Pull the moon towards the sun with an extra gravity-like force."""
    moon = _single(bodies, Kind.MOON)
    if moon is None:
        return
    sun = _single(bodies, Kind.SUN)
    if sun is None:
        return

    to_sun = sun.position - moon.position
    distance_squared = to_sun.length_squared()
    if distance_squared < MOON_MIN_DISTANCE_SQUARED:
        return

    # The moon is treated as unit mass, so the force is its acceleration.
    acceleration = to_sun.normalize() * MOON_GRAVITY * sun.mass / distance_squared
    moon.velocity = moon.velocity + acceleration * dt


def ghost_follow_camera(
    bodies: Sequence[Body], camera_position: Vec2 | None, dt: float
) -> None:
    """Accelerate the ghost towards the camera, stopping it once it arrives."""
    if camera_position is None:
        return
    ghost = _single(bodies, Kind.GHOST)
    if ghost is None:
        return

    direction = camera_position - ghost.position
    if direction.length_squared() > GHOST_REST_DISTANCE_SQUARED:
        ghost.velocity = ghost.velocity + direction.normalize() * GHOST_SPEED * dt
    else:
        ghost.velocity = Vec2()