import random

import pytest

from gravitysim.body import Kind, Vec2
from gravitysim.spawn import (
    SPAWN_DENSITY,
    Perlin,
    spawn_bodies,
    spawn_body,
    spawn_ghost,
    spawn_moon,
    spawn_sun,
)


class _NeverRng:
    """Random source whose one-in-n draws never succeed."""

    def randrange(self, n):
        return n - 1


@pytest.fixture(scope="module")
def field():
    return spawn_bodies(random.Random(7))


def test_perlin_is_zero_on_lattice():
    noise = Perlin(42)
    assert [noise.get(float(x), float(y)) for x in range(4) for y in range(4)] == [0.0] * 16


def test_perlin_is_deterministic_per_seed():
    values = {Perlin(42).get(1.37, 2.91) for _ in range(3)}
    assert len(values) == 1
    assert -1.0 <= values.pop() <= 1.0


def test_perlin_values_are_bounded():
    noise = Perlin(3)
    values = [noise.get(x * 0.17, y * 0.23) for x in range(40) for y in range(40)]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert any(v != 0.0 for v in values)


def test_perlin_seeds_differ():
    points = [(x * 0.3 + 0.1, y * 0.3 + 0.2) for x in range(10) for y in range(10)]
    a = [Perlin(1).get(x, y) for x, y in points]
    b = [Perlin(2).get(x, y) for x, y in points]
    assert a != b


def test_spawn_density_for_fun_build():
    assert SPAWN_DENSITY == 48
    assert len(spawn_bodies(random.Random(0))) == 48 * 46


def test_spawn_bodies_count(field):
    assert len(field) == SPAWN_DENSITY * (SPAWN_DENSITY - 2)


def test_spawn_bodies_reproducible():
    first = spawn_bodies(random.Random(11))
    masses = [body.mass for body in first]
    velocities = [body.velocity for body in first]
    second = spawn_bodies(random.Random(11))
    assert [body.mass for body in second] == masses
    assert [body.velocity for body in second] == velocities
    other = spawn_bodies(random.Random(12))
    assert [body.mass for body in other] != masses


def test_spawned_bodies_are_consistent(field):
    for body in field:
        assert body.kind is Kind.BODY
        assert body.scale == pytest.approx(body.radius * 2.0)
        assert body.mass / body.radius**3 in (pytest.approx(1.0), pytest.approx(1.1))


def test_spawn_body_plain_when_no_chance_hits():
    body = spawn_body(Vec2(3.0, 4.0), Vec2(-1.0, 2.0), _NeverRng())
    assert body.radius == 2.0
    assert body.mass == pytest.approx(8.0)
    assert body.position == Vec2(3.0, 4.0)
    assert body.velocity == Vec2(-1.0, 2.0)


def test_spawn_sun():
    sun = spawn_sun()
    assert sun.kind is Kind.SUN
    assert sun.mass == pytest.approx(32.0)
    assert sun.sprite == "sprites/sun.png"
    assert sun.position == Vec2(1.0, 0.1)


def test_spawn_moon():
    moon = spawn_moon()
    assert moon.kind is Kind.MOON
    assert moon.velocity == Vec2(110.0, 0.0)
    assert moon.position == Vec2(0.0, 100.1)
    assert moon.sprite == "sprites/moon.png"


def test_spawn_ghost():
    ghost = spawn_ghost()
    assert ghost.kind is Kind.GHOST
    assert ghost.radius == 2.1
    assert ghost.velocity == Vec2(100.0, 0.0)
    assert ghost.position == Vec2(30.0, -110.0)
    assert ghost.scale < ghost.radius