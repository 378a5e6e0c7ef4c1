# gravitysim

A small 2D gravity sandbox. A grid of 48 × 46 bodies is laid out, nudged
off the grid by seeded Perlin noise and given small noisy starting
velocities; about one body in ten starts thirteen times faster. Body sizes
and densities vary at random. From there every pair of bodies attracts
under a softened Newtonian law. Three special bodies share the field:

- **the sun** steers slowly towards the centre of mass of everything else;
- **the moon** gets an extra pull towards the sun, so it ends up orbiting it;
- **the ghost** steers towards wherever the camera is.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
gravitysim
gravitysim --seed 7
```

This opens a borderless window the size of the screen and runs the
simulation with a fixed step of 1/64 s until the window is closed. An FPS
counter is drawn in the top-left corner. `--seed` fixes the random body
sizes and fast starters; without it they differ on every run.

The mouse cursor is hidden. When the window gains focus the cursor is
grabbed and moved to the centre of the window; when it loses focus the
cursor is shown and released.

| Input         | Effect                                           |
|---------------|--------------------------------------------------|
| W / A / S / D | Pan the camera; the step grows with the zoom     |
| Mouse motion  | Pan the camera                                   |
| Mouse wheel   | Zoom in (up) and out (down), never below 0.5     |

Field bodies are drawn as plain squares. The sun, moon and ghost are drawn
from `assets/sprites/sun.png`, `assets/sprites/moon.png` and
`assets/sprites/ghost.png`, looked up relative to the current directory.
These images are not part of the package; where one cannot be loaded, that
body is simulated but not drawn.

## Using it as a library

The simulation runs without a window; pygame is only imported by the
`gravitysim` command.

```python
from gravitysim.app import Controls, create_simulation
from gravitysim.camera import ScrollUnit

sim = create_simulation(seed=42)
for _ in range(60):
    sim.step(1 / 60, Controls(up=True, scrolls=[(ScrollUnit.LINE, 1.0)]))

sun = next(body for body in sim.bodies if body.kind.name == "SUN")
print(sun.position, sim.camera.position, sim.camera.scale)
```

Each call to `Simulation.step(dt, controls)`:

1. applies focus events to the cursor state, then the keyboard, mouse
   motion and wheel input to the camera;
2. runs the sun, moon and ghost behaviours;
3. applies pairwise gravity over `dt`;
4. moves every body along its velocity by a fixed 0.016 s.

The building blocks live in separate modules:

- `gravitysim.body`: `Vec2` (an immutable vector), `Body` and `Kind`.
- `gravitysim.gravity`: `gravitational_force`, `apply_gravity` and `integrate`.
- `gravitysim.behaviors`: `sun_behavior`, `moon_behavior` and `ghost_follow_camera`.
- `gravitysim.spawn`: `Perlin`, `spawn_bodies`, `spawn_body`, `spawn_sun`,
  `spawn_moon` and `spawn_ghost`.
- `gravitysim.camera`: `Camera` (with `keyboard_move`, `mouse_motion` and
  `scroll`), `ScrollUnit`, `GrabMode`, `CursorState` and `spawn_camera`.
- `gravitysim.app`: `Controls`, `Simulation`, `create_simulation` and `main`.

## What it does not do

There is no collision or merging between bodies, no saving or loading of a
scene, and no key to quit: the window is closed through the window system.