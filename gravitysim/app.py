"""The simulation loop and the full-screen window that shows it."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from pathlib import Path

from .behaviors import ghost_follow_camera, moon_behavior, sun_behavior
from .body import Body, Vec2
from .camera import Camera, CursorState, GrabMode, ScrollUnit, spawn_camera
from .gravity import apply_gravity, integrate
from .spawn import spawn_bodies, spawn_ghost, spawn_moon, spawn_sun

FIXED_DT = 1.0 / 64.0
MAX_FRAME_TIME = 0.25
CLEAR_COLOR = (26, 26, 51)
BODY_COLOR = (230, 179, 204)
TEXT_COLOR = (255, 255, 255)
ASSET_DIR = Path("assets")


@dataclass
class Controls:
    """Input gathered for one simulation step."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    mouse_motion: list[tuple[float, float]] = field(default_factory=list)
    scrolls: list[tuple[ScrollUnit, float]] = field(default_factory=list)
    focus_events: list[bool] = field(default_factory=list)


@dataclass
class Simulation:
    """All bodies, the camera and the cursor, advanced together one step at a time."""

    bodies: list[Body] = field(default_factory=list)
    camera: Camera = field(default_factory=spawn_camera)
    cursor: CursorState = field(default_factory=CursorState)
    window_size: tuple[int, int] = (1280, 720)

    def step(self, dt: float, controls: Controls | None = None) -> None:
        """Apply input, steer the special bodies, then gravitate and move everything."""
        if controls is None:
            controls = Controls()
        width, height = self.window_size
        for focused in controls.focus_events:
            self.cursor.on_focus(focused, width, height)
        self.camera.keyboard_move(controls.up, controls.down, controls.left, controls.right)
        for dx, dy in controls.mouse_motion:
            self.camera.mouse_motion(dx, dy)
        for unit, amount in controls.scrolls:
            self.camera.scroll(unit, amount)
        sun_behavior(self.bodies, dt)
        moon_behavior(self.bodies, dt)
        ghost_follow_camera(self.bodies, self.camera.position, dt)
        apply_gravity(self.bodies, dt)
        integrate(self.bodies)


def create_simulation(seed: int | None = None) -> Simulation:
    """Build the starting scene: the body field, the camera, the ghost, the sun and the moon."""
    rng = random.Random(seed)
    bodies = spawn_bodies(rng)
    bodies.extend([spawn_ghost(), spawn_sun(), spawn_moon()])
    return Simulation(bodies=bodies, camera=spawn_camera())


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gravitysim", description="N-body gravity sandbox.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random body sizes")
    return parser.parse_args(argv)


def _world_to_screen(
    point: Vec2, camera: Camera, width: int, height: int
) -> tuple[float, float, float]:
    pixels_per_unit = height / (camera.viewport_height * camera.scale)
    sx = width / 2.0 + (point.x - camera.position.x) * pixels_per_unit
    sy = height / 2.0 - (point.y - camera.position.y) * pixels_per_unit
    return sx, sy, pixels_per_unit


def main(argv: list[str] | None = None) -> int:
    """Open a borderless full-screen window and run the simulation until it is closed."""
    args = _parse_args(argv)

    import pygame

    pygame.init()
    info = pygame.display.Info()
    size = (info.current_w, info.current_h)
    screen = pygame.display.set_mode(size, pygame.NOFRAME)
    pygame.display.set_caption("gravitysim")
    pygame.mouse.set_visible(False)
    font = pygame.font.Font(None, 32)
    clock = pygame.time.Clock()

    sim = create_simulation(args.seed)
    sim.window_size = screen.get_size()

    images: dict[str, pygame.Surface | None] = {}

    def sprite_image(path: str) -> pygame.Surface | None:
        if path not in images:
            try:
                images[path] = pygame.image.load(str(ASSET_DIR / path)).convert_alpha()
            except (pygame.error, FileNotFoundError):
                images[path] = None
        return images[path]

    pending = Controls()
    accumulator = 0.0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                pending.mouse_motion.append((float(event.rel[0]), float(event.rel[1])))
            elif event.type == pygame.MOUSEWHEEL:
                pending.scrolls.append((ScrollUnit.LINE, float(event.y)))
            elif event.type == pygame.WINDOWFOCUSGAINED:
                pending.focus_events.append(True)
            elif event.type == pygame.WINDOWFOCUSLOST:
                pending.focus_events.append(False)
        if not running:
            break

        accumulator += min(clock.tick() / 1000.0, MAX_FRAME_TIME)
        while accumulator >= FIXED_DT:
            keys = pygame.key.get_pressed()
            pending.up = keys[pygame.K_w]
            pending.down = keys[pygame.K_s]
            pending.left = keys[pygame.K_a]
            pending.right = keys[pygame.K_d]
            sim.window_size = screen.get_size()
            sim.step(FIXED_DT, pending)
            pending = Controls()
            accumulator -= FIXED_DT

        pygame.mouse.set_visible(sim.cursor.visible)
        pygame.event.set_grab(sim.cursor.grab_mode is GrabMode.LOCKED)
        if sim.cursor.warp_to is not None:
            pygame.mouse.set_pos(sim.cursor.warp_to)
            sim.cursor.warp_to = None

        width, height = screen.get_size()
        screen.fill(CLEAR_COLOR)
        for body in sim.bodies:
            sx, sy, ppu = _world_to_screen(body.position, sim.camera, width, height)
            if body.sprite is None:
                side = max(1.0, body.scale * ppu)
                if -side <= sx <= width + side and -side <= sy <= height + side:
                    rect = pygame.Rect(0, 0, int(side), int(side))
                    rect.center = (int(sx), int(sy))
                    pygame.draw.rect(screen, BODY_COLOR, rect)
                continue
            image = sprite_image(body.sprite)
            if image is None:
                continue
            w = max(1, int(image.get_width() * body.scale * ppu))
            h = max(1, int(image.get_height() * body.scale * ppu))
            scaled = pygame.transform.scale(image, (w, h))
            screen.blit(scaled, scaled.get_rect(center=(int(sx), int(sy))))

        fps_text = font.render(f"FPS: {clock.get_fps():.2f}", True, TEXT_COLOR)
        screen.blit(fps_text, (0, 0))
        pygame.display.flip()

    pygame.quit()
    return 0