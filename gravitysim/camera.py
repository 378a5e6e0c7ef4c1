"""The orthographic camera, its keyboard, mouse and wheel controls, and cursor capture."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .body import Vec2

CAMERA_SCALE = 2.5
VIEWPORT_HEIGHT = 720.0
CAMERA_DEPTH = 10.0
KEYBOARD_SPEED = 5.0
MOUSE_SLOWDOWN = 0.65
PIXEL_ZOOM_STEP = 0.2
PIXEL_MIN_SCALE = 0.2
LINE_ZOOM_STEP = 0.5
LINE_MIN_SCALE = 0.5


class ScrollUnit(Enum):
    """How a mouse wheel reports its movement."""

    LINE = "line"
    PIXEL = "pixel"


class GrabMode(Enum):
    """Whether the cursor is confined to the window."""

    NONE = "none"
    LOCKED = "locked"


@dataclass
class Camera:
    """A 2D orthographic camera showing ``viewport_height * scale`` world units vertically."""

    position: Vec2 = field(default_factory=Vec2)
    scale: float = CAMERA_SCALE
    viewport_height: float = VIEWPORT_HEIGHT
    depth: float = CAMERA_DEPTH

    def keyboard_move(self, up: bool, down: bool, left: bool, right: bool) -> None:
        """Pan by a fixed step in the held direction, faster when zoomed out."""
        direction = Vec2(float(right) - float(left), float(up) - float(down))
        if direction != Vec2():
            direction = direction.normalize()
        self.position = self.position + direction * (KEYBOARD_SPEED * self.scale)

    def mouse_motion(self, dx: float, dy: float) -> None:
        """Pan by a mouse movement given in screen pixels (y grows downwards)."""
        factor = self.scale * MOUSE_SLOWDOWN
        self.position = Vec2(self.position.x + factor * dx, self.position.y - factor * dy)

    def scroll(self, unit: ScrollUnit, amount: float) -> None:
        """Zoom in on positive wheel movement and out on negative, with a minimum scale."""
        if unit is ScrollUnit.PIXEL:
            step, minimum = PIXEL_ZOOM_STEP, PIXEL_MIN_SCALE
        elif unit is ScrollUnit.LINE:
            step, minimum = LINE_ZOOM_STEP, LINE_MIN_SCALE
        else:
            raise ValueError(f"unknown scroll unit: {unit!r}")
        self.scale = max(self.scale + step * -amount, minimum)


@dataclass
class CursorState:
    """Visibility and capture of the pointer, plus a pending warp position."""

    visible: bool = False
    grab_mode: GrabMode = GrabMode.NONE
    warp_to: tuple[float, float] | None = None

    def on_focus(self, focused: bool, width: float, height: float) -> None:
        """Hide and lock the cursor at the window centre on focus; release it otherwise."""
        if focused:
            self.visible = False
            self.grab_mode = GrabMode.LOCKED
            self.warp_to = (width / 2.0, height / 2.0)
        else:
            self.visible = True
            self.grab_mode = GrabMode.NONE


def spawn_camera() -> Camera:
    """Create the camera at the origin with the default zoom."""
    return Camera()