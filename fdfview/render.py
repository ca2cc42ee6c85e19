"""Projecting a height map and drawing its wireframe into a pixel canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from fdfview.mapfile import HeightMap

COLOR_BLACK = 0x000000
COLOR_WHITE = 0xFFFFFF
COLOR_RED = 0xFF0000
COLOR_GREEN = 0x00FF00
COLOR_BLUE = 0x0000FF
COLOR_YELLOW = 0xFFFF00
COLOR_CYAN = 0x00FFFF
COLOR_MAGENTA = 0xFF00FF
COLOR_GRAY = 0x808080
COLOR_LIGHT_GRAY = 0xC0C0C0
COLOR_DARK_GRAY = 0x404040
COLOR_ORANGE = 0xFFA500
COLOR_PINK = 0xFFC0CB
COLOR_BROWN = 0xA52A2A
COLOR_PURPLE = 0x800080

FLAT_COLOR = 0xFFFFFF
RAISED_COLOR = 0xE80C0C

S_WIDTH = 1280
S_HEIGHT = 768

FLT_MAX = 3.4028234663852886e38
FLT_MIN = 1.1754943508222875e-38

_ISO_ANGLE = 30
_FIT_MARGIN = 0.9


class Projection(IntEnum):
    """How map coordinates are laid onto the screen."""

    PARALLEL = 0
    ISOMETRIC = 1


def deg_to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * math.pi / 180


def isometric(x: float, y: float, z: float) -> tuple[float, float]:
    """Project a map point onto the screen plane at 30 degrees."""
    angle = deg_to_rad(_ISO_ANGLE)
    return (x - y) * math.cos(angle), (x + y) * math.sin(angle) - z


def height_factor(height_range: float) -> float | None:
    """Height scale suited to a map's height range, or None to keep it."""
    if 0 <= height_range <= 10:
        return 0.1
    if 11 <= height_range <= 25:
        return 1.0
    if height_range > 25:
        return 0.3
    return None


class Canvas:
    """A fixed-size grid of 32-bit pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self._pixels = [COLOR_BLACK] * (width * height)

    @property
    def pixels(self) -> tuple[int, ...]:
        """All pixels, row by row."""
        return tuple(self._pixels)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set a pixel; coordinates are truncated and points outside ignored."""
        column, row = int(x), int(y)
        if 0 <= column < self.width and 0 <= row < self.height:
            self._pixels[row * self.width + column] = color & 0xFFFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """The pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self._pixels[y * self.width + x]

    def clear(self, color: int) -> None:
        """Fill the whole canvas with ``color``."""
        self._pixels[:] = [color & 0xFFFFFFFF] * len(self._pixels)


def _visible_steps(start: float, step: float, size: int, steps: int) -> range:
    """Step indices whose coordinate may land inside ``[0, size)``."""
    if step == 0:
        return range(steps) if -1 < start < size else range(0)
    low = (-1 - start) / step
    high = (size - start) / step
    low, high = min(low, high), max(low, high)
    return range(max(0, math.floor(low)), min(steps, math.ceil(high) + 1))


def _fit(extent: int, span: float) -> float:
    return math.inf if span == 0 else extent / span * _FIT_MARGIN


@dataclass
class Scene:
    """A height map with the view state used to draw it."""

    heightmap: HeightMap
    canvas: Canvas = field(default_factory=lambda: Canvas(S_WIDTH, S_HEIGHT))
    zoom: float = 1.0
    factor: float = 1.0
    projection: Projection = Projection.PARALLEL
    offset_x: float = 0.0
    offset_y: float = 0.0
    min_x: float = FLT_MAX
    max_x: float = FLT_MIN
    min_y: float = FLT_MAX
    max_y: float = FLT_MIN

    def reset_bounds(self) -> None:
        """Zero the offsets and restart the tracked screen bounds."""
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.min_x = FLT_MAX
        self.max_x = FLT_MIN
        self.min_y = FLT_MAX
        self.max_y = FLT_MIN

    def _track(self, x: float, y: float) -> None:
        if x < self.min_x:
            self.min_x = x
        if x > self.max_x:
            self.max_x = x
        if y < self.min_y:
            self.min_y = y
        if y > self.max_y:
            self.max_y = y

    def _screen(self, x: float, y: float, z: float) -> tuple[float, float]:
        if self.projection is Projection.ISOMETRIC:
            x, y = isometric(x, y, z)
        return self.zoom * x + self.offset_x, self.zoom * y + self.offset_y

    def _segment(self, x0: int, y0: int, x1: int, y1: int, do_draw: bool) -> None:
        z0 = self.heightmap.z(x0, y0) * self.factor
        z1 = self.heightmap.z(x1, y1) * self.factor
        start_x, start_y = self._screen(x0, y0, z0)
        end_x, end_y = self._screen(x1, y1, z1)
        self._track(start_x, start_y)
        color = RAISED_COLOR if z0 or z1 else FLAT_COLOR
        if do_draw:
            self._line(start_x, start_y, end_x, end_y, color)

    def _line(self, sx: float, sy: float, ex: float, ey: float, color: int) -> None:
        if not all(math.isfinite(value) for value in (sx, sy, ex, ey)):
            return
        dx, dy = ex - sx, ey - sy
        steps = int(max(abs(dx), abs(dy)))
        if steps == 0:
            return
        x_step, y_step = dx / steps, dy / steps
        along_x = _visible_steps(sx, x_step, self.canvas.width, steps)
        along_y = _visible_steps(sy, y_step, self.canvas.height, steps)
        for k in range(max(along_x.start, along_y.start), min(along_x.stop, along_y.stop)):
            self.canvas.put_pixel(sx + k * x_step, sy + k * y_step, color)

    def draw(self, do_draw: bool) -> None:
        """Walk every grid edge, tracking bounds and painting when asked."""
        width, height = self.heightmap.width, self.heightmap.height
        for y in range(height):
            for x in range(width):
                if x < width - 1:
                    self._segment(x, y, x + 1, y, do_draw)
                if y < height - 1:
                    self._segment(x, y, x, y + 1, do_draw)

    def recenter(self) -> None:
        """Set the offsets so the tracked bounds sit in the canvas centre."""
        center_x = (self.min_x + self.max_x) / 2
        center_y = (self.min_y + self.max_y) / 2
        self.offset_x = self.canvas.width // 2 - center_x
        self.offset_y = self.canvas.height // 2 - center_y

    def rescale(self) -> None:
        """Set the zoom so the tracked bounds fill 90% of the screen."""
        self.zoom = min(
            _fit(S_WIDTH, self.max_x - self.min_x),
            _fit(S_HEIGHT, self.max_y - self.min_y),
        )

    def auto_factor(self) -> None:
        """Pick the height scale from the map's height range."""
        factor = height_factor(self.heightmap.height_range())
        if factor is not None:
            self.factor = factor

    def render(self) -> None:
        """Clear, fit, centre and draw the whole map."""
        self.canvas.clear(COLOR_BLACK)
        self.draw(False)
        self.rescale()
        self.draw(False)
        self.recenter()
        self.draw(True)