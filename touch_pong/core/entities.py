"""
Touch Pong game entities: ball, players, game modes
"""

from dataclasses import dataclass
from dataclasses import field
from enum import IntEnum

Color = tuple[int, int, int, int]


class GameMode(IntEnum):
    """Game modes, the integer values are the saved form"""

    PAUSE = 0
    READY = 1
    RUNNING = 2
    LOSE = 3
    WIN = 4

    @property
    def is_between_rounds(self) -> bool:
        """True for every mode where no physics tick runs"""
        return self is not GameMode.RUNNING


@dataclass
class Paint:
    """Style used to draw a game object (cosmetic only)"""

    color: Color
    stroke_width: float = 1.0
    dash: tuple[float, float] | None = None
    anti_alias: bool = True


@dataclass
class Rect:
    """Axis-aligned rectangle with float edges"""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    def offset_to(self, left: float, top: float) -> None:
        """Moves the rectangle keeping its size"""
        width = self.width
        height = self.height
        self.left = left
        self.top = top
        self.right = left + width
        self.bottom = top + height

    def contains(self, x: float, y: float) -> bool:
        """Checks if a point is inside the rectangle (edges included)"""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersects(self, left: float, top: float, right: float, bottom: float) -> bool:
        """Checks if the given rectangle overlaps this one (touching edges do not count)"""
        return self.left < right and left < self.right and self.top < bottom and top < self.bottom

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


class Ball:
    """Game ball"""

    def __init__(self, radius: int, paint: Paint):
        self._radius = radius
        self.paint = paint
        self.cx = 0.0
        self.cy = 0.0
        self.dx = 0.0
        self.dy = 0.0

    @property
    def radius(self) -> int:
        """Ball radius, fixed at construction"""
        return self._radius

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the ball bounding box (left, top, right, bottom)"""
        return (
            self.cx - self._radius,
            self.cy - self._radius,
            self.cx + self._radius,
            self.cy + self._radius,
        )


@dataclass
class Player:
    """A player and its paddle"""

    paddle_width: int
    paddle_height: int
    paint: Paint
    score: int = 0
    # Ticks left of the "just hit" highlight, 0 when not hit
    collision: int = 0
    bounds: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.bounds = Rect(0.0, 0.0, float(self.paddle_width), float(self.paddle_height))

    @property
    def left(self) -> float:
        return self.bounds.left

    @property
    def top(self) -> float:
        return self.bounds.top
