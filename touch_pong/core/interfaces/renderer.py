"""
Renderer protocols - the drawing surface handed to the game once per tick
"""

from typing import Protocol

from touch_pong.core.entities import Color, Paint, Rect


class Canvas(Protocol):
    """
    Drawing target for a single frame.

    Only valid between :meth:`SurfaceHolder.lock_canvas` and
    :meth:`SurfaceHolder.unlock_canvas_and_post`.
    """

    def draw_color(self, color: Color) -> None:
        """Fill the whole canvas with a color"""
        ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, paint: Paint) -> None:
        ...

    def draw_round_rect(self, rect: Rect, rx: float, ry: float, paint: Paint) -> None:
        ...

    def draw_circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        ...


class SurfaceHolder(Protocol):
    """
    Owner of the drawing surface.

    Every canvas returned by :meth:`lock_canvas` must be given back through
    :meth:`unlock_canvas_and_post`, including when drawing failed.
    """

    def lock_canvas(self) -> Canvas | None:
        """
        Start editing the surface.

        Returns:
            A canvas to draw on, or None when the surface is not ready
        """
        ...

    def unlock_canvas_and_post(self, canvas: Canvas) -> None:
        """Finish editing and publish the frame"""
        ...
