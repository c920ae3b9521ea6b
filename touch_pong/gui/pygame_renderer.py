"""
PyGame renderer for Touch Pong game
"""

import math
import threading

import pygame

from touch_pong.core.entities import Color, Paint, Rect
from touch_pong.utils.config import GameConfig, game_config


class PygameCanvas:
    """Canvas implementation drawing on a pygame Surface"""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def draw_color(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, paint: Paint) -> None:
        """Draw a line, dashed if the paint has a dash pattern"""
        width = max(1, int(round(paint.stroke_width)))
        target = self._layer_for(paint)

        if paint.dash is None:
            pygame.draw.line(target, paint.color, (x1, y1), (x2, y2), width)
        else:
            length = math.hypot(x2 - x1, y2 - y1)
            if length > 0:
                on, off = paint.dash
                ux = (x2 - x1) / length
                uy = (y2 - y1) / length
                position = 0.0
                while position < length:
                    end = min(position + on, length)
                    pygame.draw.line(
                        target,
                        paint.color,
                        (x1 + ux * position, y1 + uy * position),
                        (x1 + ux * end, y1 + uy * end),
                        width,
                    )
                    position = end + off

        self._blend(target)

    def draw_round_rect(self, rect: Rect, rx: float, ry: float, paint: Paint) -> None:
        target = self._layer_for(paint)
        left, top, right, bottom = rect.to_tuple()
        pygame_rect = pygame.Rect(
            int(left), int(top), int(round(right - left)), int(round(bottom - top))
        )
        pygame.draw.rect(target, paint.color, pygame_rect, border_radius=int(min(rx, ry)))
        self._blend(target)

    def draw_circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        target = self._layer_for(paint)
        pygame.draw.circle(target, paint.color, (int(cx), int(cy)), int(radius))
        self._blend(target)

    def _layer_for(self, paint: Paint) -> pygame.Surface:
        """Translucent paints are drawn on a temporary layer then blended"""
        if len(paint.color) > 3 and paint.color[3] < 255:
            return pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        return self.surface

    def _blend(self, layer: pygame.Surface) -> None:
        if layer is not self.surface:
            self.surface.blit(layer, (0, 0))


class PygameSurfaceHolder:
    """
    Double-buffered surface shared between the game loop and the window.

    The loop thread draws into the back buffer between :meth:`lock_canvas` and
    :meth:`unlock_canvas_and_post`; posting swaps it with the front buffer.
    The window thread only ever reads the front buffer through
    :meth:`blit_latest_frame`, so pygame display calls stay on the main thread.
    """

    def __init__(self, width: int, height: int):
        self._lock = threading.Lock()
        self._size = (width, height)
        self._back = pygame.Surface(self._size)
        self._front = pygame.Surface(self._size)
        self._ready = True
        self.frames_posted = 0

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def lock_canvas(self) -> PygameCanvas | None:
        with self._lock:
            if not self._ready:
                return None
            return PygameCanvas(self._back)

    def unlock_canvas_and_post(self, canvas: PygameCanvas) -> None:
        with self._lock:
            if canvas.surface is self._back:
                self._back, self._front = self._front, self._back
                self.frames_posted += 1

    def resize(self, width: int, height: int) -> None:
        with self._lock:
            self._size = (width, height)
            self._back = pygame.Surface(self._size)
            self._front = pygame.Surface(self._size)

    def set_ready(self, ready: bool) -> None:
        """Surfaces that are not ready hand out no canvas"""
        with self._lock:
            self._ready = ready

    def blit_latest_frame(self, target: pygame.Surface) -> None:
        with self._lock:
            target.blit(self._front, (0, 0))


class PygameRenderer:
    """PyGame window showing the frames posted by the game loop"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config or game_config
        self.width = self.config.FIELD_WIDTH
        self.height = self.config.FIELD_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption("Touch Pong")

        self.surface_holder = PygameSurfaceHolder(self.width, self.height)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.text_color: tuple[int, int, int] = (255, 255, 255)
        self.score_color: tuple[int, int, int] = (128, 128, 128)

        # Font for text rendering
        self.font_status = pygame.font.Font(None, 48)
        self.font_score = pygame.font.Font(None, self.config.SCORE_TEXT_SIZE * 2)
        self.font_small = pygame.font.Font(None, 24)

    def resize(self, width: int, height: int) -> None:
        """Recreate the window and buffers for a new size"""
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.surface_holder.resize(width, height)

    def draw_frame(self) -> None:
        """Copy the latest frame posted by the game loop"""
        self.surface_holder.blit_latest_frame(self.screen)

    def draw_score(self, score_text: str) -> None:
        """Draw the current score"""
        text_surface = self.font_score.render(score_text, True, self.score_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.top = 10
        self.screen.blit(text_surface, text_rect)

    def draw_status(self, status_text: str) -> None:
        """Draw the status line (win, lose, paused) with a hint below"""
        status_surface = self.font_status.render(status_text, True, self.text_color)
        status_rect = status_surface.get_rect()
        status_rect.center = (self.width // 2, self.height // 2 - 40)
        self.screen.blit(status_surface, status_rect)

        hint = "SPACE resume - N new game - ESC quit"
        hint_surface = self.font_small.render(hint, True, self.score_color)
        hint_rect = hint_surface.get_rect()
        hint_rect.center = (self.width // 2, self.height - 20)
        self.screen.blit(hint_surface, hint_rect)

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain the window frame rate"""
        self.clock.tick(fps or self.config.FPS)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
