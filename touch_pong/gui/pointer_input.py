"""
Human player input: pointer (mouse or touch) events to paddle moves
"""

from collections.abc import Callable
from typing import Any

from touch_pong.core.game import PongGame

Dispatch = Callable[..., None]


def call_now(command: Callable[..., Any], *args: Any) -> None:
    command(*args)


class PointerInput:
    """
    Translates pointer events for the human player.

    Between rounds a tap resumes the game. While playing, pressing on the
    human paddle grabs it and the paddle then follows the pointer vertically
    until the button is released.

    Game mutations go through ``dispatch``, which the application points at
    the game loop queue while the loop is running.
    """

    def __init__(self, game: PongGame, dispatch: Dispatch | None = None):
        self.game = game
        self.dispatch = dispatch or call_now
        self.moving = False

    def on_pointer_down(self, x: float, y: float) -> None:
        if self.game.is_between_rounds():
            self.dispatch(self.game.unpause)
        elif self.game.is_touch_on_human_paddle(x, y):
            self.moving = True

    def on_pointer_move(self, x: float, y: float) -> None:
        if self.moving:
            self.dispatch(self.game.move_human_paddle, y)

    def on_pointer_up(self, x: float, y: float) -> None:
        self.moving = False

    def on_wheel(self, dy: float, step: float = 20.0) -> None:
        """Scrolling nudges the paddle, up is negative"""
        if not self.game.is_between_rounds():
            self.dispatch(self.game.move_human_paddle_by, -dy * step)
