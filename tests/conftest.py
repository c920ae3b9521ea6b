"""
Shared fixtures for Touch Pong tests
"""

import os
import random

import pytest

# pygame must never open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from touch_pong.core.entities import GameMode  # noqa: E402
from touch_pong.core.game import PongGame  # noqa: E402
from touch_pong.core.notifications import MessageChannel  # noqa: E402
from touch_pong.utils.config import GameConfig  # noqa: E402

FIELD_WIDTH = 480
FIELD_HEIGHT = 320


class FakeCanvas:
    """Canvas recording every draw call"""

    def __init__(self):
        self.calls = []

    def draw_color(self, color):
        self.calls.append(("color", color))

    def draw_line(self, x1, y1, x2, y2, paint):
        self.calls.append(("line", (x1, y1, x2, y2), paint))

    def draw_round_rect(self, rect, rx, ry, paint):
        self.calls.append(("round_rect", rect.to_tuple(), paint))

    def draw_circle(self, cx, cy, radius, paint):
        self.calls.append(("circle", (cx, cy, radius), paint))


class FakeSurfaceHolder:
    """Surface holder handing out FakeCanvas objects (or None when not ready)"""

    def __init__(self, ready=True):
        self.ready = ready
        self.locked = 0
        self.posted = []

    def lock_canvas(self):
        if not self.ready:
            return None
        self.locked += 1
        return FakeCanvas()

    def unlock_canvas_and_post(self, canvas):
        self.posted.append(canvas)


@pytest.fixture
def config():
    """Fresh default configuration, isolated from the global one"""
    return GameConfig()


@pytest.fixture
def channel():
    return MessageChannel()


@pytest.fixture
def game(config, channel):
    """Game on a 480x320 field, ready for a new round"""
    pong = PongGame(config, notify=channel, rng=random.Random(1234))
    pong.set_surface_size(FIELD_WIDTH, FIELD_HEIGHT)
    pong.set_state(GameMode.READY)
    return pong


@pytest.fixture
def running_game(game, channel):
    """Game in running mode with the status messages already drained"""
    game.set_state(GameMode.RUNNING)
    channel.poll()
    return game


@pytest.fixture
def fake_canvas():
    return FakeCanvas()


@pytest.fixture
def surface_holder():
    return FakeSurfaceHolder()


@pytest.fixture
def unready_surface_holder():
    return FakeSurfaceHolder(ready=False)
