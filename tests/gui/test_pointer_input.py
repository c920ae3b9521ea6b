"""
Tests for pointer input handling
"""

import pytest

from touch_pong.core.entities import GameMode
from touch_pong.gui.pointer_input import PointerInput


class TestPointerInput:
    """Test tap, drag and wheel handling"""

    def test_tap_between_rounds_resumes(self, game):
        pointer = PointerInput(game)
        pointer.on_pointer_down(300.0, 30.0)

        assert game.mode == GameMode.RUNNING
        assert not pointer.moving

    def test_drag_human_paddle(self, running_game):
        pointer = PointerInput(running_game)

        pointer.on_pointer_down(10.0, 160.0)
        assert pointer.moving

        pointer.on_pointer_move(10.0, 100.0)
        assert running_game.human.top == pytest.approx(57.5)

        pointer.on_pointer_up(10.0, 100.0)
        pointer.on_pointer_move(10.0, 200.0)
        assert running_game.human.top == pytest.approx(57.5)

    def test_press_away_from_paddle_does_nothing(self, running_game):
        pointer = PointerInput(running_game)

        pointer.on_pointer_down(300.0, 160.0)
        pointer.on_pointer_move(300.0, 30.0)

        assert not pointer.moving
        assert running_game.human.top == pytest.approx(117.5)

    def test_drag_clamped_to_field(self, running_game):
        pointer = PointerInput(running_game)
        pointer.on_pointer_down(10.0, 160.0)
        pointer.on_pointer_move(10.0, 5000.0)

        assert running_game.human.top == 234.0

    def test_wheel_while_running(self, running_game):
        pointer = PointerInput(running_game)
        pointer.on_wheel(1)
        assert running_game.human.top == pytest.approx(97.5)

    def test_wheel_ignored_between_rounds(self, game):
        pointer = PointerInput(game)
        pointer.on_wheel(1)
        assert game.human.top == pytest.approx(117.5)

    def test_mutations_go_through_dispatch(self, running_game):
        """Paddle moves are handed to the dispatcher instead of being applied"""
        calls = []
        pointer = PointerInput(running_game, dispatch=lambda command, *args: calls.append(args))

        pointer.on_pointer_down(10.0, 160.0)
        pointer.on_pointer_move(10.0, 100.0)
        pointer.on_wheel(1)

        assert calls == [(100.0,), (-20.0,)]
        assert running_game.human.top == pytest.approx(117.5)
