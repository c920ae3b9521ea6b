"""
Unit tests for the round/game state machine

Tests:
- Entry action of every mode
- Round reset positions on a 480x320 field
- New game
- Restoring a mode without side effects on the entities
"""

import pytest

from touch_pong.core.entities import GameMode
from touch_pong.core.notifications import StatusMessage

READY_BALL = (240.0, 160.0, -8.0, 0.0)
HUMAN_START = (2.0, 117.5)
COMPUTER_START = (453.0, 117.5)


def ball_state(game):
    return (game.ball.cx, game.ball.cy, game.ball.dx, game.ball.dy)


def scramble(game):
    """Move everything away from the round start positions"""
    game.ball.cx, game.ball.cy, game.ball.dx, game.ball.dy = 100.0, 50.0, 5.0, -3.0
    game.physics.move_player(game.human, 2.0, 10.0)
    game.physics.move_player(game.computer, 453.0, 200.0)


class TestRoundReset:
    """Test the round start positions"""

    def test_ready_positions(self, game):
        """Ball in the centre moving left, paddles centred against their walls"""
        scramble(game)
        game.set_state(GameMode.READY)

        assert ball_state(game) == READY_BALL
        assert (game.human.left, game.human.top) == HUMAN_START
        assert (game.computer.left, game.computer.top) == COMPUTER_START

    def test_reset_is_repeatable(self, game):
        """Resetting twice gives the same positions"""
        game.state_machine.prepare_new_round()
        first = (ball_state(game), game.human.bounds.to_tuple(), game.computer.bounds.to_tuple())

        scramble(game)
        game.state_machine.prepare_new_round()
        game.state_machine.prepare_new_round()
        second = (ball_state(game), game.human.bounds.to_tuple(), game.computer.bounds.to_tuple())

        assert first == second

    def test_ready_keeps_scores(self, game):
        game.human.score = 3
        game.computer.score = 2
        game.set_state(GameMode.READY)
        assert (game.human.score, game.computer.score) == (3, 2)

    def test_resize_resets_round(self, game):
        """A new surface size starts a fresh round on the new field"""
        scramble(game)
        game.set_surface_size(800, 600)

        assert ball_state(game) == (400.0, 300.0, -8.0, 0.0)
        assert (game.human.left, game.human.top) == (2.0, 257.5)
        assert (game.computer.left, game.computer.top) == (773.0, 257.5)

    def test_reset_restores_frame_rate(self, game):
        game.state_machine.frames_per_second = 10
        game.set_state(GameMode.READY)
        assert game.frames_per_second == game.config.FPS


class TestTransitions:
    """Test the entry action of each mode"""

    def test_running_hides_status(self, game, channel):
        channel.poll()
        game.set_state(GameMode.RUNNING)

        assert game.mode == GameMode.RUNNING
        assert channel.poll() == [StatusMessage("", visible=False)]

    def test_win(self, game, channel):
        """Human scores once, computer score unchanged, round restarts"""
        game.computer.score = 4
        scramble(game)
        channel.poll()

        game.set_state(GameMode.WIN)

        assert game.human.score == 1
        assert game.computer.score == 4
        assert ball_state(game) == READY_BALL
        assert (game.human.left, game.human.top) == HUMAN_START
        assert (game.computer.left, game.computer.top) == COMPUTER_START
        assert channel.poll() == [StatusMessage(game.config.WIN_TEXT, visible=True)]

    def test_lose(self, game, channel):
        scramble(game)
        channel.poll()

        game.set_state(GameMode.LOSE)

        assert game.human.score == 0
        assert game.computer.score == 1
        assert ball_state(game) == READY_BALL
        assert channel.poll() == [StatusMessage(game.config.LOSE_TEXT, visible=True)]

    def test_pause_does_not_touch_entities(self, game, channel):
        scramble(game)
        before = (ball_state(game), game.human.bounds.to_tuple(), game.computer.bounds.to_tuple())
        channel.poll()

        game.set_state(GameMode.PAUSE)

        after = (ball_state(game), game.human.bounds.to_tuple(), game.computer.bounds.to_tuple())
        assert after == before
        assert channel.poll() == [StatusMessage(game.config.PAUSE_TEXT, visible=True)]

    def test_set_state_accepts_saved_integer(self, game):
        game.set_state(2)
        assert game.mode is GameMode.RUNNING

    def test_unknown_mode_rejected(self, game):
        with pytest.raises(ValueError):
            game.set_state(42)

    @pytest.mark.parametrize(
        "mode,between_rounds",
        [
            (GameMode.PAUSE, True),
            (GameMode.READY, True),
            (GameMode.RUNNING, False),
            (GameMode.LOSE, True),
            (GameMode.WIN, True),
        ],
    )
    def test_is_between_rounds(self, game, mode, between_rounds):
        game.set_state(mode)
        assert game.is_between_rounds() is between_rounds


class TestNewGame:
    """Test starting a new game"""

    def test_new_game_resets_scores_and_runs(self, game, channel):
        game.human.score = 7
        game.computer.score = 9
        scramble(game)

        game.start_new_game()

        assert (game.human.score, game.computer.score) == (0, 0)
        assert game.mode == GameMode.RUNNING
        assert ball_state(game) == READY_BALL
        assert channel.poll()[-1] == StatusMessage("", visible=False)


class TestRestoreMode:
    """Test re-entering a saved mode"""

    def test_restore_win_keeps_scores_and_positions(self, game, channel):
        scramble(game)
        channel.poll()

        game.state_machine.restore_mode(GameMode.WIN)

        assert game.mode == GameMode.WIN
        assert (game.human.score, game.computer.score) == (0, 0)
        assert ball_state(game) == (100.0, 50.0, 5.0, -3.0)
        assert channel.poll() == [StatusMessage(game.config.WIN_TEXT, visible=True)]

    def test_restore_pause_shows_message(self, game, channel):
        channel.poll()
        game.state_machine.restore_mode(GameMode.PAUSE)
        assert channel.poll() == [StatusMessage(game.config.PAUSE_TEXT, visible=True)]

    def test_restore_running_hides_message(self, game, channel):
        channel.poll()
        game.state_machine.restore_mode(GameMode.RUNNING)
        assert channel.poll() == [StatusMessage("", visible=False)]
