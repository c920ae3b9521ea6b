"""
Round and game state machine for Touch Pong
"""

from collections.abc import Callable

from touch_pong.core.entities import GameMode
from touch_pong.core.notifications import MessageSink, StatusMessage
from touch_pong.core.physics import PhysicsEngine
from touch_pong.utils.logger import logger


class GameStateMachine:
    """
    Holds the current mode and performs the entry action of each mode.

    Entry actions are declared in a table so that each transition stays a
    small, separately testable function:

    ======== =====================================================
    READY    new round
    RUNNING  hide the status line
    WIN      show win message, human scores, new round
    LOSE     show lose message, computer scores, new round
    PAUSE    show pause message
    ======== =====================================================
    """

    def __init__(self, physics: PhysicsEngine, notify: MessageSink):
        self.physics = physics
        self.config = physics.config
        self.notify = notify
        self.mode = GameMode.READY
        self.frames_per_second = self.config.FPS

        self._entry_actions: dict[GameMode, Callable[[], None]] = {
            GameMode.READY: self.prepare_new_round,
            GameMode.RUNNING: self._enter_running,
            GameMode.WIN: self._enter_win,
            GameMode.LOSE: self._enter_lose,
            GameMode.PAUSE: self._enter_pause,
        }
        # Status line shown for a mode, None hides it
        self._status_texts: dict[GameMode, str | None] = {
            GameMode.READY: None,
            GameMode.RUNNING: None,
            GameMode.WIN: self.config.WIN_TEXT,
            GameMode.LOSE: self.config.LOSE_TEXT,
            GameMode.PAUSE: self.config.PAUSE_TEXT,
        }

    def set_state(self, mode: GameMode) -> None:
        """Switches to a mode and runs its entry action"""
        mode = GameMode(mode)
        logger.debug("Game mode %s -> %s", self.mode.name, mode.name)
        self.mode = mode
        self._entry_actions[mode]()

    def restore_mode(self, mode: GameMode) -> None:
        """
        Re-enters a saved mode without touching scores or positions.

        Only the visible side effect of the mode (its status line) is replayed,
        so a restored game shows "Paused" again but keeps its saved state.
        """
        self.mode = GameMode(mode)
        self._show_status_for(self.mode)

    def is_between_rounds(self) -> bool:
        return self.mode.is_between_rounds

    def new_game(self) -> None:
        """Resets scores and starts playing right away"""
        self.physics.human.score = 0
        self.physics.computer.score = 0
        self.prepare_new_round()
        self.set_state(GameMode.RUNNING)

    def prepare_new_round(self) -> None:
        """Reset players and ball position for a new round"""
        physics = self.physics
        ball = physics.ball
        width = physics.field_width
        height = physics.field_height

        ball.cx = width / 2
        ball.cy = height / 2
        ball.dx = -self.config.BALL_SPEED
        ball.dy = 0.0

        margin = self.config.PADDLE_MARGIN
        human = physics.human
        computer = physics.computer
        physics.move_player(human, margin, (height - human.paddle_height) / 2)
        physics.move_player(
            computer,
            width - computer.paddle_width - margin,
            (height - computer.paddle_height) / 2,
        )

        self.frames_per_second = self.config.FPS

    def _show_status_for(self, mode: GameMode) -> None:
        text = self._status_texts[mode]
        if text is None:
            self.notify(StatusMessage("", visible=False))
        else:
            self.notify(StatusMessage(text, visible=True))

    def _enter_running(self) -> None:
        self._show_status_for(GameMode.RUNNING)

    def _enter_win(self) -> None:
        self._show_status_for(GameMode.WIN)
        self.physics.human.score += 1
        logger.info("Human scores (%d - %d)", self.physics.human.score, self.physics.computer.score)
        self.prepare_new_round()

    def _enter_lose(self) -> None:
        self._show_status_for(GameMode.LOSE)
        self.physics.computer.score += 1
        logger.info(
            "Computer scores (%d - %d)", self.physics.human.score, self.physics.computer.score
        )
        self.prepare_new_round()

    def _enter_pause(self) -> None:
        self._show_status_for(GameMode.PAUSE)
