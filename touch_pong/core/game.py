"""
Touch Pong game: entities, physics and game mode behind a single lock
"""

import random
import threading

from touch_pong.core.entities import Ball, GameMode, Paint, Player
from touch_pong.core.interfaces.persistence import StateContainer
from touch_pong.core.interfaces.renderer import Canvas
from touch_pong.core.notifications import MessageSink, ScoreMessage, discard
from touch_pong.core.physics import PhysicsEngine
from touch_pong.core.state_machine import GameStateMachine
from touch_pong.utils.config import GameConfig, game_config
from touch_pong.utils.logger import logger

# Keys used when game state is saved/restored
KEY_HUMAN_PLAYER_DATA = "humanPlayer"
KEY_COMPUTER_PLAYER_DATA = "computerPlayer"
KEY_BALL_DATA = "ball"
KEY_FPS = "fps"
KEY_MODE = "mode"

PADDLE_CORNER_RADIUS = 5.0


class PongGame:
    """
    Complete game state: both players, the ball and the game mode.

    Every public method takes :attr:`lock` for its whole duration. The game
    loop holds the same lock while it updates physics and draws, so input
    handlers never race a physics tick and a frame is never drawn half updated.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        notify: MessageSink | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or game_config
        self.lock = threading.RLock()
        self.notify = notify or discard

        self.human = Player(
            self.config.PADDLE_WIDTH, self.config.PADDLE_HEIGHT, Paint(self.config.HUMAN_COLOR)
        )
        self.computer = Player(
            self.config.PADDLE_WIDTH, self.config.PADDLE_HEIGHT, Paint(self.config.COMPUTER_COLOR)
        )
        self.ball = Ball(self.config.BALL_RADIUS, Paint(self.config.BALL_COLOR))

        self.hit_paint = Paint(self.config.HIT_COLOR)
        self.median_line_paint = Paint(
            self.config.MEDIAN_LINE_COLOR, stroke_width=5.0, dash=(5.0, 5.0)
        )

        self.physics = PhysicsEngine(self.human, self.computer, self.ball, self.config, rng)
        self.state_machine = GameStateMachine(self.physics, self.notify)

        self._last_score_text: str | None = None

    # Game mode

    @property
    def mode(self) -> GameMode:
        return self.state_machine.mode

    @property
    def frames_per_second(self) -> int:
        return self.state_machine.frames_per_second

    @property
    def tick_interval(self) -> float:
        """Seconds between two ticks"""
        return 1.0 / self.state_machine.frames_per_second

    @property
    def canvas_width(self) -> int:
        return self.physics.field_width

    @property
    def canvas_height(self) -> int:
        return self.physics.field_height

    def set_state(self, mode: GameMode) -> None:
        """Sets the game mode"""
        with self.lock:
            self.state_machine.set_state(mode)

    def do_start(self) -> None:
        """Start the game"""
        with self.lock:
            self.state_machine.set_state(GameMode.RUNNING)

    def pause(self) -> None:
        """Pauses the game, only while playing"""
        with self.lock:
            if self.state_machine.mode == GameMode.RUNNING:
                self.state_machine.set_state(GameMode.PAUSE)

    def unpause(self) -> None:
        """Resumes from a pause"""
        with self.lock:
            self.state_machine.set_state(GameMode.RUNNING)

    def start_new_game(self) -> None:
        """Reset both scores and play a fresh round"""
        with self.lock:
            self.state_machine.new_game()

    def is_between_rounds(self) -> bool:
        """True if the game is in ready, win, lose or pause mode"""
        with self.lock:
            return self.state_machine.is_between_rounds()

    def set_surface_size(self, width: int, height: int) -> None:
        """Callback invoked when the surface dimensions change"""
        with self.lock:
            self.physics.set_field_size(width, height)
            self.state_machine.prepare_new_round()

    # Input bridge

    def is_touch_on_human_paddle(self, x: float, y: float) -> bool:
        with self.lock:
            return self.human.bounds.contains(x, y)

    def move_human_paddle(self, y: float) -> None:
        """Centers the human paddle on a pointer position"""
        with self.lock:
            self.physics.move_player(
                self.human, self.human.bounds.left, y - self.human.paddle_height / 2
            )

    def move_human_paddle_by(self, dy: float) -> None:
        with self.lock:
            self.physics.move_player(
                self.human, self.human.bounds.left, self.human.bounds.top + dy
            )

    def move_human_paddle_to(self, x: float, y: float) -> None:
        """Moves the human paddle top-left corner to (x, y), within the field"""
        with self.lock:
            self.physics.move_player(self.human, x, y)

    # Tick

    def update(self) -> dict[str, list]:
        """Runs one physics tick if the game is running. Returns the physics events."""
        with self.lock:
            if self.state_machine.mode != GameMode.RUNNING:
                return {}

            events = self.physics.update()
            for goal in events["goals"]:
                if goal["player"] == "human":
                    self.state_machine.set_state(GameMode.WIN)
                else:
                    self.state_machine.set_state(GameMode.LOSE)
            return events

    def update_display(self, canvas: Canvas) -> None:
        """Draws the median line, the paddles and the ball, then pushes the score"""
        with self.lock:
            canvas.draw_color(self.config.BACKGROUND_COLOR)

            middle = self.canvas_width / 2
            canvas.draw_line(middle, 1, middle, self.canvas_height - 1, self.median_line_paint)

            for player in (self.human, self.computer):
                paint = self.hit_paint if player.collision > 0 else player.paint
                canvas.draw_round_rect(
                    player.bounds, PADDLE_CORNER_RADIUS, PADDLE_CORNER_RADIUS, paint
                )

            canvas.draw_circle(self.ball.cx, self.ball.cy, self.ball.radius, self.ball.paint)

            score_text = f"{self.human.score}    {self.computer.score}"
            if score_text != self._last_score_text:
                self._last_score_text = score_text
                self.notify(ScoreMessage(score_text))

    # Save / restore

    def save_state(self, container: StateContainer) -> None:
        """Save game state to the provided container"""
        with self.lock:
            container.put_float_array(
                KEY_HUMAN_PLAYER_DATA,
                [self.human.bounds.left, self.human.bounds.top, self.human.score],
            )
            container.put_float_array(
                KEY_COMPUTER_PLAYER_DATA,
                [self.computer.bounds.left, self.computer.bounds.top, self.computer.score],
            )
            container.put_float_array(
                KEY_BALL_DATA, [self.ball.cx, self.ball.cy, self.ball.dx, self.ball.dy]
            )
            container.put_int(KEY_FPS, self.state_machine.frames_per_second)
            container.put_int(KEY_MODE, int(self.state_machine.mode))

    def restore_state(self, container: StateContainer) -> None:
        """
        Restores game state from a container filled by :meth:`save_state`.

        Paddle positions go through the field constraints, so a saved position
        outside the current field is brought back inside. The container must
        come from :meth:`save_state`; missing keys raise ``KeyError``.
        """
        with self.lock:
            human_data = container.get_float_array(KEY_HUMAN_PLAYER_DATA)
            self.human.score = int(human_data[2])
            self.physics.move_player(self.human, float(human_data[0]), float(human_data[1]))

            computer_data = container.get_float_array(KEY_COMPUTER_PLAYER_DATA)
            self.computer.score = int(computer_data[2])
            self.physics.move_player(
                self.computer, float(computer_data[0]), float(computer_data[1])
            )

            ball_data = container.get_float_array(KEY_BALL_DATA)
            self.ball.cx = float(ball_data[0])
            self.ball.cy = float(ball_data[1])
            self.ball.dx = float(ball_data[2])
            self.ball.dy = float(ball_data[3])

            self.state_machine.frames_per_second = container.get_int(KEY_FPS)
            mode = GameMode(container.get_int(KEY_MODE))
            self.state_machine.restore_mode(mode)
            logger.info("Game restored in %s mode", mode.name)
