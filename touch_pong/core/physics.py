"""
Physics system for Touch Pong
"""

import random

from touch_pong.core.collision import CollisionDetector
from touch_pong.core.entities import Ball, Player
from touch_pong.utils.config import GameConfig


class PhysicsEngine:
    """
    Fixed-step physics for one human paddle (left), one computer paddle (right)
    and the ball.

    Every quantity is expressed per tick: one call to :meth:`update` advances
    the simulation by exactly one frame. Goals are not handled here, they are
    reported in the returned events so the caller can change the game mode.
    """

    def __init__(
        self,
        human: Player,
        computer: Player,
        ball: Ball,
        config: GameConfig,
        rng: random.Random | None = None,
    ):
        self.human = human
        self.computer = computer
        self.ball = ball
        self.config = config
        self.rng = rng or random.Random()
        self.collision_detector = CollisionDetector()

        self.field_width = 1
        self.field_height = 1

    def set_field_size(self, width: int, height: int) -> None:
        self.field_width = width
        self.field_height = height

    def update(self) -> dict[str, list]:
        """Runs one tick: collisions, AI, ball motion. Returns the events that occurred."""
        events: dict[str, list] = {
            "paddle_hits": [],
            "wall_bounces": [],
            "goals": [],
            "ai_moves": [],
        }

        for player in (self.human, self.computer):
            if player.collision > 0:
                player.collision -= 1

        if self._check_paddle(self.human, "right"):
            events["paddle_hits"].append({"player": "human"})
        elif self._check_paddle(self.computer, "left"):
            events["paddle_hits"].append({"player": "computer"})
        else:
            wall_collision = self.collision_detector.check_ball_walls(
                self.ball, self.field_width, self.field_height
            )

            if wall_collision in ("top", "bottom"):
                self.ball.dy = -self.ball.dy
                events["wall_bounces"].append(wall_collision)
            elif wall_collision == "right_goal":
                # Human plays on the left
                events["goals"].append({"player": "human"})
                return events
            elif wall_collision == "left_goal":
                events["goals"].append({"player": "computer"})
                return events
            elif self.rng.random() < self.config.AI_MOVE_PROBABILITY:
                direction = self.do_ai()
                if direction:
                    events["ai_moves"].append(direction)

        self.move_ball()

        return events

    def _check_paddle(self, player: Player, face: str) -> bool:
        hit = self.collision_detector.check_ball_paddle(
            self.ball, player, face, self.config.BALL_SPEED, self.config.MAX_BOUNCE_ANGLE
        )
        if hit:
            player.collision = self.config.COLLISION_FRAMES
        return hit

    def do_ai(self) -> str | None:
        """Moves the computer paddle one step towards the ball. Returns the direction taken."""
        bounds = self.computer.bounds
        if bounds.top > self.ball.cy:
            self.move_player(self.computer, bounds.left, bounds.top - self.config.PADDLE_SPEED)
            return "up"
        elif bounds.top + self.computer.paddle_height < self.ball.cy:
            self.move_player(self.computer, bounds.left, bounds.top + self.config.PADDLE_SPEED)
            return "down"
        return None

    def move_ball(self) -> None:
        """Advances the ball and keeps it inside the vertical bounds"""
        ball = self.ball
        ball.cx += ball.dx
        ball.cy += ball.dy

        ball.cy = max(float(ball.radius), min(ball.cy, self.field_height - ball.radius - 1.0))

    def move_player(self, player: Player, left: float, top: float) -> None:
        """Moves a paddle, constrained to the field with a fixed side margin"""
        margin = self.config.PADDLE_MARGIN
        left = max(margin, min(left, self.field_width - player.paddle_width - margin))
        top = max(0.0, min(top, self.field_height - player.paddle_height - 1.0))
        player.bounds.offset_to(left, top)
