"""
Collision detection system for Touch Pong
"""

import math

import numpy as np

from touch_pong.core.entities import Ball, Player


def ball_paddle_collision(ball: Ball, player: Player) -> bool:
    """Checks if the ball bounding box overlaps the paddle rectangle"""
    return player.bounds.intersects(*ball.get_rect())


def normalized_intersect(ball: Ball, player: Player) -> float:
    """
    Where the ball struck the paddle, relative to the paddle centre.

    Returns 1.0 at the top edge, 0.0 at the centre and -1.0 at the bottom edge.
    Hits on a corner (ball centre beyond the paddle ends) are clamped to the
    nearest edge value.
    """
    half_height = player.paddle_height / 2
    relative_intersect_y = player.bounds.top + half_height - ball.cy
    return max(-1.0, min(1.0, relative_intersect_y / half_height))


def bounce_angle(offset: float, max_angle: float) -> float:
    """Outgoing angle for a normalized hit offset in [-1, 1]"""
    return offset * max_angle


def apply_paddle_bounce(ball: Ball, player: Player, speed: float, max_angle: float) -> None:
    """Sends the ball back with an angle depending on where it hit the paddle"""
    angle = bounce_angle(normalized_intersect(ball, player), max_angle)

    ball.dx = float(-np.sign(ball.dx) * speed * math.cos(angle))
    ball.dy = float(speed * -math.sin(angle))


class CollisionDetector:
    """Main collision manager"""

    def check_ball_paddle(
        self, ball: Ball, player: Player, face: str, speed: float, max_angle: float
    ) -> bool:
        """Checks and handles ball-paddle collision, face is the paddle side facing the field"""
        if not ball_paddle_collision(ball, player):
            return False

        apply_paddle_bounce(ball, player, speed, max_angle)
        self.separate_ball_from_paddle(ball, player, face)
        return True

    def separate_ball_from_paddle(self, ball: Ball, player: Player, face: str) -> None:
        """Places the ball flush against the given paddle face ("left" or "right")"""
        if face == "right":
            ball.cx = player.bounds.right + ball.radius
        else:
            ball.cx = player.bounds.left - ball.radius

    def check_ball_walls(self, ball: Ball, field_width: float, field_height: float) -> str:
        """Checks collisions with walls. Returns the collision type."""
        # Top and bottom walls
        if ball.cy <= ball.radius:
            return "top"
        elif ball.cy + ball.radius >= field_height - 1:
            return "bottom"

        # Right and left walls (goals), the human plays on the left
        if ball.cx + ball.radius >= field_width - 1:
            return "right_goal"
        elif ball.cx <= ball.radius:
            return "left_goal"

        return "none"
