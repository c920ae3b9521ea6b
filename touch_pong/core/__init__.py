"""
Core module of Touch Pong game
"""

from touch_pong.core.entities import Ball
from touch_pong.core.entities import GameMode
from touch_pong.core.entities import Paint
from touch_pong.core.entities import Player
from touch_pong.core.entities import Rect
from touch_pong.core.game import PongGame
from touch_pong.core.game_loop import GameLoop
from touch_pong.core.notifications import MessageChannel
from touch_pong.core.notifications import ScoreMessage
from touch_pong.core.notifications import StatusMessage

__all__ = [
    "Ball",
    "Player",
    "Rect",
    "Paint",
    "GameMode",
    "PongGame",
    "GameLoop",
    "MessageChannel",
    "StatusMessage",
    "ScoreMessage",
]
