"""
Touch Pong utility module
"""

from touch_pong.utils.bundle import StateBundle
from touch_pong.utils.config import GameConfig
from touch_pong.utils.config import game_config
from touch_pong.utils.logger import logger

__all__ = ["game_config", "GameConfig", "StateBundle", "logger"]
