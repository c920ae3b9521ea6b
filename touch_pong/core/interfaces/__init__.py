"""
Protocols for the collaborators the game core talks to
"""

from touch_pong.core.interfaces.persistence import StateContainer
from touch_pong.core.interfaces.renderer import Canvas
from touch_pong.core.interfaces.renderer import SurfaceHolder

__all__ = ["Canvas", "SurfaceHolder", "StateContainer"]
