"""
Touch Pong graphical interface (PyGame host)
"""

from touch_pong.gui.pointer_input import PointerInput
from touch_pong.gui.pygame_renderer import PygameCanvas
from touch_pong.gui.pygame_renderer import PygameRenderer
from touch_pong.gui.pygame_renderer import PygameSurfaceHolder

__all__ = ["PointerInput", "PygameCanvas", "PygameRenderer", "PygameSurfaceHolder"]
