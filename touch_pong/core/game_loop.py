"""
Game loop thread: fixed tick rate, drawing and cooperative shutdown
"""

import functools
import queue
import threading
import time
from collections.abc import Callable
from typing import Any

from touch_pong.core.game import PongGame
from touch_pong.core.interfaces.renderer import SurfaceHolder
from touch_pong.utils.logger import logger


class GameLoop(threading.Thread):
    """
    Drives a :class:`PongGame` at a fixed tick rate.

    Each tick locks a canvas from the surface holder, updates physics and
    draws while holding the game lock, then posts the canvas back. The next
    tick is scheduled from the previous target time, not from "now", so sleep
    inaccuracy does not accumulate. A late tick runs immediately; ticks are
    never skipped.

    Calls coming from the host thread can be queued with :meth:`post`, they
    run at the start of the next tick while the game lock is held.
    """

    def __init__(self, game: PongGame, surface_holder: SurfaceHolder, name: str = "game-loop"):
        super().__init__(name=name, daemon=True)
        self.game = game
        self.surface_holder = surface_holder
        self.tick_count = 0

        self._stop_requested = threading.Event()
        self._commands: queue.SimpleQueue[Callable[[], Any]] = queue.SimpleQueue()

    @property
    def running(self) -> bool:
        return self.is_alive() and not self._stop_requested.is_set()

    def post(self, command: Callable[..., Any], *args: Any) -> None:
        """Queue a call to run on the loop thread at the start of the next tick"""
        self._commands.put(functools.partial(command, *args))

    def run(self) -> None:
        """Game loop"""
        logger.info("Game loop started at %d fps", self.game.frames_per_second)
        next_game_tick = time.monotonic()
        try:
            while not self._stop_requested.is_set():
                self.run_once()

                next_game_tick += self.game.tick_interval
                sleep_time = next_game_tick - time.monotonic()
                if sleep_time > 0:
                    # Wakes up early when a stop is requested, the loop condition handles it
                    self._stop_requested.wait(sleep_time)
        except Exception:
            logger.exception("Game loop stopped on error")
            raise
        finally:
            logger.info("Game loop exited after %d ticks", self.tick_count)

    def run_once(self) -> None:
        """One tick: queued commands, physics, draw"""
        canvas = None
        try:
            canvas = self.surface_holder.lock_canvas()
            with self.game.lock:
                self._drain_commands()
                self.game.update()
                if canvas is not None and not self._stop_requested.is_set():
                    self.game.update_display(canvas)
        finally:
            if canvas is not None:
                self.surface_holder.unlock_canvas_and_post(canvas)
            self.tick_count += 1

    def _drain_commands(self) -> None:
        while True:
            try:
                command = self._commands.get_nowait()
            except queue.Empty:
                return
            command()

    def stop(self) -> None:
        """Ask the loop to exit and wait until it has"""
        self._stop_requested.set()
        if threading.current_thread() is self:
            return
        while self.is_alive():
            self.join()
