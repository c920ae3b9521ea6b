"""
Main game application with PyGame GUI
"""

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pygame

from touch_pong.core.entities import GameMode
from touch_pong.core.game import PongGame
from touch_pong.core.game_loop import GameLoop
from touch_pong.core.notifications import MessageChannel, ScoreMessage, StatusMessage
from touch_pong.gui.pointer_input import PointerInput
from touch_pong.gui.pygame_renderer import PygameRenderer
from touch_pong.utils.bundle import StateBundle
from touch_pong.utils.config import GameConfig, game_config, load_config_from_file
from touch_pong.utils.logger import configure_logging, logger


class PongApp:
    """Main application class for Touch Pong with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None, state_file: str | None = None):
        """Initialize the application"""
        self.config = config or game_config
        self.state_file = Path(state_file) if state_file else None

        self.channel = MessageChannel()
        self.game = PongGame(self.config, notify=self.channel)
        self.renderer = PygameRenderer(self.config)
        self.pointer = PointerInput(self.game, dispatch=self.dispatch)
        self.game_loop: GameLoop | None = None

        self.running = True
        self.status_text = ""
        self.status_visible = False
        self.score_text = ""

        self.game.set_surface_size(self.renderer.width, self.renderer.height)

        if self.state_file is not None and self.state_file.exists():
            self.game.restore_state(StateBundle.load_from_file(self.state_file))
        else:
            self.game.set_state(GameMode.READY)

    def start_loop(self) -> None:
        """Start a game loop thread drawing on the window surface"""
        self.game_loop = GameLoop(self.game, self.renderer.surface_holder)
        self.game_loop.start()

    def stop_loop(self) -> None:
        if self.game_loop is not None:
            self.game_loop.stop()
            self.game_loop = None

    def dispatch(self, command: Callable[..., Any], *args: Any) -> None:
        """Run a game call on the loop thread when it is running, right away otherwise"""
        if self.game_loop is not None and self.game_loop.running:
            self.game_loop.post(command, *args)
        else:
            command(*args)

    def save_state(self) -> None:
        if self.state_file is None:
            return
        bundle = StateBundle()
        self.game.save_state(bundle)
        bundle.save_to_file(self.state_file)
        logger.info("Game saved to %s", self.state_file)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Dispatch one pygame event"""
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.pointer.on_pointer_down(*event.pos)

        elif event.type == pygame.MOUSEMOTION:
            self.pointer.on_pointer_move(*event.pos)

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.pointer.on_pointer_up(*event.pos)

        elif event.type == pygame.MOUSEWHEEL:
            self.pointer.on_wheel(event.y)

        elif event.type == pygame.VIDEORESIZE:
            self.renderer.resize(event.w, event.h)
            self.dispatch(self.game.set_surface_size, event.w, event.h)

        elif event.type == pygame.WINDOWFOCUSLOST:
            self.dispatch(self.game.pause)

        elif event.type == pygame.WINDOWMINIMIZED:
            self.renderer.surface_holder.set_ready(False)
            self.dispatch(self.game.pause)

        elif event.type == pygame.WINDOWRESTORED:
            self.renderer.surface_holder.set_ready(True)

    def handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_p:
            self.dispatch(self.game.pause)
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            if self.game.is_between_rounds():
                self.dispatch(self.game.unpause)
        elif key == pygame.K_n:
            self.dispatch(self.game.start_new_game)
        elif key == pygame.K_UP:
            self.dispatch(self.game.move_human_paddle_by, -self.config.PADDLE_SPEED)
        elif key == pygame.K_DOWN:
            self.dispatch(self.game.move_human_paddle_by, self.config.PADDLE_SPEED)

    def apply_messages(self) -> None:
        """Apply status and score messages pushed by the game"""
        for message in self.channel.poll():
            if isinstance(message, StatusMessage):
                self.status_visible = message.visible
                if message.visible:
                    self.status_text = message.text
            elif isinstance(message, ScoreMessage):
                self.score_text = message.text

    def render(self) -> None:
        self.renderer.draw_frame()
        if self.score_text:
            self.renderer.draw_score(self.score_text)
        if self.status_visible:
            self.renderer.draw_status(self.status_text)
        self.renderer.present()

    def run(self) -> None:
        """Window loop, the game itself runs on the game loop thread"""
        self.start_loop()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.apply_messages()
                self.render()
                self.renderer.update()
        finally:
            self.game.pause()
            self.stop_loop()
            self.save_state()
            self.renderer.cleanup()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Touch Pong - human versus computer")
    parser.add_argument("--config", type=str, help="JSON configuration file")
    parser.add_argument("--state-file", type=str, help="Resume from and save to this file")
    parser.add_argument("--fps", type=int, help="Ticks per second")
    parser.add_argument(
        "--ai-probability", type=float, help="Chance per tick that the computer reacts (0-1)"
    )
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument(
        "--save-config", type=str, help="Write the resulting configuration to this file and exit"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point"""
    args = parse_args(argv)

    if args.config and not load_config_from_file(args.config):
        print(f"Configuration file not found: {args.config}")
        return 1
    if args.fps is not None:
        game_config.FPS = args.fps
    if args.ai_probability is not None:
        game_config.AI_MOVE_PROBABILITY = args.ai_probability
    if args.log_level is not None:
        game_config.LOG_LEVEL = args.log_level

    configure_logging(game_config.LOG_LEVEL)

    if args.save_config:
        game_config.save_to_file(args.save_config)
        logger.info("Configuration written to %s", args.save_config)
        return 0

    app = PongApp(game_config, state_file=args.state_file)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
