"""
Touch Pong game configuration with Pydantic validation
"""

import math
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

Color = tuple[int, int, int, int]


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Window (the arena follows the drawing surface size)
    FIELD_WIDTH: int = Field(default=480, gt=0, description="Initial window width in pixels")
    FIELD_HEIGHT: int = Field(default=320, gt=0, description="Initial window height in pixels")

    # Game objects
    PADDLE_WIDTH: int = Field(default=25, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: int = Field(default=85, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: float = Field(default=2.0, ge=0, description="Paddle gap from side walls")
    BALL_RADIUS: int = Field(default=15, gt=0, description="Ball radius in pixels")

    # Physics, expressed per tick
    FPS: int = Field(default=60, gt=0, le=240, description="Ticks per second")
    BALL_SPEED: float = Field(default=8.0, gt=0, description="Ball speed in pixels per tick")
    PADDLE_SPEED: float = Field(default=12.0, gt=0, description="AI paddle speed per tick")
    MAX_BOUNCE_ANGLE: float = Field(
        default=5 * math.pi / 12, gt=0, lt=math.pi / 2, description="Max bounce angle (radians)"
    )
    AI_MOVE_PROBABILITY: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Chance per tick that the AI reacts"
    )
    COLLISION_FRAMES: int = Field(default=5, ge=0, description="Ticks a hit paddle stays lit")

    # Display
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0, 255), description="RGBA color")
    HUMAN_COLOR: Color = Field(default=(0, 0, 255, 255), description="RGBA color")
    COMPUTER_COLOR: Color = Field(default=(255, 0, 0, 255), description="RGBA color")
    BALL_COLOR: Color = Field(default=(0, 255, 0, 255), description="RGBA color")
    HIT_COLOR: Color = Field(default=(255, 255, 0, 255), description="RGBA color")
    MEDIAN_LINE_COLOR: Color = Field(default=(255, 255, 255, 80), description="RGBA color")
    SCORE_TEXT_SIZE: int = Field(default=26, gt=0, description="Score font size")

    # Status messages
    WIN_TEXT: str = Field(default="You win! Tap to continue", description="Shown on a human goal")
    LOSE_TEXT: str = Field(default="You lose! Tap to continue", description="Shown on a CPU goal")
    PAUSE_TEXT: str = Field(default="Paused", description="Shown while paused")

    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")

    @field_validator(
        "BACKGROUND_COLOR",
        "HUMAN_COLOR",
        "COMPUTER_COLOR",
        "BALL_COLOR",
        "HIT_COLOR",
        "MEDIAN_LINE_COLOR",
    )
    @classmethod
    def validate_color(cls, v: Color) -> Color:
        """Validate RGBA channels"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"Color channels must be within 0-255, got {v}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @model_validator(mode="after")
    def validate_dimensions(self) -> "GameConfig":
        """Validate that the game objects fit in the initial window"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + 4 * self.BALL_RADIUS
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        if self.FIELD_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(
                f"FIELD_HEIGHT ({self.FIELD_HEIGHT}) must exceed PADDLE_HEIGHT "
                f"({self.PADDLE_HEIGHT})"
            )

        if self.BALL_SPEED >= 2 * self.BALL_RADIUS + self.PADDLE_WIDTH:
            raise ValueError(
                f"BALL_SPEED ({self.BALL_SPEED}) would let the ball skip over a paddle"
            )

        return self

    def save_to_file(self, filepath: str | Path) -> None:
        """Write the configuration as JSON, the format read by load_from_file"""
        Path(filepath).write_text(self.model_dump_json(indent=2))

    @classmethod
    def load_from_file(cls, filepath: str | Path) -> "GameConfig":
        """Read and validate a JSON configuration, FileNotFoundError if absent"""
        path = Path(filepath)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")
        return cls.model_validate_json(path.read_text())


# Shared configuration read by the application entry point
game_config = GameConfig()


def load_config_from_file(filepath: str | Path) -> bool:
    """Copy a configuration file into game_config. Returns False if there is no such file."""
    path = Path(filepath)
    if not path.is_file():
        return False

    loaded = GameConfig.load_from_file(path)
    for name in GameConfig.model_fields:
        setattr(game_config, name, getattr(loaded, name))
    return True


@contextmanager
def game_config_tmp(**overrides: Any) -> Iterator[None]:
    """Override game_config fields for the duration of a with block (values are validated)"""
    saved = {name: getattr(game_config, name) for name in overrides}
    try:
        for name, value in overrides.items():
            setattr(game_config, name, value)
        yield
    finally:
        for name, value in saved.items():
            setattr(game_config, name, value)
