"""Configuration management."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from jaipur.errors import InvalidConfiguration
from jaipur.logging import GameLogConfig
from jaipur.models.rules import JaipurConfig


class GameConfig(BaseModel):
    """Simulation configuration."""

    num_games: int = 10
    seed: int = 0
    players: list[str] = Field(default_factory=lambda: ["greedy", "random"])


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class Config(BaseModel):
    """Root configuration."""

    rules: JaipurConfig = JaipurConfig()
    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def create_rules(**overrides: Any) -> JaipurConfig:
    """Build rules from keyword overrides.

    Raises:
        InvalidConfiguration: If any value is missing or out of range.
    """
    return JaipurConfig(**overrides)


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.

    Raises:
        InvalidConfiguration: If the file content fails validation.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    try:
        return Config(**data) if data else Config()
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid config {config_path}: {e}") from e
