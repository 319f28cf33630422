"""Game logging module."""

from .formatters import format_action, format_goods, snapshot
from .game_logger import GameLogConfig, GameLogger

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_action",
    "format_goods",
    "snapshot",
]
