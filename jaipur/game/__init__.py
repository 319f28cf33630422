"""Game logic: setup, action generation, application and lifecycle."""

from .applier import ActionApplier, apply
from .engine import GameEngine
from .events import GameEvent, GameListener
from .generator import legal_actions, sell_actions, take_actions
from .lifecycle import LifecycleController
from .setup import RoundInitializer, build_deck, new_match, new_round
from .validator import ActionValidator, ValidationResult

__all__ = [
    "ActionApplier",
    "ActionValidator",
    "GameEngine",
    "GameEvent",
    "GameListener",
    "LifecycleController",
    "RoundInitializer",
    "ValidationResult",
    "apply",
    "build_deck",
    "legal_actions",
    "new_match",
    "new_round",
    "sell_actions",
    "take_actions",
]
