"""Game models."""

from .action import Action, SellAction, TakeAction
from .counter import Counter
from .goods import GOOD_NAMES, HAND_GOODS, TRADE_GOODS, GoodCounts, GoodType
from .results import AppliedEffects, RoundResult
from .rules import JaipurConfig
from .state import MatchState, MatchStatus, PlayerState, RoundPhase, RoundState
from .tokens import TokenStack

__all__ = [
    "Action",
    "AppliedEffects",
    "Counter",
    "GOOD_NAMES",
    "GoodCounts",
    "GoodType",
    "HAND_GOODS",
    "JaipurConfig",
    "MatchState",
    "MatchStatus",
    "PlayerState",
    "RoundPhase",
    "RoundResult",
    "RoundState",
    "SellAction",
    "TRADE_GOODS",
    "TakeAction",
    "TokenStack",
]
