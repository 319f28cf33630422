"""Results produced by applying actions and settling rounds."""

from dataclasses import dataclass, field

from .action import Action
from .goods import GoodType


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a settled round."""

    round_number: int
    scores: tuple[int, ...]  # Round scores, camel bonus included
    herds: tuple[int, ...]
    camel_bonus_player: int | None  # None when the camel lead was tied
    ranking: tuple[int, ...]  # Player ids, round winner first
    rounds_won: tuple[int, ...]  # Round-win counts after this round

    @property
    def winner(self) -> int:
        return self.ranking[0]


@dataclass
class AppliedEffects:
    """Everything that changed while applying one action."""

    action: Action
    player: int
    tokens: list[int] = field(default_factory=list)  # Good-token values won
    bonus: int | None = None  # Bonus-token value won, if any
    stack_exhausted: bool = False
    refilled: list[GoodType] = field(default_factory=list)  # Cards drawn into market
    round_end_triggered: bool = False
    round_result: RoundResult | None = None
    game_over: bool = False

    @property
    def points(self) -> int:
        """Points scored by the action itself."""
        return sum(self.tokens) + (self.bonus or 0)

    @property
    def round_over(self) -> bool:
        return self.round_result is not None
