"""Game state models."""

import random
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from jaipur.errors import InternalConsistencyError

from .counter import Counter
from .goods import TRADE_GOODS, GoodCounts, GoodType
from .results import RoundResult
from .rules import JaipurConfig
from .tokens import TokenStack


class RoundPhase(str, Enum):
    """Round state machine: ACTIVE -> ENDING -> SETTLED."""

    ACTIVE = "active"
    ENDING = "ending"
    SETTLED = "settled"


class MatchStatus(str, Enum):
    """Match status."""

    IN_PROGRESS = "in_progress"
    ENDED = "ended"


class PlayerState(BaseModel):
    """Per-player round state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_id: int
    hand: GoodCounts  # Camels never enter the hand
    herd: Counter

    # Reset every round
    score: int = 0
    good_tokens: int = 0
    bonus_tokens: int = 0

    def hand_size(self) -> int:
        """Number of cards in hand (wildcards count toward the limit)."""
        return self.hand.total()

    def clone(self) -> "PlayerState":
        return PlayerState(
            player_id=self.player_id,
            hand=self.hand.copy(),
            herd=self.herd.copy(),
            score=self.score,
            good_tokens=self.good_tokens,
            bonus_tokens=self.bonus_tokens,
        )

    def __str__(self) -> str:
        return (
            f"Player{self.player_id}[score={self.score}, hand={self.hand}, "
            f"herd={self.herd.value}]"
        )


class RoundState(BaseModel):
    """State rebuilt at the start of every round."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    market: GoodCounts
    draw_pile: list[GoodType] = Field(default_factory=list)  # Front is index 0
    players: list[PlayerState]
    good_tokens: dict[GoodType, TokenStack]  # One stack per trade good
    bonus_tokens: dict[int, TokenStack]  # Keyed by sale size 3, 4, 5
    goods_sold: Counter  # Good-token stacks fully sold
    discarded: int = 0  # Cards sold this round

    round_end_triggered: bool = False
    phase: RoundPhase = RoundPhase.ACTIVE
    current_player: int = 0
    turn_number: int = 0

    def draw(self) -> GoodType | None:
        """Draw the front card of the draw pile (None if empty)."""
        if not self.draw_pile:
            return None
        return self.draw_pile.pop(0)

    def card_total(self) -> int:
        """Cards accounted for across every zone."""
        return (
            self.market.total()
            + sum(p.hand.total() + p.herd.value for p in self.players)
            + len(self.draw_pile)
            + self.discarded
        )

    def clone(self) -> "RoundState":
        return RoundState(
            market=self.market.copy(),
            draw_pile=list(self.draw_pile),
            players=[p.clone() for p in self.players],
            good_tokens={g: s.copy() for g, s in self.good_tokens.items()},
            bonus_tokens={n: s.copy() for n, s in self.bonus_tokens.items()},
            goods_sold=self.goods_sold.copy(),
            discarded=self.discarded,
            round_end_triggered=self.round_end_triggered,
            phase=self.phase,
            current_player=self.current_player,
            turn_number=self.turn_number,
        )


class MatchState(BaseModel):
    """Overall match state.

    Owns the round state and the match's random generator. Nothing here is
    shared with other matches or clones.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: JaipurConfig
    seed: int
    rng: random.Random
    round_state: RoundState

    round_number: int = 1
    rounds_won: list[int]
    total_scores: list[int]
    status: MatchStatus = MatchStatus.IN_PROGRESS
    winner: int | None = None
    round_results: list[RoundResult] = Field(default_factory=list)

    @property
    def num_players(self) -> int:
        return len(self.rounds_won)

    @property
    def current_player(self) -> int:
        return self.round_state.current_player

    @property
    def players(self) -> list[PlayerState]:
        return self.round_state.players

    @property
    def is_over(self) -> bool:
        return self.status == MatchStatus.ENDED

    def player(self, player_id: int) -> PlayerState:
        return self.round_state.players[player_id]

    def clone(self) -> "MatchState":
        """Create a deep, independent copy.

        The config is immutable and shared; everything else is copied,
        including the generator state.
        """
        rng = random.Random()
        rng.setstate(self.rng.getstate())
        return MatchState(
            config=self.config,
            seed=self.seed,
            rng=rng,
            round_state=self.round_state.clone(),
            round_number=self.round_number,
            rounds_won=list(self.rounds_won),
            total_scores=list(self.total_scores),
            status=self.status,
            winner=self.winner,
            round_results=list(self.round_results),
        )

    def check_invariants(self) -> None:
        """Verify card conservation and counter bounds.

        Raises:
            InternalConsistencyError: If any invariant is violated.
        """
        rs = self.round_state
        expected = self.config.deck_total()
        actual = rs.card_total()
        if actual != expected:
            raise InternalConsistencyError(
                f"Card total {actual} does not match deck total {expected}"
            )
        if rs.market.total() > self.config.market_capacity:
            raise InternalConsistencyError(
                f"Market holds {rs.market.total()} cards (capacity {self.config.market_capacity})"
            )
        for p in rs.players:
            if p.hand.get(GoodType.CAMEL):
                raise InternalConsistencyError(f"Player {p.player_id} has camels in hand")
            if p.hand_size() > self.config.hand_limit:
                raise InternalConsistencyError(
                    f"Player {p.player_id} hand size {p.hand_size()} exceeds limit"
                )
        for good in TRADE_GOODS:
            if len(rs.good_tokens[good]) > len(self.config.token_progression[good]):
                raise InternalConsistencyError(f"Token stack for {good.name} grew")
        if not 0 <= rs.current_player < self.num_players:
            raise InternalConsistencyError(f"Invalid current player {rs.current_player}")

    def __str__(self) -> str:
        parts = [f"Round {self.round_number}, Turn {self.round_state.turn_number}"]
        if self.is_over:
            parts.append(f"[ENDED, winner {self.winner}]")
        else:
            parts.append(f"Player {self.current_player}'s turn")
        return " ".join(parts)
