"""Rules parameters for a match."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from jaipur.errors import InvalidConfiguration

from .goods import GOOD_NAMES, TRADE_GOODS, GoodType
from .tokens import BONUS_SIZES


def _default_deck() -> dict[GoodType, int]:
    return {
        GoodType.DIAMONDS: 6,
        GoodType.GOLD: 6,
        GoodType.SILVER: 6,
        GoodType.CLOTH: 8,
        GoodType.SPICE: 8,
        GoodType.LEATHER: 10,
        GoodType.WILDCARD: 6,  # Only dealt with customized rules
    }


def _default_min_sell() -> dict[GoodType, int]:
    return {
        GoodType.DIAMONDS: 2,
        GoodType.GOLD: 2,
        GoodType.SILVER: 2,
        GoodType.CLOTH: 1,
        GoodType.SPICE: 1,
        GoodType.LEATHER: 1,
    }


def _default_progression() -> dict[GoodType, tuple[int, ...]]:
    return {
        GoodType.DIAMONDS: (5, 5, 5, 7, 7),
        GoodType.GOLD: (5, 5, 5, 6, 6),
        GoodType.SILVER: (5, 5, 5, 5, 5),
        GoodType.CLOTH: (1, 1, 2, 2, 3, 3, 5),
        GoodType.SPICE: (1, 1, 2, 2, 3, 3, 5),
        GoodType.LEATHER: (1, 1, 1, 1, 1, 1, 2, 3, 4),
    }


def _default_bonus() -> dict[int, tuple[int, ...]]:
    return {
        3: (1, 1, 2, 2, 2, 3, 3),
        4: (4, 4, 5, 5, 6, 6),
        5: (8, 8, 9, 10, 10),
    }


class JaipurConfig(BaseModel):
    """Rules parameters, immutable for the life of a match."""

    model_config = ConfigDict(frozen=True)

    # Cards per good type in a round's deck (camels come from max_camels_in_game)
    deck_composition: dict[GoodType, int] = Field(default_factory=_default_deck)
    min_sell: dict[GoodType, int] = Field(default_factory=_default_min_sell)
    # Good-token values in stack order (front is taken first)
    token_progression: dict[GoodType, tuple[int, ...]] = Field(
        default_factory=_default_progression
    )
    # Bonus-token pools keyed by sale size (3, 4, 5+)
    bonus_tokens: dict[int, tuple[int, ...]] = Field(default_factory=_default_bonus)

    camel_bonus: int = 5
    goods_sold_round_end: int = 3
    rounds_to_win: int = 2

    hand_limit: int = 7
    initial_cards_in_hand: int = 5
    market_capacity: int = 5
    initial_camels_in_market: int = 3
    max_camels_in_game: int = 11

    # Customized rules add wildcard cards to the deck
    customized: bool = False

    def __init__(self, **data: Any) -> None:
        """Validate the rules.

        Raises:
            InvalidConfiguration: If any value is missing or out of range.
        """
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfiguration(str(e)) from e

    @field_validator("deck_composition", "min_sell", "token_progression", mode="before")
    @classmethod
    def _parse_good_keys(cls, value: Any) -> Any:
        """Accept good names (case-insensitive) as mapping keys."""
        if isinstance(value, dict):
            return {GoodType.parse(k): v for k, v in value.items()}
        return value

    @model_validator(mode="after")
    def _check_rules(self) -> "JaipurConfig":
        for good in TRADE_GOODS:
            name = GOOD_NAMES[good]
            if good not in self.deck_composition:
                raise ValueError(f"deck_composition is missing {name}")
            if good not in self.min_sell:
                raise ValueError(f"min_sell is missing {name}")
            if good not in self.token_progression:
                raise ValueError(f"token_progression is missing {name}")
            if self.min_sell[good] < 1:
                raise ValueError(f"min_sell for {name} must be at least 1")
            if any(v < 0 for v in self.token_progression[good]):
                raise ValueError(f"token_progression for {name} has negative values")

        if GoodType.CAMEL in self.deck_composition:
            raise ValueError("Camels are set by max_camels_in_game, not deck_composition")
        for mapping_name in ("min_sell", "token_progression"):
            extra = [g for g in getattr(self, mapping_name) if not g.is_trade_good]
            if extra:
                raise ValueError(f"{mapping_name} only accepts trade goods, got {extra[0].name}")
        if self.customized and GoodType.WILDCARD not in self.deck_composition:
            raise ValueError("deck_composition is missing Wildcard (customized rules)")
        if any(n < 0 for n in self.deck_composition.values()):
            raise ValueError("deck_composition counts must be non-negative")

        if set(self.bonus_tokens) != set(BONUS_SIZES):
            raise ValueError(f"bonus_tokens keys must be {list(BONUS_SIZES)}")
        if any(v < 0 for values in self.bonus_tokens.values() for v in values):
            raise ValueError("bonus_tokens values must be non-negative")

        if self.hand_limit < 1:
            raise ValueError("hand_limit must be at least 1")
        if self.market_capacity < 1:
            raise ValueError("market_capacity must be at least 1")
        if self.initial_cards_in_hand < 0:
            raise ValueError("initial_cards_in_hand must be non-negative")
        if not 0 <= self.initial_camels_in_market <= self.market_capacity:
            raise ValueError("initial_camels_in_market must be within [0, market_capacity]")
        if self.initial_camels_in_market > self.max_camels_in_game:
            raise ValueError("initial_camels_in_market exceeds max_camels_in_game")
        if self.rounds_to_win < 1:
            raise ValueError("rounds_to_win must be at least 1")
        if not 1 <= self.goods_sold_round_end <= len(TRADE_GOODS):
            raise ValueError(
                f"goods_sold_round_end must be within [1, {len(TRADE_GOODS)}]"
            )
        if self.camel_bonus < 0:
            raise ValueError("camel_bonus must be non-negative")
        return self

    def deck_count(self, good: GoodType) -> int:
        """Cards of a good in a round's full deck (market camels included)."""
        if good == GoodType.CAMEL:
            return self.max_camels_in_game
        if good == GoodType.WILDCARD and not self.customized:
            return 0
        return self.deck_composition.get(good, 0)

    def deck_total(self) -> int:
        """Total cards in play for one round."""
        return sum(self.deck_count(g) for g in GoodType)

    def validate_for_players(self, player_count: int) -> None:
        """Check that a match with `player_count` players can be set up.

        Raises:
            InvalidConfiguration: If the player count or deck size is unusable.
        """
        if player_count < 2:
            raise InvalidConfiguration(f"At least 2 players required, got {player_count}")
        needed = player_count * self.initial_cards_in_hand + self.market_capacity
        if self.deck_total() < needed:
            raise InvalidConfiguration(
                f"Deck of {self.deck_total()} cards cannot deal {player_count} hands "
                f"and fill the market ({needed} needed)"
            )
        if self.initial_cards_in_hand > self.hand_limit:
            raise InvalidConfiguration("initial_cards_in_hand exceeds hand_limit")

