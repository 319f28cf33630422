"""Match and round setup."""

import logging
import random

from jaipur.errors import InternalConsistencyError
from jaipur.models.counter import Counter
from jaipur.models.goods import TRADE_GOODS, GoodCounts, GoodType
from jaipur.models.rules import JaipurConfig
from jaipur.models.state import MatchState, PlayerState, RoundState
from jaipur.models.tokens import BONUS_SIZES, TokenStack

logger = logging.getLogger(__name__)


def build_deck(config: JaipurConfig) -> list[GoodType]:
    """Build the unshuffled draw deck for one round.

    Camels already placed in the market are not part of the deck, and
    wildcards are only included with customized rules.
    """
    deck: list[GoodType] = []
    for good in GoodType:
        count = config.deck_count(good)
        if good == GoodType.CAMEL:
            count -= config.initial_camels_in_market
        deck.extend([good] * count)
    return deck


class RoundInitializer:
    """Builds the match state and resets it for every round."""

    def __init__(self, config: JaipurConfig | None = None):
        """Initialize the round initializer.

        Args:
            config: Rules parameters (uses defaults if not provided)
        """
        self.config = config or JaipurConfig()

    def new_match(self, player_count: int, seed: int) -> MatchState:
        """Create a match and set up its first round.

        Args:
            player_count: Number of players
            seed: Seed for the match's random generator

        Returns:
            MatchState ready for the first player's turn

        Raises:
            InvalidConfiguration: If the rules cannot support `player_count`
        """
        self.config.validate_for_players(player_count)

        match = MatchState(
            config=self.config,
            seed=seed,
            rng=random.Random(seed),
            round_state=self._empty_round(player_count),
            rounds_won=[0] * player_count,
            total_scores=[0] * player_count,
        )
        self.new_round(match)
        return match

    def new_round(self, match: MatchState, seed: int | None = None) -> None:
        """Replace the match's round state with a freshly dealt round.

        Round-win counts and total scores are kept. Everything else is
        rebuilt: market, draw pile, hands, herds, token stacks and scores.

        Args:
            match: Match to reset
            seed: Round seed. If None, one is drawn from the match generator.
        """
        cfg = self.config
        round_seed = seed if seed is not None else match.rng.getrandbits(64)
        rng = random.Random(round_seed)

        deck = build_deck(cfg)
        rng.shuffle(deck)

        rs = self._empty_round(match.num_players)
        rs.draw_pile = deck

        # Deal hands; camels go straight to the herd
        for player in rs.players:
            for _ in range(cfg.initial_cards_in_hand):
                card = self._draw_or_fail(rs)
                if card == GoodType.CAMEL:
                    player.herd.increment()
                else:
                    player.hand.add(card)

        # Market starts with the fixed camels, then fills from the deck
        rs.market.set(GoodType.CAMEL, cfg.initial_camels_in_market)
        while rs.market.total() < cfg.market_capacity:
            rs.market.add(self._draw_or_fail(rs))

        for good in TRADE_GOODS:
            rs.good_tokens[good] = TokenStack(
                cfg.token_progression[good], name=f"Good tokens {good.name}"
            )
        for size in BONUS_SIZES:
            stack = TokenStack(cfg.bonus_tokens[size], name=f"Bonus tokens {size}")
            stack.shuffle(rng)
            rs.bonus_tokens[size] = stack

        match.round_state = rs
        logger.info(
            f"Round {match.round_number} initialized, market: {rs.market}, "
            f"draw pile: {len(rs.draw_pile)} cards"
        )
        logger.debug(f"Round {match.round_number} seed: {round_seed}")

    def _empty_round(self, player_count: int) -> RoundState:
        cfg = self.config
        players = [
            PlayerState(
                player_id=i,
                hand=GoodCounts(cfg.hand_limit, name=f"Player {i} hand"),
                herd=Counter(0, 0, cfg.max_camels_in_game, name=f"Player {i} herd"),
            )
            for i in range(player_count)
        ]
        return RoundState(
            market=GoodCounts(cfg.market_capacity, name="Market"),
            players=players,
            good_tokens={},
            bonus_tokens={},
            goods_sold=Counter(0, 0, len(TRADE_GOODS), name="Goods fully sold"),
        )

    @staticmethod
    def _draw_or_fail(rs: RoundState) -> GoodType:
        card = rs.draw()
        if card is None:
            raise InternalConsistencyError("Draw pile exhausted during setup")
        return card


def new_match(config: JaipurConfig, player_count: int, seed: int) -> MatchState:
    """Create a match with the given rules, player count and seed."""
    return RoundInitializer(config).new_match(player_count, seed)


def new_round(match: MatchState, seed: int | None = None) -> None:
    """Start a new round of `match` in place."""
    RoundInitializer(match.config).new_round(match, seed)
