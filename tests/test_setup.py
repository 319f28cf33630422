"""Tests for match and round setup."""

import pytest

from jaipur.errors import InvalidConfiguration
from jaipur.game.setup import RoundInitializer, build_deck, new_match, new_round
from jaipur.logging import snapshot
from jaipur.models import GoodType, JaipurConfig, RoundPhase


@pytest.fixture
def rules():
    return JaipurConfig()


@pytest.fixture
def state(rules):
    return new_match(rules, 2, seed=42)


class TestBuildDeck:
    """Tests for deck composition."""

    def test_default_deck(self, rules):
        """Test that market camels are left out of the deck."""
        deck = build_deck(rules)

        assert len(deck) == 52
        assert deck.count(GoodType.CAMEL) == 8
        assert deck.count(GoodType.LEATHER) == 10
        assert GoodType.WILDCARD not in deck

    def test_customized_deck(self):
        """Test that customized rules add wildcards."""
        deck = build_deck(JaipurConfig(customized=True))
        assert deck.count(GoodType.WILDCARD) == 6


class TestNewMatch:
    """Tests for new_match."""

    def test_initial_deal(self, state, rules):
        """Test hands, herds and market after the deal."""
        rs = state.round_state

        for player in state.players:
            assert player.hand.total() + player.herd.value == rules.initial_cards_in_hand
            assert player.hand[GoodType.CAMEL] == 0
            assert player.score == 0

        assert rs.market.total() == rules.market_capacity
        assert rs.market[GoodType.CAMEL] >= rules.initial_camels_in_market
        assert len(rs.draw_pile) == 52 - 2 * rules.initial_cards_in_hand - 2
        assert rs.discarded == 0

    def test_initial_status(self, state):
        """Test that the match starts in round 1 with player 0 to move."""
        assert state.round_number == 1
        assert state.current_player == 0
        assert state.round_state.phase == RoundPhase.ACTIVE
        assert state.rounds_won == [0, 0]
        assert not state.is_over

    def test_token_stacks(self, state, rules):
        """Test that token stacks are loaded from the rules."""
        rs = state.round_state

        for good, values in rules.token_progression.items():
            assert rs.good_tokens[good].values == values
        for size, values in rules.bonus_tokens.items():
            assert sorted(rs.bonus_tokens[size].values) == sorted(values)

    def test_card_conservation(self, state):
        """Test that every card of the deck is accounted for."""
        state.check_invariants()
        assert state.round_state.card_total() == state.config.deck_total()

    def test_same_seed_same_match(self, rules):
        """Test that the same seed reproduces the same deal."""
        a = new_match(rules, 2, seed=7)
        b = new_match(rules, 2, seed=7)

        assert snapshot(a) == snapshot(b)
        assert a.round_state.draw_pile == b.round_state.draw_pile

    def test_different_seed(self, rules):
        """Test that different seeds shuffle differently."""
        a = new_match(rules, 2, seed=1)
        b = new_match(rules, 2, seed=2)
        assert a.round_state.draw_pile != b.round_state.draw_pile

    def test_more_players(self, rules):
        """Test dealing for more than two players."""
        state = new_match(rules, 4, seed=3)
        assert len(state.players) == 4
        state.check_invariants()

    def test_invalid_player_count(self, rules):
        """Test that one player is rejected."""
        with pytest.raises(InvalidConfiguration):
            new_match(rules, 1, seed=0)

    def test_invalid_rules(self):
        """Test that bad rules fail with InvalidConfiguration before dealing."""
        with pytest.raises(InvalidConfiguration):
            new_match(JaipurConfig(hand_limit=0), 2, seed=0)

    def test_customized_conservation(self):
        """Test card conservation with wildcards in the deck."""
        state = new_match(JaipurConfig(customized=True), 2, seed=5)
        state.check_invariants()
        assert state.round_state.card_total() == 61


class TestNewRound:
    """Tests for new_round."""

    def test_keeps_round_wins(self, state):
        """Test that round wins and totals survive a new round."""
        state.rounds_won[1] = 1
        state.total_scores[1] = 40
        state.player(1).score = 40
        state.player(1).hand.clear()

        new_round(state)

        assert state.rounds_won == [0, 1]
        assert state.total_scores == [0, 40]
        assert state.player(1).score == 0
        assert state.player(1).hand.total() + state.player(1).herd.value == 5
        state.check_invariants()

    def test_explicit_seed(self, rules):
        """Test that an explicit round seed reproduces the round."""
        a = new_match(rules, 2, seed=1)
        b = new_match(rules, 2, seed=2)

        new_round(a, seed=99)
        new_round(b, seed=99)

        assert a.round_state.draw_pile == b.round_state.draw_pile
        assert a.round_state.market == b.round_state.market

    def test_seed_from_match_generator(self, rules):
        """Test that rounds without a seed draw from the match generator."""
        a = new_match(rules, 2, seed=11)
        b = new_match(rules, 2, seed=11)

        new_round(a)
        new_round(b)
        assert a.round_state.draw_pile == b.round_state.draw_pile

        first = list(a.round_state.draw_pile)
        new_round(a)
        assert a.round_state.draw_pile != first

    def test_initializer_uses_its_config(self):
        """Test the class interface with non-default rules."""
        rules = JaipurConfig(initial_cards_in_hand=3)
        state = RoundInitializer(rules).new_match(3, seed=0)

        for player in state.players:
            assert player.hand.total() + player.herd.value == 3
        state.check_invariants()
