"""Tests for legal action generation."""

import pytest

from jaipur.errors import InternalConsistencyError
from jaipur.game import legal_actions, new_match, sell_actions, take_actions
from jaipur.models import (
    GoodType,
    JaipurConfig,
    MatchStatus,
    SellAction,
    TakeAction,
)


@pytest.fixture
def state():
    return new_match(JaipurConfig(), 2, seed=42)


@pytest.fixture
def custom_state():
    return new_match(JaipurConfig(customized=True), 2, seed=42)


def set_hand(state, player_id, **counts):
    hand = state.player(player_id).hand
    hand.clear()
    for name, n in counts.items():
        hand.set(GoodType.parse(name), n)


def set_market(state, **counts):
    market = state.round_state.market
    market.clear()
    for name, n in counts.items():
        market.set(GoodType.parse(name), n)


class TestSellActions:
    """Tests for sale enumeration."""

    def test_three_diamonds(self, state):
        """Test that 3 Diamonds (minimum 2) allow sales of 2 and 3 only."""
        set_hand(state, 0, diamonds=3)

        diamonds = [a for a in legal_actions(state)
                    if isinstance(a, SellAction) and a.good == GoodType.DIAMONDS]

        assert [a.count for a in diamonds] == [2, 3]
        assert all(a.wildcards == 0 for a in diamonds)

    def test_below_minimum(self, state):
        """Test that one Gold card cannot be sold."""
        set_hand(state, 0, gold=1)
        assert sell_actions(state, 0) == []

    def test_minimum_one(self, state):
        """Test goods that sell from a single card."""
        set_hand(state, 0, leather=2)
        assert [a.count for a in sell_actions(state, 0)] == [1, 2]

    def test_camels_never_sold(self, state):
        """Test that camels in the herd are not sellable."""
        set_hand(state, 0)
        state.player(0).herd.set(5)
        assert sell_actions(state, 0) == []

    def test_wildcards_padding(self, custom_state):
        """Test sales that combine held cards with wildcards."""
        set_hand(custom_state, 0, diamonds=1, wildcard=2)

        actions = sell_actions(custom_state, 0)

        assert actions == [
            SellAction(player=0, good=GoodType.DIAMONDS, count=2, wildcards=1),
            SellAction(player=0, good=GoodType.DIAMONDS, count=3, wildcards=2),
        ]

    def test_wildcards_with_plain_sales(self, custom_state):
        """Test that plain sales come before wildcard sales of the same good."""
        set_hand(custom_state, 0, cloth=2, wildcard=1)

        actions = sell_actions(custom_state, 0)

        assert [(a.count, a.wildcards) for a in actions] == [(1, 0), (2, 0), (3, 1)]

    def test_wildcards_never_sold_alone(self, custom_state):
        """Test that a hand of wildcards has nothing to sell."""
        set_hand(custom_state, 0, wildcard=3)
        assert sell_actions(custom_state, 0) == []

    def test_wildcards_ignored_without_customized_rules(self, state):
        """Test that wildcards do not pad sales in standard mode."""
        set_hand(state, 0, diamonds=1, wildcard=2)
        assert sell_actions(state, 0) == []


class TestTakeActions:
    """Tests for market take enumeration."""

    def test_camels_taken_together(self, state):
        """Test that there is one action taking all market camels."""
        set_market(state, camel=3, gold=2)

        camel_takes = [a for a in take_actions(state, 0) if a.is_camel_take]

        assert camel_takes == [TakeAction.camels(0, 3)]

    def test_single_takes(self, state):
        """Test one take action per non-camel good in the market."""
        set_hand(state, 0, leather=1)
        set_market(state, silver=1, spice=3, wildcard=1)

        actions = take_actions(state, 0)

        assert actions == [
            TakeAction.single(0, GoodType.SILVER),
            TakeAction.single(0, GoodType.SPICE),
            TakeAction.single(0, GoodType.WILDCARD),
        ]

    def test_hand_limit(self, state):
        """Test that a full hand can only take camels."""
        set_hand(state, 0, leather=4, cloth=3)
        set_market(state, camel=2, gold=3)

        assert take_actions(state, 0) == [TakeAction.camels(0, 2)]

    def test_herd_ignores_hand_limit(self, state):
        """Test that a large herd does not block taking goods."""
        set_hand(state, 0)
        state.player(0).herd.set(10)
        set_market(state, camel=1, gold=4)

        assert TakeAction.single(0, GoodType.GOLD) in take_actions(state, 0)


class TestLegalActions:
    """Tests for the combined action list."""

    def test_order(self, state):
        """Test sells first, then camels, then single takes."""
        set_hand(state, 0, diamonds=2, cloth=1)
        set_market(state, camel=2, gold=1, spice=2)

        assert legal_actions(state) == [
            SellAction(player=0, good=GoodType.DIAMONDS, count=2),
            SellAction(player=0, good=GoodType.CLOTH, count=1),
            TakeAction.camels(0, 2),
            TakeAction.single(0, GoodType.GOLD),
            TakeAction.single(0, GoodType.SPICE),
        ]

    def test_current_player_only(self, state):
        """Test that actions belong to the player to move."""
        state.round_state.current_player = 1
        assert all(a.player == 1 for a in legal_actions(state))

    def test_pure(self, state):
        """Test that generation does not mutate the state."""
        before = state.clone()
        first = legal_actions(state)
        second = legal_actions(state)

        assert first == second
        assert state.round_state.market == before.round_state.market
        assert state.player(0).hand == before.player(0).hand

    def test_no_legal_action(self, state):
        """Test that an empty action list is an internal error."""
        set_hand(state, 0, wildcard=7)
        set_market(state, diamonds=5)

        with pytest.raises(InternalConsistencyError, match="No legal action"):
            legal_actions(state)

    def test_ended_match(self, state):
        """Test that a finished match has no actions."""
        state.status = MatchStatus.ENDED
        assert legal_actions(state) == []
