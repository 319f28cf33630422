"""Tests for entity models."""

import random

import pytest

from jaipur.errors import InternalConsistencyError
from jaipur.models import (
    Counter,
    GoodCounts,
    GoodType,
    HAND_GOODS,
    SellAction,
    TRADE_GOODS,
    TakeAction,
    TokenStack,
)
from jaipur.models.tokens import bonus_bucket_for


class TestGoodType:
    """Tests for GoodType enum."""

    def test_trade_goods(self):
        """Test that only the six tradeable goods have token stacks."""
        assert len(TRADE_GOODS) == 6
        assert GoodType.CAMEL not in TRADE_GOODS
        assert GoodType.WILDCARD not in TRADE_GOODS
        assert not GoodType.CAMEL.is_trade_good
        assert GoodType.LEATHER.is_trade_good

    def test_hand_goods_exclude_camel(self):
        """Test that camels never belong in a hand."""
        assert GoodType.CAMEL not in HAND_GOODS
        assert GoodType.WILDCARD in HAND_GOODS

    def test_parse(self):
        """Test parsing good names and indices."""
        assert GoodType.parse("diamonds") == GoodType.DIAMONDS
        assert GoodType.parse(" Spice ") == GoodType.SPICE
        assert GoodType.parse(6) == GoodType.CAMEL
        assert GoodType.parse(GoodType.GOLD) == GoodType.GOLD

    def test_parse_unknown(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError):
            GoodType.parse("silk")


class TestGoodCounts:
    """Tests for GoodCounts class."""

    def test_add_remove(self):
        """Test adding and removing counts."""
        counts = GoodCounts(5)
        counts.add(GoodType.GOLD, 3)
        counts.remove(GoodType.GOLD)

        assert counts[GoodType.GOLD] == 2
        assert counts.total() == 2

    def test_upper_bound(self):
        """Test that a slot cannot exceed its limit."""
        counts = GoodCounts(2, name="Market")
        counts.set(GoodType.SILVER, 2)

        with pytest.raises(InternalConsistencyError, match="Market"):
            counts.add(GoodType.SILVER)

    def test_negative_count(self):
        """Test that a slot cannot go below zero."""
        counts = GoodCounts(5)
        with pytest.raises(InternalConsistencyError):
            counts.remove(GoodType.CLOTH)

    def test_total_exclude(self):
        """Test totals that skip some goods."""
        counts = GoodCounts(5)
        counts.set(GoodType.CAMEL, 3)
        counts.set(GoodType.LEATHER, 2)

        assert counts.total() == 5
        assert counts.total(exclude=(GoodType.CAMEL,)) == 2

    def test_to_dict_in_enum_order(self):
        """Test that non-zero counts follow enumeration order."""
        counts = GoodCounts(5)
        counts.set(GoodType.LEATHER, 1)
        counts.set(GoodType.DIAMONDS, 1)

        assert list(counts.to_dict().items()) == [("DIAMONDS", 1), ("LEATHER", 1)]

    def test_copy_is_independent(self):
        """Test that copies do not share storage."""
        counts = GoodCounts(5)
        counts.set(GoodType.GOLD, 1)
        copy = counts.copy()
        copy.add(GoodType.GOLD)

        assert counts[GoodType.GOLD] == 1
        assert copy[GoodType.GOLD] == 2
        assert counts != copy


class TestCounter:
    """Tests for Counter class."""

    def test_increment_decrement(self):
        """Test changing the value within bounds."""
        counter = Counter(0, 0, 11)
        counter.increment(3)
        counter.decrement()
        assert counter.value == 2

    def test_bounds(self):
        """Test that leaving the bounds raises."""
        counter = Counter(0, 0, 3, name="Goods fully sold")
        with pytest.raises(InternalConsistencyError, match="Goods fully sold"):
            counter.increment(4)
        with pytest.raises(InternalConsistencyError):
            counter.decrement()


class TestTokenStack:
    """Tests for TokenStack class."""

    def test_pop_front_first(self):
        """Test that tokens come off the front in stack order."""
        stack = TokenStack([5, 5, 5, 7, 7])
        assert stack.pop(2) == [5, 5]
        assert stack.values == (5, 7, 7)
        assert stack.peek(2) == (5, 7)

    def test_underflow(self):
        """Test that popping more tokens than remain raises."""
        stack = TokenStack([1, 2])
        with pytest.raises(InternalConsistencyError):
            stack.pop(3)

    def test_shuffle_is_seeded(self):
        """Test that shuffling with the same seed gives the same order."""
        a = TokenStack([1, 1, 2, 2, 2, 3, 3])
        b = TokenStack([1, 1, 2, 2, 2, 3, 3])
        a.shuffle(random.Random(4))
        b.shuffle(random.Random(4))
        assert a == b
        assert sorted(a.values) == [1, 1, 2, 2, 2, 3, 3]

    def test_bonus_buckets(self):
        """Test bonus bucket keys for sale sizes."""
        assert bonus_bucket_for(2) is None
        assert bonus_bucket_for(3) == 3
        assert bonus_bucket_for(4) == 4
        assert bonus_bucket_for(5) == 5
        assert bonus_bucket_for(7) == 5


class TestActions:
    """Tests for action models."""

    def test_sell_equality(self):
        """Test that equal actions compare equal (frozen model)."""
        a = SellAction(player=0, good=GoodType.DIAMONDS, count=2)
        b = SellAction(player=0, good=GoodType.DIAMONDS, count=2)
        assert a == b
        assert a in [b]
        assert a != SellAction(player=1, good=GoodType.DIAMONDS, count=2)

    def test_sell_from_hand(self):
        """Test cards leaving the hand when wildcards are used."""
        action = SellAction(player=0, good=GoodType.CLOTH, count=4, wildcards=1)
        assert action.from_hand == 3
        assert "wildcard" in action.describe()

    def test_take_helpers(self):
        """Test camel and single take constructors."""
        camels = TakeAction.camels(1, 3)
        single = TakeAction.single(1, GoodType.SPICE)

        assert camels.is_camel_take
        assert camels.taken(GoodType.CAMEL) == 3
        assert camels.distinct_goods_taken == 0
        assert not single.is_camel_take
        assert single.distinct_goods_taken == 1

    def test_sell_and_take_differ(self):
        """Test that the two action kinds never compare equal."""
        sell = SellAction(player=0, good=GoodType.GOLD, count=2)
        take = TakeAction.single(0, GoodType.GOLD)
        assert sell != take
        assert sell.kind == "sell"
        assert take.kind == "take"
