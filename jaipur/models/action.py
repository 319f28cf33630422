"""Action models.

Actions form a closed union (SellAction | TakeAction) tagged by `kind`.
They are frozen, so an action can be compared against the list the
generator issued.
"""

from typing import Literal, Union

from pydantic import BaseModel

from .goods import GOOD_NAMES, GoodType

GoodAmounts = tuple[tuple[GoodType, int], ...]


class SellAction(BaseModel, frozen=True):
    """Sell cards of one good type, optionally padded with wildcards."""

    kind: Literal["sell"] = "sell"
    player: int
    good: GoodType
    count: int  # Total cards sold (wildcards included)
    wildcards: int = 0

    @property
    def from_hand(self) -> int:
        """Cards of `good` itself leaving the hand."""
        return self.count - self.wildcards

    def describe(self) -> str:
        text = f"sell {self.count} {GOOD_NAMES[self.good]}"
        if self.wildcards:
            text += f" ({self.wildcards} wildcard)"
        return text

    def __str__(self) -> str:
        return f"P{self.player} {self.describe()}"


class TakeAction(BaseModel, frozen=True):
    """Take cards from the market, optionally giving cards back.

    `take` and `give` are (good, amount) pairs sorted by good type.
    """

    kind: Literal["take"] = "take"
    player: int
    take: GoodAmounts
    give: GoodAmounts = ()

    @classmethod
    def camels(cls, player: int, count: int) -> "TakeAction":
        """Take all `count` camels from the market."""
        return cls(player=player, take=((GoodType.CAMEL, count),))

    @classmethod
    def single(cls, player: int, good: GoodType) -> "TakeAction":
        """Take one non-camel card from the market."""
        return cls(player=player, take=((good, 1),))

    def taken(self, good: GoodType) -> int:
        """Number of `good` cards taken from the market."""
        return sum(n for g, n in self.take if g == good)

    @property
    def is_camel_take(self) -> bool:
        return any(g == GoodType.CAMEL for g, _ in self.take)

    @property
    def distinct_goods_taken(self) -> int:
        """Distinct non-camel goods taken."""
        return len({g for g, n in self.take if g != GoodType.CAMEL and n > 0})

    def describe(self) -> str:
        parts = [f"{n} {GOOD_NAMES[g]}" for g, n in self.take]
        text = "take " + ", ".join(parts)
        if self.give:
            text += " give " + ", ".join(f"{n} {GOOD_NAMES[g]}" for g, n in self.give)
        return text

    def __str__(self) -> str:
        return f"P{self.player} {self.describe()}"


Action = Union[SellAction, TakeAction]
