"""Good types and bounded per-good counts."""

from enum import IntEnum
from typing import Iterator

from jaipur.errors import InternalConsistencyError


class GoodType(IntEnum):
    """Card good type (matches GoodCounts array indices).

    Enumeration order is the order used everywhere actions are generated.
    """

    DIAMONDS = 0
    GOLD = 1
    SILVER = 2
    CLOTH = 3
    SPICE = 4
    LEATHER = 5
    CAMEL = 6
    WILDCARD = 7  # Customized rules only

    @property
    def is_trade_good(self) -> bool:
        """Check if this good is sold for tokens."""
        return self not in (GoodType.CAMEL, GoodType.WILDCARD)

    @classmethod
    def parse(cls, value: "GoodType | str | int") -> "GoodType":
        """Parse a good type from its name (case-insensitive) or index."""
        if isinstance(value, GoodType):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown good type: {value!r}") from None
        return cls(value)


# Goods with a token stack, in enumeration order
TRADE_GOODS: tuple[GoodType, ...] = tuple(g for g in GoodType if g.is_trade_good)

# Goods that can sit in a player's hand (camels go to the herd)
HAND_GOODS: tuple[GoodType, ...] = tuple(g for g in GoodType if g != GoodType.CAMEL)

GOOD_NAMES = {
    GoodType.DIAMONDS: "Diamonds",
    GoodType.GOLD: "Gold",
    GoodType.SILVER: "Silver",
    GoodType.CLOTH: "Cloth",
    GoodType.SPICE: "Spice",
    GoodType.LEATHER: "Leather",
    GoodType.CAMEL: "Camel",
    GoodType.WILDCARD: "Wildcard",
}

NUM_GOOD_TYPES = len(GoodType)


class GoodCounts:
    """Fixed-size count array indexed by GoodType.

    Every slot is bounded to [0, limit]. A mutation that would leave the
    bounds raises InternalConsistencyError instead of clamping.
    """

    __slots__ = ("_counts", "limit", "name")

    def __init__(
        self,
        limit: int,
        name: str = "counts",
        counts: list[int] | None = None,
    ):
        """Initialize counts.

        Args:
            limit: Maximum value of any single slot.
            name: Label used in error messages.
            counts: Initial values (all zero if not provided).
        """
        self.limit = limit
        self.name = name
        self._counts = list(counts) if counts else [0] * NUM_GOOD_TYPES
        if len(self._counts) != NUM_GOOD_TYPES:
            raise InternalConsistencyError(
                f"{name}: expected {NUM_GOOD_TYPES} slots, got {len(self._counts)}"
            )
        for good in GoodType:
            self._check(good, self._counts[good])

    def _check(self, good: GoodType, value: int) -> None:
        if value < 0 or value > self.limit:
            raise InternalConsistencyError(
                f"{self.name}: {GOOD_NAMES[GoodType(good)]} count {value} "
                f"outside [0, {self.limit}]"
            )

    def get(self, good: GoodType) -> int:
        """Get the count for a good."""
        return self._counts[good]

    def set(self, good: GoodType, value: int) -> None:
        """Set the count for a good."""
        self._check(good, value)
        self._counts[good] = value

    def add(self, good: GoodType, amount: int = 1) -> None:
        """Add to the count for a good."""
        self.set(good, self._counts[good] + amount)

    def remove(self, good: GoodType, amount: int = 1) -> None:
        """Remove from the count for a good."""
        self.set(good, self._counts[good] - amount)

    def clear(self) -> None:
        """Reset all counts to zero."""
        self._counts = [0] * NUM_GOOD_TYPES

    def total(self, exclude: tuple[GoodType, ...] = ()) -> int:
        """Sum of all counts, optionally excluding some goods."""
        return sum(c for g, c in zip(GoodType, self._counts) if g not in exclude)

    def to_dict(self) -> dict[str, int]:
        """Non-zero counts keyed by good name."""
        return {g.name: c for g, c in zip(GoodType, self._counts) if c > 0}

    def copy(self) -> "GoodCounts":
        """Create an independent copy."""
        return GoodCounts(self.limit, self.name, self._counts)

    def __getitem__(self, good: GoodType) -> int:
        return self._counts[good]

    def __iter__(self) -> Iterator[tuple[GoodType, int]]:
        return iter(zip(GoodType, self._counts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GoodCounts):
            return NotImplemented
        return self.limit == other.limit and self._counts == other._counts

    def __str__(self) -> str:
        items = [f"{GOOD_NAMES[g]}x{c}" for g, c in self if c > 0]
        return "[" + ", ".join(items) + "]" if items else "[]"

    def __repr__(self) -> str:
        return f"GoodCounts({self.name!r}, {self._counts!r}, limit={self.limit})"
