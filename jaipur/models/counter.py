"""Bounded integer counter."""

import sys

from jaipur.errors import InternalConsistencyError


class Counter:
    """Integer value constrained to [minimum, maximum]."""

    __slots__ = ("value", "minimum", "maximum", "name")

    def __init__(
        self,
        value: int = 0,
        minimum: int = 0,
        maximum: int = sys.maxsize,
        name: str = "counter",
    ):
        self.minimum = minimum
        self.maximum = maximum
        self.name = name
        self.value = minimum
        self.set(value)

    def set(self, value: int) -> None:
        """Set the value, raising if it leaves the bounds."""
        if value < self.minimum or value > self.maximum:
            raise InternalConsistencyError(
                f"{self.name}: value {value} outside [{self.minimum}, {self.maximum}]"
            )
        self.value = value

    def increment(self, amount: int = 1) -> None:
        self.set(self.value + amount)

    def decrement(self, amount: int = 1) -> None:
        self.set(self.value - amount)

    def copy(self) -> "Counter":
        return Counter(self.value, self.minimum, self.maximum, self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Counter):
            return NotImplemented
        return (self.value, self.minimum, self.maximum) == (
            other.value,
            other.minimum,
            other.maximum,
        )

    def __repr__(self) -> str:
        return f"Counter({self.name!r}, {self.value}, [{self.minimum}, {self.maximum}])"
