"""Good-token stacks and bonus-token buckets."""

import random
from typing import Iterable

from jaipur.errors import InternalConsistencyError

# Sale sizes that earn a bonus token; sales above the last size use the last bucket
BONUS_SIZES: tuple[int, ...] = (3, 4, 5)


class TokenStack:
    """Ordered token values popped from the front.

    Tokens are popped front-first in the configured order. Stacks never
    grow after creation.
    """

    __slots__ = ("_values", "name")

    def __init__(self, values: Iterable[int] = (), name: str = "tokens"):
        self._values: list[int] = list(values)
        self.name = name

    @property
    def values(self) -> tuple[int, ...]:
        """Remaining token values, front first."""
        return tuple(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def peek(self, count: int) -> tuple[int, ...]:
        """Values of the next `count` tokens without removing them."""
        return tuple(self._values[:count])

    def pop(self, count: int = 1) -> list[int]:
        """Remove and return `count` tokens from the front.

        Raises:
            InternalConsistencyError: If fewer than `count` tokens remain.
        """
        if count < 0 or count > len(self._values):
            raise InternalConsistencyError(
                f"{self.name}: cannot pop {count} of {len(self._values)} tokens"
            )
        taken = self._values[:count]
        del self._values[:count]
        return taken

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self._values)

    def copy(self) -> "TokenStack":
        return TokenStack(self._values, self.name)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenStack):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"TokenStack({self.name!r}, {self._values!r})"


def bonus_bucket_for(count: int) -> int | None:
    """Get the bonus bucket key for a sale of `count` cards.

    Returns:
        3, 4 or 5 for sales of 3, 4 or 5+ cards; None below 3.
    """
    if count < BONUS_SIZES[0]:
        return None
    return min(count, BONUS_SIZES[-1])
