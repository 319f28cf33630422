"""Base player class.

Defines the interface that every action-choosing player implements.
"""

from abc import ABC, abstractmethod

from jaipur.models.action import Action
from jaipur.models.state import MatchState


class Player(ABC):
    """Abstract base class for players.

    The engine passes a snapshot of the state and the list of legal
    actions. The returned action must be one of them.
    """

    name: str = "player"

    @abstractmethod
    def choose_action(self, state: MatchState, actions: list[Action]) -> Action:
        """Choose one action to play.

        Args:
            state: Snapshot of the current match state (safe to mutate)
            actions: Legal actions for this player, never empty

        Returns:
            One element of `actions`
        """
        pass

    def __str__(self) -> str:
        return self.name
