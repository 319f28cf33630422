"""Lifecycle events published to read-only listeners."""

from abc import ABC, abstractmethod
from enum import Enum

from jaipur.models.action import Action
from jaipur.models.state import MatchState


class GameEvent(str, Enum):
    """Events published by the game engine."""

    ROUND_STARTED = "round_started"
    ACTION_APPLIED = "action_applied"
    ROUND_OVER = "round_over"
    GAME_OVER = "game_over"


class GameListener(ABC):
    """Observer of engine transitions.

    Listeners receive the live state after the fact and must only read it.
    """

    # Events this listener is notified of
    events: frozenset[GameEvent] = frozenset(GameEvent)

    @abstractmethod
    def on_event(self, event: GameEvent, state: MatchState, action: Action | None) -> None:
        """Handle an event.

        Args:
            event: Event type
            state: Match state right after the transition
            action: Action that caused the transition (None for ROUND_STARTED
                of the first round)
        """
        ...
