"""Game engine for Jaipur."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from jaipur.errors import IllegalActionError
from jaipur.models.action import Action
from jaipur.models.results import AppliedEffects
from jaipur.models.rules import JaipurConfig
from jaipur.models.state import MatchState

from .applier import ActionApplier
from .events import GameEvent, GameListener
from .generator import legal_actions
from .lifecycle import LifecycleController
from .setup import RoundInitializer
from .validator import ActionValidator

if TYPE_CHECKING:
    from jaipur.logging import GameLogger
    from jaipur.players.base import Player

logger = logging.getLogger(__name__)


class GameEngine:
    """Main game engine for Jaipur.

    Wires the initializer, validator, applier and lifecycle controller
    together and publishes lifecycle events to registered listeners.
    """

    def __init__(
        self,
        config: JaipurConfig | None = None,
        listeners: Sequence[GameListener] | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Rules parameters (uses defaults if not provided)
            listeners: Listeners notified of lifecycle events
            game_logger: GameLogger instance for detailed logging
        """
        self.config = config or JaipurConfig()
        self.listeners: list[GameListener] = list(listeners or [])
        self.game_logger = game_logger
        if game_logger:
            self.listeners.append(game_logger)

        self.initializer = RoundInitializer(self.config)
        self.validator = ActionValidator()
        self.lifecycle = LifecycleController(self.initializer)
        self.applier = ActionApplier(self.validator, self.lifecycle)
        self.lifecycle.set_callbacks(
            on_action=self._handle_action,
            on_round_over=self._handle_round_over,
            on_round_start=self._handle_round_start,
            on_game_over=self._handle_game_over,
        )

        self._on_game_end: Callable[[int, MatchState], None] | None = None

    def add_listener(self, listener: GameListener) -> None:
        """Register a listener for lifecycle events."""
        self.listeners.append(listener)

    def set_callbacks(
        self,
        on_game_end: Callable[[int, MatchState], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_game_end: Called when a game of `run_games` ends (game_number, state)
        """
        self._on_game_end = on_game_end

    def new_match(self, player_count: int, seed: int) -> MatchState:
        """Create a match and publish the start of its first round.

        Raises:
            InvalidConfiguration: If the rules cannot support `player_count`
        """
        state = self.initializer.new_match(player_count, seed)
        self._publish(GameEvent.ROUND_STARTED, state, None)
        return state

    def legal_actions(self, state: MatchState) -> list[Action]:
        """Enumerate legal actions for the current player."""
        return legal_actions(state)

    def step(self, state: MatchState, action: Action) -> AppliedEffects:
        """Apply one action and publish the resulting events.

        Raises:
            IllegalActionError: If the action is not legal in this state
        """
        return self.applier.apply(state, action)

    def play_match(self, players: Sequence[Player], seed: int) -> MatchState:
        """Play a full match between `players`.

        Args:
            players: One player per seat, in turn order
            seed: Match seed

        Returns:
            Final (ended) match state

        Raises:
            IllegalActionError: If a player returns an action it was not offered
        """
        state = self.new_match(len(players), seed)

        while not state.is_over:
            actions = self.legal_actions(state)
            player = players[state.current_player]
            action = player.choose_action(state.clone(), list(actions))

            if action not in actions:
                raise IllegalActionError(
                    f"Player {state.current_player} ({player}) chose an action "
                    f"that was not offered: {action}"
                )
            self.step(state, action)

        return state

    def run_games(
        self,
        players: Sequence[Player],
        num_games: int,
        seed: int = 0,
    ) -> dict[int, int]:
        """Run multiple matches with the same players.

        Game `i` (0-based) is seeded with `seed + i`.

        Args:
            players: One player per seat
            num_games: Number of matches
            seed: Seed of the first match

        Returns:
            Dict of player_id -> matches won
        """
        wins: dict[int, int] = {i: 0 for i in range(len(players))}

        if self.game_logger:
            self.game_logger.log_session_start(players)

        for game_num in range(1, num_games + 1):
            logger.info(f"Starting game {game_num}/{num_games}")
            state = self.play_match(players, seed + game_num - 1)

            if state.winner is not None:
                wins[state.winner] += 1
            if self._on_game_end:
                self._on_game_end(game_num, state)

        if self.game_logger:
            self.game_logger.log_session_end(num_games, wins)

        return wins

    def _publish(self, event: GameEvent, state: MatchState, action: Action | None) -> None:
        for listener in self.listeners:
            if event in listener.events:
                listener.on_event(event, state, action)

    def _handle_action(self, state: MatchState, effects: AppliedEffects) -> None:
        self._publish(GameEvent.ACTION_APPLIED, state, effects.action)

    def _handle_round_over(self, state: MatchState, effects: AppliedEffects) -> None:
        self._publish(GameEvent.ROUND_OVER, state, effects.action)

    def _handle_round_start(self, state: MatchState) -> None:
        self._publish(GameEvent.ROUND_STARTED, state, None)

    def _handle_game_over(self, state: MatchState, effects: AppliedEffects) -> None:
        self._publish(GameEvent.GAME_OVER, state, effects.action)
