"""Round and game lifecycle: round end, settlement and turn order."""

from __future__ import annotations

import logging
from typing import Callable

from jaipur.models.results import AppliedEffects, RoundResult
from jaipur.models.state import MatchState, MatchStatus, RoundPhase

from .setup import RoundInitializer

logger = logging.getLogger(__name__)


class LifecycleController:
    """Runs after every applied action.

    Moves the round through ACTIVE -> ENDING -> SETTLED, awards the camel
    bonus, counts round wins and either ends the match or deals the next
    round.
    """

    def __init__(self, initializer: RoundInitializer | None = None):
        """Initialize lifecycle controller.

        Args:
            initializer: Used to deal new rounds (created per match if not provided)
        """
        self.initializer = initializer

        self._on_action: Callable[[MatchState, AppliedEffects], None] | None = None
        self._on_round_over: Callable[[MatchState, AppliedEffects], None] | None = None
        self._on_round_start: Callable[[MatchState], None] | None = None
        self._on_game_over: Callable[[MatchState, AppliedEffects], None] | None = None

    def set_callbacks(
        self,
        on_action: Callable[[MatchState, AppliedEffects], None] | None = None,
        on_round_over: Callable[[MatchState, AppliedEffects], None] | None = None,
        on_round_start: Callable[[MatchState], None] | None = None,
        on_game_over: Callable[[MatchState, AppliedEffects], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_action: Called once the action is resolved, before any settlement
            on_round_over: Called with the settled round, before the next deal
            on_round_start: Called after a new round is dealt
            on_game_over: Called once the match has ended
        """
        self._on_action = on_action
        self._on_round_over = on_round_over
        self._on_round_start = on_round_start
        self._on_game_over = on_game_over

    def after_action(self, state: MatchState, effects: AppliedEffects) -> None:
        """Check for round end and advance the match.

        Called by the applier once the whole action has been resolved.

        Args:
            state: Match state, already mutated by the action
            effects: Effects of the action, updated in place
        """
        rs = state.round_state
        effects.round_end_triggered = rs.round_end_triggered

        if self._on_action:
            self._on_action(state, effects)

        if not self.round_should_end(state):
            self.end_player_turn(state)
            return

        rs.phase = RoundPhase.ENDING
        effects.round_result = self.settle_round(state)

        if self._on_round_over:
            self._on_round_over(state, effects)

        if state.is_over:
            effects.game_over = True
            if self._on_game_over:
                self._on_game_over(state, effects)
            return

        self.start_next_round(state)

    def round_should_end(self, state: MatchState) -> bool:
        """Check whether the current round has reached its end condition."""
        rs = state.round_state
        return (
            rs.round_end_triggered
            or rs.goods_sold.value >= state.config.goods_sold_round_end
        )

    def camel_bonus_player(self, state: MatchState) -> int | None:
        """Get the player with strictly the most camels.

        Returns:
            Player ID, or None if two or more players share the maximum
        """
        herds = [p.herd.value for p in state.players]
        most = max(herds)
        leaders = [i for i, herd in enumerate(herds) if herd == most]
        return leaders[0] if len(leaders) == 1 else None

    def rank_players(self, state: MatchState) -> list[int]:
        """Rank players for the round.

        Order: round score, then bonus tokens, then good tokens (all
        descending), then lowest player ID.
        """
        return sorted(
            range(state.num_players),
            key=lambda i: (
                -state.player(i).score,
                -state.player(i).bonus_tokens,
                -state.player(i).good_tokens,
                i,
            ),
        )

    def settle_round(self, state: MatchState) -> RoundResult:
        """Score the ending round and record its winner.

        Args:
            state: Match state whose round is ENDING

        Returns:
            RoundResult for the settled round
        """
        rs = state.round_state
        cfg = state.config

        bonus_player = self.camel_bonus_player(state)
        if bonus_player is not None:
            state.player(bonus_player).score += cfg.camel_bonus

        ranking = self.rank_players(state)
        winner = ranking[0]
        state.rounds_won[winner] += 1
        for p in state.players:
            state.total_scores[p.player_id] += p.score

        rs.phase = RoundPhase.SETTLED
        result = RoundResult(
            round_number=state.round_number,
            scores=tuple(p.score for p in state.players),
            herds=tuple(p.herd.value for p in state.players),
            camel_bonus_player=bonus_player,
            ranking=tuple(ranking),
            rounds_won=tuple(state.rounds_won),
        )
        state.round_results.append(result)

        logger.info(
            f"Round {state.round_number} settled: winner Player {winner}, "
            f"scores {list(result.scores)}, camel bonus {bonus_player}"
        )

        if state.rounds_won[winner] >= cfg.rounds_to_win:
            state.status = MatchStatus.ENDED
            state.winner = winner
            logger.info(
                f"Game over: Player {winner} wins with {state.rounds_won[winner]} rounds"
            )

        return result

    def start_next_round(self, state: MatchState, seed: int | None = None) -> None:
        """Deal the next round of an unfinished match."""
        initializer = self.initializer or RoundInitializer(state.config)
        state.round_number += 1
        initializer.new_round(state, seed)
        if self._on_round_start:
            self._on_round_start(state)

    def end_player_turn(self, state: MatchState) -> None:
        """Pass the turn to the next player."""
        rs = state.round_state
        rs.current_player = (rs.current_player + 1) % state.num_players
        rs.turn_number += 1
