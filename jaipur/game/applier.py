"""Action application: state mutation for sells and takes."""

import logging

from jaipur.errors import IllegalActionError, InternalConsistencyError
from jaipur.models.action import Action, SellAction, TakeAction
from jaipur.models.goods import GoodType
from jaipur.models.results import AppliedEffects
from jaipur.models.state import MatchState
from jaipur.models.tokens import bonus_bucket_for

from .lifecycle import LifecycleController
from .validator import ActionValidator

logger = logging.getLogger(__name__)


class ActionApplier:
    """Validates and applies actions, then hands over to the lifecycle."""

    def __init__(
        self,
        validator: ActionValidator | None = None,
        lifecycle: LifecycleController | None = None,
    ):
        """Initialize applier.

        Args:
            validator: ActionValidator instance (creates one if not provided)
            lifecycle: LifecycleController instance (creates one if not provided)
        """
        self.validator = validator or ActionValidator()
        self.lifecycle = lifecycle or LifecycleController()

    def apply(self, state: MatchState, action: Action) -> AppliedEffects:
        """Apply an action to the state in place.

        The round-end check runs only after the whole action is resolved.

        Args:
            state: Current match state
            action: Action for the current player

        Returns:
            AppliedEffects describing what changed

        Raises:
            IllegalActionError: If the action is not legal in this state
        """
        validation = self.validator.validate(state, action)
        if not validation.is_valid:
            raise IllegalActionError(validation.error_message)

        effects = AppliedEffects(action=action, player=action.player)
        if isinstance(action, SellAction):
            self._sell(state, action, effects)
        elif isinstance(action, TakeAction):
            self._take(state, action, effects)
        else:
            raise InternalConsistencyError(f"Unhandled action type: {type(action).__name__}")

        logger.debug(
            f"Round {state.round_number} turn {state.round_state.turn_number}: "
            f"{action} (+{effects.points})"
        )

        self.lifecycle.after_action(state, effects)
        return effects

    def _take(self, state: MatchState, action: TakeAction, effects: AppliedEffects) -> None:
        rs = state.round_state
        player = state.player(action.player)

        for good, amount in action.take:
            rs.market.remove(good, amount)
            if good == GoodType.CAMEL:
                player.herd.increment(amount)
            else:
                player.hand.add(good, amount)

        for good, amount in action.give:
            if good == GoodType.CAMEL:
                player.herd.decrement(amount)
            else:
                player.hand.remove(good, amount)
            rs.market.add(good, amount)

        if action.distinct_goods_taken >= 2:
            rs.round_end_triggered = True

        self._refill_market(state, effects)

    def _refill_market(self, state: MatchState, effects: AppliedEffects) -> None:
        rs = state.round_state
        while rs.market.total() < state.config.market_capacity:
            card = rs.draw()
            if card is None:
                logger.debug(f"Draw pile exhausted in round {state.round_number}")
                rs.round_end_triggered = True
                return
            rs.market.add(card)
            effects.refilled.append(card)

    def _sell(self, state: MatchState, action: SellAction, effects: AppliedEffects) -> None:
        rs = state.round_state
        player = state.player(action.player)

        player.hand.remove(action.good, action.from_hand)
        if action.wildcards:
            player.hand.remove(GoodType.WILDCARD, action.wildcards)
        rs.discarded += action.count

        stack = rs.good_tokens[action.good]
        had_tokens = not stack.is_empty()
        tokens = stack.pop(min(action.count, len(stack)))
        player.score += sum(tokens)
        player.good_tokens += len(tokens)
        effects.tokens = tokens

        if had_tokens and stack.is_empty():
            rs.goods_sold.increment()
            effects.stack_exhausted = True

        bucket = bonus_bucket_for(action.count)
        if bucket is not None and not rs.bonus_tokens[bucket].is_empty():
            bonus = rs.bonus_tokens[bucket].pop()[0]
            player.score += bonus
            player.bonus_tokens += 1
            effects.bonus = bonus


def apply(state: MatchState, action: Action) -> AppliedEffects:
    """Validate and apply `action` to `state` in place."""
    return ActionApplier().apply(state, action)
