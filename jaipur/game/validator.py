"""Action re-validation before mutation."""

from dataclasses import dataclass

from jaipur.models.action import Action, SellAction, TakeAction
from jaipur.models.goods import GOOD_NAMES, GoodType
from jaipur.models.state import MatchState, RoundPhase

from .generator import sell_actions, take_actions


@dataclass
class ValidationResult:
    """Result of action validation."""

    is_valid: bool
    error_message: str = ""


class ActionValidator:
    """Checks an action against the current state.

    Actions built by hand or kept from an earlier state are rejected with a
    specific message. Anything that passes the specific checks must still
    be one of the actions the generator would issue now.
    """

    def validate(self, state: MatchState, action: Action) -> ValidationResult:
        """Validate an action.

        Args:
            state: Current match state
            action: Action to check

        Returns:
            ValidationResult
        """
        if state.is_over:
            return ValidationResult(is_valid=False, error_message="Match already ended")

        if state.round_state.phase != RoundPhase.ACTIVE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Round {state.round_number} is {state.round_state.phase.value}",
            )

        if action.player != state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Not player {action.player}'s turn "
                    f"(current player is {state.current_player})"
                ),
            )

        if isinstance(action, SellAction):
            return self._validate_sell(state, action)
        if isinstance(action, TakeAction):
            return self._validate_take(state, action)
        return ValidationResult(is_valid=False, error_message=f"Unknown action: {action!r}")

    def _validate_sell(self, state: MatchState, action: SellAction) -> ValidationResult:
        cfg = state.config
        hand = state.player(action.player).hand
        name = GOOD_NAMES[action.good]

        if not action.good.is_trade_good:
            return ValidationResult(is_valid=False, error_message=f"{name} cannot be sold")

        if action.wildcards < 0 or action.from_hand < 1:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid sale of {action.count} {name} "
                f"with {action.wildcards} wildcards",
            )

        if action.wildcards and not cfg.customized:
            return ValidationResult(
                is_valid=False, error_message="Wildcards require customized rules"
            )

        if action.count < cfg.min_sell[action.good]:
            return ValidationResult(
                is_valid=False,
                error_message=f"Must sell at least {cfg.min_sell[action.good]} {name}",
            )

        if hand[action.good] < action.from_hand:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player holds {hand[action.good]} {name}, "
                f"cannot sell {action.from_hand}",
            )

        if hand[GoodType.WILDCARD] < action.wildcards:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player holds {hand[GoodType.WILDCARD]} wildcards",
            )

        if action not in sell_actions(state, action.player):
            return ValidationResult(
                is_valid=False, error_message=f"Sale is not legal: {action.describe()}"
            )

        return ValidationResult(is_valid=True)

    def _validate_take(self, state: MatchState, action: TakeAction) -> ValidationResult:
        market = state.round_state.market

        if not action.take:
            return ValidationResult(is_valid=False, error_message="Take with no cards")

        for good, amount in action.take:
            if amount < 1 or market[good] < amount:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Market holds {market[good]} {GOOD_NAMES[good]}, "
                    f"cannot take {amount}",
                )

        if action.give:
            return ValidationResult(
                is_valid=False, error_message="Taking with give-back is not available"
            )

        if action not in take_actions(state, action.player):
            if action.is_camel_take:
                message = "Camels must be taken all at once"
            elif state.player(action.player).hand_size() >= state.config.hand_limit:
                message = f"Hand limit {state.config.hand_limit} reached"
            else:
                message = f"Take is not legal: {action.describe()}"
            return ValidationResult(is_valid=False, error_message=message)

        return ValidationResult(is_valid=True)
