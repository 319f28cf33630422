"""Legal action generation for the player to move."""

from jaipur.errors import InternalConsistencyError
from jaipur.models.action import Action, SellAction, TakeAction
from jaipur.models.goods import HAND_GOODS, TRADE_GOODS, GoodType
from jaipur.models.state import MatchState, RoundPhase


def sell_actions(state: MatchState, player_id: int) -> list[SellAction]:
    """Enumerate sales available to a player.

    Plain sales run from the good's minimum up to the number held. With
    customized rules, every held good can also be padded with 1..w
    wildcards, as long as the total reaches the minimum.

    Args:
        state: Current match state
        player_id: Player selling

    Returns:
        Sales in good-type order, then ascending quantity
    """
    cfg = state.config
    hand = state.player(player_id).hand
    wildcards = hand[GoodType.WILDCARD] if cfg.customized else 0

    actions: list[SellAction] = []
    for good in TRADE_GOODS:
        held = hand[good]
        if held == 0:
            continue
        threshold = cfg.min_sell[good]

        for count in range(threshold, held + 1):
            actions.append(SellAction(player=player_id, good=good, count=count))

        for used in range(1, wildcards + 1):
            if held + used >= threshold:
                actions.append(
                    SellAction(player=player_id, good=good, count=held + used, wildcards=used)
                )
    return actions


def take_actions(state: MatchState, player_id: int) -> list[TakeAction]:
    """Enumerate market takes available to a player.

    Camels are always taken all at once and ignore the hand limit. Other
    goods are taken one card at a time while the hand is below its limit.
    """
    market = state.round_state.market
    actions: list[TakeAction] = []

    camels = market[GoodType.CAMEL]
    if camels > 0:
        actions.append(TakeAction.camels(player_id, camels))

    if state.player(player_id).hand_size() < state.config.hand_limit:
        for good in HAND_GOODS:
            if market[good] > 0:
                actions.append(TakeAction.single(player_id, good))
    return actions


def legal_actions(state: MatchState) -> list[Action]:
    """Enumerate every legal action for the current player.

    Does not mutate `state`. A finished match has no legal actions and
    returns an empty list.

    Args:
        state: Current match state

    Returns:
        Sales first, then the camel take, then single-card takes

    Raises:
        InternalConsistencyError: If an active round offers no action
    """
    if state.is_over or state.round_state.phase != RoundPhase.ACTIVE:
        return []

    player_id = state.current_player
    actions: list[Action] = [*sell_actions(state, player_id), *take_actions(state, player_id)]
    if not actions:
        raise InternalConsistencyError(
            f"No legal action for player {player_id} "
            f"(round {state.round_number}, turn {state.round_state.turn_number})"
        )
    return actions
