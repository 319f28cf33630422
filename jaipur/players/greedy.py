"""Greedy heuristic player.

Strategy:
- Sell: take the sale worth the most points right now, counting the good
  tokens it would win and the average remaining bonus token
- Take: otherwise take the good whose next token is worth the most
- Camels: take camels when nothing else is worth doing
"""

from jaipur.models.action import Action, SellAction, TakeAction
from jaipur.models.goods import GoodType
from jaipur.models.state import MatchState
from jaipur.models.tokens import bonus_bucket_for
from jaipur.players.base import Player

# Sales worth less than this are postponed in favour of taking cards
MIN_SALE_VALUE = 5


def sale_value(state: MatchState, action: SellAction) -> float:
    """Estimate the points a sale would score now."""
    rs = state.round_state
    value = float(sum(rs.good_tokens[action.good].peek(action.count)))
    bucket = bonus_bucket_for(action.count)
    if bucket is not None:
        pool = rs.bonus_tokens[bucket].values
        if pool:
            value += sum(pool) / len(pool)
    # Wildcards are worth keeping for later sales
    return value - action.wildcards


def take_value(state: MatchState, action: TakeAction) -> float:
    """Estimate the value of taking cards from the market."""
    if action.is_camel_take:
        return 0.5 * action.taken(GoodType.CAMEL)
    rs = state.round_state
    value = 0.0
    for good, amount in action.take:
        if good == GoodType.WILDCARD:
            value += 3.0 * amount
        elif good.is_trade_good:
            stack = rs.good_tokens[good]
            value += float(stack.peek(1)[0]) * amount if len(stack) else 0.0
    return value


class GreedyPlayer(Player):
    """One-ply greedy player."""

    name = "greedy"

    def __init__(self, min_sale_value: float = MIN_SALE_VALUE):
        self.min_sale_value = min_sale_value

    def choose_action(self, state: MatchState, actions: list[Action]) -> Action:
        sells = [a for a in actions if isinstance(a, SellAction)]
        takes = [a for a in actions if isinstance(a, TakeAction)]

        if sells:
            best_sell = max(sells, key=lambda a: sale_value(state, a))
            if sale_value(state, best_sell) >= self.min_sale_value or not takes:
                return best_sell

        if takes:
            # max() keeps the first of equal values, so ties follow good-type order
            return max(takes, key=lambda a: take_value(state, a))

        return actions[0]
