"""Formatters for game log output and read-only state snapshots."""

from typing import Any

from jaipur.models.action import Action, GoodAmounts, SellAction
from jaipur.models.goods import GoodCounts
from jaipur.models.state import MatchState


def format_goods(counts: GoodCounts) -> str:
    """Format good counts to a compact string.

    Args:
        counts: Counts to format.

    Returns:
        Comma-separated "NAME:count" pairs (e.g., "DIAMONDS:2,CAMEL:3").
        Empty string if all counts are zero.
    """
    return ",".join(f"{name}:{n}" for name, n in counts.to_dict().items())


def format_amounts(amounts: GoodAmounts) -> dict[str, int]:
    """Format (good, amount) pairs to a dict keyed by good name."""
    return {good.name: n for good, n in amounts}


def format_action(action: Action) -> dict[str, Any]:
    """Format an action to a JSON-serializable dict."""
    if isinstance(action, SellAction):
        return {
            "kind": action.kind,
            "good": action.good.name,
            "count": action.count,
            "wildcards": action.wildcards,
        }
    return {
        "kind": action.kind,
        "take": format_amounts(action.take),
        "give": format_amounts(action.give),
    }


def snapshot(state: MatchState) -> dict[str, Any]:
    """Build a read-only, JSON-serializable projection of the state.

    Renderers and log readers consume this instead of the live state.

    Args:
        state: Match state to project.

    Returns:
        Dict with the market, per-player zones, token stacks and match status.
    """
    rs = state.round_state
    return {
        "round": state.round_number,
        "turn": rs.turn_number,
        "phase": rs.phase.value,
        "status": state.status.value,
        "current_player": rs.current_player,
        "winner": state.winner,
        "market": rs.market.to_dict(),
        "draw_pile": len(rs.draw_pile),
        "discarded": rs.discarded,
        "goods_sold": rs.goods_sold.value,
        "round_end_triggered": rs.round_end_triggered,
        "good_tokens": {g.name: list(s.values) for g, s in rs.good_tokens.items()},
        "bonus_tokens": {str(n): len(s) for n, s in rs.bonus_tokens.items()},
        "players": [
            {
                "id": p.player_id,
                "hand": p.hand.to_dict(),
                "herd": p.herd.value,
                "score": p.score,
                "good_tokens": p.good_tokens,
                "bonus_tokens": p.bonus_tokens,
                "rounds_won": state.rounds_won[p.player_id],
                "total_score": state.total_scores[p.player_id],
            }
            for p in rs.players
        ],
    }
