"""Analytics listeners that collect one record per matching event."""

from abc import abstractmethod
from typing import Any

from jaipur.game.events import GameEvent, GameListener
from jaipur.models.action import Action, TakeAction
from jaipur.models.state import MatchState


class Metric(GameListener):
    """Base class for metrics.

    Subclasses set `events` and implement `_run`, returning a record or
    None to skip the event. Metrics only read the state.
    """

    name = "metric"

    def __init__(self):
        self.records: list[dict[str, Any]] = []

    def on_event(self, event: GameEvent, state: MatchState, action: Action | None) -> None:
        record = self._run(event, state, action)
        if record is not None:
            self.records.append({"event": event.value, "round": state.round_number, **record})

    @abstractmethod
    def _run(
        self, event: GameEvent, state: MatchState, action: Action | None
    ) -> dict[str, Any] | None:
        pass

    def reset(self) -> None:
        """Drop collected records."""
        self.records.clear()


class RoundScoreDifference(Metric):
    """Mean absolute score difference between adjacent players at round end."""

    name = "round_score_difference"
    events = frozenset({GameEvent.ROUND_OVER})

    def _run(
        self, event: GameEvent, state: MatchState, action: Action | None
    ) -> dict[str, Any] | None:
        scores = state.round_results[-1].scores
        diffs = [abs(scores[i] - scores[i + 1]) for i in range(len(scores) - 1)]
        return {"score_difference": sum(diffs) / len(diffs)}


class PurchaseFromMarket(Metric):
    """Goods taken from the market."""

    name = "purchase_from_market"
    events = frozenset({GameEvent.ACTION_APPLIED})

    def _run(
        self, event: GameEvent, state: MatchState, action: Action | None
    ) -> dict[str, Any] | None:
        if not isinstance(action, TakeAction):
            return None
        good, count = action.take[0]
        return {"player": action.player, "good": good.name, "count": count}


class WinGamesFirstPlayer(Metric):
    """Whether the first player won the game."""

    name = "win_games_first_player"
    events = frozenset({GameEvent.GAME_OVER})

    def _run(
        self, event: GameEvent, state: MatchState, action: Action | None
    ) -> dict[str, Any] | None:
        return {"first_player_won": 1 if state.winner == 0 else 0}


class WinRoundsWithMoreCamels(Metric):
    """Whether the player with the most camels won the round.

    Rounds where the camel lead is tied, or nobody has camels, record 0.
    """

    name = "win_rounds_with_more_camels"
    events = frozenset({GameEvent.ROUND_OVER})

    def _run(
        self, event: GameEvent, state: MatchState, action: Action | None
    ) -> dict[str, Any] | None:
        result = state.round_results[-1]
        leader = result.camel_bonus_player
        return {
            "camel_leader": leader,
            "camels": max(result.herds),
            "won": 1 if leader is not None and result.winner == leader else 0,
        }


def default_metrics() -> list[Metric]:
    """Create one instance of every metric."""
    return [
        RoundScoreDifference(),
        PurchaseFromMarket(),
        WinGamesFirstPlayer(),
        WinRoundsWithMoreCamels(),
    ]


def summarize(metrics: list[Metric]) -> dict[str, float]:
    """Average the numeric field of each metric's records."""
    fields = {
        "round_score_difference": "score_difference",
        "purchase_from_market": "count",
        "win_games_first_player": "first_player_won",
        "win_rounds_with_more_camels": "won",
    }
    summary: dict[str, float] = {}
    for metric in metrics:
        field = fields.get(metric.name)
        if field is None or not metric.records:
            continue
        values = [r[field] for r in metric.records]
        summary[metric.name] = sum(values) / len(values)
    return summary


__all__ = [
    "Metric",
    "PurchaseFromMarket",
    "RoundScoreDifference",
    "WinGamesFirstPlayer",
    "WinRoundsWithMoreCamels",
    "default_metrics",
    "summarize",
]
