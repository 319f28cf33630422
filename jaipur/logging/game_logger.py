"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from pydantic import BaseModel

from jaipur.game.events import GameEvent, GameListener
from jaipur.models.action import Action
from jaipur.models.state import MatchState
from jaipur.players.base import Player

from .formatters import format_action, format_goods, snapshot


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger(GameListener):
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    Register it with the engine to record every round start, action,
    round end and game end.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self._game = 0

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def on_event(self, event: GameEvent, state: MatchState, action: Action | None) -> None:
        if event == GameEvent.ROUND_STARTED:
            if state.round_number == 1:
                self._game += 1
            self.log_round_start(state)
        elif event == GameEvent.ACTION_APPLIED and action is not None:
            self.log_action(state, action)
        elif event == GameEvent.ROUND_OVER:
            self.log_round_end(state)
        elif event == GameEvent.GAME_OVER:
            self.log_game_end(state)

    def log_session_start(self, players: Sequence[Player]) -> None:
        """Log session start with player information.

        Args:
            players: Players in seat order.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "players": [
                {"id": i, "name": p.name}
                for i, p in enumerate(players)
            ],
        })

    def log_round_start(self, state: MatchState) -> None:
        """Log a freshly dealt round.

        Args:
            state: State right after the deal.
        """
        rs = state.round_state
        self._write({
            "type": "round_start",
            "game": self._game,
            "seed": state.seed,
            "round": state.round_number,
            "market": format_goods(rs.market),
            "hands": {str(p.player_id): format_goods(p.hand) for p in rs.players},
            "herds": {str(p.player_id): p.herd.value for p in rs.players},
            "first_player": rs.current_player,
        })

    def log_action(self, state: MatchState, action: Action) -> None:
        """Log a resolved action.

        Args:
            state: State after the action, before turn change or settlement.
            action: Action that was applied.
        """
        rs = state.round_state
        self._write({
            "type": "action",
            "game": self._game,
            "round": state.round_number,
            "turn": rs.turn_number,
            "player": action.player,
            "action": format_action(action),
            "market": format_goods(rs.market),
            "scores": [p.score for p in rs.players],
            "round_end_triggered": rs.round_end_triggered,
        })

    def log_round_end(self, state: MatchState) -> None:
        """Log a settled round.

        Args:
            state: State with the settled round still in place.
        """
        result = state.round_results[-1]
        self._write({
            "type": "round_end",
            "game": self._game,
            "round": result.round_number,
            "scores": list(result.scores),
            "herds": list(result.herds),
            "camel_bonus_player": result.camel_bonus_player,
            "ranking": list(result.ranking),
            "rounds_won": list(result.rounds_won),
        })

    def log_game_end(self, state: MatchState) -> None:
        """Log game end with results.

        Args:
            state: Final match state.
        """
        self._write({
            "type": "game_end",
            "game": self._game,
            "winner": state.winner,
            "rounds": state.round_number,
            "rounds_won": list(state.rounds_won),
            "total_scores": list(state.total_scores),
            "final_state": snapshot(state),
        })

    def log_session_end(self, total_games: int, wins: dict[int, int]) -> None:
        """Log session end with final results.

        Args:
            total_games: Total number of games played.
            wins: Dict mapping player_id to games won.
        """
        ranking = sorted(wins, key=lambda p: (-wins[p], p))
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "wins": {str(k): v for k, v in wins.items()},
            "ranking": ranking,
        })
