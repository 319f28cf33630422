"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from jaipur.models.results import RoundResult
    from jaipur.models.state import MatchState
    from jaipur.players.base import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display simulation progress to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show player hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_players(self, players: Sequence["Player"]) -> None:
        """Print the seating."""
        print("Players:")
        for i, player in enumerate(players):
            print(f"  Player {i}: {player.name}")
        print()

    def print_round_end(self, result: "RoundResult") -> None:
        """Print a settled round."""
        bonus = (
            f"Player {result.camel_bonus_player}"
            if result.camel_bonus_player is not None
            else "none (tie)"
        )
        scores = " | ".join(f"P{i}:{s}" for i, s in enumerate(result.scores))
        print(f"  Round {result.round_number}: {scores}  camel bonus: {bonus}  "
              f"-> Player {result.winner}")

    def print_hands(self, state: "MatchState") -> None:
        """Print hands and herds for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("  Hands:")
        for player in state.players:
            print(f"    P{player.player_id}: {player.hand}  herd: {player.herd.value}")

    def print_game_end(
        self,
        game_number: int,
        state: "MatchState",
        players: Sequence["Player"],
    ) -> None:
        """Print game end results."""
        print(f"\nGame {game_number} finished after {state.round_number} rounds!")
        for result in state.round_results:
            self.print_round_end(result)
        self.print_hands(state)
        if state.winner is not None:
            print(f"  Winner: Player {state.winner} ({players[state.winner].name})")

    def print_final_results(
        self,
        wins: dict[int, int],
        players: Sequence["Player"],
    ) -> None:
        """Print final results."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        # Sort by wins descending
        sorted_players = sorted(wins.items(), key=lambda x: x[1], reverse=True)

        for rank, (player_id, won) in enumerate(sorted_players, 1):
            player = players[player_id]
            print(f"  #{rank}: Player {player_id} ({player.name}) - {won} wins")
