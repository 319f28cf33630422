"""Main entry point for the Jaipur simulator."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from jaipur.config import create_rules, load_config
from jaipur.game.engine import GameEngine
from jaipur.logging import GameLogConfig, GameLogger
from jaipur.metrics import default_metrics, summarize
from jaipur.models.state import MatchState
from jaipur.players import Player, create_player
from jaipur.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, players: list[Player]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are kept in seat order.

    Args:
        log_dir: Directory for log files.
        players: Players in seat order.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(p.name for p in players)
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Jaipur trading card game simulator"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Seed of the first game (overrides config)",
    )
    parser.add_argument(
        "-p",
        "--players",
        nargs="+",
        help="Player types in seat order: random, greedy (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show final hands after each game",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    parser.add_argument(
        "--customized",
        action="store_true",
        help="Play with customized rules (wildcards in the deck)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Collect and print game metrics",
    )

    args = parser.parse_args()

    try:
        # Load config
        config = load_config(args.config)

        # Apply command-line overrides
        if args.num_games:
            config.game.num_games = args.num_games
        if args.seed is not None:
            config.game.seed = args.seed
        if args.players:
            config.game.players = args.players
        if args.verbose:
            config.logging.level = "DEBUG"
        if args.show_hands:
            config.logging.show_hands = True
        if args.customized:
            config.rules = create_rules(**{**config.rules.model_dump(), "customized": True})

        # Setup logging
        setup_logging(config.logging.level)

        display = GameDisplay(show_hands=config.logging.show_hands)

        players = [
            create_player(kind, seed=config.game.seed + seat)
            for seat, kind in enumerate(config.game.players)
        ]
        config.rules.validate_for_players(len(players))

        # Determine game log directory (CLI argument overrides config file)
        game_log_enabled = args.game_log is not None or config.game_log.enabled
        game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

        print("Jaipur simulator starting...")
        print(f"Games: {config.game.num_games}")
        print(f"Seed: {config.game.seed}")
        print(f"Customized rules: {config.rules.customized}")
        display.print_players(players)

        if game_log_enabled:
            log_path = generate_log_filename(game_log_dir, players)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            print(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        metrics = default_metrics() if args.metrics else []

        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(config.rules, metrics, game_logger)

            def on_game_end(game_num: int, state: MatchState) -> None:
                display.print_game_end(game_num, state, players)

            engine.set_callbacks(on_game_end=on_game_end)

            print(f"Starting {config.game.num_games} games...")
            display.print_separator()

            wins = engine.run_games(players, config.game.num_games, config.game.seed)

            display.print_final_results(wins, players)

        if metrics:
            print("\nMetrics:")
            for name, value in summarize(metrics).items():
                print(f"  {name}: {value:.3f}")

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Simulation error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
