"""Action-choosing players."""

from jaipur.players.base import Player
from jaipur.players.greedy import GreedyPlayer
from jaipur.players.random_player import RandomPlayer

PLAYER_TYPES: dict[str, type[Player]] = {
    "greedy": GreedyPlayer,
    "random": RandomPlayer,
}


def create_player(kind: str, seed: int | None = None) -> Player:
    """Create a built-in player by name.

    Args:
        kind: "greedy" or "random"
        seed: Seed for players that use randomness

    Raises:
        ValueError: If `kind` is unknown
    """
    key = kind.strip().lower()
    if key not in PLAYER_TYPES:
        raise ValueError(f"Unknown player type: {kind!r} (choose from {sorted(PLAYER_TYPES)})")
    if key == "random":
        return RandomPlayer(seed)
    return PLAYER_TYPES[key]()


__all__ = ["GreedyPlayer", "PLAYER_TYPES", "Player", "RandomPlayer", "create_player"]
