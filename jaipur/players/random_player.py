"""Uniform random player."""

import random

from jaipur.models.action import Action
from jaipur.models.state import MatchState
from jaipur.players.base import Player


class RandomPlayer(Player):
    """Chooses uniformly among legal actions with its own seeded generator."""

    name = "random"

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def choose_action(self, state: MatchState, actions: list[Action]) -> Action:
        return self.rng.choice(actions)
