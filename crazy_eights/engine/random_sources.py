from dataclasses import dataclass
from typing import Self

import numpy as np


@dataclass
class RandomSources:
    """
    Independent generators for every random decision made during a game,
    so that each of them can be fixed separately in tests.

    Args:
        shuffle: Shuffles the deck
        first_player: Picks the player who is dealt to first
        reinsert: Picks where a wild up card goes back into the deck
        strategy: Orders the computer's match-by-suit and match-by-rank strategies
        suit_tiebreak: Breaks ties when the computer declares a suit
    """
    shuffle: np.random.Generator
    first_player: np.random.Generator
    reinsert: np.random.Generator
    strategy: np.random.Generator
    suit_tiebreak: np.random.Generator

    @classmethod
    def from_seed(cls, random_state: int | np.int_ | None = None) -> Self:
        rng = np.random.default_rng(random_state)
        next_seed = lambda: rng.integers(999999)
        return cls(
            shuffle=np.random.default_rng(next_seed()),
            first_player=np.random.default_rng(next_seed()),
            reinsert=np.random.default_rng(next_seed()),
            strategy=np.random.default_rng(next_seed()),
            suit_tiebreak=np.random.default_rng(next_seed()),
        )
