from typing import Self

import numpy as np

from .card import Card
from .constants import Suit, NUMBER_OF_DECKS
from .errors import PreconditionViolation


def create_deck(deck_count: int = NUMBER_OF_DECKS,
                rng: np.random.Generator | None = None) -> list[Card]:
    """
    Builds ``deck_count`` standard decks of 52 cards and shuffles them together

    Args:
        deck_count: How many copies of each card there should be
        rng: Generator used for shuffling. A fresh, unseeded one is created
            if not provided
    """
    if rng is None:
        rng = np.random.default_rng()

    cards = [
        Card(suit, rank_value)
        for _ in range(deck_count)
        for suit in Suit
        for rank_value in Card.rank_mapper.keys()
    ]
    return [cards[i] for i in rng.permutation(len(cards))]


class Deck:
    """
    Draw pile. Upon creating the object the deck is automatically shuffled.
    Cards are drawn from the front.

    Args:
        deck_count: Number of standard 52 card decks mixed together
        rng: Generator used for shuffling
    """

    def __init__(self,
                 deck_count: int = NUMBER_OF_DECKS,
                 rng: np.random.Generator | None = None):
        self._cards = create_deck(deck_count, rng)

    @classmethod
    def from_cards(cls, cards: list[Card]) -> Self:
        """Deck with a fixed order of cards, the first one being on top"""
        deck = cls.__new__(cls)
        deck._cards = list(cards)
        return deck

    @property
    def cards(self) -> list[Card]:
        return self._cards.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def draw(self) -> Card:
        """Removes and returns the top card"""
        if len(self._cards) == 0:
            raise PreconditionViolation('Cannot draw from an empty deck')
        return self._cards.pop(0)

    def insert(self, position: int, card: Card) -> None:
        self._cards.insert(position, card)
