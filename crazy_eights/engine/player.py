import warnings

import numpy as np

from .card import Card
from .constants import Suit, PlayerKind
from .deck import Deck
from .errors import InvalidSelection, PreconditionViolation
from .utils import is_legal_play, is_wild


def _first_of_suit(hand: list[Card], suit: Suit) -> Card | None:
    return next((c for c in hand if c.suit == suit), None)


def _first_of_rank(hand: list[Card], rank_value: int) -> Card | None:
    return next((c for c in hand if c.rank_value == rank_value), None)


class Player:
    """
    A participant of the game together with their hand.
    Human and computer players differ only in how decisions are made:
    humans choose through the round's ``attempt_*`` methods, and the computer
    uses ``computer_choose_play`` and ``computer_choose_suit``.

    Args:
        kind: Whether the player is a human or the computer
    """

    def __init__(self, kind: PlayerKind):
        self.kind = kind
        self.skipped_last_turn = False
        self._hand: list[Card] = []

    @property
    def hand(self) -> list[Card]:
        return self._hand.copy()

    @property
    def is_computer(self) -> bool:
        return self.kind == PlayerKind.COMPUTER

    def __str__(self) -> str:
        return 'Player' if self.kind == PlayerKind.HUMAN else 'Computer'

    def __len__(self) -> int:
        return len(self._hand)

    def draw(self, deck: Deck) -> Card:
        """Takes the top card of the deck into the hand"""
        card = deck.draw()
        self._hand.append(card)
        return card

    def card_at(self, index: int) -> Card:
        """
        Args:
            index: 1-based position of the card in hand
        """
        if not 1 <= index <= len(self._hand):
            raise InvalidSelection(f'There is no card number {index} in hand')
        return self._hand[index - 1]

    def play(self, index: int) -> Card:
        """
        Removes a card from the hand

        Args:
            index: 1-based position of the card in hand
        """
        card = self.card_at(index)
        del self._hand[index - 1]
        return card

    def can_play(self, active_suit: Suit | None, up_card: Card) -> bool:
        return any(is_legal_play(active_suit, up_card, card) for card in self._hand)

    def computer_choose_play(self,
                             active_suit: Suit | None,
                             up_card: Card,
                             rng: np.random.Generator) -> Card:
        """
        Picks a card to play and removes it from the hand. An eight is only
        thrown when no card matches the suit or the rank.

        Args:
            active_suit: Suit declared after the last eight, if any
            up_card: The most recently played card
            rng: Decides whether matching the suit or the rank is tried first
        """
        card = None

        if active_suit is not None:
            card = _first_of_suit(self._hand, active_suit)
        else:
            strategies = [
                lambda: _first_of_suit(self._hand, up_card.suit),
                lambda: _first_of_rank(self._hand, up_card.rank_value),
            ]
            for strategy_idx in rng.permutation(len(strategies)):
                card = strategies[strategy_idx]()
                if card is not None:
                    break

        if card is None:
            card = next((c for c in self._hand if is_wild(c)), None)

        if card is None:
            raise PreconditionViolation(f'{self} has no card to play on {up_card}')

        self._hand.remove(card)
        return card

    def computer_choose_suit(self, rng: np.random.Generator) -> Suit:
        """
        Returns:
            The suit held most often in hand. Ties are broken at random
        """
        if len(self._hand) == 0:
            warnings.warn(f'{self} is declaring a suit with an empty hand. '
                          'Picking a random suit.')

        all_suits = list(Suit)
        counts = np.array([sum(c.suit == suit for c in self._hand) for suit in all_suits])
        best_suits_idx = np.flatnonzero(counts == counts.max())
        return all_suits[rng.choice(best_suits_idx)]


def presentable_hand(player: Player) -> list[tuple[int, str]]:
    """
    Returns:
        Pairs of the 1-based choice number and the card's label, in hand order
    """
    return [(i, str(card)) for i, card in enumerate(player.hand, start=1)]
