from dataclasses import dataclass

from .constants import (
    CARDS_TO_DEAL, NUMBER_OF_DECKS, CARDS_IN_DECK_COUNT, PLAYER_COUNT, WILD_CARDS_PER_DECK,
)


@dataclass(frozen=True)
class CrazyEightsRules:
    """
    Args:
        cards_to_deal: Number of cards each player is dealt at the start
        deck_count: Number of standard decks shuffled together
    """
    cards_to_deal: int = CARDS_TO_DEAL
    deck_count: int = NUMBER_OF_DECKS

    def __post_init__(self):
        if self.deck_count < 1:
            raise ValueError('At least one deck is required')
        if self.cards_to_deal < 1:
            raise ValueError('Each player has to be dealt at least one card')
        # the cards left after dealing cannot all be eights, or no up card can be turned
        cards_left = CARDS_IN_DECK_COUNT * self.deck_count - self.cards_to_deal * PLAYER_COUNT
        if cards_left <= WILD_CARDS_PER_DECK * self.deck_count:
            raise ValueError(f'Cannot deal {self.cards_to_deal} cards to {PLAYER_COUNT} '
                             f'players from {self.deck_count} deck(s)')
