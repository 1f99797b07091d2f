"""
Utilities for tests
"""
from unittest.mock import MagicMock

import numpy as np

from crazy_eights.engine import Card, Suit, CrazyEightsRound, CrazyEightsRules, Deck, RandomSources


def c(card_str: str) -> Card:
    """
    A quick way to parse a Card object from a string e.g. "10♥"
    """
    rank_str = card_str[:-1]
    suit_str = card_str[-1]
    suit = [s for s in list(Suit) if s.value == suit_str][0]
    return Card.of(rank_str, suit)


def cl(cards_str: list[str]) -> list[Card]:
    """
    A quick way to parse a list of Card object from a string e.g. ["10♥", "Q♣"]
    """
    return [c(s) for s in cards_str]


def fixed_random_sources(first_dealt_idx: int = 0,
                         reinsert_position: int = 0,
                         strategy_order: tuple[int, int] = (0, 1),
                         suit_pick: int = 0) -> RandomSources:
    """
    Random sources with every decision fixed in advance

    Args:
        first_dealt_idx: 0 if the human is dealt to first (so the computer
            moves first), 1 otherwise
        reinsert_position: Where a wild up card goes back into the deck
        strategy_order: 0 - match by suit, 1 - match by rank
        suit_pick: Which of the equally frequent suits the computer declares
    """
    first_player = MagicMock()
    first_player.integers.return_value = first_dealt_idx
    reinsert = MagicMock()
    reinsert.integers.return_value = reinsert_position
    strategy = MagicMock()
    strategy.permutation.return_value = np.array(strategy_order)
    suit_tiebreak = MagicMock()
    suit_tiebreak.choice.side_effect = lambda options: options[suit_pick]
    return RandomSources(
        shuffle=MagicMock(),
        first_player=first_player,
        reinsert=reinsert,
        strategy=strategy,
        suit_tiebreak=suit_tiebreak,
    )


def make_round(human_hand: list[str],
               computer_hand: list[str],
               up_card: str,
               rest: list[str],
               human_moves_first: bool = True,
               random_sources: RandomSources | None = None) -> CrazyEightsRound:
    """
    A round with a stacked deck, so that each player ends up with the given
    hand. Both hands need to be of the same length.
    """
    assert len(human_hand) == len(computer_hand)

    if human_moves_first:
        first_dealt, second_dealt = cl(computer_hand), cl(human_hand)
    else:
        first_dealt, second_dealt = cl(human_hand), cl(computer_hand)

    deck_cards = []
    for first_card, second_card in zip(first_dealt, second_dealt):
        deck_cards.extend([first_card, second_card])
    deck_cards.append(c(up_card))
    deck_cards.extend(cl(rest))

    if random_sources is None:
        random_sources = fixed_random_sources(first_dealt_idx=1 if human_moves_first else 0)

    return CrazyEightsRound(
        rules=CrazyEightsRules(cards_to_deal=len(human_hand)),
        random_sources=random_sources,
        deck=Deck.from_cards(deck_cards),
    )
