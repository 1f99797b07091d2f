from typing import TYPE_CHECKING, Iterable, TypeVar

import numpy as np

from .card import Card
from .constants import (
    Suit, GameStatus, WILD_RANK_VALUE, WILD_POINTS, FACE_CARD_POINTS, ACE_POINTS,
)

if TYPE_CHECKING:
    from .player import Player

T = TypeVar('T')


def is_wild(card: Card) -> bool:
    return card.rank_value == WILD_RANK_VALUE


def choose_first_player(player_a: T, player_b: T, rng: np.random.Generator) -> T:
    return (player_a, player_b)[rng.integers(2)]


def is_legal_play(active_suit: Suit | None, up_card: Card, candidate: Card) -> bool:
    """
    Args:
        active_suit: Suit declared by whoever played the last wild card,
            or ``None`` if the up card's suit is in force
        up_card: The most recently played card
        candidate: The card to be played
    """
    if is_wild(candidate):
        return True
    if active_suit is not None:
        return candidate.suit == active_suit
    return candidate.suit == up_card.suit or candidate.rank_value == up_card.rank_value


def points_for_card(card: Card) -> int:
    if is_wild(card):
        return WILD_POINTS
    if card.rank_value == 14:
        return ACE_POINTS
    if card.rank_value > 10:
        return FACE_CARD_POINTS
    return card.rank_value


def score(hand: Iterable[Card]) -> int:
    return sum(points_for_card(card) for card in hand)


def determine_winner(player_a: 'Player', player_b: 'Player') -> GameStatus:
    """
    Compares the points left in both hands. Lower score wins.

    Returns:
        The outcome from the perspective of ``player_a``
    """
    score_a = score(player_a.hand)
    score_b = score(player_b.hand)
    if score_a < score_b:
        return GameStatus.WON
    if score_a > score_b:
        return GameStatus.LOST
    return GameStatus.TIED
