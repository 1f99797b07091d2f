from dataclasses import dataclass

from .constants import Suit


@dataclass(frozen=True)
class Card:
    """
    Args:
        suit: Suit of the card
        rank_value: Numerical representation of card's rank (2-14, where Ace=14)
    """
    suit: Suit
    rank_value: int

    rank_mapper = {
        **{i: str(i) for i in range(2, 11)},
        11: 'J',
        12: 'Q',
        13: 'K',
        14: 'A',
    }

    rank_names = {
        **{i: str(i) for i in range(2, 11)},
        11: 'Jack',
        12: 'Queen',
        13: 'King',
        14: 'Ace',
    }

    @classmethod
    def of(cls, rank: str, suit: Suit) -> 'Card':
        for rank_value, rank_str in Card.rank_mapper.items():
            if rank_str == rank:
                return cls(suit, rank_value)
        raise ValueError(f'Unknown rank: {rank}')

    @property
    def rank(self) -> str:
        return Card.rank_mapper[self.rank_value]

    @property
    def rank_name(self) -> str:
        return Card.rank_names[self.rank_value]

    def __str__(self) -> str:
        return f'{self.rank}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)


def suit_symbol(suit: Suit) -> str:
    return suit.value
