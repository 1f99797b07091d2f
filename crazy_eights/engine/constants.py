from enum import Enum

PLAYER_COUNT = 2
CARDS_TO_DEAL = 7
NUMBER_OF_DECKS = 1
CARDS_IN_DECK_COUNT = 52

HUMAN_IDX = 0
COMPUTER_IDX = 1

WILD_RANK_VALUE = 8
WILD_CARDS_PER_DECK = 4
WILD_POINTS = 50
FACE_CARD_POINTS = 10
ACE_POINTS = 1


class Suit(Enum):
    HEART = '♥'
    SPADE = '♠'
    DIAMOND = '♦'
    CLUB = '♣'


class PlayerKind(Enum):
    HUMAN = 'human'
    COMPUTER = 'computer'


class GameStatus(Enum):
    """Outcome of the game from the human player's perspective"""
    IN_PROGRESS = 0
    WON = 1
    LOST = 2
    TIED = 3


class RoundPhase(Enum):
    DEALING = 0
    AWAITING_UPCARD = 1
    IN_PROGRESS = 2
    FINISHED = 3


class TurnPhase(Enum):
    AWAITING_PLAY = 0
    AWAITING_SUIT = 1
