"""
This module contains the rules engine of two-player Crazy Eights, with the
:class:`CrazyEightsRound` class driving the turns of a single game.
"""

from .card import Card, suit_symbol
from .constants import Suit, PlayerKind, GameStatus, RoundPhase, TurnPhase
from .deck import Deck, create_deck
from .errors import InvalidSelection, IllegalPlay, PreconditionViolation
from .player import Player, presentable_hand
from .random_sources import RandomSources
from .round import CrazyEightsRound, TurnRecord, new_game
from .rules import CrazyEightsRules
