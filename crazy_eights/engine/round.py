from dataclasses import dataclass, field
from typing import Self

import numpy as np

from .card import Card
from .constants import (
    Suit, PlayerKind, GameStatus, RoundPhase, TurnPhase, HUMAN_IDX, COMPUTER_IDX,
    CARDS_TO_DEAL, NUMBER_OF_DECKS,
)
from .deck import Deck
from .errors import IllegalPlay, InvalidSelection, PreconditionViolation
from .player import Player
from .random_sources import RandomSources
from .rules import CrazyEightsRules
from .utils import choose_first_player, determine_winner, is_legal_play, is_wild, score


@dataclass
class TurnRecord:
    """
    What happened during a single turn

    Args:
        player_idx: Index of the player who moved
        drawn: Cards drawn because nothing could be played
        played: Card played, or ``None`` if the turn was skipped
        declared_suit: Suit declared after playing an eight
        skipped: Whether the player could neither play nor draw
    """
    player_idx: int
    drawn: list[Card] = field(default_factory=list)
    played: Card | None = None
    declared_suit: Suit | None = None
    skipped: bool = False


class CrazyEightsRound:
    """
    Engine for a game of two-player Crazy Eights, human against the computer.

    Creating the object deals the cards and turns the up card; the game is
    then in progress. Each turn starts as soon as the previous one ends:
    the player to move draws until they can play, or has their turn skipped
    if the deck runs out. Afterwards the game waits for:

        - ``attempt_human_play()`` followed by ``attempt_human_suit_choice()``
          if the human played an eight, when it is the human's turn
        - ``advance_computer_turn()`` when it is the computer's turn

    The game is finished once ``is_terminal()`` returns an outcome.

    Args:
        rules: Number of cards to deal and decks to use. See
            :class:`CrazyEightsRules` for defaults
        random_state: Random seed for reproducibility. Ignored if
            ``random_sources`` are given
        random_sources: Generators for every random decision of the game
        deck: Deck to play with, top card first. Shuffled from
            ``random_sources.shuffle`` if not provided
    """

    def __init__(self,
                 rules: CrazyEightsRules = CrazyEightsRules(),
                 random_state: int | np.int_ | None = None,
                 random_sources: RandomSources | None = None,
                 deck: Deck | None = None):

        self.rules = rules
        self.rng = random_sources if random_sources is not None else RandomSources.from_seed(random_state)

        self.phase = RoundPhase.DEALING
        self.turn_phase = TurnPhase.AWAITING_PLAY
        self.status = GameStatus.IN_PROGRESS
        self.reason: str | None = None

        self.players = [Player(PlayerKind.HUMAN), Player(PlayerKind.COMPUTER)]
        self.deck = deck if deck is not None else Deck(rules.deck_count, self.rng.shuffle)
        self.up_card: Card | None = None
        self.active_suit: Suit | None = None
        self.current_player_idx = HUMAN_IDX
        self.history: list[TurnRecord] = []
        self._current_turn: TurnRecord | None = None

        self._deal()
        self._turn_up_card()

        self.phase = RoundPhase.IN_PROGRESS
        self._start_turn()

    @property
    def human(self) -> Player:
        return self.players[HUMAN_IDX]

    @property
    def computer(self) -> Player:
        return self.players[COMPUTER_IDX]

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_idx]

    @property
    def current_turn(self) -> TurnRecord | None:
        """The turn in progress, or ``None`` if the game has finished"""
        return self._current_turn

    @property
    def cards_left(self) -> int:
        return len(self.deck)

    def _deal(self):
        """
        Deals the cards one at a time, starting with a randomly chosen player.
        The other player is the first to move.
        """
        first_dealt = choose_first_player(self.human, self.computer, self.rng.first_player)
        first_dealt_idx = self.players.index(first_dealt)
        second_dealt_idx = 1 - first_dealt_idx

        for _ in range(self.rules.cards_to_deal):
            self.players[first_dealt_idx].draw(self.deck)
            self.players[second_dealt_idx].draw(self.deck)

        self.current_player_idx = second_dealt_idx

    def _turn_up_card(self):
        """
        The up card cannot be an eight, so eights are put back into the deck
        at a random position under the top card until another card is drawn.
        """
        self.phase = RoundPhase.AWAITING_UPCARD

        card = self.deck.draw()
        while is_wild(card):
            if all(is_wild(c) for c in self.deck.cards):
                raise PreconditionViolation('Only eights are left in the deck. '
                                            'Cannot turn the up card.')
            # below the top card, so the same eight is not drawn again
            self.deck.insert(self.rng.reinsert.integers(1, len(self.deck) + 1), card)
            card = self.deck.draw()

        self.up_card = card
        self.active_suit = None

    def _start_turn(self):
        """
        Makes the current player draw until they can play. The turn is
        skipped if the deck runs out first.
        """
        mover = self.current_player
        mover.skipped_last_turn = False
        self.turn_phase = TurnPhase.AWAITING_PLAY
        self._current_turn = TurnRecord(self.current_player_idx)

        while not mover.can_play(self.active_suit, self.up_card) and len(self.deck) > 0:
            self._current_turn.drawn.append(mover.draw(self.deck))

        if not mover.can_play(self.active_suit, self.up_card):
            mover.skipped_last_turn = True
            self._current_turn.skipped = True
            self._end_turn()

    def _end_turn(self):
        self.history.append(self._current_turn)
        self._current_turn = None

        self._check_game_over()
        if self.status != GameStatus.IN_PROGRESS:
            self.phase = RoundPhase.FINISHED
            return

        self.current_player_idx = 1 - self.current_player_idx
        self._start_turn()

    def _check_game_over(self):
        mover = self.current_player
        if len(mover) == 0:
            if mover.kind == PlayerKind.HUMAN:
                self.status = GameStatus.WON
            else:
                self.status = GameStatus.LOST
            self.reason = f'{mover} wins - they were able to get rid of their cards first!'
            return

        if len(self.deck) == 0 and all(p.skipped_last_turn for p in self.players):
            self.status = determine_winner(self.human, self.computer)
            human_score = score(self.human.hand)
            computer_score = score(self.computer.hand)
            if self.status == GameStatus.WON:
                self.reason = (f"Player wins - their card total ({human_score}) is less than "
                               f"the Computer's card total ({computer_score}).")
            elif self.status == GameStatus.LOST:
                self.reason = (f"Computer wins - their card total ({computer_score}) is less than "
                               f"the Player's card total ({human_score}).")
            else:
                self.reason = (f"Tie - Player's card total and Computer's card total "
                               f"are the same ({human_score}).")

    def _require_turn(self, kind: PlayerKind, turn_phase: TurnPhase):
        if self.phase != RoundPhase.IN_PROGRESS:
            raise PreconditionViolation('The game is not in progress')
        if self.current_player.kind != kind:
            raise PreconditionViolation(f'It is not the {kind.value} player\'s turn')
        if self.turn_phase != turn_phase:
            raise PreconditionViolation(f'The turn is in phase {self.turn_phase.name}, '
                                        f'expected {turn_phase.name}')

    def _apply_play(self, card: Card):
        mover = self.current_player
        self.up_card = card
        self._current_turn.played = card

        if not is_wild(card):
            self.active_suit = None
        elif len(mover) > 0:
            if mover.is_computer:
                self._declare_suit(mover.computer_choose_suit(self.rng.suit_tiebreak))
            else:
                self.turn_phase = TurnPhase.AWAITING_SUIT
            return

        self._end_turn()

    def _declare_suit(self, suit: Suit):
        self.active_suit = suit
        self._current_turn.declared_suit = suit
        self._end_turn()

    def attempt_human_play(self, index: int) -> Self:
        """
        Args:
            index: 1-based position of the chosen card in the human's hand

        Raises:
            InvalidSelection: There is no card at ``index``
            IllegalPlay: The card cannot be played right now
        """
        self._require_turn(PlayerKind.HUMAN, TurnPhase.AWAITING_PLAY)

        card = self.human.card_at(index)
        if not is_legal_play(self.active_suit, self.up_card, card):
            raise IllegalPlay(f'{card} cannot be played on {self.up_card}')

        self.human.play(index)
        self._apply_play(card)
        return self

    def attempt_human_suit_choice(self, index: int) -> Self:
        """
        Args:
            index: 1-based position of the chosen suit in :class:`Suit`

        Raises:
            InvalidSelection: There is no suit at ``index``
        """
        self._require_turn(PlayerKind.HUMAN, TurnPhase.AWAITING_SUIT)

        all_suits = list(Suit)
        if not 1 <= index <= len(all_suits):
            raise InvalidSelection(f'There is no suit number {index}')

        self._declare_suit(all_suits[index - 1])
        return self

    def advance_computer_turn(self) -> Self:
        self._require_turn(PlayerKind.COMPUTER, TurnPhase.AWAITING_PLAY)

        card = self.computer.computer_choose_play(self.active_suit, self.up_card, self.rng.strategy)
        self._apply_play(card)
        return self

    def is_terminal(self) -> tuple[GameStatus, str] | None:
        """
        Returns:
            The outcome from the human player's perspective together with
            the explanation, or ``None`` if the game is still in progress
        """
        if self.status == GameStatus.IN_PROGRESS:
            return None
        return self.status, self.reason


def new_game(deck_count: int = NUMBER_OF_DECKS,
             cards_to_deal: int = CARDS_TO_DEAL,
             random_state: int | np.int_ | None = None) -> CrazyEightsRound:
    rules = CrazyEightsRules(cards_to_deal=cards_to_deal, deck_count=deck_count)
    return CrazyEightsRound(rules=rules, random_state=random_state)
