from typing import Callable

import numpy as np

from crazy_eights.engine import (
    CrazyEightsRound, CrazyEightsRules, GameStatus, TurnPhase,
    InvalidSelection, IllegalPlay, PreconditionViolation,
)
from .console import ConsoleInterface


class CrazyEightsGame:
    """
    A game of Crazy Eights between a human at the console and the computer

    Args:
        interface: Console the human plays through
        rules: Number of cards to deal and decks to use. See :class:`CrazyEightsRules`
            for defaults
        random_state: Random seed for reproducibility
    """

    def __init__(self,
                 interface: ConsoleInterface | None = None,
                 rules: CrazyEightsRules = CrazyEightsRules(),
                 random_state: int | np.int_ | None = None):

        self.interface = interface if interface is not None else ConsoleInterface()
        self.round = CrazyEightsRound(rules=rules, random_state=random_state)
        self._turns_shown = 0

    def _show_finished_turns(self):
        for record in self.round.history[self._turns_shown:]:
            player = self.round.players[record.player_idx]
            # draws of a human turn that got to a decision were shown before the prompt
            shown_live = not player.is_computer and not record.skipped
            self.interface.show_turn(self.round, record, include_draws=not shown_live)
        self._turns_shown = len(self.round.history)

    def _prompt_until_valid(self, attempt: Callable[[int], CrazyEightsRound]):
        while True:
            try:
                attempt(self.interface.read_choice())
                return
            except IllegalPlay:
                self.interface.show_error('You cannot play that card. Please try again.')
            except InvalidSelection:
                self.interface.show_error('Invalid selection. Please try again.')

    def _play_human_turn(self):
        self.interface.show_draws(self.round, self.round.current_turn)
        self.interface.show_table(self.round)
        self._prompt_until_valid(self.round.attempt_human_play)

        if self.round.turn_phase == TurnPhase.AWAITING_SUIT:
            self.interface.show_suits()
            self._prompt_until_valid(self.round.attempt_human_suit_choice)

    def play_turn(self):
        """
        Plays a single turn of whoever is to move. Skipped turns are resolved
        by the engine as soon as they come up, so they never need a call.
        """
        if self.round.is_terminal() is not None:
            raise PreconditionViolation('The game has already finished')

        if self.round.current_player.is_computer:
            self.round.advance_computer_turn()
        else:
            self._play_human_turn()
        self._show_finished_turns()

    def play(self) -> tuple[GameStatus, str]:
        """
        Plays until the game ends

        Returns:
            Outcome from the human player's perspective and its explanation
        """
        self.interface.show_start(self.round)
        self._show_finished_turns()

        while self.round.is_terminal() is None:
            self.play_turn()

        status, reason = self.round.is_terminal()
        self.interface.show_outcome(status, reason)
        return status, reason
