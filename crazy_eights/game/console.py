from typing import Callable

from crazy_eights.engine import (
    CrazyEightsRound, TurnRecord, Suit, GameStatus, InvalidSelection, presentable_hand, suit_symbol,
)


class ConsoleInterface:
    """
    Console input and output for the human player

    Args:
        input_fn: Reads a line of input after showing a prompt
        print_fn: Prints a line of output
    """

    def __init__(self,
                 input_fn: Callable[[str], str] = input,
                 print_fn: Callable[..., None] = print):
        self._input = input_fn
        self._print = print_fn

    @staticmethod
    def pretty_print_choices(labels: list[str]) -> tuple[str, str]:
        """
        Returns:
            Two rows: the labels, and the 1-based choice numbers aligned below them
        """
        widths = [max(len(label), len(str(i))) for i, label in enumerate(labels, start=1)]
        labels_row = ' | '.join(f'{label:^{w}}' for label, w in zip(labels, widths))
        numbers_row = ' | '.join(f'{i:^{w}}' for i, w in enumerate(widths, start=1))
        return labels_row, numbers_row

    def wait_for_start(self) -> None:
        self._input('Press [Enter] to play a crazy game of Crazy Eights ... ')

    def show_start(self, game_round: CrazyEightsRound) -> None:
        self._print(f'Player and Computer were dealt {game_round.rules.cards_to_deal} cards each.')
        self._print(f'Up card to start: {game_round.up_card}')
        self._print(f'{game_round.current_player} goes first!')
        self._print()

    def show_draws(self, game_round: CrazyEightsRound, record: TurnRecord) -> None:
        player = game_round.players[record.player_idx]
        for card in record.drawn:
            if player.is_computer:
                self._print(f'No cards to play. {player} draws a card.')
            else:
                self._print(f'No cards to play. {player} draws a: {card}')

    def show_turn(self, game_round: CrazyEightsRound, record: TurnRecord, include_draws: bool = True) -> None:
        player = game_round.players[record.player_idx]
        if include_draws:
            self.show_draws(game_round, record)

        if record.skipped:
            self._print(f"No cards to play. No cards to draw from deck. Skipping {player}'s turn.")
        elif player.is_computer:
            self._print(f"{player}'s decision: {record.played}")

        if record.declared_suit is not None:
            self._print(f'New suit selected: {suit_symbol(record.declared_suit)}')
        self._print()

    def show_table(self, game_round: CrazyEightsRound) -> None:
        self._print(f'Cards left ..... {game_round.cards_left}')
        if game_round.active_suit is None:
            self._print(f'Top card ....... {game_round.up_card}')
        else:
            self._print(f'New suit ....... {suit_symbol(game_round.active_suit)}')

        labels = [label for _, label in presentable_hand(game_round.human)]
        labels_row, numbers_row = self.pretty_print_choices(labels)
        self._print(f'Your hand ...... {labels_row}')
        self._print(f'Your choices ... {numbers_row}')

    def show_suits(self) -> None:
        labels_row, numbers_row = self.pretty_print_choices([suit_symbol(suit) for suit in Suit])
        self._print(f'Suits .......... {labels_row}')
        self._print(f'Your choices ... {numbers_row}')

    def show_error(self, message: str) -> None:
        self._print(message)

    def show_outcome(self, status: GameStatus, reason: str) -> None:
        self._print('=====')
        self._print(reason)
        if status == GameStatus.WON:
            self._print('You won!')
        elif status == GameStatus.LOST:
            self._print('You lost.')
        else:
            self._print("It's a tie.")
        self._print('=====')

    def read_choice(self, prompt: str = "Player's decision: ") -> int:
        """
        Raises:
            InvalidSelection: The input is not a number
        """
        raw = self._input(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            raise InvalidSelection(f'Not a number: {raw!r}')
