import unittest
from unittest.mock import MagicMock

import numpy as np

from crazy_eights.engine import CrazyEightsRound, CrazyEightsRules, GameStatus, PreconditionViolation, Suit, TurnPhase
from crazy_eights.engine.constants import COMPUTER_IDX
from crazy_eights.engine.utils import is_legal_play
from crazy_eights.game import CrazyEightsGame, ConsoleInterface
from tests.game.test_console import printed_lines
from tests.utils import make_round


def get_game_with_inputs(inputs: list[str], *round_args, **round_kwargs) -> tuple[CrazyEightsGame, MagicMock]:
    print_fn = MagicMock()
    interface = ConsoleInterface(input_fn=MagicMock(side_effect=inputs), print_fn=print_fn)
    game = CrazyEightsGame(interface, random_state=1)
    game.round = make_round(*round_args, **round_kwargs)
    return game, print_fn


class TestCrazyEightsGame(unittest.TestCase):
    def test_human_turn_reprompts(self):
        # arrange
        game, print_fn = get_game_with_inputs(
            ['x', '9', '1', '2'],
            ['2♦', '5♣'], ['K♦', '2♣'], '7♣', ['3♦', '4♦'],
        )
        # act
        game.play_turn()
        # assert
        lines = printed_lines(print_fn)
        self.assertEqual(2, lines.count('Invalid selection. Please try again.'))
        self.assertEqual(1, lines.count('You cannot play that card. Please try again.'))
        self.assertEqual(['2♦'], [str(card) for card in game.round.human.hand])
        self.assertEqual(COMPUTER_IDX, game.round.current_player_idx)

    def test_human_plays_eight(self):
        game, print_fn = get_game_with_inputs(
            ['1', '7', '2'],
            ['8♥', '2♦'], ['K♦', '2♠'], '7♣', ['3♦', '4♦'],
        )

        game.play_turn()

        self.assertEqual(Suit.SPADE, game.round.active_suit)
        lines = printed_lines(print_fn)
        self.assertEqual(1, lines.count('Invalid selection. Please try again.'))
        self.assertIn('New suit selected: ♠', lines)

    def test_human_draws_are_shown_once(self):
        game, print_fn = get_game_with_inputs(
            ['2'],
            ['2♦'], ['K♠'], '7♣', ['7♥', '4♠'],
        )

        game.play_turn()

        lines = printed_lines(print_fn)
        self.assertEqual(1, lines.count('No cards to play. Player draws a: 7♥'))

    def test_computer_turn(self):
        game, print_fn = get_game_with_inputs(
            [],
            ['2♦', '5♦'], ['K♦', '5♣'], '7♣', ['4♦'], human_moves_first=False,
        )

        game.play_turn()

        self.assertIn("Computer's decision: 5♣", printed_lines(print_fn))
        self.assertEqual(TurnPhase.AWAITING_PLAY, game.round.turn_phase)

    def test_play_turn_after_game_over(self):
        game, _ = get_game_with_inputs(['1'], ['5♣'], ['K♦'], '7♣', ['3♦'])
        game.play_turn()
        with self.assertRaises(PreconditionViolation):
            game.play_turn()

    def test_play_full_game(self):
        print_fn = MagicMock()
        game: CrazyEightsGame | None = None

        def first_legal_choice(prompt: str) -> str:
            game_round = game.round
            if game_round.turn_phase == TurnPhase.AWAITING_SUIT:
                return '1'
            for i, card in enumerate(game_round.human.hand, start=1):
                if is_legal_play(game_round.active_suit, game_round.up_card, card):
                    return str(i)
            return '1'

        interface = ConsoleInterface(input_fn=first_legal_choice, print_fn=print_fn)
        game = CrazyEightsGame(interface, random_state=7)

        status, reason = game.play()

        self.assertIn(status, [GameStatus.WON, GameStatus.LOST, GameStatus.TIED])
        self.assertEqual((status, reason), game.round.is_terminal())
        self.assertIn(reason, printed_lines(print_fn))

    def test_rules_and_numpy_seed(self):
        rules = CrazyEightsRules(cards_to_deal=5)

        game = CrazyEightsGame(ConsoleInterface(input_fn=MagicMock(), print_fn=MagicMock()),
                               rules=rules, random_state=np.int64(4))
        expected = CrazyEightsRound(rules=rules, random_state=4)

        self.assertEqual(5, game.round.rules.cards_to_deal)
        self.assertEqual(expected.human.hand, game.round.human.hand)
        self.assertEqual(expected.computer.hand, game.round.computer.hand)
        self.assertEqual(expected.up_card, game.round.up_card)
        self.assertEqual(expected.deck.cards, game.round.deck.cards)
