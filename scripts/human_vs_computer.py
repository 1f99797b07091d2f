from crazy_eights.game import CrazyEightsGame, ConsoleInterface

if __name__ == '__main__':
    interface = ConsoleInterface()
    interface.wait_for_start()
    game = CrazyEightsGame(interface)
    game.play()
