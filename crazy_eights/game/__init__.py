from .console import ConsoleInterface
from .crazy_eights_game import CrazyEightsGame

__all__ = [
    'ConsoleInterface',
    'CrazyEightsGame',
]
