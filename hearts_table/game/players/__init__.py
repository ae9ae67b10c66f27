from .heuristic import select_card
from .input_player import InputPlayer

__all__ = [
    'InputPlayer',
    'select_card',
]
