from enum import Enum
from typing import Union

PLAYER_COUNT = 4
CARDS_IN_DECK_COUNT = 52
CARDS_PER_PLAYER_COUNT = CARDS_IN_DECK_COUNT // PLAYER_COUNT
TRICK_COUNT = CARDS_PER_PLAYER_COUNT

HEART_POINTS = 1
Q_SPADES_POINTS = 13
MAX_POINTS = 26

RANK_QUEEN = 12
RANK_TWO = 2


class Suit(Enum):
    CLUB = '♣'
    DIAMOND = '♦'
    SPADE = '♠'
    HEART = '♥'

    @staticmethod
    def order(suit: Union['Suit', None]) -> int | None:
        if suit is None:
            return None
        return list(Suit).index(suit)
