from typing import Self

import numpy as np

from .card import Card
from .constants import CARDS_IN_DECK_COUNT


class Deck:
    """
    Standard 52 cards deck.
    Upon creating the object the deck is automatically shuffled

    Args:
        rng: Random generator used for shuffling. Takes precedence over
            ``random_state``
        random_state: Random seed for reproducibility
    """

    __slots__ = ['_rng', '_cards', '_cards_left']

    def __init__(self,
                 rng: np.random.Generator | None = None,
                 random_state: int | None = None):
        self._rng = rng if rng is not None else np.random.default_rng(random_state)

        # standard deck of 52 cards
        self._cards = np.array([
            Card.from_idx(i) for i in range(CARDS_IN_DECK_COUNT)
        ], dtype=object)
        self._cards_left = 0
        self.shuffle()

    @property
    def cards_left(self) -> int:
        return self._cards_left

    def shuffle(self) -> Self:
        """
        Resets and shuffles the deck
        """
        self._cards_left = len(self._cards)
        self._rng.shuffle(self._cards)
        return self

    def deal(self, n: int) -> list[Card]:
        """
        Deals n cards from the top
        """
        if n > self._cards_left:
            raise ValueError('Not enough cards left in the deck')

        start_idx = len(self._cards) - self._cards_left
        dealt_cards = self._cards[start_idx:start_idx + n]
        self._cards_left -= n

        return list(dealt_cards)

    def all(self) -> list[Card]:
        """Deal all remaining cards"""
        return self.deal(self._cards_left)
