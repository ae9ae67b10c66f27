from .card import Card
from .constants import PLAYER_COUNT, Suit
from .utils import get_winning_card_argmax


class Trick:
    """
    Cards played in the current trick, in the order they were played.

    Args:
        leading_player_idx: Index of a player who plays the first card
    """

    __slots__ = ['leading_player_idx', '_cards']

    def __init__(self, leading_player_idx: int):
        self.leading_player_idx = leading_player_idx
        self._cards: list[Card] = []

    @property
    def cards(self) -> list[Card]:
        return self._cards.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, pos: int) -> Card:
        return self._cards[pos]

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    @property
    def is_full(self) -> bool:
        return len(self._cards) == PLAYER_COUNT

    @property
    def leading_suit(self) -> Suit | None:
        """Leading suit in the trick, or None if the trick is empty"""
        if self.is_empty:
            return None
        return self._cards[0].suit

    @property
    def next_player_idx(self) -> int:
        """ID of the player that is expected to throw the next card"""
        return (self.leading_player_idx + len(self._cards)) % PLAYER_COUNT

    def player_idx_at(self, pos: int) -> int:
        """Index of a player who played the card at the given position"""
        return (self.leading_player_idx + pos) % PLAYER_COUNT

    def highest_card(self) -> Card | None:
        """The card currently winning the trick"""
        if self.is_empty:
            return None
        return self._cards[get_winning_card_argmax(self._cards, self.leading_suit)]

    def add(self, card: Card):
        if self.is_full:
            raise RuntimeError('Cannot play card because the trick is full. '
                               'Complete the trick before playing the next card')
        self._cards.append(card)

    def taker_idx(self) -> int:
        """
        Index of a player who takes the trick, i.e. the one who played
        the highest card of the leading suit
        """
        if not self.is_full:
            raise RuntimeError('The trick is not full and therefore cannot be completed')
        return self.player_idx_at(get_winning_card_argmax(self._cards, self.leading_suit))

    def __str__(self) -> str:
        return ', '.join(str(card) for card in self._cards)
