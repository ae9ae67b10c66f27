from dataclasses import dataclass

from .constants import Suit


@dataclass(frozen=True)
class Card:
    """
    Args:
        suit: Suit of the card
        rank_value: Numerical representation of card's rank (2-14, where Ace=14)
    """
    suit: Suit
    rank_value: int

    ranks_str = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')

    def __post_init__(self):
        if not 2 <= self.rank_value <= 14:
            raise ValueError(f'Invalid rank value: {self.rank_value}')

    @classmethod
    def of(cls, rank: str, suit: Suit) -> 'Card':
        return cls(suit, Card.ranks_str.index(rank) + 2)

    @classmethod
    def from_idx(cls, idx: int) -> 'Card':
        """
        Args:
            idx: Value from the range 0-51 representing the index of the card.
                The cards are ordered by suit: clubs, diamonds, spades, hearts;
                and within each suit by rank: from 2 to Ace
        """
        return cls(list(Suit)[idx // 13], idx % 13 + 2)

    @property
    def idx(self) -> int:
        return Suit.order(self.suit) * 13 + self.rank_value - 2

    @property
    def rank(self) -> str:
        return Card.ranks_str[self.rank_value - 2]

    def __str__(self) -> str:
        return f'{self.rank}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)
