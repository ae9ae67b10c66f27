from typing import Iterator, Iterable

from .card import Card
from .constants import CARDS_PER_PLAYER_COUNT, Suit
from .utils import sort_key


class Hand:
    """
    Fixed-size collection of card slots owned by a single player.

    Playing a card empties its slot. Slots are never refilled nor compacted,
    so an index keeps pointing at the same slot for the whole round.

    Args:
        cards: Cards dealt to the player. They are sorted by suit and rank
    """

    __slots__ = ['_slots']

    def __init__(self, cards: Iterable[Card] = ()):
        cards = sorted(cards, key=sort_key)
        if len(cards) > CARDS_PER_PLAYER_COUNT:
            raise ValueError(f'A hand cannot hold more than {CARDS_PER_PLAYER_COUNT} cards')
        self._slots: list[Card | None] = list(cards)

    @property
    def slots(self) -> tuple[Card | None, ...]:
        """Immutable snapshot of the hand, including empty slots"""
        return tuple(self._slots)

    def __len__(self) -> int:
        """Number of cards still held"""
        return sum(1 for card in self._slots if card is not None)

    def __getitem__(self, idx: int) -> Card | None:
        return self._slots[idx]

    def __iter__(self) -> Iterator[Card]:
        return (card for card in self._slots if card is not None)

    def __contains__(self, card: Card) -> bool:
        return card in self._slots

    @property
    def slot_count(self) -> int:
        return len(self._slots)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def indexed(self) -> Iterator[tuple[int, Card]]:
        """Yields ``(index, card)`` pairs of non-empty slots"""
        for idx, card in enumerate(self._slots):
            if card is not None:
                yield idx, card

    def index_of(self, card: Card) -> int | None:
        for idx, held in self.indexed():
            if held == card:
                return idx
        return None

    def has_card_of_suit(self, suit: Suit) -> bool:
        return any(card.suit == suit for card in self)

    def take(self, idx: int) -> Card:
        """
        Removes the card from the slot and hands it over to the caller

        Raises:
            IndexError: if the index does not point at any slot
            RuntimeError: if the slot has already been played
        """
        if not 0 <= idx < len(self._slots):
            raise IndexError(f'Hand has no slot {idx}')
        card = self._slots[idx]
        if card is None:
            raise RuntimeError(f'Slot {idx} is empty, its card has already been played')
        self._slots[idx] = None
        return card

    def __str__(self) -> str:
        return ' '.join(str(card) if card is not None else '--' for card in self._slots)

    def __repr__(self) -> str:
        return f'Hand({self})'
