from dataclasses import dataclass, field

from .card import Card
from .hand import Hand
from .utils import sum_points, sort_key


@dataclass(eq=False)
class Player:
    """
    State of a single seat at the table

    Args:
        name: Name displayed for the player
        is_human: Whether moves are supplied from the outside (``True``)
            or picked by the built-in heuristic (``False``)
    """
    name: str
    is_human: bool = False
    hand: Hand = field(default_factory=Hand)
    # point cards captured in the current round
    cards_taken: list[Card] = field(default_factory=list)

    @property
    def points(self) -> int:
        return sum_points(self.cards_taken)

    def reset(self, cards: list[Card]):
        self.hand = Hand(cards)
        self.cards_taken = []

    def sort_cards_taken(self):
        self.cards_taken.sort(key=sort_key)

    def __str__(self) -> str:
        return self.name
