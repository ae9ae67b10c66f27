from dataclasses import dataclass

from .card import Card
from .constants import PLAYER_COUNT, Suit
from .rules import check_play
from .utils import get_winning_card_argmax, has_points


@dataclass(frozen=True)
class RoundView:
    """
    Immutable snapshot of the round from the perspective of the player
    who is expected to play the next card

    Args:
        hand: The player's hand slots (``None`` for already played slots)
        trick: Cards in the current trick, in the order they were played
        trick_no: Number of the current trick, starting from 0
        are_hearts_broken: Whether any heart has been taken so far
        other_hands: Cards remaining in the hands of the other three players
    """
    hand: tuple[Card | None, ...]
    trick: tuple[Card, ...]
    trick_no: int
    are_hearts_broken: bool
    other_hands: tuple[tuple[Card, ...], ...]

    @property
    def held_cards(self) -> list[Card]:
        return [card for card in self.hand if card is not None]

    @property
    def is_first_trick(self) -> bool:
        return self.trick_no == 0

    @property
    def is_leading(self) -> bool:
        return len(self.trick) == 0

    @property
    def is_trailing(self) -> bool:
        """Whether the player is the last one to play in this trick"""
        return len(self.trick) == PLAYER_COUNT - 1

    @property
    def leading_suit(self) -> Suit | None:
        if self.is_leading:
            return None
        return self.trick[0].suit

    @property
    def highest_card(self) -> Card | None:
        """Highest card of the leading suit played so far"""
        if self.is_leading:
            return None
        return self.trick[get_winning_card_argmax(list(self.trick), self.leading_suit)]

    @property
    def trick_has_points(self) -> bool:
        return any(has_points(card) for card in self.trick)

    def is_valid(self, card: Card) -> bool:
        return check_play(
            hand=self.held_cards,
            card=card,
            trick=list(self.trick),
            is_first_trick=self.is_first_trick,
            are_hearts_broken=self.are_hearts_broken,
        ) is None
