from enum import Enum
from typing import Iterable

from .card import Card
from .utils import is_heart, has_points, is_starting_card


class PlayRejection(Enum):
    """Reasons for which a card cannot be played"""
    NOT_STARTING_CARD = 'The first card must be Two of Clubs.'
    POINTS_IN_FIRST_TRICK = "You can't play a card worth points in the first trick."
    HEARTS_NOT_BROKEN = "Hearts haven't been broken."
    MUST_FOLLOW_SUIT = 'You must follow suit.'
    NOT_YOUR_TURN = "It's not your turn."

    def __str__(self) -> str:
        return self.value


def check_play(hand: Iterable[Card],
               card: Card,
               trick: list[Card],
               is_first_trick: bool,
               are_hearts_broken: bool) -> PlayRejection | None:
    """
    Checks whether the card may be played given the state of the round.
    The function does not mutate anything.

    Args:
        hand: Cards remaining in the player's hand
        card: A card the player wants to play
        trick: Cards played so far in the current trick
        is_first_trick: Whether it is the first trick of the round
        are_hearts_broken: Whether any heart has been taken in previous tricks

    Returns:
        ``None`` if the play is legal, otherwise the first rule it breaks
    """
    hand = list(hand)

    if is_first_trick and len(trick) == 0:
        if is_starting_card(card):
            return None
        return PlayRejection.NOT_STARTING_CARD

    if is_first_trick and has_points(card):
        # hearts are allowed if the player has nothing but point cards
        if is_heart(card) and all(has_points(c) for c in hand):
            return None
        return PlayRejection.POINTS_IN_FIRST_TRICK

    if len(trick) == 0:
        if are_hearts_broken or not is_heart(card):
            return None
        if any(not is_heart(c) for c in hand):
            return PlayRejection.HEARTS_NOT_BROKEN
        return None

    leading_suit = trick[0].suit
    if card.suit == leading_suit:
        return None
    if any(c.suit == leading_suit for c in hand):
        return PlayRejection.MUST_FOLLOW_SUIT
    return None


def is_valid_play(hand: Iterable[Card],
                  card: Card,
                  trick: list[Card],
                  is_first_trick: bool,
                  are_hearts_broken: bool) -> tuple[bool, str | None]:
    """
    Returns:
        A tuple of two elements: whether the play is legal, and a
        human-readable explanation if it is not
    """
    rejection = check_play(hand, card, trick, is_first_trick, are_hearts_broken)
    if rejection is None:
        return True, None
    return False, rejection.value


def get_valid_plays(hand: list[Card | None],
                    trick: list[Card],
                    is_first_trick: bool,
                    are_hearts_broken: bool) -> list[int]:
    """
    Args:
        hand: Hand slots, possibly with empty ones

    Returns:
        Indexes of slots holding cards that can be legally played
    """
    held = [card for card in hand if card is not None]
    return [
        idx for idx, card in enumerate(hand)
        if card is not None
        and check_play(held, card, trick, is_first_trick, are_hearts_broken) is None
    ]
