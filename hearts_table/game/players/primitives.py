"""
Building blocks of the computer player. Every picking function scans a
hand snapshot and returns an index of a slot, or ``None`` if no card in the
hand qualifies. Functions that take ``is_valid`` only consider cards that
can be legally played.
"""
from typing import Callable, Iterable, Sequence

from hearts_table.engine import Card, Suit
from hearts_table.engine.utils import points_for_card, has_points

HandSlots = Sequence[Card | None]
CardPredicate = Callable[[Card], bool]


def _valid_cards(hand: HandSlots, is_valid: CardPredicate) -> list[tuple[int, Card]]:
    return [(idx, card) for idx, card in enumerate(hand)
            if card is not None and is_valid(card)]


def has_card_of_suit(hand: HandSlots, suit: Suit) -> bool:
    return any(card is not None and card.suit == suit for card in hand)


def pick_specific_card(hand: HandSlots, suit: Suit, rank_value: int) -> int | None:
    for idx, card in enumerate(hand):
        if card is not None and card.suit == suit and card.rank_value == rank_value:
            return idx
    return None


def pick_lead_card(hand: HandSlots,
                   is_valid: CardPredicate,
                   prefer: CardPredicate,
                   fallback: CardPredicate) -> int | None:
    """
    Candidates are scanned from the lowest rank (ties broken by suit order).

    Returns:
        The first legal card satisfying ``prefer``; if there is none, the
        first legal card satisfying ``fallback``; if there is none either,
        the first legal card
    """
    candidates = sorted(
        _valid_cards(hand, is_valid),
        key=lambda item: (item[1].rank_value, Suit.order(item[1].suit)),
    )
    if len(candidates) == 0:
        return None

    for predicate in (prefer, fallback):
        for idx, card in candidates:
            if predicate(card):
                return idx
    return candidates[0][0]


def pick_lower_value_card(hand: HandSlots, reference: Card, is_valid: CardPredicate) -> int | None:
    """The highest card of the reference's suit that is still lower than the reference"""
    lower = [(idx, card) for idx, card in _valid_cards(hand, is_valid)
             if card.suit == reference.suit and card.rank_value < reference.rank_value]
    if len(lower) == 0:
        return None
    return max(lower, key=lambda item: item[1].rank_value)[0]


def pick_slightly_higher_value_card(hand: HandSlots, reference: Card, is_valid: CardPredicate) -> int | None:
    """The lowest card of the reference's suit that is still higher than the reference"""
    higher = [(idx, card) for idx, card in _valid_cards(hand, is_valid)
              if card.suit == reference.suit and card.rank_value > reference.rank_value]
    if len(higher) == 0:
        return None
    return min(higher, key=lambda item: item[1].rank_value)[0]


def pick_low_points_high_value_card(hand: HandSlots,
                                    is_valid: CardPredicate,
                                    suit: Suit | None = None) -> int | None:
    """The highest card worth no points, optionally restricted to a suit"""
    safe = [(idx, card) for idx, card in _valid_cards(hand, is_valid)
            if not has_points(card) and (suit is None or card.suit == suit)]
    if len(safe) == 0:
        return None
    return max(safe, key=lambda item: item[1].rank_value)[0]


def pick_max_points_card(hand: HandSlots, is_valid: CardPredicate) -> int | None:
    """The card worth the most points. Ties are broken by the highest rank"""
    candidates = _valid_cards(hand, is_valid)
    if len(candidates) == 0:
        return None
    return max(candidates, key=lambda item: (points_for_card(item[1]), item[1].rank_value))[0]


def other_player_has_lower_value_card(other_hands: Iterable[Iterable[Card]], card: Card) -> bool:
    return any(
        other.suit == card.suit and other.rank_value < card.rank_value
        for hand in other_hands
        for other in hand
    )


def other_player_has_higher_value_card(other_hands: Iterable[Iterable[Card]], card: Card) -> bool:
    return any(
        other.suit == card.suit and other.rank_value > card.rank_value
        for hand in other_hands
        for other in hand
    )
