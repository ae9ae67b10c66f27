from typing import Iterable

from .card import Card
from .constants import HEART_POINTS, Q_SPADES_POINTS, Suit, RANK_QUEEN, RANK_TWO


def is_heart(card: Card) -> bool:
    return card.suit == Suit.HEART


def is_q_spades(card: Card) -> bool:
    return card.suit == Suit.SPADE and card.rank_value == RANK_QUEEN


def is_starting_card(card: Card) -> bool:
    return card.suit == Suit.CLUB and card.rank_value == RANK_TWO


def points_for_card(card: Card) -> int:
    if is_heart(card):
        return HEART_POINTS
    if is_q_spades(card):
        return Q_SPADES_POINTS
    return 0


def has_points(card: Card) -> bool:
    return points_for_card(card) > 0


def sum_points(cards: Iterable[Card]) -> int:
    return sum(points_for_card(card) for card in cards)


def get_winning_card_argmax(cards: list[Card], leading_suit: Suit) -> int:
    """
    Returns:
        Position (within ``cards``) of the highest card matching the leading
        suit. Cards of other suits never win.
    """
    winner_pos = 0
    for pos, card in enumerate(cards):
        if card.suit != leading_suit:
            continue
        if cards[winner_pos].suit != leading_suit or card.rank_value > cards[winner_pos].rank_value:
            winner_pos = pos
    return winner_pos


def sort_key(card: Card) -> tuple[int, int]:
    return Suit.order(card.suit), card.rank_value
