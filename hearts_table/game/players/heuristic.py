import logging

from hearts_table.engine import RoundView, Suit
from hearts_table.engine.constants import RANK_QUEEN, RANK_TWO
from .primitives import (
    pick_specific_card,
    pick_lead_card,
    pick_lower_value_card,
    pick_slightly_higher_value_card,
    pick_low_points_high_value_card,
    pick_max_points_card,
    other_player_has_lower_value_card,
    other_player_has_higher_value_card,
)

logger = logging.getLogger(__name__)


def _pick_lead(view: RoundView) -> int | None:
    if view.is_first_trick:
        return pick_specific_card(view.hand, Suit.CLUB, RANK_TWO)

    def prefer(card) -> bool:
        # nobody can undercut it, but it is not the top card of its suit either
        return (not other_player_has_lower_value_card(view.other_hands, card)
                and other_player_has_higher_value_card(view.other_hands, card))

    def lower_value_card_in_play(card) -> bool:
        return other_player_has_lower_value_card(view.other_hands, card)

    return pick_lead_card(view.hand, view.is_valid, prefer, lower_value_card_in_play)


def _pick_last_resort(view: RoundView) -> int | None:
    if view.is_first_trick:
        card_idx = pick_low_points_high_value_card(view.hand, view.is_valid)
        if card_idx is not None:
            return card_idx
    return pick_max_points_card(view.hand, view.is_valid)


def _pick_follow(view: RoundView) -> int | None:
    high_card = view.highest_card

    if high_card.suit == Suit.SPADE and high_card.rank_value > RANK_QUEEN:
        q_spades_idx = pick_specific_card(view.hand, Suit.SPADE, RANK_QUEEN)
        if q_spades_idx is not None and view.is_valid(view.hand[q_spades_idx]):
            return q_spades_idx

    if not view.trick_has_points and view.is_trailing:
        card_idx = pick_low_points_high_value_card(view.hand, view.is_valid, view.leading_suit)
        if card_idx is not None:
            return card_idx
        return _pick_last_resort(view)

    card_idx = pick_lower_value_card(view.hand, high_card, view.is_valid)
    if card_idx is not None:
        return card_idx

    if not view.is_trailing:
        card_idx = pick_slightly_higher_value_card(view.hand, high_card, view.is_valid)
    else:
        card_idx = pick_low_points_high_value_card(view.hand, view.is_valid, high_card.suit)
    if card_idx is not None:
        return card_idx

    return _pick_last_resort(view)


def select_card(view: RoundView) -> int:
    """
    Pick a card to play for a computer-controlled player.

    Leading: the two of clubs in the first trick, otherwise the lowest card
    nobody can undercut (and which is not the top of its suit), or failing
    that a card somebody can still undercut.

    Following: the queen of spades goes under a winning king or ace of
    spades. A trick without points that the player closes is used to get
    rid of a high card. Otherwise the player ducks under the winning card,
    then overtakes it as cheaply as possible (or, when closing the trick,
    plays the highest safe card of the suit), and finally sheds the card
    worth the most points.

    Args:
        view: The round as seen by the player

    Returns:
        Index of a hand slot holding a legal card

    Raises:
        RuntimeError: if no legal card could be found
    """
    if view.is_leading:
        card_idx = _pick_lead(view)
    else:
        card_idx = _pick_follow(view)

    if card_idx is None:
        raise RuntimeError(f'No card could be selected from hand {view.held_cards} '
                           f'for trick {list(view.trick)}')

    logger.debug('Selected %s from %s', view.hand[card_idx], view.held_cards)
    return card_idx
