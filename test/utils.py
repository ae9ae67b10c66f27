"""
Utilities for tests
"""
from hearts_table.engine import Card, Suit, RoundView


def c(card_str: str) -> Card:
    """
    A quick way to parse a Card object from a string e.g. "10♥"
    """
    rank_str = card_str[:-1]
    suit_str = card_str[-1]
    suit = [s for s in list(Suit) if s.value == suit_str][0]
    return Card.of(rank_str, suit)


def cl(cards_str: list[str]) -> list[Card]:
    """
    A quick way to parse a list of Card object from a string e.g. ["10♥", "Q♣"]
    """
    return [c(s) for s in cards_str]


def slots(cards_str: list[str | None]) -> tuple[Card | None, ...]:
    """
    Same as ``cl`` but keeps ``None`` as empty hand slots
    """
    return tuple(c(s) if s is not None else None for s in cards_str)


def view(hand: list[str | None],
         trick: list[str] = (),
         trick_no: int = 1,
         are_hearts_broken: bool = False,
         other_hands: list[list[str]] = ((), (), ())) -> RoundView:
    """
    Builds a round snapshot for the player to move out of card strings
    """
    return RoundView(
        hand=slots(hand),
        trick=tuple(cl(list(trick))),
        trick_no=trick_no,
        are_hearts_broken=are_hearts_broken,
        other_hands=tuple(tuple(cl(list(h))) for h in other_hands),
    )


# Hands of a rigged round, used by the scenario tests. Seat 0 holds the two
# of clubs and no diamonds, seat 3 holds the ace of spades and four hearts.
RIGGED_HANDS = [
    ['2♣', '2♥', '3♥', '4♥', '5♥', '6♥', '7♥', '8♥', '9♥', 'A♥', '2♠', '3♠', '4♠'],
    ['3♣', '4♣', '5♣', '6♣', '7♣', '4♦', '5♦', '8♦', '9♦', '5♠', '6♠', '7♠', '8♠'],
    ['8♣', '10♣', 'J♣', 'K♣', '2♦', '6♦', '10♦', 'J♦', '9♠', '10♠', 'J♠', 'Q♠', 'K♠'],
    ['9♣', 'Q♣', 'A♣', '3♦', '7♦', 'Q♦', 'K♦', 'A♦', 'A♠', '10♥', 'J♥', 'Q♥', 'K♥'],
]
