from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from hearts_table.engine import Card


class GamePhase(Enum):
    NOT_DEALT = 0
    AWAITING_LEAD = 1
    TRICK_IN_PROGRESS = 2
    TRICK_RESOLVING = 3
    ROUND_OVER = 4


class EventKind(Enum):
    ROUND_STARTED = 'round_started'
    AWAITING_HUMAN_MOVE = 'awaiting_human_move'
    PLAYER_THINKING = 'player_thinking'
    CARD_PLAYED = 'card_played'
    PLAY_REJECTED = 'play_rejected'
    TRICK_TAKEN = 'trick_taken'
    ROUND_ENDED = 'round_ended'


@dataclass(frozen=True)
class GameEvent:
    """
    One-way notification for the presentation layer. Listeners must not
    rely on events to drive the state of the game.

    Args:
        kind: What happened
        player_idx: The player the event concerns, if any
        message: Status line suitable for displaying
        cards: Cards involved (e.g. the played card or the taken trick)
    """
    kind: EventKind
    player_idx: int | None = None
    message: str = ''
    cards: tuple[Card, ...] = field(default=())


GameListener = Callable[[GameEvent], None]
