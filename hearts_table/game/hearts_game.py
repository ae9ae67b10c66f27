import logging
from dataclasses import dataclass

import numpy as np

from hearts_table.engine import Card, Deck, Player, PlayRejection, RoundView, Trick, check_play, get_valid_plays
from hearts_table.engine.constants import (
    PLAYER_COUNT, CARDS_IN_DECK_COUNT, CARDS_PER_PLAYER_COUNT, TRICK_COUNT, MAX_POINTS,
)
from hearts_table.engine.utils import is_heart, is_starting_card, has_points
from .config import TableConfig, DEFAULT_TABLE
from .events import GamePhase, EventKind, GameEvent, GameListener
from .players.heuristic import select_card

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayResult:
    """
    Outcome of an attempt to play a card

    Args:
        accepted: Whether the card has been played
        rejection: The rule that was broken, if the card was not accepted
        trick_complete: Whether the played card was the last one in the trick
    """
    accepted: bool
    rejection: PlayRejection | None = None
    trick_complete: bool = False

    @property
    def reason(self) -> str | None:
        if self.rejection is None:
            return None
        return self.rejection.value


class HeartsGame:
    """
    A single round of the standard 4-player game of Hearts, played step by
    step.

    The game is a state machine (see :class:`GamePhase`). Human moves are
    supplied with :meth:`attempt_play`, and everything else (computer moves,
    resolving full tricks) happens one step per :meth:`advance` call. This
    lets the caller put any delays it wants between the steps.

    Args:
        config: Seats and the random seed. See :class:`TableConfig`
        rng: Random generator used for shuffling. If given, the random seed
            from the config is ignored
    """

    def __init__(self,
                 config: TableConfig = DEFAULT_TABLE,
                 rng: np.random.Generator | None = None):

        if len(config.seats) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} players')

        self.players = [Player(seat.name, is_human=seat.is_human) for seat in config.seats]
        self.deck = Deck(rng=rng, random_state=config.random_state)

        self.phase = GamePhase.NOT_DEALT
        self.trick_no = 0
        self._trick: Trick | None = None
        self._discarded: list[Card] = []
        self._tricks_history: list[tuple[list[Card], int]] = []
        self._listeners: list[GameListener] = []
        # listeners being notified; the game cannot be advanced from within them
        self._notifying = 0

    def add_listener(self, listener: GameListener):
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        self._listeners.remove(listener)

    def _emit(self, kind: EventKind, player_idx: int | None = None,
              message: str = '', cards: list[Card] | None = None):
        event = GameEvent(kind, player_idx, message, tuple(cards or ()))
        self._notifying += 1
        try:
            for listener in self._listeners:
                listener(event)
        finally:
            self._notifying -= 1

    @property
    def current_trick(self) -> list[Card]:
        if self._trick is None:
            return []
        return self._trick.cards

    @property
    def leading_player_idx(self) -> int | None:
        if self._trick is None:
            return None
        return self._trick.leading_player_idx

    @property
    def tricks_history(self) -> list[tuple[list[Card], int]]:
        """
        Tricks resolved in this round, in order. Each one is a tuple of the
        trick content and the index of a player who took it.
        """
        return [(cards.copy(), taker_idx) for cards, taker_idx in self._tricks_history]

    @property
    def discarded(self) -> list[Card]:
        """Cards worth no points from the resolved tricks"""
        return self._discarded.copy()

    @property
    def are_hearts_broken(self) -> bool:
        """Whether any heart has been taken in one of the previous tricks"""
        return any(is_heart(card) for player in self.players for card in player.cards_taken)

    @property
    def is_round_over(self) -> bool:
        return self.phase == GamePhase.ROUND_OVER

    @property
    def is_awaiting_move(self) -> bool:
        return self.phase in (GamePhase.AWAITING_LEAD, GamePhase.TRICK_IN_PROGRESS)

    @property
    def current_player_idx(self) -> int:
        """ID of the player that is expected to throw the next card"""
        if not self.is_awaiting_move:
            raise RuntimeError(f'No player is expected to play a card in phase {self.phase.name}')
        return self._trick.next_player_idx

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_idx]

    def deal(self, player_name: str | None = None):
        """
        Shuffles and deals all the cards, and resets the round. The player
        holding the two of clubs leads the first trick.

        Args:
            player_name: New name for the player at the first seat
        """
        if player_name is not None:
            self.players[0].name = player_name

        logger.debug('Resetting game')
        self.deck.shuffle()
        for player in self.players:
            player.reset(self.deck.deal(CARDS_PER_PLAYER_COUNT))

        self.trick_no = 0
        self._discarded = []
        self._tricks_history = []
        self._trick = Trick(self._find_starting_player_idx())
        self.phase = GamePhase.AWAITING_LEAD

        self._emit(EventKind.ROUND_STARTED, self._trick.leading_player_idx)
        self._announce_turn()

    def override_hands(self, hands: list[list[Card]]):
        """
        Replace the dealt hands with the given ones. Use with caution and
        only right after dealing, before any card is played.
        """
        if self.phase != GamePhase.AWAITING_LEAD or self.trick_no != 0:
            raise RuntimeError('Hands can only be overridden right after dealing')
        if len(hands) != PLAYER_COUNT or any(len(hand) != CARDS_PER_PLAYER_COUNT for hand in hands):
            raise ValueError(f'There should be {PLAYER_COUNT} hands of {CARDS_PER_PLAYER_COUNT} cards')

        all_cards = [card for hand in hands for card in hand]
        if len(set(all_cards)) != CARDS_IN_DECK_COUNT:
            raise RuntimeError(f'Hands do not form a full deck: {len(set(all_cards))} unique cards')

        for player, hand in zip(self.players, hands):
            player.reset(hand)
        self._trick = Trick(self._find_starting_player_idx())
        self._announce_turn()

    def _find_starting_player_idx(self) -> int:
        for player_idx, player in enumerate(self.players):
            if any(is_starting_card(card) for card in player.hand):
                return player_idx
        raise RuntimeError('Nobody holds the two of clubs')

    def _announce_turn(self):
        player_idx = self.current_player_idx
        player = self.players[player_idx]
        if player.is_human:
            self._emit(EventKind.AWAITING_HUMAN_MOVE, player_idx, 'Select a card to play.')
        else:
            self._emit(EventKind.PLAYER_THINKING, player_idx, f'Waiting for {player} to play a card...')

    def view_for(self, player_idx: int) -> RoundView:
        """Snapshot of the round as seen by the given player"""
        return RoundView(
            hand=self.players[player_idx].hand.slots,
            trick=tuple(self.current_trick),
            trick_no=self.trick_no,
            are_hearts_broken=self.are_hearts_broken,
            other_hands=tuple(
                tuple(player.hand)
                for other_idx, player in enumerate(self.players)
                if other_idx != player_idx
            ),
        )

    def valid_plays(self, player_idx: int) -> list[int]:
        """Indexes of the hand slots the player could legally play now"""
        return get_valid_plays(
            hand=list(self.players[player_idx].hand.slots),
            trick=self.current_trick,
            is_first_trick=self.trick_no == 0,
            are_hearts_broken=self.are_hearts_broken,
        )

    def suggest_card(self, player_idx: int | None = None) -> int:
        """
        The card the computer would play for the current player

        Args:
            player_idx: Defaults to the current player. Any other player
                is not expected to play and cannot get a suggestion

        Raises:
            RuntimeError: if the given player is not the one to play now
        """
        current_player_idx = self.current_player_idx
        if player_idx is not None and player_idx != current_player_idx:
            raise RuntimeError(f'{self.players[player_idx]} is not expected to play a card now')
        return select_card(self.view_for(current_player_idx))

    def attempt_play(self, player_idx: int, card_idx: int) -> PlayResult:
        """
        Play a card from the given hand slot in the current trick.
        An illegal play is rejected and does not change anything.

        Raises:
            RuntimeError: if no card can be played in the current phase, or
                the slot is empty
            IndexError: if the hand has no such slot
        """
        if not self.is_awaiting_move:
            raise RuntimeError(f'Cannot play a card in phase {self.phase.name}')

        player = self.players[player_idx]
        if player_idx != self.current_player_idx:
            return self._reject(player_idx, PlayRejection.NOT_YOUR_TURN)

        if not 0 <= card_idx < player.hand.slot_count:
            raise IndexError(f'{player} has no hand slot {card_idx}')
        card = player.hand[card_idx]
        if card is None:
            raise RuntimeError(f'Slot {card_idx} of {player} is empty')

        rejection = self._check_play(player, card)
        if rejection is not None:
            return self._reject(player_idx, rejection)

        if self._trick.is_full:
            raise RuntimeError('Cannot play card because the trick is full')
        self._trick.add(player.hand.take(card_idx))
        trick_complete = self._trick.is_full
        self.phase = GamePhase.TRICK_RESOLVING if trick_complete else GamePhase.TRICK_IN_PROGRESS
        logger.debug('%s plays %s', player, card)

        self._emit(EventKind.CARD_PLAYED, player_idx, f'{player} plays {card}', [card])
        if not trick_complete:
            self._announce_turn()
        return PlayResult(accepted=True, trick_complete=trick_complete)

    def _check_play(self, player: Player, card: Card) -> PlayRejection | None:
        return check_play(
            hand=player.hand,
            card=card,
            trick=self.current_trick,
            is_first_trick=self.trick_no == 0,
            are_hearts_broken=self.are_hearts_broken,
        )

    def _reject(self, player_idx: int, rejection: PlayRejection) -> PlayResult:
        self._emit(EventKind.PLAY_REJECTED, player_idx, f"You can't play this card: {rejection}")
        return PlayResult(accepted=False, rejection=rejection)

    def resolve_trick(self) -> int:
        """
        Complete the current trick and prepare for the next one

        Returns:
            The index of a player who took the trick
        """
        if self.phase != GamePhase.TRICK_RESOLVING:
            raise RuntimeError('The trick is not full and therefore cannot be completed')

        trick_cards = self._trick.cards
        taker_idx = self._trick.taker_idx()
        taker = self.players[taker_idx]
        logger.debug('%s takes the trick: %s', taker, self._trick)

        for card in trick_cards:
            if has_points(card):
                taker.cards_taken.append(card)
            else:
                self._discarded.append(card)

        self._tricks_history.append((trick_cards, taker_idx))
        self.trick_no += 1
        self._trick = Trick(taker_idx)
        self._verify_deck_partition()

        if self.trick_no == TRICK_COUNT:
            for player in self.players:
                player.sort_cards_taken()
            self.phase = GamePhase.ROUND_OVER
            logger.info('Round finished. Scores: %s', self.scores())
        else:
            self.phase = GamePhase.AWAITING_LEAD

        self._emit(EventKind.TRICK_TAKEN, taker_idx, f'{taker} takes the trick', trick_cards)
        if self.is_round_over:
            self._emit(EventKind.ROUND_ENDED, message='Game ended.')
        else:
            self._announce_turn()

        return taker_idx

    def _verify_deck_partition(self):
        all_cards = list(self._discarded) + self.current_trick
        for player in self.players:
            all_cards.extend(player.hand)
            all_cards.extend(player.cards_taken)
        if len(all_cards) != CARDS_IN_DECK_COUNT or len(set(all_cards)) != CARDS_IN_DECK_COUNT:
            raise RuntimeError(f'Cards no longer form a full deck: {len(all_cards)} cards, '
                               f'{len(set(all_cards))} unique')

    def advance(self) -> bool:
        """
        Perform one step of the game: resolve a full trick, or let the
        computer play for the current player. Does nothing if a human is
        expected to play, or the round is not in progress.

        Calls made from within a listener do nothing as well, so that a
        step is never applied twice.

        Returns:
            ``True`` if the state of the game has changed
        """
        if self._notifying:
            return False

        if self.phase == GamePhase.TRICK_RESOLVING:
            self.resolve_trick()
            return True

        if not self.is_awaiting_move:
            return False

        player_idx = self.current_player_idx
        player = self.players[player_idx]
        if player.is_human:
            self._emit(EventKind.AWAITING_HUMAN_MOVE, player_idx, 'Select a card to play.')
            return False

        card_idx = self.suggest_card()
        rejection = self._check_play(player, player.hand[card_idx])
        if rejection is not None:
            raise RuntimeError(f'{player} picked an illegal card {player.hand[card_idx]}: {rejection}')
        self.attempt_play(player_idx, card_idx)
        return True

    def run_until_blocked(self) -> int:
        """
        Keep advancing until a human move is needed or the round is over

        Returns:
            Number of steps performed
        """
        steps = 0
        while self.advance():
            steps += 1
        return steps

    def set_human(self, player_idx: int, is_human: bool):
        """Hand the seat over to the computer, or take it back"""
        self.players[player_idx].is_human = is_human
        if self.is_awaiting_move and self.current_player_idx == player_idx:
            self._announce_turn()

    def scores(self) -> list[int]:
        """Points collected by each player so far"""
        return [player.points for player in self.players]

    def winners(self) -> set[int]:
        """
        Indexes of the winning players. A player who has taken all the
        points shoots the moon and is the only winner; otherwise everyone
        with the lowest score wins.
        """
        scores = self.scores()
        if MAX_POINTS in scores:
            return {scores.index(MAX_POINTS)}
        min_score = min(scores)
        return {player_idx for player_idx, score in enumerate(scores) if score == min_score}

    def is_winner(self, player_idx: int) -> bool:
        return player_idx in self.winners()

    def dump_state(self):
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug('------------------------------')
        for player in self.players:
            logger.debug('Player %s', player)
            logger.debug('Hand: %s', player.hand)
            logger.debug('Taken: %s', ', '.join(str(card) for card in player.cards_taken))
