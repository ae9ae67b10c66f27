from hearts_table.engine import Card
from hearts_table.engine.utils import sum_points
from ..events import GameEvent, EventKind


class InputPlayer:
    """
    A player with console input. Register the object as a listener of the
    game to have the status lines and trick outcomes printed.

    Args:
        player_idx: Seat of the player at the table
        pause_after_trick: Whether to wait for [Enter] after every trick
    """

    def __init__(self, player_idx: int = 0, pause_after_trick: bool = True):
        self.player_idx = player_idx
        self.pause_after_trick = pause_after_trick

    @staticmethod
    def pretty_print_hand(hand: list[Card | None], valid_cards_idx: list[int] | None = None) -> None:
        held_idx = [i for i, card in enumerate(hand) if card is not None]
        if valid_cards_idx is None:
            valid_cards_idx = held_idx

        numbers_row = ' | '.join(
            f'{valid_cards_idx.index(i) + 1:^3}'
            if i in valid_cards_idx else ' ' * 3
            for i in held_idx
        )

        cards_row = ' | '.join(f'{str(hand[i]):^3}' for i in held_idx)

        print(numbers_row)
        print(cards_row)

    def play_card(self,
                  hand: list[Card | None],
                  trick: list[Card],
                  valid_cards_idx: list[int]) -> int:
        """
        Returns:
            Index of the chosen hand slot
        """
        print()

        if len(trick) == 0:
            print('You are leading the trick')
        else:
            print(f'Current trick: {", ".join([str(card) for card in trick])}')

        print('Your hand:')
        self.pretty_print_hand(hand, valid_cards_idx)

        while True:
            try:
                choice = int(input(f'Choose a card (1-{len(valid_cards_idx)}): ')) - 1
                if 0 <= choice < len(valid_cards_idx):
                    return valid_cards_idx[choice]
                else:
                    print('Choice out of range.')
            except ValueError:
                print('Please enter a number.')

    def __call__(self, event: GameEvent) -> None:
        if event.kind == EventKind.PLAY_REJECTED and event.player_idx == self.player_idx:
            print(event.message)
        elif event.kind == EventKind.TRICK_TAKEN:
            print(f'Trick outcome: {", ".join([str(card) for card in event.cards])} '
                  f'({sum_points(event.cards)} pts)')
            if event.player_idx == self.player_idx:
                print('You take this trick.')
            if self.pause_after_trick:
                input('Press [Enter] to proceed ')
        elif event.kind == EventKind.ROUND_ENDED:
            print('=====')
            print(event.message)
            print('=====')
