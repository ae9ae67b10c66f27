import logging

from hearts_table.game import HeartsGame, TableConfig, SeatConfig
from hearts_table.game.players import InputPlayer

if __name__ == '__main__':
    logging.basicConfig(level=logging.WARNING)

    name = input('Your name: ').strip() or None
    game = HeartsGame(TableConfig(seats=(
        SeatConfig('You', is_human=True),
        SeatConfig('Paul'),
        SeatConfig('Simon'),
        SeatConfig('Lisa'),
    )))
    console = InputPlayer(player_idx=0)
    game.add_listener(console)

    game.deal(player_name=name)
    while not game.is_round_over:
        game.run_until_blocked()
        if game.is_round_over:
            break
        card_idx = console.play_card(
            hand=list(game.players[0].hand.slots),
            trick=game.current_trick,
            valid_cards_idx=game.valid_plays(0),
        )
        game.attempt_play(0, card_idx)

    scores = game.scores()
    for player_idx, player in enumerate(game.players):
        marker = ' (winner)' if game.is_winner(player_idx) else ''
        print(f'{player}: {scores[player_idx]}{marker}')
