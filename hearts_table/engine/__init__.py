"""
This module contains the core classes of the Hearts rules: cards, hands,
tricks and the legal-play rules
"""

from .card import Card
from .constants import Suit
from .deck import Deck
from .hand import Hand
from .player import Player
from .round import RoundView
from .rules import PlayRejection, check_play, is_valid_play, get_valid_plays
from .trick import Trick
