from .config import SeatConfig, TableConfig, DEFAULT_TABLE
from .events import GamePhase, EventKind, GameEvent
from .hearts_game import HeartsGame, PlayResult
