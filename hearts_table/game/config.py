from dataclasses import dataclass


@dataclass(frozen=True)
class SeatConfig:
    """
    Args:
        name: Name of the player sitting at this seat
        is_human: Whether the moves for this seat come from the outside
    """
    name: str
    is_human: bool = False


@dataclass(frozen=True)
class TableConfig:
    """
    Args:
        seats: Exactly 4 seats, in the order of play
        random_state: Random seed for reproducible deals
    """
    seats: tuple[SeatConfig, ...] = (
        SeatConfig('Gunnar', is_human=True),
        SeatConfig('Paul'),
        SeatConfig('Simon'),
        SeatConfig('Lisa'),
    )
    random_state: int | None = None


DEFAULT_TABLE = TableConfig()
