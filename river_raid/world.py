"""
World
======
Aggregate root of one game session. Owned by the game loop and passed
explicitly to the simulation and renderer.
"""

from dataclasses import dataclass, field

from .components import Position, PlayerStatus
from .ecs import EntityStore
from .river import River


@dataclass
class World:
    """Everything a tick reads or writes."""
    max_columns: int
    max_rows: int
    player: Position
    river: River
    entities: EntityStore = field(default_factory=EntityStore)
    status: PlayerStatus = PlayerStatus.ALIVE
    ship: str = 'P'
    ticks: int = 0

    @property
    def alive(self) -> bool:
        return self.status == PlayerStatus.ALIVE


def create_world(max_columns: int, max_rows: int) -> World:
    """Fresh session: player bottom-center, straight river, no entities."""
    return World(
        max_columns=max_columns,
        max_rows=max_rows,
        player=Position(max_columns // 2, max_rows - 1),
        river=River(max_columns, max_rows),
    )
