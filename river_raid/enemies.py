"""
Enemy Definitions
==================
Enemy entity creation and lookup.
"""

from typing import Iterator, Tuple

from .ecs import EntityStore
from .components import Position, Renderable, EnemyTag
from .engine import NEON_RED


ENEMY_CHAR = 'E'


def create_enemy(store: EntityStore, x: int, y: int) -> int:
    """Create an enemy drifting down the river."""
    entity_id = store.create_entity()
    store.add_component(entity_id, Position(x, y))
    store.add_component(entity_id, Renderable(char=ENEMY_CHAR, color=NEON_RED, layer=5))
    store.add_component(entity_id, EnemyTag())
    return entity_id


def iter_enemies(store: EntityStore) -> Iterator[Tuple[int, Position]]:
    """Yield (entity_id, position) for every live enemy."""
    for entity_id, pos, _ in store.query(Position, EnemyTag):
        yield entity_id, pos


def enemy_count(store: EntityStore) -> int:
    return sum(1 for _ in iter_enemies(store))
