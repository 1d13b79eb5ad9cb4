"""
Projectile System
==================
Bullet lifecycle: spawn on fire, climb two rows per tick, expire when
its energy runs out or it nears the top of the screen.
"""

from typing import Iterator, Optional, Tuple

from .ecs import EntityStore
from .components import Position, Renderable, Bullet, BulletTag
from .engine import NEON_YELLOW
from .world import World


BULLET_CHAR = '|'
BULLET_TIP_CHAR = '^'
BULLET_SPEED = 2             # Rows climbed per tick
BULLET_CEILING = 2           # Bullets at or above this row are removed


def bullet_energy(max_rows: int) -> int:
    """Range of a fresh bullet, in ticks."""
    return max_rows // 4


def spawn_bullet(store: EntityStore, x: int, y: int, energy: int) -> int:
    """Spawn a single bullet entity."""
    entity_id = store.create_entity()
    store.add_component(entity_id, Position(x, y))
    store.add_component(entity_id, Renderable(char=BULLET_CHAR, color=NEON_YELLOW, layer=8))
    store.add_component(entity_id, Bullet(energy=energy, tip_char=BULLET_TIP_CHAR))
    store.add_component(entity_id, BulletTag())
    return entity_id


def iter_bullets(store: EntityStore) -> Iterator[Tuple[int, Position, Bullet]]:
    """Yield (entity_id, position, bullet) for every live bullet."""
    for entity_id, pos, bullet, _ in store.query(Position, Bullet, BulletTag):
        yield entity_id, pos, bullet


def has_live_bullet(store: EntityStore) -> bool:
    return any(True for _ in iter_bullets(store))


def fire_bullet(world: World) -> Optional[int]:
    """
    Fire from one row above the ship.

    Only one bullet may be in flight; firing while one exists does
    nothing and returns None.
    """
    if has_live_bullet(world.entities):
        return None
    return spawn_bullet(
        world.entities,
        world.player.x,
        world.player.y - 1,
        bullet_energy(world.max_rows),
    )
