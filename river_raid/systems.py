"""
Simulation Systems
===================
Functions that advance the World by one tick, plus the world painter.

physics() runs the rules in a fixed order: collisions are judged
against the river as it is before it scrolls.
"""

import logging

from .components import Position, Renderable, Bullet, PlayerStatus
from .enemies import create_enemy, iter_enemies
from .engine import GameRenderer, BANK_GREEN, NEON_CYAN
from .projectiles import iter_bullets, BULLET_SPEED, BULLET_CEILING
from .rng import RandomSource
from .world import World

logger = logging.getLogger(__name__)


SPAWN_ROLL = 10
SPAWN_THRESHOLD = 9          # Spawn when the draw is >= this (10%)
HIT_RANGE = 1                # Max row distance for a bullet to hit
BANK_CHAR = '+'


# =============================================================================
# COLLISION SYSTEMS
# =============================================================================

def ground_collision_system(world: World):
    """Kill the player if the ship is outside the channel on its row."""
    player = world.player
    if not world.river.contains(player.x, player.y):
        logger.info('ship hit the bank at (%d, %d)', player.x, player.y)
        world.status = PlayerStatus.DEAD


def enemy_collision_system(world: World):
    """Kill the player on contact with an enemy; remove enemies hit by bullets."""
    store = world.entities
    player = world.player
    bullets = [pos for _, pos, _ in iter_bullets(store)]

    for enemy_id, e_pos in iter_enemies(store):
        if e_pos.x == player.x and e_pos.y == player.y:
            logger.info('ship rammed by enemy at (%d, %d)', e_pos.x, e_pos.y)
            world.status = PlayerStatus.DEAD

        for b_pos in bullets:
            if e_pos.x == b_pos.x and abs(e_pos.y - b_pos.y) <= HIT_RANGE:
                store.destroy_entity(enemy_id)
                break


# =============================================================================
# WORLD MOVEMENT
# =============================================================================

def river_system(world: World, rng: RandomSource):
    world.river.advance(rng)


def enemy_spawn_system(world: World, rng: RandomSource):
    """Maybe drop a new enemy somewhere on the top row of water."""
    if rng.range(0, SPAWN_ROLL) >= SPAWN_THRESHOLD:
        left, right = world.river.bounds_at(0)
        create_enemy(world.entities, rng.range(left, right), 0)


def enemy_movement_system(world: World):
    """Drift enemies down one row; cull those past the bottom."""
    store = world.entities
    for enemy_id, pos in iter_enemies(store):
        pos.y += 1
        if pos.y >= world.max_rows:
            store.destroy_entity(enemy_id)


def bullet_movement_system(world: World):
    """Climb bullets and spend their energy; remove spent ones."""
    store = world.entities
    for bullet_id, pos, bullet in iter_bullets(store):
        pos.y -= BULLET_SPEED
        bullet.energy -= 1
        if bullet.energy <= 0 or pos.y <= BULLET_CEILING:
            store.destroy_entity(bullet_id)


def physics(world: World, rng: RandomSource):
    """Advance the world by exactly one tick."""
    ground_collision_system(world)
    enemy_collision_system(world)
    river_system(world, rng)
    enemy_spawn_system(world, rng)
    enemy_movement_system(world)
    bullet_movement_system(world)
    world.entities.process_dead_entities()
    world.ticks += 1


# =============================================================================
# RENDERING
# =============================================================================

def render_banks(world: World, renderer: GameRenderer):
    """Fill every cell outside the channel with bank glyphs."""
    for y, (left, right) in enumerate(world.river.rows):
        renderer.put_string(0, y, BANK_CHAR * left, BANK_GREEN)
        renderer.put_string(right, y, BANK_CHAR * (world.max_columns - right), BANK_GREEN)


def render_system(world: World, renderer: GameRenderer):
    """
    Render all visible entities, sorted by layer.

    Bullets get their tip drawn one row above the body.
    """
    store = world.entities
    render_list = []

    for entity_id, pos, rend in store.query(Position, Renderable):
        if rend.visible:
            render_list.append((rend.layer, entity_id, pos, rend))

    render_list.sort(key=lambda x: x[0])

    for _, entity_id, pos, rend in render_list:
        renderer.put(pos.x, pos.y, rend.char, rend.color)
        bullet = store.get_component(entity_id, Bullet)
        if bullet:
            renderer.put(pos.x, pos.y - 1, bullet.tip_char, rend.color)


def render_world(world: World, renderer: GameRenderer):
    """Paint banks, entities and the ship. Reads the world only."""
    render_banks(world, renderer)
    render_system(world, renderer)
    renderer.put(world.player.x, world.player.y, world.ship, NEON_CYAN)
