"""
Component Definitions
======================
All components are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# SPATIAL COMPONENTS
# =============================================================================

@dataclass
class Position:
    """Cell position: column (x) and screen row (y)."""
    x: int = 0
    y: int = 0


# =============================================================================
# RENDERING COMPONENTS
# =============================================================================

@dataclass
class Renderable:
    """Visual representation of an entity."""
    char: str = '?'
    color: int = 7  # ANSI 256 color
    layer: int = 0  # Higher layers render on top
    visible: bool = True


# =============================================================================
# COMBAT COMPONENTS
# =============================================================================

@dataclass
class Bullet:
    """Projectile range counter, spent once per tick."""
    energy: int = 0
    tip_char: str = '^'


# =============================================================================
# TAGS
# =============================================================================

@dataclass
class EnemyTag:
    """Marks an entity as an enemy."""
    pass


@dataclass
class BulletTag:
    """Marks an entity as a player bullet."""
    pass


# =============================================================================
# PLAYER STATUS
# =============================================================================

class PlayerStatus(Enum):
    """
    Coarse game-state classification of the player.

    Only ALIVE and DEAD are reached by the current rules; PAUSED and
    ANIMATION are kept representable.
    """
    ALIVE = auto()
    DEAD = auto()
    PAUSED = auto()
    ANIMATION = auto()
