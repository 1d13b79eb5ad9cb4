"""
Player Module
==============
Keyboard mapping and the player's response to intents.
"""

from enum import Enum, auto
from typing import Optional

from .projectiles import fire_bullet
from .world import World


class Intent(Enum):
    """What the player asked for this tick."""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()
    QUIT = auto()


_CHAR_INTENTS = {
    'w': Intent.MOVE_UP,
    's': Intent.MOVE_DOWN,
    'a': Intent.MOVE_LEFT,
    'd': Intent.MOVE_RIGHT,
    ' ': Intent.FIRE,
    'q': Intent.QUIT,
}

_SEQUENCE_INTENTS = {
    'KEY_UP': Intent.MOVE_UP,
    'KEY_DOWN': Intent.MOVE_DOWN,
    'KEY_LEFT': Intent.MOVE_LEFT,
    'KEY_RIGHT': Intent.MOVE_RIGHT,
    'KEY_ESCAPE': Intent.QUIT,
}


def map_key(key) -> Optional[Intent]:
    """Translate a blessed Keystroke into an Intent (None if unmapped)."""
    if key is None or not key:
        return None
    if key.is_sequence:
        return _SEQUENCE_INTENTS.get(key.name)
    return _CHAR_INTENTS.get(key.lower())


class InputHandler:
    """
    Holds at most one pending intent per tick.

    Terminals queue repeated key presses; only the first key of a burst
    is mapped, the rest are drained by the caller and dropped.
    """

    def __init__(self):
        self._intent: Optional[Intent] = None

    def process_key(self, key) -> None:
        """Process the first key press of a burst from blessed's inkey()."""
        self._intent = map_key(key)

    def consume_intent(self) -> Optional[Intent]:
        """Check and consume the pending intent."""
        intent = self._intent
        self._intent = None
        return intent


def apply_intent(world: World, intent: Optional[Intent]) -> None:
    """
    Move or fire. The ship stays within [1, max - 1] on both axes.

    QUIT is handled by the game loop and ignored here.
    """
    player = world.player

    if intent == Intent.MOVE_UP:
        if player.y > 1:
            player.y -= 1
    elif intent == Intent.MOVE_DOWN:
        if player.y < world.max_rows - 1:
            player.y += 1
    elif intent == Intent.MOVE_LEFT:
        if player.x > 1:
            player.x -= 1
    elif intent == Intent.MOVE_RIGHT:
        if player.x < world.max_columns - 1:
            player.x += 1
    elif intent == Intent.FIRE:
        fire_bullet(world)
