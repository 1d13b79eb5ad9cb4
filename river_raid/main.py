#!/usr/bin/env python3
"""
RIVER RAID - Terminal River Shooter
====================================
Fly up a winding river, dodge the banks, shoot what floats down.

Controls:
    WASD / Arrows   - Move
    SPACE           - Fire
    Q/ESC           - Quit
"""

import logging
import sys
import time
from typing import Optional

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .engine import GameRenderer, GRAY_MED, GRAY_DARKER, NEON_CYAN, NEON_GREEN, NEON_RED, NEON_YELLOW
from .logger import setup_logging
from .player import InputHandler, Intent, apply_intent
from .rng import RandomSource
from .systems import physics, render_world
from .world import World, create_world

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

FRAME_TIME = 0.1             # Seconds per tick
INPUT_TIMEOUT = 0.01         # Seconds to wait for a key each tick
MIN_WIDTH = 20
MIN_HEIGHT = 10

# Game phases
PHASE_TITLE = 'title'
PHASE_PLAYING = 'playing'
PHASE_GAME_OVER = 'game_over'

TITLE_ART = [
    r" ___ _____   _____ ___   ___    _   ___ ___  ",
    r"| _ \_ _\ \ / / __| _ \ | _ \  /_\ |_ _|   \ ",
    r"|   /| | \ V /| _||   / |   / / _ \ | || |) |",
    r"|_|_\___| \_/ |___|_|_\ |_|_\/_/ \_\___|___/ ",
]

GAME_OVER_ART = [
    r" ___   _   __  __ ___    _____   _____ ___ ",
    r"/ __| /_\ |  \/  | __|  / _ \ \ / / __| _ \ ",
    r"| (_ |/ _ \| |\/| | _|  | (_) \ V /| _||   /",
    r" \___/_/ \_\_|  |_|___|  \___/ \_/ |___|_|_\ ",
]

PROMPT = '[ PRESS ANY KEY TO CONTINUE ]'


# =============================================================================
# SCREENS
# =============================================================================

def render_title_screen(renderer: GameRenderer, frame: int):
    """Render the welcome banner."""
    height = renderer.height
    art_y = max(1, height // 2 - 4)

    for i, line in enumerate(TITLE_ART):
        renderer.put_centered(art_y + i, line, NEON_CYAN if i % 2 == 0 else NEON_GREEN)

    controls = 'WASD/ARROWS - Move   SPACE - Fire   Q - Quit'
    renderer.put_centered(art_y + len(TITLE_ART) + 1, controls, GRAY_MED)

    # Blinking prompt
    if (frame // 5) % 2 == 0:
        renderer.put_centered(art_y + len(TITLE_ART) + 3, PROMPT, NEON_YELLOW)

    renderer.draw_box(0, 0, renderer.width, height, GRAY_DARKER, '.')


def render_goodbye_screen(renderer: GameRenderer, ticks: int, frame: int):
    """Render the game over banner with the run length."""
    height = renderer.height
    art_y = max(1, height // 2 - 4)

    for i, line in enumerate(GAME_OVER_ART):
        renderer.put_centered(art_y + i, line, NEON_RED)

    stats_y = art_y + len(GAME_OVER_ART) + 1
    renderer.put_centered(stats_y, 'THANKS FOR PLAYING', NEON_CYAN)
    renderer.put_centered(stats_y + 1, f'TICKS SURVIVED: {ticks}', NEON_YELLOW)

    if (frame // 5) % 2 == 0:
        renderer.put_centered(stats_y + 3, PROMPT, NEON_GREEN)


# =============================================================================
# GAME STATE
# =============================================================================

class GameState:
    """Session controller. Owns the World and threads it through each tick."""

    def __init__(self, term: Terminal, rng: Optional[RandomSource] = None):
        self.term = term
        self.renderer = GameRenderer(term)
        self.input_handler = InputHandler()
        self.rng = rng or RandomSource()

        self.running = True
        self.phase = PHASE_TITLE
        self.phase_frame = 0
        self.world: Optional[World] = None

    def _set_phase(self, phase: str):
        logger.info('phase %s -> %s', self.phase, phase)
        self.phase = phase
        self.phase_frame = 0

    def start_game(self):
        """Initialize a new game session."""
        self.world = create_world(self.renderer.width, self.renderer.height)
        self._set_phase(PHASE_PLAYING)

    def _trigger_game_over(self):
        logger.info('player died after %d ticks', self.world.ticks)
        self._set_phase(PHASE_GAME_OVER)

    def quit(self):
        logger.info('player quit')
        self.running = False

    def handle_input(self):
        """
        Wait briefly for a key, then drain the rest of the burst.

        Only the first key read this tick is acted on.
        """
        key = self.term.inkey(timeout=INPUT_TIMEOUT)
        if not key:
            return
        while self.term.inkey(timeout=0):
            pass

        if self.phase == PHASE_TITLE:
            key_str = key.lower() if not key.is_sequence else ''
            if key_str == 'q' or key.name == 'KEY_ESCAPE':
                self.quit()
            else:
                self.start_game()
        elif self.phase == PHASE_GAME_OVER:
            self.running = False
        else:
            self.input_handler.process_key(key)

    def update(self):
        """Advance one tick: apply the pending intent, then run physics."""
        self.phase_frame += 1
        if self.phase != PHASE_PLAYING:
            return

        intent = self.input_handler.consume_intent()
        if intent == Intent.QUIT:
            self.quit()
            return
        apply_intent(self.world, intent)

        physics(self.world, self.rng)
        if not self.world.alive:
            self._trigger_game_over()

    def render(self):
        """Render one frame."""
        self.renderer.begin_frame()

        if self.phase == PHASE_TITLE:
            render_title_screen(self.renderer, self.phase_frame)
        elif self.phase == PHASE_GAME_OVER:
            render_goodbye_screen(self.renderer, self.world.ticks, self.phase_frame)
        else:
            render_world(self.world, self.renderer)

        output = self.renderer.end_frame()
        if output:
            print(output, end='', flush=True)

    def tick(self):
        """One loop iteration: input, update, render."""
        self.handle_input()
        if not self.running:
            return
        self.update()
        if not self.running:
            return
        self.render()


# =============================================================================
# MAIN LOOP
# =============================================================================

def run_session(game: GameState, sleep=time.sleep):
    """Tick at a fixed rate until the session ends."""
    # Initial clear (only time we clear the whole screen)
    print(game.term.home + game.term.clear, end='', flush=True)
    game.render()

    while game.running:
        now = time.perf_counter()
        game.tick()

        # Sleep for remaining frame time
        elapsed = time.perf_counter() - now
        sleep_time = FRAME_TIME - elapsed
        if game.running and sleep_time > 0:
            sleep(sleep_time)


def main():
    """Entry point. Sets up the terminal and runs one session."""
    setup_logging()
    term = Terminal()

    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        sys.exit(1)

    logger.info('session start on %dx%d terminal', term.width, term.height)
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            run_session(GameState(term))
            # Restore terminal
            print(term.normal, end='', flush=True)
    except OSError:
        logger.exception('terminal I/O failed')
        raise
    logger.info('session end')


if __name__ == '__main__':
    main()
