"""
River Model
============
Scrolling riverbank geometry: one (left, right) channel per screen row,
with row 0 drifting one column per tick toward a slower-changing
random target.
"""

from typing import List, Tuple

from .rng import RandomSource


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_CHANNEL_WIDTH = 3
RETARGET_SPREAD = 5          # New targets land within +/- this of the old one
RETARGET_ROLL = 10           # Draw in [0, RETARGET_ROLL)...
RETARGET_THRESHOLD = 7       # ...retarget when the draw is >= this (30%)

INITIAL_HALF_WIDTH = 5
INITIAL_TARGET_HALF_WIDTH = 7


def _step_toward(value: int, target: int) -> int:
    if target > value:
        return value + 1
    if target < value:
        return value - 1
    return value


class River:
    """
    The scrolling tunnel.

    rows[0] is the newest row at the top of the screen; rows[-1] is the
    row at the bottom. Targets always satisfy
    1 <= target_left and target_left + MIN_CHANNEL_WIDTH <= target_right
    <= max_columns - 1.
    """

    def __init__(self, max_columns: int, max_rows: int):
        self.max_columns = max_columns
        center = max_columns // 2
        self.rows: List[Tuple[int, int]] = [
            (center - INITIAL_HALF_WIDTH, center + INITIAL_HALF_WIDTH)
        ] * max_rows
        self.target_left = center - INITIAL_TARGET_HALF_WIDTH
        self.target_right = center + INITIAL_TARGET_HALF_WIDTH

    def __len__(self) -> int:
        return len(self.rows)

    def bounds_at(self, row: int) -> Tuple[int, int]:
        """Channel (left, right) at a screen row."""
        return self.rows[row]

    def contains(self, column: int, row: int) -> bool:
        """True if the cell is on water: left <= column < right."""
        left, right = self.rows[row]
        return left <= column < right

    # -------------------------------------------------------------------------
    # Per-tick evolution
    # -------------------------------------------------------------------------

    def scroll(self) -> None:
        """Shift every row down one index; the bottom row falls off."""
        for row in range(len(self.rows) - 1, 0, -1):
            self.rows[row] = self.rows[row - 1]

    def advance_row0_toward_target(self) -> None:
        """Move each bound of row 0 one column toward its target."""
        left, right = self.rows[0]
        self.rows[0] = (
            _step_toward(left, self.target_left),
            _step_toward(right, self.target_right),
        )

    def maybe_retarget(self, rng: RandomSource) -> None:
        """
        Pick new targets for bounds that have reached theirs.

        Each bound rolls independently (30%). Left targets floor at 1
        and leave room for the minimum channel; right targets cap at
        max_columns - 1.
        """
        left, right = self.rows[0]

        if (self.target_left == left
                and rng.range(0, RETARGET_ROLL) >= RETARGET_THRESHOLD):
            new_left = rng.range(max(self.target_left - RETARGET_SPREAD, 0),
                                 self.target_left + RETARGET_SPREAD)
            new_left = min(new_left, self.max_columns - 1 - MIN_CHANNEL_WIDTH)
            self.target_left = max(new_left, 1)

        if (self.target_right == right
                and rng.range(0, RETARGET_ROLL) >= RETARGET_THRESHOLD):
            new_right = rng.range(max(self.target_right - RETARGET_SPREAD, 0),
                                  self.target_right + RETARGET_SPREAD)
            self.target_right = min(new_right, self.max_columns - 1)

    def enforce_minimum_width(self) -> None:
        """Keep the targets at least MIN_CHANNEL_WIDTH apart."""
        if abs(self.target_right - self.target_left) < MIN_CHANNEL_WIDTH:
            self.target_right += MIN_CHANNEL_WIDTH

        # Inverted targets are not fixed by a single widening
        if self.target_right - self.target_left < MIN_CHANNEL_WIDTH:
            self.target_right = self.target_left + MIN_CHANNEL_WIDTH

        if self.target_right > self.max_columns - 1:
            self.target_right = self.max_columns - 1
            self.target_left = min(self.target_left,
                                   self.target_right - MIN_CHANNEL_WIDTH)

    def advance(self, rng: RandomSource) -> None:
        """Scroll one row and shape the new top row."""
        self.scroll()
        self.advance_row0_toward_target()
        self.maybe_retarget(rng)
        self.enforce_minimum_width()
