"""
Rendering Engine
=================
Double-buffered terminal renderer.

Each frame is painted into a cleared back buffer, then the cells that
differ from the previous frame are emitted as a single string.
"""

from dataclasses import dataclass, field
from typing import List

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


# ANSI 256 color constants
NEON_CYAN = 51
NEON_YELLOW = 226
NEON_GREEN = 46
NEON_RED = 196

BANK_GREEN = 28

GRAY_MED = 245
GRAY_DARK = 238
GRAY_DARKER = 235


@dataclass
class Cell:
    """A single cell in the render buffer."""
    char: str = ' '
    fg_color: int = 7
    bg_color: int = -1  # -1 = transparent/default

    def matches(self, other: 'Cell') -> bool:
        """Check if two cells are visually identical."""
        return (
            self.char == other.char and
            self.fg_color == other.fg_color and
            self.bg_color == other.bg_color
        )

    def reset(self):
        self.char = ' '
        self.fg_color = 7
        self.bg_color = -1


class DoubleBuffer:
    """
    Double-buffered terminal surface.

    Writes go to the back buffer; present() swaps the buffers and
    returns the escape sequence for the cells that changed. The size is
    read once from the terminal and never changes afterwards.
    """

    def __init__(self, term: Terminal):
        self.term = term
        self.width = term.width
        self.height = term.height
        self.front: List[List[Cell]] = self._blank()
        self.back: List[List[Cell]] = self._blank()
        self._normal = term.normal

    def _blank(self) -> List[List[Cell]]:
        return [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def clear_back(self):
        """Clear the back buffer by resetting cells in-place."""
        for row in self.back:
            for cell in row:
                cell.reset()

    def put(self, x: int, y: int, char: str, fg_color: int = 7, bg_color: int = -1):
        """Put a character in the back buffer; off-screen writes are dropped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.fg_color = fg_color
            cell.bg_color = bg_color

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7, bg_color: int = -1):
        """Put a string in the back buffer."""
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color, bg_color)

    def char_at(self, x: int, y: int) -> str:
        """Character currently painted in the back buffer."""
        return self.back[y][x].char

    def present(self) -> str:
        """
        Swap buffers and generate output for changed cells only.

        The returned string is written in one piece so a frame is never
        partially visible.
        """
        output_parts = []
        normal = self._normal

        for y in range(self.height):
            for x in range(self.width):
                back_cell = self.back[y][x]
                front_cell = self.front[y][x]

                if not back_cell.matches(front_cell):
                    output_parts.append(self.term.move_xy(x, y))
                    # Reset colors to prevent bleed
                    output_parts.append(normal)
                    if back_cell.bg_color >= 0:
                        output_parts.append(self.term.on_color(back_cell.bg_color))
                    output_parts.append(self.term.color(back_cell.fg_color))
                    output_parts.append(back_cell.char if back_cell.char else ' ')

        # Swap: back becomes the new front, old front becomes next back
        self.front, self.back = self.back, self.front

        return ''.join(output_parts)


@dataclass
class GameRenderer:
    """High-level frame lifecycle on top of the double buffer."""
    term: Terminal
    buffer: DoubleBuffer = field(init=False)

    def __post_init__(self):
        self.buffer = DoubleBuffer(self.term)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    def begin_frame(self):
        """Begin rendering a new frame on a cleared surface."""
        self.buffer.clear_back()

    def end_frame(self) -> str:
        """Finalize the frame and return the changed-cell output."""
        return self.buffer.present()

    def put(self, x: int, y: int, char: str, fg_color: int = 7):
        self.buffer.put(x, y, char, fg_color)

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        self.buffer.put_string(x, y, text, fg_color)

    def put_centered(self, y: int, text: str, fg_color: int = 7):
        """Put a string horizontally centered on row y."""
        x = max(0, self.width // 2 - len(text) // 2)
        self.buffer.put_string(x, y, text, fg_color)

    def draw_box(self, x: int, y: int, w: int, h: int, color: int = GRAY_DARK,
                 char: str = '#'):
        """Draw a rectangular border."""
        for i in range(w):
            self.put(x + i, y, char, color)
            self.put(x + i, y + h - 1, char, color)
        for j in range(1, h - 1):
            self.put(x, y + j, char, color)
            self.put(x + w - 1, y + j, char, color)
