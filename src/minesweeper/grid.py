"""
Grid geometry helpers.

Cells live in a flat row-major list, so positions are converted between
(x, y) cursors and list indices here.
"""
from typing import Iterator, Sequence, Tuple

Cursor = Tuple[int, int]

DIRS_8: Tuple[Cursor, ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)
DIRS_9: Tuple[Cursor, ...] = ((0, 0),) + DIRS_8


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= x < width and 0 <= y < height


def to_index(x: int, y: int, width: int) -> int:
    """Convert (x, y) to a flat row-major index."""
    return y * width + x


def to_cursor(index: int, width: int) -> Cursor:
    """Convert a flat index back to (x, y)."""
    return index % width, index // width


def neighbors(
    x: int,
    y: int,
    width: int,
    height: int,
    dirs: Sequence[Cursor] = DIRS_8,
) -> Iterator[Cursor]:
    """
    Yield in-bounds positions around (x, y).

    Args:
        x: Column of center cell.
        y: Row of center cell.
        width: Board width.
        height: Board height.
        dirs: Offsets to apply; DIRS_9 includes the center itself.

    Yields:
        (x, y) tuples of valid positions. Edges are clipped, never wrapped.
    """
    for dx, dy in dirs:
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny, width, height):
            yield nx, ny
