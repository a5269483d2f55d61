"""
Mine placement.

Scatters mines uniformly at random across the board while keeping a
safe zone around the first opened cell. Sampling walks a sorted set of
already used indices instead of retrying on collisions.
"""
import bisect
import logging
from typing import Iterable, List

import numpy as np

from .grid import DIRS_9, Cursor, neighbors, to_index

logger = logging.getLogger(__name__)


def fill_random(
    whitelist: Iterable[int],
    size: int,
    fills: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Mark exactly ``fills`` random non-whitelisted positions.

    Each draw picks r in [0, size - len(chosen)) and shifts it past every
    already chosen index <= r, which lands on a distinct free index with
    uniform probability. When more than half the board must be filled the
    complement is sampled instead.

    Args:
        whitelist: Indices that must stay False.
        size: Length of the resulting mask.
        fills: Number of True entries wanted.
        rng: Source of uniform random integers.

    Returns:
        Boolean array of length ``size``.

    Raises:
        ValueError: If there are not enough free positions.
    """
    chosen: List[int] = sorted(set(whitelist))
    available = size - len(chosen)
    if fills < 0 or fills > available:
        raise ValueError(
            f"Cannot place {fills} mines in {available} free cells"
        )

    flip = fills > size // 2
    if flip:
        fills = available - fills
        mask = np.ones(size, dtype=bool)
        mask[chosen] = False
        value = False
    else:
        mask = np.zeros(size, dtype=bool)
        value = True

    for _ in range(fills):
        r = int(rng.integers(0, size - len(chosen)))
        for used in chosen:
            if used > r:
                break
            r += 1
        mask[r] = value
        bisect.insort(chosen, r)

    return mask


def safe_zone(cursor: Cursor, width: int, height: int) -> List[int]:
    """
    Indices that must stay free of mines for a first open at ``cursor``.

    The center is pulled one cell away from the edges so the zone always
    spans nine cells and still covers the cursor's own neighborhood.
    """
    x = min(max(cursor[0], 1), width - 2)
    y = min(max(cursor[1], 1), height - 2)
    return [
        to_index(nx, ny, width)
        for nx, ny in neighbors(x, y, width, height, DIRS_9)
    ]


def generate_mine_mask(
    width: int,
    height: int,
    mines: int,
    cursor: Cursor,
    rng: np.random.Generator,
) -> np.ndarray:
    """Build a mine mask for a first open at ``cursor``."""
    whitelist = safe_zone(cursor, width, height)
    logger.debug(
        "Placing %d mines on %dx%d board, safe zone around %s",
        mines, width, height, cursor,
    )
    return fill_random(whitelist, width * height, mines, rng)
