"""
Board configuration for Minesweeper.

Holds the board dimensions, mine count and gameplay switches, plus the
classic difficulty presets.
"""
from dataclasses import dataclass, replace


# ============================================================================
# Constants
# ============================================================================

MIN_SIDE = 8
MAX_SIDE = 256

# The first open always keeps a full 3x3 block free of mines
SAFE_ZONE_SIZE = 9


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        cap_flags: Refuse more definite flags than there are mines.
    """

    width: int = 32
    height: int = 16
    num_mines: int = 100
    cap_flags: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def clamped(self) -> "BoardConfig":
        """
        Return a copy with every value pulled into its playable range.

        Width and height are kept within [8, 256]; the mine count within
        [1, size - 9] so the first open can always get a mine-free 3x3 block.
        """
        width = min(max(self.width, MIN_SIDE), MAX_SIDE)
        height = min(max(self.height, MIN_SIDE), MAX_SIDE)
        max_mines = width * height - SAFE_ZONE_SIZE
        num_mines = min(max(self.num_mines, 1), max_mines)
        return replace(self, width=width, height=height, num_mines=num_mines)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
