"""
Unit tests for mine placement.

Tests the sorted-exclusion sampler, its complement mode, the safe zone
around the first open and neighbor counting on the board.
"""
import numpy as np
import pytest

from minesweeper import Board, BoardConfig, Empty, Mine, WinState
from minesweeper.grid import neighbors, to_cursor, to_index
from minesweeper.placement import fill_random, generate_mine_mask, safe_zone


# ============================================================================
# Sampler Tests
# ============================================================================

class TestFillRandom:
    """Test fill_random."""

    @pytest.mark.parametrize("fills", [0, 1, 10, 40, 50, 90, 91])
    def test_exact_fill_count(self, fills: int) -> None:
        """Exactly the requested number of entries should be set."""
        rng = np.random.default_rng(fills)
        whitelist = [0, 1, 2, 10, 11, 12, 20, 21, 22]
        mask = fill_random(whitelist, 100, fills, rng)
        assert mask.shape == (100,)
        assert mask.dtype == bool
        assert int(mask.sum()) == fills

    @pytest.mark.parametrize("fills", [5, 80])
    def test_whitelist_never_filled(self, fills: int) -> None:
        """Whitelisted indices stay False in both sampling modes."""
        whitelist = [33, 34, 35, 43, 44, 45, 53, 54, 55]
        for seed in range(50):
            mask = fill_random(whitelist, 100, fills, np.random.default_rng(seed))
            assert not mask[whitelist].any()

    def test_all_free_cells_filled(self) -> None:
        """Filling every free cell leaves only the whitelist empty."""
        whitelist = [0, 1, 2]
        mask = fill_random(whitelist, 10, 7, np.random.default_rng(0))
        assert mask.tolist() == [False] * 3 + [True] * 7

    def test_too_many_fills_raises_error(self) -> None:
        """Asking for more fills than free cells should raise ValueError."""
        with pytest.raises(ValueError, match="Cannot place"):
            fill_random([0, 1], 10, 9, np.random.default_rng(0))

    def test_same_seed_same_mask(self) -> None:
        """Placement is deterministic for a seeded generator."""
        first = fill_random([5], 64, 12, np.random.default_rng(7))
        second = fill_random([5], 64, 12, np.random.default_rng(7))
        assert np.array_equal(first, second)

    def test_every_free_cell_reachable(self) -> None:
        """Across many draws every non-whitelisted index gets picked."""
        rng = np.random.default_rng(3)
        hits = np.zeros(20, dtype=int)
        for _ in range(400):
            hits += fill_random([0, 19], 20, 2, rng)
        assert hits[0] == 0 and hits[19] == 0
        assert (hits[1:19] > 0).all()


# ============================================================================
# Safe Zone Tests
# ============================================================================

class TestSafeZone:
    """Test the whitelist around the first open."""

    def test_interior_cursor(self) -> None:
        """Interior cursor gets its own 3x3 block."""
        zone = safe_zone((4, 4), 8, 8)
        expected = {to_index(x, y, 8) for x in (3, 4, 5) for y in (3, 4, 5)}
        assert set(zone) == expected

    @pytest.mark.parametrize("cursor", [(0, 0), (7, 0), (0, 7), (7, 7), (0, 3)])
    def test_edge_cursor_keeps_nine_cells(self, cursor) -> None:
        """Edge cursors still get nine safe cells covering their block."""
        zone = set(safe_zone(cursor, 8, 8))
        assert len(zone) == 9
        block = {
            to_index(x, y, 8)
            for x, y in neighbors(cursor[0], cursor[1], 8, 8)
        }
        block.add(to_index(cursor[0], cursor[1], 8))
        assert block <= zone

    def test_first_open_neighborhood_is_mine_free(self) -> None:
        """The 3x3 around the first open never contains a mine."""
        for seed in range(30):
            mask = generate_mine_mask(8, 8, 55, (0, 0), np.random.default_rng(seed))
            assert int(mask.sum()) == 55
            for x, y in [(0, 0), (1, 0), (0, 1), (1, 1)]:
                assert not mask[to_index(x, y, 8)]


# ============================================================================
# Seeding Tests
# ============================================================================

class TestSeedMines:
    """Test writing a mine mask into a board."""

    def test_seed_sets_mines_and_counts(self) -> None:
        """Neighbor counts should match the mines around each cell."""
        board = Board(BoardConfig(8, 8, 10))
        mask = generate_mine_mask(8, 8, 10, (3, 3), np.random.default_rng(11))
        board.seed_mines(mask)

        for index, cell in enumerate(board.cells):
            if mask[index]:
                assert cell.content == Mine()
                continue
            x, y = to_cursor(index, 8)
            expected = sum(
                1 for nx, ny in neighbors(x, y, 8, 8)
                if mask[to_index(nx, ny, 8)]
            )
            assert cell.content == Empty(expected)

    def test_seed_starts_game(self) -> None:
        """Seeding moves the board out of UNTOUCHED."""
        board = Board(BoardConfig(8, 8, 1))
        mask = np.zeros(64, dtype=bool)
        mask[63] = True
        board.seed_mines(mask)
        assert board.win_state == WinState.ONGOING

    def test_corner_mine_does_not_wrap(self) -> None:
        """A mine on one edge must not bump cells on the opposite edge."""
        board = Board(BoardConfig(8, 8, 1))
        mask = np.zeros(64, dtype=bool)
        mask[to_index(7, 0, 8)] = True
        board.seed_mines(mask)
        assert board.get_cell((0, 1)).content == Empty(0)
        assert board.get_cell((0, 0)).content == Empty(0)
        assert board.get_cell((6, 0)).content == Empty(1)
        assert board.get_cell((6, 1)).content == Empty(1)
        assert board.get_cell((7, 1)).content == Empty(1)
