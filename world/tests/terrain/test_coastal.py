"""Tests for the sand shoreline pass."""

import numpy as np
import pytest

from islandworld.block_types import LAND_TYPES, BlockType
from islandworld.grid import TerrainGrid
from islandworld.terrain.coastal import (
    apply_sand_pass,
    detect_shore_cells,
    propagate_sand,
    water_neighbor_count,
)
from islandworld.terrain.config import ShorelineConfig, TerrainConfig
from islandworld.terrain.generator import make_noise_field
from islandworld.terrain.hydrology import flood_fill
from islandworld.terrain.island import layout_island
from islandworld.terrain.profile import compute_height_profiles
from islandworld.terrain.rasterize import rasterize_landmass

BEACH = (
    "dd....",
    "dd....",
    "dd....",
    "dd~~~~",
    "dd~~~~",
    "######",
)
BEACH_SHORE = {(1, 2), (1, 3), (1, 4), (1, 5), (2, 5), (3, 5), (4, 5), (5, 5)}


class TestWaterNeighborCount:
    """Tests for 8-neighbour water counting."""

    def test_counts_diagonals(self, grid_from_rows) -> None:
        """Diagonal water counts as a neighbour."""
        grid = grid_from_rows(
            "~..",
            ".d.",
            "..~",
        )
        assert water_neighbor_count(grid.cells)[1, 1] == 2

    def test_center_not_counted(self, grid_from_rows) -> None:
        """A water cell does not count itself."""
        grid = grid_from_rows(
            "...",
            ".~.",
            "...",
        )
        assert water_neighbor_count(grid.cells)[1, 1] == 0

    def test_outside_grid_is_dry(self, grid_from_rows) -> None:
        """Cells past the border count as not water."""
        grid = grid_from_rows(
            "d~",
            "~~",
        )
        assert water_neighbor_count(grid.cells)[0, 0] == 3


class TestDetectShoreCells:
    """Tests for phase A shore detection."""

    def test_land_touching_water(self, grid_from_rows) -> None:
        """Land with a water neighbour inside the window is a candidate."""
        grid = grid_from_rows(*BEACH)
        config = ShorelineConfig(max_raise=1, max_depth=0, scan_rows_above=30)
        assert detect_shore_cells(grid.cells, 3, config) == BEACH_SHORE

    def test_max_raise_limits_window(self, grid_from_rows) -> None:
        """Cells above water row - max_raise are ignored."""
        grid = grid_from_rows(*BEACH)
        config = ShorelineConfig(max_raise=0, max_depth=0, scan_rows_above=30)
        assert detect_shore_cells(grid.cells, 3, config) == BEACH_SHORE - {(1, 2)}

    def test_scan_window_limits_rise(self, grid_from_rows) -> None:
        """The scan window caps how far above the water row sand can start."""
        grid = grid_from_rows(*BEACH)
        config = ShorelineConfig(max_raise=3, max_depth=0, scan_rows_above=0)
        assert (1, 2) not in detect_shore_cells(grid.cells, 3, config)

    def test_sand_and_water_not_candidates(self, grid_from_rows) -> None:
        """Only dirt, grass and stone become sand."""
        grid = grid_from_rows(
            "s~",
            "~~",
        )
        config = ShorelineConfig()
        assert detect_shore_cells(grid.cells, 0, config) == set()


class TestPropagateSand:
    """Tests for phase B downward propagation."""

    def test_extends_through_dirt_and_stone(self, grid_from_rows) -> None:
        """Sand walks down into dirt and stone up to max_depth."""
        cells = grid_from_rows("d", "d", "#", "#", "d").cells
        assert propagate_sand(cells, {(0, 0)}, 3) == {(0, 0), (0, 1), (0, 2), (0, 3)}

    def test_depth_limit(self, grid_from_rows) -> None:
        """No more than max_depth cells are added below a candidate."""
        cells = grid_from_rows("d", "d", "d", "d").cells
        assert propagate_sand(cells, {(0, 0)}, 1) == {(0, 0), (0, 1)}

    def test_stops_at_air(self, grid_from_rows) -> None:
        """Propagation stops at the first non-sinkable block."""
        cells = grid_from_rows("d", "d", ".", "d").cells
        assert propagate_sand(cells, {(0, 0)}, 3) == {(0, 0), (0, 1)}

    def test_grass_not_sinkable(self, grid_from_rows) -> None:
        """Grass below a candidate is left alone."""
        cells = grid_from_rows("d", "g").cells
        assert propagate_sand(cells, {(0, 0)}, 3) == {(0, 0)}

    def test_stops_at_bottom(self, grid_from_rows) -> None:
        """Propagation never leaves the grid."""
        cells = grid_from_rows("d", "d").cells
        assert propagate_sand(cells, {(0, 0)}, 5) == {(0, 0), (0, 1)}

    def test_zero_depth(self, grid_from_rows) -> None:
        """max_depth 0 returns the candidates unchanged."""
        cells = grid_from_rows("d", "d").cells
        assert propagate_sand(cells, {(0, 0)}, 0) == {(0, 0)}


class TestApplySandPass:
    """Tests for the committed sand pass."""

    def test_converts_shore(self, grid_from_rows) -> None:
        """Candidates and their propagation become sand together."""
        grid = grid_from_rows(*BEACH)
        config = ShorelineConfig(max_raise=1, max_depth=0, scan_rows_above=30)

        converted = apply_sand_pass(grid, 3, config)

        assert converted == len(BEACH_SHORE)
        for col, row in BEACH_SHORE:
            assert grid.get_block_type(col, row) == BlockType.SAND
        assert grid.get_block_type(0, 3) == BlockType.DIRT

    def test_new_sand_does_not_spread(self, grid_from_rows) -> None:
        """Detection reads the grid before any cell is converted."""
        grid = grid_from_rows(
            "ddd",
            "dd~",
            "ddd",
        )
        config = ShorelineConfig(max_raise=1, max_depth=0, scan_rows_above=30)
        apply_sand_pass(grid, 1, config)

        # Only cells that touched water in the original grid
        assert grid.get_block_type(0, 1) == BlockType.DIRT
        assert grid.get_block_type(0, 2) == BlockType.DIRT
        assert grid.get_block_type(1, 1) == BlockType.SAND

    def test_no_water_no_sand(self, grid_from_rows) -> None:
        """A dry grid is left unchanged."""
        grid = grid_from_rows("...", "ddd", "###")
        assert apply_sand_pass(grid, 1, ShorelineConfig()) == 0
        assert grid.count(BlockType.SAND) == 0


class TestGeneratedShoreline:
    """Sand pass behaviour on generated terrain."""

    @pytest.fixture(scope="class")
    def before_and_after(self) -> tuple[np.ndarray, TerrainGrid, TerrainConfig]:
        config = TerrainConfig()
        layout = layout_island(config, np.random.default_rng(config.seed))
        profiles = compute_height_profiles(config, layout, make_noise_field(config))
        grid = TerrainGrid(columns=config.grid.columns, rows=config.grid.rows)
        rasterize_landmass(grid, profiles)
        flood_fill(grid, config.target_water_row)

        before = grid.cells.copy()
        apply_sand_pass(grid, config.target_water_row, config.shoreline)
        return before, grid, config

    def test_every_change_is_sand_on_land(self, before_and_after) -> None:
        """The pass only turns land into sand."""
        before, grid, _ = before_and_after
        changed = grid.cells != before

        assert changed.any()
        assert np.all(grid.cells[changed] == BlockType.SAND)
        assert np.all(np.isin(before[changed], [int(b) for b in LAND_TYPES]))

    def test_changes_touch_water_or_sit_below_sand(self, before_and_after) -> None:
        """Each new sand cell bordered water or lies under another new one."""
        before, grid, config = before_and_after
        changed = grid.cells != before
        near_water = water_neighbor_count(before) > 0
        top = config.target_water_row - config.shoreline.max_raise

        for row, col in zip(*np.nonzero(changed)):
            detected = near_water[row, col] and row >= top
            below_new_sand = row > 0 and changed[row - 1, col]
            assert detected or below_new_sand, (col, row)

    def test_matches_full_pipeline(self, before_and_after, default_result) -> None:
        """Running the stages by hand gives the generator's grid."""
        _, grid, _ = before_and_after
        np.testing.assert_array_equal(grid.cells, default_result.grid.cells)
