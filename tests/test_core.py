"""Tests for minigolf_planner core functionality.

Tests: GridBuilder, WeightedAStar, PathAnalyzer, StrokeModel
Focus: Rasterization precedence, search validity and cost accounting,
       slope momentum, stroke arithmetic

Note: Fixtures are defined in conftest.py (fairways, levels, grids, check_path).
"""

from math import ceil, sqrt

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from minigolf_planner.core.astar_search import SearchConstraints, WeightedAStar, octile_distance
from minigolf_planner.core.grid_builder import GridBuilder, TraversalGrid
from minigolf_planner.core.numeric import clamp, round_half_up
from minigolf_planner.core.path_metrics import PathAnalyzer, PathMetrics, count_turns
from minigolf_planner.core.stroke_model import StrokeModel
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Cup, Fairway, Level, Point, SlopeField
from minigolf_planner.model.shapes import CircleShape, PolygonShape, RectShape

TEE = Point(x=60, y=300)
CUP = Cup(x=740, y=300)


def _level(**collections) -> Level:
    return Level(tee=TEE, cup=CUP, **collections)


def _row(row: int, first_col: int, last_col: int) -> tuple[GridNode, ...]:
    step = 1 if last_col >= first_col else -1
    return tuple(GridNode(row=row, col=c) for c in range(first_col, last_col + step, step))


@pytest.fixture
def east_slope_grid() -> TraversalGrid:
    """400x200 fairway (10 rows x 20 cols) covered by one east-facing slope of strength 1."""
    level = Level(
        tee=Point(x=10, y=110),
        cup=Cup(x=390, y=110),
        slopes=(SlopeField(area=RectShape(x=0, y=0, w=400, h=200), direction="E", strength=1.0),),
    )
    return GridBuilder.build(level=level, fairway=Fairway(x=0, y=0, w=400, h=200), cell_size=20)


# =============================================================================
# TESTS FOR NUMERIC HELPERS
# =============================================================================


class TestNumeric:
    """clamp and round_half_up."""

    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3  # round() would give 2
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2
        assert round_half_up(-0.5) == 0

    def test_clamp(self) -> None:
        assert clamp(5, 2, 7) == 5
        assert clamp(1, 2, 7) == 2
        assert clamp(9, 2, 7) == 7


# =============================================================================
# TESTS FOR GRID BUILDER
# =============================================================================


class TestGridDimensions:
    """Grid size is ceil(size / cell) per axis, at least 1."""

    def test_exact_and_partial_cells(self) -> None:
        assert GridBuilder.grid_shape(fairway=Fairway(x=0, y=0, w=800, h=600), cell_size=20) == (30, 40)
        assert GridBuilder.grid_shape(fairway=Fairway(x=0, y=0, w=805, h=600), cell_size=20) == (30, 41)

    def test_degenerate_fairway_floors_to_one_cell(self) -> None:
        grid = GridBuilder.build(level=_level(), fairway=Fairway(x=0, y=0, w=0, h=0), cell_size=20)
        assert (grid.rows, grid.cols) == (1, 1)

    def test_cell_larger_than_fairway(self) -> None:
        assert GridBuilder.grid_shape(fairway=Fairway(x=0, y=0, w=15, h=15), cell_size=40) == (1, 1)

    def test_non_positive_cell_size_raises(self) -> None:
        with pytest.raises(ValueError):
            GridBuilder.build(level=_level(), fairway=Fairway(x=0, y=0, w=100, h=100), cell_size=0)

    @given(
        w=st.floats(min_value=0.0, max_value=1000.0, allow_nan=False),
        h=st.floats(min_value=0.0, max_value=1000.0, allow_nan=False),
        cell_size=st.floats(min_value=5.0, max_value=60.0, allow_nan=False),
    )
    @settings(max_examples=50)
    def test_dimensions_property(self, w: float, h: float, cell_size: float) -> None:
        rows, cols = GridBuilder.grid_shape(fairway=Fairway(x=0, y=0, w=w, h=h), cell_size=cell_size)
        assert rows == max(1, ceil(h / cell_size))
        assert cols == max(1, ceil(w / cell_size))


class TestGridMapping:
    """World <-> cell mapping."""

    def test_cell_for_point(self, open_grid: TraversalGrid) -> None:
        assert open_grid.cell_for_point(60, 300) == GridNode(row=15, col=3)
        assert open_grid.cell_for_point(740, 300) == GridNode(row=15, col=37)

    def test_out_of_bounds_points_clamp(self, open_grid: TraversalGrid) -> None:
        assert open_grid.cell_for_point(-50, -50) == GridNode(row=0, col=0)
        assert open_grid.cell_for_point(10_000, 10_000) == GridNode(row=29, col=39)

    def test_cell_center(self, open_grid: TraversalGrid) -> None:
        assert open_grid.cell_center(GridNode(row=0, col=0)) == (10.0, 10.0)
        assert open_grid.cell_center(GridNode(row=15, col=3)) == (70.0, 310.0)

    def test_offset_fairway(self) -> None:
        grid = GridBuilder.build(level=_level(), fairway=Fairway(x=100, y=50, w=200, h=100), cell_size=25)
        assert grid.cell_center(GridNode(row=0, col=0)) == (112.5, 62.5)
        assert grid.cell_for_point(130, 80) == GridNode(row=1, col=1)


class TestGridClassification:
    """Blocked -> bridge -> sand -> slope precedence."""

    def test_wall_blocks_inclusive_edge(self, wall_grid: TraversalGrid) -> None:
        assert wall_grid.blocked[0, 20]
        assert wall_grid.blocked[22, 20]  # centre y=450 is on the wall edge
        assert not wall_grid.blocked[23, 20]
        assert not wall_grid.blocked[10, 19] and not wall_grid.blocked[10, 21]

    def test_polygon_obstacle(self, fairway_800x600: Fairway) -> None:
        triangle = PolygonShape(points=[400, 200, 500, 200, 400, 300])
        grid = GridBuilder.build(level=_level(obstacles=(triangle,)), fairway=fairway_800x600, cell_size=20)
        assert grid.blocked[10, 20]  # centre (410, 210)
        assert not grid.blocked[14, 24]  # centre (490, 290) beyond the hypotenuse

    def test_water_blocks_and_bridge_restores(self, fairway_800x600: Fairway) -> None:
        level = _level(
            water=(RectShape(x=200, y=0, w=60, h=600),),
            bridges=(RectShape(x=190, y=280, w=80, h=40),),
        )
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.blocked[5, 11]
        assert not grid.blocked[14, 11] and not grid.blocked[15, 11]

    def test_post_radius_plus_clearance(self, fairway_800x600: Fairway) -> None:
        """Zero radius falls back to 8px; clearance at cell 20 is max(6, round(8)) = 8."""
        grid = GridBuilder.build(
            level=_level(posts=(CircleShape(x=400, y=300, r=0),)), fairway=fairway_800x600, cell_size=20
        )
        assert grid.blocked[15, 20]  # centre (410, 310), 14.1px away
        assert not grid.blocked[15, 21]  # centre (430, 310), 31.6px away

    @pytest.mark.parametrize("radius, reaches_next_cell", [(20, False), (25, True)])
    def test_authored_post_radius_is_inflated(
        self, fairway_800x600: Fairway, radius: float, reaches_next_cell: bool
    ) -> None:
        """Blocked disc is radius + 8px clearance; (430, 310) is 31.6px from the post."""
        grid = GridBuilder.build(
            level=_level(posts=(CircleShape(x=400, y=300, r=radius),)), fairway=fairway_800x600, cell_size=20
        )
        assert grid.blocked[15, 20]
        assert bool(grid.blocked[15, 21]) == reaches_next_cell

    def test_post_clearance(self) -> None:
        assert GridBuilder.post_clearance(20) == 8
        assert GridBuilder.post_clearance(10) == 6
        assert GridBuilder.post_clearance(25) == 10

    def test_sand_cost_and_flag(self, sand_across_route_level: Level, fairway_800x600: Fairway) -> None:
        grid = GridBuilder.build(level=sand_across_route_level, fairway=fairway_800x600, cell_size=20)
        assert grid.sand[15, 16] and grid.cost[15, 16] == 3.0
        assert not grid.sand[15, 20] and grid.cost[15, 20] == 1.0

    def test_blocked_cells_are_never_sand(self, fairway_800x600: Fairway) -> None:
        level = _level(
            obstacles=(RectShape(x=400, y=0, w=20, h=600),),
            sand=(RectShape(x=380, y=0, w=60, h=600),),
        )
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.blocked[5, 20] and not grid.sand[5, 20]
        assert grid.sand[5, 19]

    def test_slope_annotation(self, east_slope_grid: TraversalGrid) -> None:
        assert east_slope_grid.cost[5, 5] == 1.25
        assert east_slope_grid.slope_x[5, 5] == 1.0 and east_slope_grid.slope_y[5, 5] == 0.0
        assert east_slope_grid.slope_strength[5, 5] == 1.0

    def test_overlapping_slopes_sum_and_normalise(self, fairway_800x600: Fairway) -> None:
        area = RectShape(x=0, y=0, w=100, h=100)
        level = _level(
            slopes=(
                SlopeField(area=area, direction="E", strength=1.0),
                SlopeField(area=area, direction="S", strength=1.0),
            )
        )
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.slope_x[1, 1] == pytest.approx(sqrt(0.5))
        assert grid.slope_y[1, 1] == pytest.approx(sqrt(0.5))

    def test_opposing_slopes_cancel(self, fairway_800x600: Fairway) -> None:
        area = RectShape(x=0, y=0, w=100, h=100)
        level = _level(
            slopes=(
                SlopeField(area=area, direction="E", strength=1.0),
                SlopeField(area=area, direction="W", strength=1.0),
            )
        )
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.slope_strength[1, 1] == 0.0
        assert grid.cost[1, 1] == 1.0

    def test_strength_capped(self, fairway_800x600: Fairway) -> None:
        level = _level(slopes=(SlopeField(area=RectShape(x=0, y=0, w=100, h=100), direction="N", strength=2.0),))
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.slope_strength[1, 1] == 1.5

    def test_slope_on_sand_keeps_sand_cost(self, fairway_800x600: Fairway) -> None:
        area = RectShape(x=0, y=0, w=100, h=100)
        level = _level(sand=(area,), slopes=(SlopeField(area=area, direction="E"),))
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.cost[1, 1] == 3.0
        assert grid.slope_strength[1, 1] == 1.0

    def test_slopes_skip_blocked_cells(self, fairway_800x600: Fairway) -> None:
        area = RectShape(x=0, y=0, w=100, h=100)
        level = _level(obstacles=(area,), slopes=(SlopeField(area=area, direction="E"),))
        grid = GridBuilder.build(level=level, fairway=fairway_800x600, cell_size=20)
        assert grid.blocked[1, 1] and grid.slope_strength[1, 1] == 0.0

    def test_arrays_are_read_only(self, open_grid: TraversalGrid) -> None:
        with pytest.raises(ValueError):
            open_grid.cost[0, 0] = 5.0
        with pytest.raises(ValueError):
            open_grid.blocked[0, 0] = True

    def test_blocked_neighbor_counts(self, wall_grid: TraversalGrid) -> None:
        counts = wall_grid.blocked_neighbor_counts
        assert counts[10, 19] == 3
        assert counts[10, 20] == 2  # blocked itself, centre not counted
        assert counts[0, 19] == 2  # cells outside the grid do not count
        assert counts[23, 19] == 1
        assert counts[15, 3] == 0


# =============================================================================
# TESTS FOR WEIGHTED A*
# =============================================================================


class TestWeightedAStar:
    """WeightedAStar - validity, cost accounting, constraints."""

    def test_start_equals_goal(self, open_grid: TraversalGrid) -> None:
        node = GridNode(row=5, col=5)
        result = WeightedAStar(grid=open_grid).search(start=node, goal=node)
        assert result.found
        assert result.path == (node,)
        assert result.path_cost == 0.0

    def test_open_route_is_straight(self, open_grid: TraversalGrid, check_path) -> None:
        result = WeightedAStar(grid=open_grid).search(start=GridNode(15, 3), goal=GridNode(15, 37))
        assert result.found
        assert result.path == _row(15, 3, 37)
        assert result.path_cost == pytest.approx(34.0)
        assert result.expansions > 0
        check_path(open_grid, result.path)

    def test_diagonal_cost(self, open_grid: TraversalGrid) -> None:
        result = WeightedAStar(grid=open_grid).search(start=GridNode(0, 0), goal=GridNode(5, 5))
        assert result.path_cost == pytest.approx(5 * sqrt(2))
        assert octile_distance(GridNode(0, 0), GridNode(5, 5)) == pytest.approx(5 * sqrt(2))

    def test_wall_detour(self, wall_grid: TraversalGrid, check_path) -> None:
        result = WeightedAStar(grid=wall_grid).search(start=GridNode(15, 3), goal=GridNode(15, 37))
        assert result.found
        assert max(node.row for node in result.path) >= 23
        assert result.path_cost >= 40.6
        check_path(wall_grid, result.path)

    def test_no_corner_cutting(self, check_path) -> None:
        """Two diagonal blocked cells: the diagonal between their free corners is illegal."""
        level = Level(
            tee=Point(x=110, y=110),
            cup=Cup(x=130, y=130),
            obstacles=(RectShape(x=120, y=100, w=20, h=20), RectShape(x=100, y=120, w=20, h=20)),
        )
        grid = GridBuilder.build(level=level, fairway=Fairway(x=0, y=0, w=200, h=200), cell_size=20)
        assert grid.blocked[5, 6] and grid.blocked[6, 5]
        result = WeightedAStar(grid=grid).search(start=GridNode(5, 5), goal=GridNode(6, 6))
        assert result.found
        assert len(result.path) > 2
        check_path(grid, result.path)

    def test_unreachable(self) -> None:
        level = Level(tee=Point(x=10, y=10), cup=Cup(x=190, y=10), obstacles=(RectShape(x=100, y=0, w=20, h=200),))
        grid = GridBuilder.build(level=level, fairway=Fairway(x=0, y=0, w=200, h=200), cell_size=20)
        result = WeightedAStar(grid=grid).search(start=GridNode(0, 0), goal=GridNode(0, 9))
        assert not result.found
        assert result.path == ()
        assert result.expansions > 0

    def test_blocked_endpoint_is_not_found(self, wall_grid: TraversalGrid) -> None:
        result = WeightedAStar(grid=wall_grid).search(start=GridNode(15, 3), goal=GridNode(5, 20))
        assert not result.found

    def test_banned_nodes_are_avoided(self, open_grid: TraversalGrid, check_path) -> None:
        banned = GridNode(15, 20)
        result = WeightedAStar(grid=open_grid).search(
            start=GridNode(15, 3),
            goal=GridNode(15, 37),
            constraints=SearchConstraints(banned_nodes=frozenset({banned})),
        )
        assert result.found
        assert banned not in result.path
        assert result.path_cost > 34.0
        check_path(open_grid, result.path)

    def test_banned_goal_is_unreachable(self, open_grid: TraversalGrid) -> None:
        goal = GridNode(15, 37)
        result = WeightedAStar(grid=open_grid).search(
            start=GridNode(15, 3), goal=goal, constraints=SearchConstraints(banned_nodes=frozenset({goal}))
        )
        assert not result.found

    def test_reported_cost_ignores_slope_factor(self, east_slope_grid: TraversalGrid) -> None:
        """Downhill steps are cheaper for the search, but path_cost is raw terrain cost."""
        planner = WeightedAStar(grid=east_slope_grid)
        result = planner.search(start=GridNode(5, 0), goal=GridNode(5, 19))
        assert result.path == _row(5, 0, 19)
        assert result.path_cost == pytest.approx(19 * 1.25)
        assert planner.path_cost(result.path) == pytest.approx(result.path_cost)

    def test_deterministic(self, wall_grid: TraversalGrid) -> None:
        planner = WeightedAStar(grid=wall_grid)
        first = planner.search(start=GridNode(15, 3), goal=GridNode(15, 37))
        second = planner.search(start=GridNode(15, 3), goal=GridNode(15, 37))
        assert first == second

    @given(
        seed_cells=st.lists(
            st.tuples(st.integers(min_value=0, max_value=9), st.integers(min_value=0, max_value=9)),
            max_size=30,
        )
    )
    @settings(max_examples=40, deadline=None)
    def test_random_obstacles_paths_are_valid(self, seed_cells: list[tuple[int, int]]) -> None:
        """Any found path is unblocked, 8-adjacent and free of corner cuts."""
        obstacles = tuple(RectShape(x=c * 20 + 5, y=r * 20 + 5, w=10, h=10) for r, c in seed_cells)
        level = Level(tee=Point(x=10, y=10), cup=Cup(x=190, y=190), obstacles=obstacles)
        grid = GridBuilder.build(level=level, fairway=Fairway(x=0, y=0, w=200, h=200), cell_size=20)
        result = WeightedAStar(grid=grid).search(start=GridNode(0, 0), goal=GridNode(9, 9))
        if not result.found:
            return
        assert result.path[0] == GridNode(0, 0) and result.path[-1] == GridNode(9, 9)
        for node in result.path:
            assert not grid.blocked[node.row, node.col]
        for a, b in zip(result.path, result.path[1:]):
            dr, dc = b.row - a.row, b.col - a.col
            assert (dr, dc) != (0, 0) and abs(dr) <= 1 and abs(dc) <= 1
            if dr and dc:
                assert not grid.blocked[a.row, b.col] and not grid.blocked[b.row, a.col]


# =============================================================================
# TESTS FOR PATH METRICS
# =============================================================================


class TestCountTurns:
    """count_turns - direction changes over consecutive triples."""

    def test_straight(self) -> None:
        assert count_turns(_row(0, 0, 5)) == 0

    def test_single_corner(self) -> None:
        path = _row(0, 0, 3) + (GridNode(1, 3), GridNode(2, 3))
        assert count_turns(path) == 1

    def test_zigzag(self) -> None:
        path = (GridNode(0, 0), GridNode(1, 1), GridNode(0, 2), GridNode(1, 3), GridNode(0, 4))
        assert count_turns(path) == 3

    def test_short_paths(self) -> None:
        assert count_turns(()) == 0
        assert count_turns((GridNode(0, 0), GridNode(0, 1))) == 0


class TestPathAnalyzer:
    """PathAnalyzer - terrain counts and slope momentum."""

    def test_open_route(self, open_grid: TraversalGrid) -> None:
        metrics = PathAnalyzer(grid=open_grid).analyze(_row(15, 3, 37))
        assert metrics.cell_count == 35
        assert metrics.length_px == pytest.approx(680.0)
        assert metrics.turns == 0
        assert metrics.corridor_sum == 0 and metrics.corridor_density == 0.0
        assert metrics.sand_cells == 0 and metrics.slope_cells == 0
        assert metrics.downhill_momentum == 0.0

    def test_corridor_contact_along_wall(self, wall_grid: TraversalGrid) -> None:
        path = tuple(GridNode(row=r, col=19) for r in range(5, 10))
        metrics = PathAnalyzer(grid=wall_grid).analyze(path)
        assert metrics.corridor_sum == 15  # 3 blocked neighbours per cell
        assert metrics.corridor_density == 3.0

    def test_sand_cells(self, sand_across_route_level: Level, fairway_800x600: Fairway) -> None:
        grid = GridBuilder.build(level=sand_across_route_level, fairway=fairway_800x600, cell_size=20)
        metrics = PathAnalyzer(grid=grid).analyze(_row(15, 3, 37))
        assert metrics.sand_cells == 3
        assert metrics.length_px == pytest.approx((31 + 3 * 3) * 20)

    def test_downhill_momentum(self, east_slope_grid: TraversalGrid) -> None:
        metrics = PathAnalyzer(grid=east_slope_grid).analyze(_row(5, 0, 19))
        assert metrics.slope_cells == 20
        assert metrics.downhill_momentum == pytest.approx(19.0)
        assert metrics.uphill_resistance == 0.0
        assert metrics.auto_assist_segments == 19
        assert metrics.net_momentum == pytest.approx(19.0)

    def test_uphill_resistance(self, east_slope_grid: TraversalGrid) -> None:
        metrics = PathAnalyzer(grid=east_slope_grid).analyze(_row(5, 19, 0))
        assert metrics.downhill_momentum == 0.0
        assert metrics.uphill_resistance == pytest.approx(19.0)
        assert metrics.auto_assist_segments == 0

    def test_cross_slope_has_no_momentum(self, east_slope_grid: TraversalGrid) -> None:
        path = tuple(GridNode(row=r, col=5) for r in range(0, 10))
        metrics = PathAnalyzer(grid=east_slope_grid).analyze(path)
        assert metrics.downhill_momentum == 0.0 and metrics.uphill_resistance == 0.0


# =============================================================================
# TESTS FOR STROKE MODEL
# =============================================================================


def _metrics(**overrides) -> PathMetrics:
    values = dict(
        cell_count=35,
        length_px=640.0,
        turns=0,
        corridor_sum=0,
        corridor_density=0.0,
        sand_cells=0,
        slope_cells=0,
    )
    values.update(overrides)
    return PathMetrics(**values)


class TestStrokeModel:
    """StrokeModel - distance, penalties, assistance, par."""

    def test_shot_distance_scales_with_friction(self) -> None:
        assert StrokeModel(config=HeuristicsConfig()).shot_distance_px == pytest.approx(320.0)
        assert StrokeModel(config=HeuristicsConfig(friction_k=2.4)).shot_distance_px == pytest.approx(160.0)
        assert StrokeModel(config=HeuristicsConfig(friction_k=0.6)).shot_distance_px == pytest.approx(640.0)

    def test_distance_only(self) -> None:
        assert StrokeModel(config=HeuristicsConfig()).base_strokes(_metrics()) == pytest.approx(2.0)

    def test_penalties(self) -> None:
        model = StrokeModel(config=HeuristicsConfig(sand_friction_multiplier=12.0))
        assert model.sand_penalty(10) == pytest.approx(0.2)
        assert model.turn_penalty(5) == pytest.approx(0.4)
        assert model.turn_penalty(100) == 1.5
        assert model.corridor_penalty(2.0) == pytest.approx(0.24)
        assert model.corridor_penalty(50.0) == 1.0

    def test_slope_bump_coverage(self) -> None:
        model = StrokeModel(config=HeuristicsConfig())
        assert model.slope_bump(slope_cells=0, cell_count=20) == 0.0
        assert model.slope_bump(slope_cells=5, cell_count=20) == pytest.approx(0.15 * 0.75)
        assert model.slope_bump(slope_cells=20, cell_count=20) == pytest.approx(0.15)

    def test_no_momentum_means_no_assistance(self) -> None:
        model = StrokeModel(config=HeuristicsConfig())
        metrics = _metrics(turns=3)
        assert model.assisted_strokes(metrics) == model.base_strokes(metrics)

    def test_downhill_bonus_without_auto_assist(self) -> None:
        model = StrokeModel(config=HeuristicsConfig())
        metrics = _metrics(downhill_momentum=1.0)
        assert model.assisted_strokes(metrics) == pytest.approx(2.0 - 0.18)

    def test_auto_assist_by_segments(self) -> None:
        model = StrokeModel(config=HeuristicsConfig())
        metrics = _metrics(downhill_momentum=1.0, auto_assist_segments=3)
        assert model.assisted_strokes(metrics) == pytest.approx(2.0 - 0.18 - 0.45)

    def test_auto_assist_by_net_momentum(self) -> None:
        model = StrokeModel(config=HeuristicsConfig())
        metrics = _metrics(downhill_momentum=2.0, uphill_resistance=0.5)
        assert model.assisted_strokes(metrics) == pytest.approx(2.0 - 0.36 - 0.45)

    def test_stroke_floor(self) -> None:
        model = StrokeModel(config=HeuristicsConfig())
        metrics = _metrics(length_px=100.0, downhill_momentum=19.0, auto_assist_segments=19)
        assert model.assisted_strokes(metrics) == 0.35

    def test_par_for(self) -> None:
        assert StrokeModel.par_for(2.125) == 3
        assert StrokeModel.par_for(1.5) == 3  # 2.5 rounds up
        assert StrokeModel.par_for(0.0) == 2
        assert StrokeModel.par_for(100.0) == 7

    def test_fallback_par(self) -> None:
        assert StrokeModel.fallback_par(_level()) == 3  # round(680 / 260)
        walls = tuple(RectShape(x=0, y=0, w=1, h=1) for _ in range(10))
        assert StrokeModel.fallback_par(_level(obstacles=walls)) == 6  # round(2.62 + 3.0)
        many = tuple(RectShape(x=0, y=0, w=1, h=1) for _ in range(30))
        assert StrokeModel.fallback_par(_level(obstacles=many)) == 7

    def test_fallback_ignores_sand(self) -> None:
        sand = tuple(RectShape(x=0, y=0, w=1, h=1) for _ in range(10))
        assert StrokeModel.fallback_par(_level(sand=sand)) == 3

    def test_fallback_min_par(self) -> None:
        level = Level(tee=Point(x=0, y=0), cup=Cup(x=10, y=0))
        assert StrokeModel.fallback_par(level) == 2


def test_numpy_views_match_tables(open_grid: TraversalGrid) -> None:
    """The nested-list tables mirror the numpy arrays."""
    assert np.array_equal(np.array(open_grid.tables.cost), open_grid.cost)
    assert np.array_equal(np.array(open_grid.tables.blocked), open_grid.blocked)
