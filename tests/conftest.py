"""Shared pytest fixtures for minigolf_planner tests.

All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Pixel coordinates, origin top-left, +y pointing down. The main fairway is
    800x600 at cell size 20, i.e. 40 columns x 30 rows. The tee (60, 300)
    falls in cell (row 15, col 3) and the cup (740, 300) in cell (15, 37),
    so the open-fairway route is 34 orthogonal steps = 680px.

    The small fairway (400x300, 20 columns x 15 rows) keeps the multi-search
    generators (K-best, cup suggestions) fast.
"""

import pytest

from minigolf_planner.core.grid_builder import GridBuilder, TraversalGrid
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.level import Cup, Fairway, Level, Point
from minigolf_planner.model.shapes import RectShape


def assert_valid_path(grid: TraversalGrid, path: tuple[GridNode, ...]) -> None:
    """Every cell unblocked, consecutive cells 8-adjacent and distinct, no corner cutting."""
    for node in path:
        assert not grid.is_blocked(node), f"{node} is blocked"
    for a, b in zip(path, path[1:]):
        dr, dc = b.row - a.row, b.col - a.col
        assert (dr, dc) != (0, 0), f"repeated cell {a}"
        assert abs(dr) <= 1 and abs(dc) <= 1, f"{a} -> {b} not adjacent"
        if dr != 0 and dc != 0:
            assert not grid.blocked[a.row, b.col], f"corner cut at {a} -> {b}"
            assert not grid.blocked[b.row, a.col], f"corner cut at {a} -> {b}"


@pytest.fixture
def check_path():
    """The path validity assertion, for tests that search."""
    return assert_valid_path


# =============================================================================
# FAIRWAY FIXTURES
# =============================================================================


@pytest.fixture
def fairway_800x600() -> Fairway:
    """Main fairway: 40 x 30 cells at cell size 20."""
    return Fairway(x=0, y=0, w=800, h=600)


@pytest.fixture
def fairway_400x300() -> Fairway:
    """Small fairway: 20 x 15 cells at cell size 20."""
    return Fairway(x=0, y=0, w=400, h=300)


# =============================================================================
# LEVEL FIXTURES (800 x 600)
# =============================================================================


@pytest.fixture
def open_level() -> Level:
    """Tee and cup on row 15, 680px apart, nothing in between."""
    return Level(tee=Point(x=60, y=300), cup=Cup(x=740, y=300, radius=12))


@pytest.fixture
def wall_with_gap_level(open_level: Level) -> Level:
    """Wall at x=400-420 from the top down to y=450.

    Blocks column 20, rows 0-22 (row 22 centre y=450 lies on the inclusive
    edge). The gap is rows 23-29, so the route must detour 8 rows down.
    """
    return Level(
        tee=open_level.tee,
        cup=open_level.cup,
        obstacles=(RectShape(x=400, y=0, w=20, h=450),),
    )


@pytest.fixture
def full_wall_level(open_level: Level) -> Level:
    """Wall at x=400-420 spanning the whole height: the cup is unreachable."""
    return Level(
        tee=open_level.tee,
        cup=open_level.cup,
        obstacles=(RectShape(x=400, y=0, w=20, h=600),),
    )


@pytest.fixture
def sand_across_route_level(open_level: Level) -> Level:
    """Sand x=300-360, y=200-400: columns 15-17, rows 10-19 cross the straight route."""
    return Level(
        tee=open_level.tee,
        cup=open_level.cup,
        sand=(RectShape(x=300, y=200, w=60, h=200),),
    )


# =============================================================================
# LEVEL FIXTURES (400 x 300)
# =============================================================================


@pytest.fixture
def small_split_level() -> Level:
    """Tee (30, 150) -> cup (370, 150) with a central wall leaving lanes above and below.

    Tee cell (7, 1), cup cell (7, 18). The wall x=190-210, y=60-240 blocks
    columns 9-10 (centres 190 and 210 on the inclusive edges), rows 3-11.
    The lanes (rows 0-2 and 12-14) are mirror images around row 7.
    """
    return Level(
        tee=Point(x=30, y=150),
        cup=Cup(x=370, y=150),
        obstacles=(RectShape(x=190, y=60, w=20, h=180),),
    )


@pytest.fixture
def small_blocked_level() -> Level:
    """Full-height wall on the small fairway: cup unreachable."""
    return Level(
        tee=Point(x=30, y=150),
        cup=Cup(x=370, y=150),
        obstacles=(RectShape(x=190, y=0, w=20, h=300),),
    )


# =============================================================================
# GRID FIXTURES
# =============================================================================


@pytest.fixture
def open_grid(open_level: Level, fairway_800x600: Fairway) -> TraversalGrid:
    return GridBuilder.build(level=open_level, fairway=fairway_800x600, cell_size=20)


@pytest.fixture
def wall_grid(wall_with_gap_level: Level, fairway_800x600: Fairway) -> TraversalGrid:
    return GridBuilder.build(level=wall_with_gap_level, fairway=fairway_800x600, cell_size=20)
