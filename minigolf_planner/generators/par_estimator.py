"""Par Estimator - Single-path par suggestion and path preview.

Pipeline:
1. Rasterize the level (GridBuilder)
2. Search tee cell -> cup cell (WeightedAStar)
3a. Unreachable: distance-based fallback par
3b. Reachable: measure the path (PathAnalyzer) and convert it to strokes
    (StrokeModel.base_strokes); par = clamp(round(strokes + 1), 2, 7)

Slope assistance is not applied here; it belongs to the
per-route scoring of the K-best diversifier.
"""

import logging
from typing import Optional

from minigolf_planner.core.astar_search import SearchResult, WeightedAStar
from minigolf_planner.core.grid_builder import GridBuilder, TraversalGrid
from minigolf_planner.core.path_metrics import PathAnalyzer, PathMetrics
from minigolf_planner.core.stroke_model import StrokeModel
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Fairway, Level
from minigolf_planner.model.par_estimate import ParEstimate
from minigolf_planner.model.path_preview import PathPreview
from minigolf_planner.model.shapes import any_contains

logger = logging.getLogger(__name__)

FALLBACK_NOTE = "no path, fallback used"


class ParEstimator:
    """Suggests a par for the current tee and cup.

    Example:
        estimator = ParEstimator(config=HeuristicsConfig(friction_k=1.2))
        estimate = estimator.estimate(level=level, fairway=fairway, cell_size=20)
        print(estimate.suggested_par, estimate.notes)
    """

    def __init__(self, config: Optional[HeuristicsConfig] = None) -> None:
        self.config = config or HeuristicsConfig()
        self.stroke_model = StrokeModel(config=self.config)

    def estimate(self, level: Level, fairway: Fairway, cell_size: float) -> ParEstimate:
        """Estimate par for a level.

        Args:
            level: Course geometry
            fairway: Region to rasterize
            cell_size: Grid cell size in pixels

        Returns:
            ParEstimate; unreachable cups use the distance-based fallback.
        """
        grid = GridBuilder.build(level=level, fairway=fairway, cell_size=cell_size)
        return self.estimate_on_grid(level=level, grid=grid)

    def estimate_on_grid(self, level: Level, grid: TraversalGrid) -> ParEstimate:
        """Estimate par on an already built grid."""
        result = self._search_tee_to_cup(level=level, grid=grid)
        if not result.found:
            par = self.stroke_model.fallback_par(level)
            logger.warning(f"Cup unreachable, fallback par {par}")
            return ParEstimate(
                reachable=False,
                suggested_par=par,
                path_length_px=level.straight_distance,
                notes=(FALLBACK_NOTE,),
            )

        metrics = PathAnalyzer(grid=grid).analyze(result.path)
        strokes = self.stroke_model.base_strokes(metrics)
        par = self.stroke_model.par_for(strokes)
        logger.info(f"Par {par} ({strokes:.2f} strokes over {metrics.length_px:.0f}px, {metrics.turns} turns)")
        return ParEstimate(
            reachable=True,
            suggested_par=par,
            path_length_px=metrics.length_px,
            notes=self._notes_for(metrics),
        )

    def preview(self, level: Level, fairway: Fairway, cell_size: float) -> PathPreview:
        """Route overlay data for the editor.

        Sand and slope flags are read from the authored geometry at each cell
        centre, so a slope field with an unknown direction still shows up.
        """
        grid = GridBuilder.build(level=level, fairway=fairway, cell_size=cell_size)
        result = self._search_tee_to_cup(level=level, grid=grid)
        if not result.found:
            return PathPreview(found=False, cell_size=cell_size, cols=grid.cols, rows=grid.rows)

        world_points = tuple(grid.cell_center(node) for node in result.path)
        slope_areas = [field.area for field in level.slopes]
        return PathPreview(
            found=True,
            cell_size=cell_size,
            cols=grid.cols,
            rows=grid.rows,
            path_cells=result.path,
            world_points=world_points,
            sand_at=tuple(any_contains(level.sand, x, y) for x, y in world_points),
            slope_at=tuple(any_contains(slope_areas, x, y) for x, y in world_points),
        )

    @staticmethod
    def _search_tee_to_cup(level: Level, grid: TraversalGrid) -> SearchResult:
        start = grid.cell_for_point(level.tee.x, level.tee.y)
        goal = grid.cell_for_point(level.cup.x, level.cup.y)
        return WeightedAStar(grid=grid).search(start=start, goal=goal)

    @staticmethod
    def _notes_for(metrics: PathMetrics) -> tuple[str, ...]:
        notes = []
        if metrics.sand_cells > 0:
            notes.append(f"sand cells ~{metrics.sand_cells}")
        if metrics.slope_cells > 0:
            notes.append(f"slopes on path ~{metrics.slope_cells}")
        if metrics.turns > 0:
            notes.append(f"turns ~{metrics.turns}")
        if metrics.corridor_density > 0:
            notes.append(f"corridor contact ~{metrics.corridor_density:.2f}")
        return tuple(notes)
