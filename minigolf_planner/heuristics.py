"""Editor-facing entry points.

Plain functions the level editor calls on every geometry edit. Each call is
self-contained: it rasterizes the level, runs its searches and returns fresh
immutable results. Nothing is cached between calls.

Example:
    level = Level.from_dict(level_document)
    fairway = Fairway(x=0, y=0, w=800, h=600)
    estimate = estimate_par(level, fairway, cell_size=20)
    warnings = lint_goal(level, fairway, cell_size=20)
"""

from typing import Optional

from minigolf_planner.constants import DiversityConfig, GoalConfig
from minigolf_planner.core.astar_search import SearchConstraints, SearchResult, WeightedAStar
from minigolf_planner.core.grid_builder import GridBuilder, TraversalGrid
from minigolf_planner.generators.goal_suggester import GoalLinter, GoalSuggester
from minigolf_planner.generators.par_estimator import ParEstimator
from minigolf_planner.generators.path_diversifier import PathDiversifier
from minigolf_planner.model.candidate_path import KBestResult
from minigolf_planner.model.cup_candidate import CupCandidate
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Fairway, Level
from minigolf_planner.model.par_estimate import ParEstimate
from minigolf_planner.model.path_preview import PathPreview


def build_grid(level: Level, fairway: Fairway, cell_size: float) -> TraversalGrid:
    """Rasterize a level into a traversability grid."""
    return GridBuilder.build(level=level, fairway=fairway, cell_size=cell_size)


def search(
    grid: TraversalGrid,
    start: GridNode,
    goal: GridNode,
    banned_nodes: Optional[frozenset[GridNode]] = None,
) -> SearchResult:
    """Weighted A* between two cells of a grid."""
    constraints = SearchConstraints(banned_nodes=frozenset(banned_nodes)) if banned_nodes else None
    return WeightedAStar(grid=grid).search(start=start, goal=goal, constraints=constraints)


def estimate_par(
    level: Level,
    fairway: Fairway,
    cell_size: float,
    config: Optional[HeuristicsConfig] = None,
) -> ParEstimate:
    """Single-path par suggestion."""
    return ParEstimator(config=config).estimate(level=level, fairway=fairway, cell_size=cell_size)


def suggest_k(
    level: Level,
    fairway: Fairway,
    cell_size: float,
    k: int = DiversityConfig.DEFAULT_K,
    config: Optional[HeuristicsConfig] = None,
) -> KBestResult:
    """Up to k diverse routes with slope-aware stroke estimates."""
    return PathDiversifier(config=config).suggest(level=level, fairway=fairway, cell_size=cell_size, k=k)


def suggest_goals(
    level: Level,
    fairway: Fairway,
    cell_size: float,
    count: int = GoalConfig.DEFAULT_COUNT,
    config: Optional[HeuristicsConfig] = None,
) -> list[CupCandidate]:
    """Ranked alternate cup positions."""
    return GoalSuggester(config=config).suggest(level=level, fairway=fairway, cell_size=cell_size, count=count)


def lint_goal(level: Level, fairway: Fairway, cell_size: float) -> list[str]:
    """Lint messages for the current cup, as plain strings for toast display."""
    return [str(warning) for warning in GoalLinter.lint(level=level, fairway=fairway, cell_size=cell_size)]


def compute_path_preview(level: Level, fairway: Fairway, cell_size: float) -> PathPreview:
    """Tee-to-cup route overlay with per-point sand and slope flags."""
    return ParEstimator().preview(level=level, fairway=fairway, cell_size=cell_size)
