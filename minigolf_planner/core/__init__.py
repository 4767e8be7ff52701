"""Core foundation classes for grid-based course analysis.

- GridBuilder / TraversalGrid: Rasterization of level geometry
- WeightedAStar: Terrain- and slope-aware 8-connected search
- PathAnalyzer: Turns, corridor contact, terrain counts and slope momentum
- StrokeModel: Friction-scaled stroke and par estimates
"""

from minigolf_planner.core.astar_search import SearchConstraints, SearchResult, WeightedAStar
from minigolf_planner.core.grid_builder import GridBuilder, TraversalGrid
from minigolf_planner.core.path_metrics import PathAnalyzer, PathMetrics, count_turns
from minigolf_planner.core.stroke_model import StrokeModel

__all__ = [
    # Grid
    "GridBuilder",
    "TraversalGrid",
    # Search
    "WeightedAStar",
    "SearchConstraints",
    "SearchResult",
    # Metrics
    "PathAnalyzer",
    "PathMetrics",
    "count_turns",
    "StrokeModel",
]
