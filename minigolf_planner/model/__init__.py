"""Data model classes for course difficulty analysis.

Input geometry and configuration:
- Shape (RectShape, PolygonShape, CircleShape): Containment-testable terrain shapes
- Level, Point, Cup, SlopeField: Course geometry handed over by the editor
- Fairway: Region rasterized for analysis
- HeuristicsConfig: Caller-tunable parameters

Results:
- GridNode: Grid cell coordinate
- ParEstimate, CandidatePath, KBestResult, CupCandidate, PathPreview
- LintWarning: Cup placement warnings

Modules here depend only on constants, numpy and shapely, never on core.
"""

from minigolf_planner.model.candidate_path import CandidatePath, KBestResult
from minigolf_planner.model.cup_candidate import CupCandidate
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Cup, Fairway, Level, Point, SlopeField
from minigolf_planner.model.par_estimate import ParEstimate
from minigolf_planner.model.path_preview import PathPreview
from minigolf_planner.model.shapes import CircleShape, PolygonShape, RectShape, Shape
from minigolf_planner.model.warning import (
    EdgeProximityWarning,
    LintWarning,
    ObstacleBypassWarning,
    UnreachableCupWarning,
)

__all__ = [
    # Geometry
    "Shape",
    "RectShape",
    "PolygonShape",
    "CircleShape",
    "Point",
    "Cup",
    "SlopeField",
    "Level",
    "Fairway",
    "HeuristicsConfig",
    # Results
    "GridNode",
    "ParEstimate",
    "CandidatePath",
    "KBestResult",
    "CupCandidate",
    "PathPreview",
    # Warnings
    "LintWarning",
    "UnreachableCupWarning",
    "ObstacleBypassWarning",
    "EdgeProximityWarning",
]
