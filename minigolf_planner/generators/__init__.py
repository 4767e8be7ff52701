"""Higher-level estimators built on the core search.

- ParEstimator: Single-path par suggestion and route preview
- PathDiversifier: K structurally different routes with slope-aware scoring
- GoalSuggester: Alternate cup placements
- GoalLinter: Lint for the current cup placement
"""

from minigolf_planner.generators.goal_suggester import GoalLinter, GoalSuggester
from minigolf_planner.generators.par_estimator import ParEstimator
from minigolf_planner.generators.path_diversifier import PathDiversifier

__all__ = [
    "ParEstimator",
    "PathDiversifier",
    "GoalSuggester",
    "GoalLinter",
]
