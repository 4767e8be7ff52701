"""Warning - Cup placement lint findings.

Warnings flag placements that make a hole trivial or awkward:
- Cup cannot be reached from the tee
- Route bypasses the obstacles instead of playing around them
- Cup sits right against the fairway edge

The linter returns the messages as plain strings for toast display.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LintWarning(ABC):
    """Abstract base class for lint warnings.

    Subclasses store specific parameters and compute message as property.
    Use isinstance() to check warning type.
    Each subclass has a warning_type field for serialization.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable warning message."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnreachableCupWarning(LintWarning):
    """No path connects tee and cup."""

    warning_type: str = "UnreachableCupWarning"

    @property
    def message(self) -> str:
        return "Cup is not reachable from the tee"


@dataclass(frozen=True)
class ObstacleBypassWarning(LintWarning):
    """Route is nearly straight and barely touches any obstacle.

    Attributes:
        path_length_px: Route length
        straight_distance_px: Tee-to-cup distance
        turns: Direction changes along the route
        corridor_density: Average blocked neighbours per cell
        warning_type: Type identifier for serialization
    """

    path_length_px: float
    straight_distance_px: float
    turns: int
    corridor_density: float
    warning_type: str = "ObstacleBypassWarning"

    @property
    def message(self) -> str:
        return (
            f"Cup path appears to bypass obstacles (nearly straight: {self.path_length_px:.0f}px "
            f"vs {self.straight_distance_px:.0f}px direct, {self.turns} turns, "
            f"corridor contact {self.corridor_density:.2f})"
        )


@dataclass(frozen=True)
class EdgeProximityWarning(LintWarning):
    """Cup lies within the edge margin of the fairway.

    Attributes:
        margin_px: Edge margin that was violated
        warning_type: Type identifier for serialization
    """

    margin_px: float
    warning_type: str = "EdgeProximityWarning"

    @property
    def message(self) -> str:
        return f"Cup is very close to fairway edge (within {self.margin_px:.0f}px)"
