"""ParEstimate - Single-path par suggestion shown in the editor's confirmation prompt."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParEstimate:
    """Result of a single-path par estimate.

    Attributes:
        reachable: Whether a path from tee to cup exists
        suggested_par: Par in [MIN_PAR, MAX_PAR]
        path_length_px: Path length, or the straight-line distance when unreachable
        notes: Free-form diagnostics (sand, slopes, turns, corridor contact)
    """

    reachable: bool
    suggested_par: int
    path_length_px: float
    notes: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "notes", tuple(self.notes))

    def to_dict(self) -> dict:
        return {
            "reachable": self.reachable,
            "suggested_par": self.suggested_par,
            "path_length_px": self.path_length_px,
            "notes": list(self.notes),
        }
