"""CupCandidate - A suggested alternate cup position."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CupCandidate:
    """A cup position ranked by how interesting the resulting hole is.

    Attributes:
        x, y: Cell centre in pixels
        score: Desirability; longer, twistier, tighter routes score higher
        length_px: Path length from the tee
        turns: Direction changes along that path
    """

    x: float
    y: float
    score: float
    length_px: float
    turns: int

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "score": self.score, "length_px": self.length_px, "turns": self.turns}
