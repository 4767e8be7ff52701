"""GridNode - A cell coordinate in the traversability grid."""

from typing import NamedTuple


class GridNode(NamedTuple):
    """A (row, col) cell coordinate.

    A NamedTuple rather than a dataclass: nodes are hashed and compared
    millions of times inside the search loop.
    """

    row: int
    col: int
