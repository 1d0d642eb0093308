"""Core geometric types for snowflake boundaries.

This module defines the fundamental geometric types used throughout kochflake:
- Vertex: A 2D point carrying the reference centre of the wedge it belongs to
- Boundary: A closed, cyclic sequence of vertices for one refinement level
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


def expected_length(level: int) -> int:
    """Number of vertices a boundary has after ``level`` refinements."""
    return 3 * 4**level


@dataclass(frozen=True, slots=True)
class Vertex:
    """A boundary vertex with its outward-orientation reference centre.

    The centre is the point a new triangle tip must move away from when the
    edge starting at this vertex is subdivided.

    Attributes:
        x: X coordinate in display pixels
        y: Y coordinate in display pixels (grows downwards)
        centre_x: X coordinate of the reference centre
        centre_y: Y coordinate of the reference centre
    """

    x: float
    y: float
    centre_x: float
    centre_y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def centre(self) -> tuple[float, float]:
        """Reference centre as an (x, y) tuple."""
        return (self.centre_x, self.centre_y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, centre_x and centre_y fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "centre_x": self.centre_x,
            "centre_y": self.centre_y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, centre_x and centre_y fields

        Returns:
            Vertex instance
        """
        return cls(
            x=data["x"],
            y=data["y"],
            centre_x=data["centre_x"],
            centre_y=data["centre_y"],
        )


def _frozen_array(values: Any) -> NDArray[np.float64]:
    array = np.array(values, dtype=np.float64).reshape(-1)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Boundary:
    """A closed snowflake outline at one refinement level.

    Vertices are held column-wise in four parallel read-only arrays so that a
    level with millions of vertices stays compact. The last vertex implicitly
    connects back to the first.

    Attributes:
        x: Vertex X coordinates
        y: Vertex Y coordinates
        centre_x: Reference centre X coordinate per vertex
        centre_y: Reference centre Y coordinate per vertex
        level: Refinement level that produced this boundary
    """

    x: NDArray[np.float64]
    y: NDArray[np.float64]
    centre_x: NDArray[np.float64]
    centre_y: NDArray[np.float64]
    level: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y", "centre_x", "centre_y"):
            object.__setattr__(self, name, _frozen_array(getattr(self, name)))

        n = len(self.x)
        if n == 0:
            raise ValueError("Boundary must contain at least one vertex")
        if not (len(self.y) == len(self.centre_x) == len(self.centre_y) == n):
            raise ValueError("Boundary coordinate arrays must have equal length")
        if self.level < 0:
            raise ValueError("Boundary level must be non-negative")

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex], level: int = 0) -> "Boundary":
        """Build a boundary from vertex objects.

        Args:
            vertices: Vertices in boundary order
            level: Refinement level of the boundary

        Returns:
            Boundary instance
        """
        items = list(vertices)
        return cls(
            x=[v.x for v in items],
            y=[v.y for v in items],
            centre_x=[v.centre_x for v in items],
            centre_y=[v.centre_y for v in items],
            level=level,
        )

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, index: int) -> Vertex:
        return Vertex(
            x=float(self.x[index]),
            y=float(self.y[index]),
            centre_x=float(self.centre_x[index]),
            centre_y=float(self.centre_y[index]),
        )

    def __iter__(self) -> Iterator[Vertex]:
        for i in range(len(self)):
            yield self[i]

    def points(self) -> NDArray[np.float64]:
        """Vertex coordinates as an N x 2 array."""
        return np.column_stack((self.x, self.y))

    def edge_lengths(self) -> NDArray[np.float64]:
        """Length of every edge, including the closing edge.

        Returns:
            Array where element i is the distance from vertex i to vertex i+1
        """
        return np.hypot(np.roll(self.x, -1) - self.x, np.roll(self.y, -1) - self.y)

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        With display coordinates (Y down) a positive area means the vertices
        run clockwise on screen.

        Returns:
            Signed area of the outline
        """
        if len(self) < 3:
            return 0.0
        x_next = np.roll(self.x, -1)
        y_next = np.roll(self.y, -1)
        return float(np.sum(self.x * y_next - x_next * self.y) / 2.0)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the outline.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        return (
            float(self.x.min()),
            float(self.y.min()),
            float(self.x.max()),
            float(self.y.max()),
        )

    def to_vertices(self) -> list[Vertex]:
        """Materialize all vertices as Vertex objects."""
        return list(self)
