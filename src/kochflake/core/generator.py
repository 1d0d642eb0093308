"""Koch snowflake generation.

Level 0 is an equilateral triangle; every further level replaces each edge
with four edges forming an outward equilateral bump.

Outward orientation uses centre tracking: each vertex carries the centre of
the wedge it belongs to, and a new tip is placed on whichever side of its
base lies farther from the centre carried by the edge's start vertex.
"""

from collections.abc import Iterator

import numpy as np

from kochflake.core.geometry import (
    cosine_rule_side,
    edge_thirds,
    equilateral_height,
    perpendicular_offset,
)
from kochflake.domain import Boundary
from kochflake.exceptions import DegenerateEdgeError, GeometryError

INTERIOR_ANGLE_DEGREES = 120.0


def initialize(center: tuple[float, float], radius: float) -> Boundary:
    """Create the level 0 triangle.

    The top vertex sits ``radius`` above the centre. The side length follows
    from the cosine rule with the 120 degree angle subtended at the centre,
    and the triangle height places the two bottom vertices, so all three
    vertices lie ``radius`` away from ``center``.

    Vertices are ordered top, bottom-left, bottom-right and all carry
    ``center`` as their reference centre.

    Args:
        center: (x, y) centre of the triangle in display pixels
        radius: Distance from the centre to each vertex

    Returns:
        Boundary with three vertices at level 0

    Raises:
        GeometryError: If the centre is not finite or radius is not a positive
            finite number
    """
    if not np.isfinite(radius) or radius <= 0:
        raise GeometryError(f"Triangle radius must be positive, got {radius}")

    x, y = center
    if not (np.isfinite(x) and np.isfinite(y)):
        raise GeometryError(f"Triangle centre must be finite, got {center}")

    side_length = cosine_rule_side(radius, radius, INTERIOR_ANGLE_DEGREES)
    height = float(equilateral_height(side_length))
    base_y = y - radius + height

    return Boundary(
        x=[x, x - side_length / 2.0, x + side_length / 2.0],
        y=[y - radius, base_y, base_y],
        centre_x=[x, x, x],
        centre_y=[y, y, y],
        level=0,
    )


def refine(boundary: Boundary) -> Boundary:
    """Produce the next refinement level.

    Every edge (V[i], V[i+1]) contributes four vertices in order: V[i]
    unchanged, the point one third along (P1), the tip of the equilateral
    triangle on P1-P3, and the point two thirds along (P3). P1 and the tip
    carry the base midpoint as their centre; P3 keeps the centre of V[i]
    because the edge after it is not part of the new triangle.

    The input is never modified.

    Args:
        boundary: Boundary at level k

    Returns:
        New boundary at level k + 1 with four times as many vertices

    Raises:
        DegenerateEdgeError: If an edge has zero length or non-finite coordinates
    """
    x0, y0 = boundary.x, boundary.y
    cx, cy = boundary.centre_x, boundary.centre_y
    x1 = np.roll(x0, -1)
    y1 = np.roll(y0, -1)

    p1x, p1y, p3x, p3y = edge_thirds(x0, y0, x1, y1)

    xd = p1x - p3x
    yd = p1y - p3y
    xm = (p1x + p3x) / 2.0
    ym = (p1y + p3y) / 2.0

    side_length = np.hypot(xd, yd)
    _check_edges(side_length)

    xh, yh = perpendicular_offset(xd, yd, equilateral_height(side_length))

    tip_x = xm + xh
    tip_y = ym + yh
    flip = np.hypot(tip_x - cx, tip_y - cy) < np.hypot((xm - xh) - cx, (ym - yh) - cy)
    tip_x = np.where(flip, xm - xh, tip_x)
    tip_y = np.where(flip, ym - yh, tip_y)

    return Boundary(
        x=_interleave(x0, p1x, tip_x, p3x),
        y=_interleave(y0, p1y, tip_y, p3y),
        centre_x=_interleave(cx, xm, xm, cx),
        centre_y=_interleave(cy, ym, ym, cy),
        level=boundary.level + 1,
    )


def generate_levels(
    center: tuple[float, float], radius: float, levels: int
) -> Iterator[Boundary]:
    """Yield boundaries for levels 0 to ``levels - 1``.

    Only the most recent boundary is kept alive by the generator.

    Args:
        center: (x, y) centre of the initial triangle
        radius: Distance from the centre to each initial vertex
        levels: Number of levels to yield, at least 1

    Yields:
        Boundary for each level in order

    Raises:
        GeometryError: If levels is less than 1 or the triangle is invalid
    """
    if levels < 1:
        raise GeometryError(f"At least one level is required, got {levels}")

    boundary = initialize(center, radius)
    yield boundary
    for _ in range(levels - 1):
        boundary = refine(boundary)
        yield boundary


def _check_edges(side_length: np.ndarray) -> None:
    bad = np.flatnonzero(~np.isfinite(side_length))
    if bad.size:
        raise DegenerateEdgeError(int(bad[0]), "non-finite coordinates")

    bad = np.flatnonzero(side_length == 0.0)
    if bad.size:
        raise DegenerateEdgeError(int(bad[0]), "zero-length edge")


def _interleave(*columns: np.ndarray) -> np.ndarray:
    return np.stack(columns, axis=1).reshape(-1)
