"""Geometric operations for snowflake refinement.

This module provides the mathematical building blocks for:
- Side length of an isosceles triangle (cosine rule)
- Height of an equilateral triangle (right-triangle decomposition)
- Points one and two thirds along an edge
- Perpendicular displacement of a given length

Functions accept scalars or numpy arrays so a whole refinement level can be
computed at once. All functions are pure and stateless.
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def cosine_rule_side(a: float, b: float, angle_degrees: float) -> float:
    """Length of the side opposite ``angle_degrees`` between sides a and b.

    Args:
        a: Length of the first adjacent side
        b: Length of the second adjacent side
        angle_degrees: Included angle in degrees

    Returns:
        Length of the opposite side

    Examples:
        >>> round(cosine_rule_side(1.0, 1.0, 60.0), 9)
        1.0
    """
    angle = math.radians(angle_degrees)
    return math.sqrt(a**2 + b**2 - 2 * a * b * math.cos(angle))


def equilateral_height(side: ArrayLike) -> NDArray[np.float64]:
    """Height of an equilateral triangle with the given side length.

    The side, half the base and the height form a right-angled triangle, so
    ``height = sqrt(side**2 - (side / 2)**2)``.

    Args:
        side: Side length (scalar or array)

    Returns:
        Triangle height with the same shape as ``side``
    """
    side = np.asarray(side, dtype=np.float64)
    return np.sqrt(side**2 - (side / 2.0) ** 2)


def edge_thirds(
    x0: ArrayLike, y0: ArrayLike, x1: ArrayLike, y1: ArrayLike
) -> tuple[NDArray[np.float64], ...]:
    """Points one third and two thirds of the way from (x0, y0) to (x1, y1).

    Returns:
        Tuple of (x_one_third, y_one_third, x_two_thirds, y_two_thirds)
    """
    x0, y0, x1, y1 = (np.asarray(v, dtype=np.float64) for v in (x0, y0, x1, y1))
    return (
        (x0 * 2.0 + x1) / 3.0,
        (y0 * 2.0 + y1) / 3.0,
        (x0 + x1 * 2.0) / 3.0,
        (y0 + y1 * 2.0) / 3.0,
    )


def perpendicular_offset(
    xd: ArrayLike, yd: ArrayLike, height: ArrayLike
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Vector of length ``height`` perpendicular to the direction (xd, yd).

    The vertical component is solved from ``xd*xh + yd*yh = 0`` and
    ``xh**2 + yh**2 = height**2``, which divides by ``xd``. Where the
    horizontal delta is smaller in magnitude than the vertical one (including
    exactly vertical edges) the roles of x and y are swapped, so no division
    by zero can occur for a non-zero direction.

    The sign of the result is arbitrary; callers pick the outward side.

    Args:
        xd: Horizontal component of the base direction
        yd: Vertical component of the base direction
        height: Required length of the perpendicular vector

    Returns:
        Tuple of (xh, yh)
    """
    xd = np.atleast_1d(np.asarray(xd, dtype=np.float64))
    yd = np.atleast_1d(np.asarray(yd, dtype=np.float64))
    height = np.broadcast_to(np.asarray(height, dtype=np.float64), xd.shape)

    xh = np.empty_like(xd)
    yh = np.empty_like(yd)

    steep = np.abs(xd) < np.abs(yd)
    flat = ~steep

    yh[flat] = np.sqrt(height[flat] ** 2 / (yd[flat] ** 2 / xd[flat] ** 2 + 1.0))
    xh[flat] = -(yd[flat] * yh[flat]) / xd[flat]

    xh[steep] = np.sqrt(height[steep] ** 2 / (xd[steep] ** 2 / yd[steep] ** 2 + 1.0))
    yh[steep] = -(xd[steep] * xh[steep]) / yd[steep]

    return xh, yh
