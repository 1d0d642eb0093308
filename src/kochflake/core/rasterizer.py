"""Rasterization of snowflake boundaries.

Two presentation paths are provided:
- polyline_points: integer pixel polyline for plain line drawing
- render_supersampled: coverage counts on a finer grid, grouped into shade
  buckets for anti-aliased drawing

Only boundary vertices are sampled in supersampled mode, not the segments
between them. At the deeper levels the vertices are dense enough to trace
the outline.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from kochflake.domain import Boundary, Color, ShadeBucket, ShadeBuckets
from kochflake.exceptions import RasterizationError


def round_half_away(values: ArrayLike) -> NDArray[np.int64]:
    """Round to the nearest integer, halves away from zero."""
    values = np.asarray(values, dtype=np.float64)
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(np.int64)


def shade_bucket_count(supersample_factor: int) -> int:
    """Number of shade buckets for a supersample factor.

    One bucket per possible coverage count below ``factor**2``; a fully
    covered pixel shares the top bucket. At least two buckets are used so a
    factor of 1 still separates covered from uncovered pixels.
    """
    return max(supersample_factor**2, 2)


def polyline_points(boundary: Boundary) -> NDArray[np.int64]:
    """Integer pixel points for drawing the boundary as closed line segments.

    Args:
        boundary: Outline to draw

    Returns:
        (N + 1) x 2 array of (x, y) pixels, with the first point repeated at
        the end
    """
    points = np.empty((len(boundary) + 1, 2), dtype=np.int64)
    points[:-1, 0] = round_half_away(boundary.x)
    points[:-1, 1] = round_half_away(boundary.y)
    points[-1] = points[0]
    return points


def coverage_grid(
    boundary: Boundary, display_size: int, supersample_factor: int
) -> tuple[NDArray[np.bool_], int]:
    """Mark the supersample cell nearest to each vertex.

    The grid is indexed ``[x, y]`` and has ``display_size * supersample_factor``
    cells per side.

    Args:
        boundary: Outline to sample
        display_size: Display width and height in pixels
        supersample_factor: Sub-samples per pixel along each axis

    Returns:
        Tuple of (grid, dropped) where dropped counts vertices outside the grid
    """
    _check_dimensions(display_size, supersample_factor)

    grid_size = display_size * supersample_factor
    grid = np.zeros((grid_size, grid_size), dtype=np.bool_)

    finite = np.isfinite(boundary.x) & np.isfinite(boundary.y)
    gx = round_half_away(boundary.x[finite] * supersample_factor)
    gy = round_half_away(boundary.y[finite] * supersample_factor)

    inside = (gx >= 0) & (gx < grid_size) & (gy >= 0) & (gy < grid_size)
    grid[gx[inside], gy[inside]] = True

    dropped = len(boundary) - int(np.count_nonzero(inside))
    return grid, dropped


def coverage_counts(grid: NDArray[np.bool_], supersample_factor: int) -> NDArray[np.int64]:
    """Count set sub-cells per display pixel.

    Args:
        grid: Square coverage grid from coverage_grid
        supersample_factor: Sub-samples per pixel along each axis

    Returns:
        Array of shape (display_size, display_size) indexed ``[x, y]``
    """
    display_size = grid.shape[0] // supersample_factor
    blocks = grid.reshape(display_size, supersample_factor, display_size, supersample_factor)
    return blocks.sum(axis=(1, 3), dtype=np.int64)


def render_supersampled(
    boundary: Boundary, display_size: int, supersample_factor: int = 4
) -> ShadeBuckets:
    """Group display pixels into shade buckets by supersample coverage.

    Every pixel lands in exactly one bucket, so the bucket sizes always add
    up to ``display_size ** 2``. Pixels within a bucket are ordered by x,
    then y.

    Args:
        boundary: Outline to rasterize
        display_size: Display width and height in pixels
        supersample_factor: Sub-samples per pixel along each axis

    Returns:
        ShadeBuckets ordered by coverage level

    Raises:
        RasterizationError: If display_size or supersample_factor is below 1
    """
    grid, dropped = coverage_grid(boundary, display_size, supersample_factor)
    bucket_count = shade_bucket_count(supersample_factor)
    levels = np.minimum(coverage_counts(grid, supersample_factor), bucket_count - 1)

    buckets = tuple(
        ShadeBucket(level=level, pixels=np.argwhere(levels == level))
        for level in range(bucket_count)
    )
    return ShadeBuckets(buckets=buckets, display_size=display_size, dropped_samples=dropped)


def shade_color(level: int, bucket_count: int, background: Color, foreground: Color) -> Color:
    """Gray level for a shade bucket.

    Level 0 matches the background and the top level matches the foreground,
    with the channels interpolated linearly in between.

    Args:
        level: Bucket coverage level
        bucket_count: Total number of buckets
        background: Color of an uncovered pixel
        foreground: Color of a fully covered pixel

    Returns:
        RGB color for the bucket
    """
    if not 0 <= level < bucket_count:
        raise RasterizationError(f"shade level {level} outside 0-{bucket_count - 1}")

    t = level / (bucket_count - 1)
    return tuple(  # type: ignore[return-value]
        int(round(bg + (fg - bg) * t)) for bg, fg in zip(background, foreground)
    )


def _check_dimensions(display_size: int, supersample_factor: int) -> None:
    if display_size < 1:
        raise RasterizationError(f"display size must be at least 1, got {display_size}")
    if supersample_factor < 1:
        raise RasterizationError(
            f"supersample factor must be at least 1, got {supersample_factor}"
        )
