"""Core algorithms for kochflake.

This module contains the core algorithms for:

- Geometry helpers (cosine rule, equilateral height, perpendicular offsets)
- Snowflake generation (initial triangle, edge refinement)
- Rasterization (plain polyline, supersampled shade buckets)
- Render orchestration (level loop, timing, statistics)

Key functions:
- initialize: Build the level 0 triangle
- refine: Produce the next refinement level
- generate_levels: Iterate over refinement levels
- render_supersampled: Group pixels into shade buckets
- polyline_points: Integer pixel polyline for plain drawing

Key classes:
- SnowflakeRunner: Drives levels onto a display surface
"""

from kochflake.core.generator import generate_levels, initialize, refine
from kochflake.core.geometry import (
    cosine_rule_side,
    edge_thirds,
    equilateral_height,
    perpendicular_offset,
)
from kochflake.core.rasterizer import (
    coverage_counts,
    coverage_grid,
    polyline_points,
    render_supersampled,
    shade_bucket_count,
    shade_color,
)
from kochflake.core.runner import SnowflakeRunner, draw_boundary

__all__ = [
    # Runner
    "SnowflakeRunner",
    # Geometry functions
    "cosine_rule_side",
    "coverage_counts",
    "coverage_grid",
    "draw_boundary",
    "edge_thirds",
    "equilateral_height",
    # Generator functions
    "generate_levels",
    "initialize",
    "perpendicular_offset",
    # Rasterizer functions
    "polyline_points",
    "refine",
    "render_supersampled",
    "shade_bucket_count",
    "shade_color",
]
