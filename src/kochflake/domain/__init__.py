"""Domain models for kochflake.

This module contains the core domain models representing snowflake outlines
and rasterized output. All models are designed to be:

- Immutable (frozen dataclasses, read-only arrays)
- Independent of the display backend

Key classes:
- Vertex: A 2D point with its outward-orientation reference centre
- Boundary: A closed outline at one refinement level
- ShadeBucket: Pixels sharing one supersample coverage count
- ShadeBuckets: All buckets of one rendered frame
"""

from kochflake.domain.shade import Color, ShadeBucket, ShadeBuckets
from kochflake.domain.vertex import Boundary, Vertex, expected_length

__all__: list[str] = [
    # Core types
    "Vertex",
    "Boundary",
    "Color",
    "ShadeBucket",
    "ShadeBuckets",
    # Helpers
    "expected_length",
]
