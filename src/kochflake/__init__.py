"""Kochflake - Render a Koch snowflake level by level.

Kochflake starts from an equilateral triangle and repeatedly replaces every
edge with four edges forming an outward-pointing equilateral bump. Each
refinement level is presented on a display surface, either as a plain
polyline or anti-aliased through a supersampled coverage grid.

Example:
    $ kochflake antialias

This opens an 800x800 window and draws eight refinement levels with
16 shades of gray.
"""

__version__ = "0.1.0"
__author__ = "Anna Winters"

__all__ = ["__author__", "__version__"]
