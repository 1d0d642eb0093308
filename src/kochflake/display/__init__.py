"""Display surfaces for presenting snowflake levels.

Key classes:
- DisplaySurface: Protocol every surface implements
- RecordingSurface: Headless surface that records calls
- PygameSurface: Window backed by pygame (imported lazily)
"""

from kochflake.display.surface import DisplaySurface, RecordingSurface, SurfaceCall

__all__ = [
    "DisplaySurface",
    "RecordingSurface",
    "SurfaceCall",
    "open_window",
]


def open_window(size: int, title: str) -> DisplaySurface:
    """Open a pygame window surface.

    pygame is imported here so headless runs never initialise SDL.
    """
    from kochflake.display.pygame_surface import PygameSurface

    return PygameSurface(size, title)
