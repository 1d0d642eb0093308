"""Pygame window implementing the display surface protocol."""

import numpy as np
import pygame

from kochflake.display.surface import PointList
from kochflake.domain import Color
from kochflake.exceptions import DisplayError


class PygameSurface:
    """A square pygame window.

    Example:
        with PygameSurface(800, "Snowflake") as surface:
            surface.clear((88, 88, 88))
            surface.draw_polyline([(0, 0), (10, 10)], (255, 255, 255))
            surface.present()
    """

    def __init__(self, size: int, title: str = "Snowflake") -> None:
        """Open the window.

        Args:
            size: Width and height in pixels
            title: Window caption

        Raises:
            DisplayError: If pygame cannot create the window
        """
        self.size = size
        try:
            pygame.display.init()
            self._screen = pygame.display.set_mode((size, size))
        except pygame.error as e:
            pygame.quit()
            raise DisplayError(str(e)) from e
        pygame.display.set_caption(title)

    def __enter__(self) -> "PygameSurface":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def clear(self, color: Color) -> None:
        self._screen.fill(color)

    def draw_polyline(self, points: PointList, color: Color) -> None:
        if len(points) < 2:
            return
        pygame.draw.lines(self._screen, color, False, np.asarray(points).tolist())

    def draw_points(self, points: PointList, color: Color) -> None:
        pixels = np.asarray(points, dtype=np.intp).reshape(-1, 2)
        if pixels.size == 0:
            return

        inside = (
            (pixels[:, 0] >= 0)
            & (pixels[:, 0] < self.size)
            & (pixels[:, 1] >= 0)
            & (pixels[:, 1] < self.size)
        )
        pixels = pixels[inside]

        # pixels3d locks the surface until the array is released
        view = pygame.surfarray.pixels3d(self._screen)
        view[pixels[:, 0], pixels[:, 1]] = color
        del view

    def present(self) -> None:
        pygame.event.pump()
        pygame.display.flip()

    def pause(self, milliseconds: int) -> None:
        pygame.time.delay(milliseconds)

    def close(self) -> None:
        pygame.quit()

    def pixel(self, x: int, y: int) -> Color:
        """Current color of one pixel."""
        r, g, b, *_ = self._screen.get_at((x, y))
        return (r, g, b)
