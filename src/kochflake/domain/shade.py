"""Shade buckets produced by the supersampled rasterizer."""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

Color = tuple[int, int, int]


@dataclass(frozen=True, eq=False)
class ShadeBucket:
    """Display pixels sharing one supersample coverage count.

    Attributes:
        level: Coverage count this bucket stands for (0 = nothing covered)
        pixels: N x 2 integer array of (x, y) pixel coordinates
    """

    level: int
    pixels: NDArray[np.intp]

    def __len__(self) -> int:
        return len(self.pixels)

    def is_empty(self) -> bool:
        """Check if no pixel falls into this bucket."""
        return len(self.pixels) == 0

    def to_points(self) -> list[tuple[int, int]]:
        """Pixel coordinates as a list of (x, y) tuples."""
        return [(int(x), int(y)) for x, y in self.pixels]


@dataclass(frozen=True, eq=False)
class ShadeBuckets:
    """The full set of shade buckets for one rendered frame.

    Buckets are ordered by coverage level and partition the display area.

    Attributes:
        buckets: Buckets indexed by coverage level
        display_size: Width and height of the display in pixels
        dropped_samples: Vertices that fell outside the sampling grid
    """

    buckets: tuple[ShadeBucket, ...]
    display_size: int
    dropped_samples: int = 0

    def __len__(self) -> int:
        return len(self.buckets)

    def __getitem__(self, level: int) -> ShadeBucket:
        return self.buckets[level]

    def __iter__(self) -> Iterator[ShadeBucket]:
        return iter(self.buckets)

    def total_pixels(self) -> int:
        """Sum of pixels across all buckets."""
        return sum(len(bucket) for bucket in self.buckets)

    def covered(self) -> list[ShadeBucket]:
        """Non-empty buckets with at least one covered sample."""
        return [b for b in self.buckets if b.level > 0 and not b.is_empty()]
