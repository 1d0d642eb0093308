"""Display surface protocol and a headless recording implementation."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from kochflake.domain import Color

PointList = Sequence[tuple[int, int]] | NDArray[np.integer]


@runtime_checkable
class DisplaySurface(Protocol):
    """Where rendered levels are presented.

    Drawing calls accumulate into a frame that becomes visible on present().
    """

    def clear(self, color: Color) -> None: ...

    def draw_polyline(self, points: PointList, color: Color) -> None: ...

    def draw_points(self, points: PointList, color: Color) -> None: ...

    def present(self) -> None: ...

    def pause(self, milliseconds: int) -> None: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class SurfaceCall:
    """One recorded call on a RecordingSurface.

    Attributes:
        name: Method that was called
        color: Color argument, if any
        point_count: Number of points passed, if any
        milliseconds: Pause duration, if any
    """

    name: str
    color: Color | None = None
    point_count: int = 0
    milliseconds: int = 0


@dataclass
class RecordingSurface:
    """Surface that records calls instead of drawing.

    Used for headless runs; pauses are summed rather than slept.
    """

    calls: list[SurfaceCall] = field(default_factory=list)
    frames: int = 0
    paused_ms: int = 0
    closed: bool = False

    def clear(self, color: Color) -> None:
        self.calls.append(SurfaceCall("clear", color=color))

    def draw_polyline(self, points: PointList, color: Color) -> None:
        self.calls.append(SurfaceCall("draw_polyline", color=color, point_count=len(points)))

    def draw_points(self, points: PointList, color: Color) -> None:
        self.calls.append(SurfaceCall("draw_points", color=color, point_count=len(points)))

    def present(self) -> None:
        self.frames += 1
        self.calls.append(SurfaceCall("present"))

    def pause(self, milliseconds: int) -> None:
        self.paused_ms += milliseconds
        self.calls.append(SurfaceCall("pause", milliseconds=milliseconds))

    def close(self) -> None:
        self.closed = True
        self.calls.append(SurfaceCall("close"))

    def calls_named(self, name: str) -> list[SurfaceCall]:
        """Recorded calls of one method, in order."""
        return [call for call in self.calls if call.name == name]

    def summary(self) -> dict[str, Any]:
        """Counts of recorded activity."""
        return {
            "frames": self.frames,
            "paused_ms": self.paused_ms,
            "polylines": len(self.calls_named("draw_polyline")),
            "point_sets": len(self.calls_named("draw_points")),
        }
