from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, computed_field

Point = tuple[int, int, int]
FloatPoint = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class Segment:
    """One directed line element of a grown tree. Planar: z is always 0."""

    start: Point
    end: Point

    @classmethod
    def planar(cls, x0: int, y0: int, x1: int, y1: int) -> "Segment":
        return cls(start=(x0, y0, 0), end=(x1, y1, 0))


class BoundingBox(BaseModel):
    """Componentwise extent of a segment list.

    An empty segment list yields the zero box at the origin with
    ``is_empty`` set, so callers never see infinities.
    """

    min: FloatPoint
    max: FloatPoint
    is_empty: bool = False
    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> "BoundingBox":
        return cls(min=(0.0, 0.0, 0.0), max=(0.0, 0.0, 0.0), is_empty=True)

    @computed_field
    @property
    def center(self) -> FloatPoint:
        cx, cy, cz = ((lo + hi) / 2.0 for lo, hi in zip(self.min, self.max))
        return (cx, cy, cz)

    @computed_field
    @property
    def size(self) -> FloatPoint:
        sx, sy, sz = (hi - lo for lo, hi in zip(self.min, self.max))
        return (sx, sy, sz)


def segment_endpoints(segments: Sequence[Segment]) -> np.ndarray:
    """Stack every start and end point into an ``(2 * n, 3)`` integer array."""
    if not segments:
        return np.zeros((0, 3), dtype=np.int64)
    return np.array(
        [point for seg in segments for point in (seg.start, seg.end)],
        dtype=np.int64,
    )


def bounding_box(segments: Sequence[Segment]) -> BoundingBox:
    points = segment_endpoints(segments)
    if points.size == 0:
        return BoundingBox.empty()
    lo = points.min(axis=0)
    hi = points.max(axis=0)
    return BoundingBox(
        min=tuple(float(v) for v in lo),
        max=tuple(float(v) for v in hi),
    )
