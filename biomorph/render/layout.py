from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from biomorph.config import GridConfig
from biomorph.geometry import BoundingBox, Segment, segment_endpoints


@dataclass(frozen=True)
class CellTransform:
    """Maps biomorph coordinates into one grid cell of the canvas."""

    center: tuple[float, float]
    scale: tuple[float, float]
    offset: tuple[float, float]

    def apply(self, points: np.ndarray) -> np.ndarray:
        return (points - np.asarray(self.center)) * np.asarray(self.scale) + np.asarray(
            self.offset
        )


class GridLayout:
    """Splits a canvas centred on the origin into ``rows`` x ``columns`` cells.

    Slot ``i`` occupies column ``i % columns`` and row ``i // columns``; row 0
    is at the bottom (y grows upwards).
    """

    def __init__(
        self,
        grid: GridConfig,
        width: float,
        height: float,
        fill_ratio: float = 0.9,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas must have positive size, got {width}x{height}")
        self.grid = grid
        self.width = width
        self.height = height
        self.fill_ratio = fill_ratio

    @property
    def cell_size(self) -> tuple[float, float]:
        return self.width / self.grid.columns, self.height / self.grid.rows

    def cell_coordinates(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self.grid.size:
            raise IndexError(f"Cell {index} outside a grid of {self.grid.size}")
        return index % self.grid.columns, index // self.grid.columns

    def cell_offset(self, index: int) -> tuple[float, float]:
        """Centre of cell ``index`` relative to the canvas centre."""
        col, row = self.cell_coordinates(index)
        cell_w, cell_h = self.cell_size
        return (
            (col - (self.grid.columns - 1) * 0.5) * cell_w,
            (row - (self.grid.rows - 1) * 0.5) * cell_h,
        )

    def fit(self, index: int, box: BoundingBox) -> CellTransform:
        """Transform that centres ``box`` in cell ``index`` and scales it to fit."""
        cell_w, cell_h = self.cell_size
        size_x, size_y, _ = box.size
        scale_x = cell_w / size_x * self.fill_ratio if size_x > 0 else None
        scale_y = cell_h / size_y * self.fill_ratio if size_y > 0 else None
        # A flat tree borrows the scale of its extended axis.
        if scale_x is None and scale_y is None:
            scale_x = scale_y = 1.0
        elif scale_x is None:
            scale_x = scale_y
        elif scale_y is None:
            scale_y = scale_x
        cx, cy, _ = box.center
        return CellTransform(
            center=(cx, cy), scale=(scale_x, scale_y), offset=self.cell_offset(index)
        )

    def project(self, index: int, segments: list[Segment], box: BoundingBox) -> np.ndarray:
        """Canvas coordinates of ``segments`` as an ``(n, 2, 2)`` array of lines."""
        if not segments:
            return np.zeros((0, 2, 2))
        points = segment_endpoints(segments)[:, :2].astype(float)
        return self.fit(index, box).apply(points).reshape(-1, 2, 2)
