"""Genome-to-geometry development.

Genes are turned into a pair of direction tables, and the tables drive a
binary branching walk: each node draws one segment and, while length remains,
spawns two children turned one compass step left and right with one unit less
length. Segments are emitted in pre-order (a node's own segment, then its whole
left subtree, then its right subtree).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from biomorph.exceptions import SegmentCapacityError
from biomorph.genome.spec import GENE_COUNT, ORDER_INDEX
from biomorph.geometry import Segment

MAX_SEGMENTS = 1024
DIRECTIONS = 8
START_POINT: tuple[int, int] = (0, 0)
START_DIRECTION = 2


@dataclass(frozen=True)
class DirectionTables:
    """Per-direction unit steps derived from one gene vector.

    Index 8 of each table is unused as a direction and always 0.
    """

    dx: tuple[int, ...]
    dy: tuple[int, ...]
    order: int

    def step(self, direction: int) -> tuple[int, int]:
        d = direction % DIRECTIONS
        return self.dx[d], self.dy[d]


def derive_direction_tables(genes: Sequence[int]) -> DirectionTables:
    # Left/right directions mirror with a sign flip; vertical ones share magnitude.
    dx = [0] * GENE_COUNT
    dy = [0] * GENE_COUNT

    dx[3] = genes[1]
    dx[4] = genes[2]
    dx[5] = genes[3]
    dx[1] = -dx[3]
    dx[0] = -dx[4]
    dx[2] = 0
    dx[6] = 0
    dx[7] = -dx[5]

    dy[2] = genes[4]
    dy[3] = genes[5]
    dy[4] = genes[6]
    dy[5] = genes[7]
    dy[6] = genes[ORDER_INDEX]
    dy[0] = dy[4]
    dy[1] = dy[3]
    dy[7] = dy[5]

    return DirectionTables(dx=tuple(dx), dy=tuple(dy), order=genes[ORDER_INDEX])


def segment_count(order: int) -> int:
    """Number of segments a full tree of depth ``order`` contains."""
    return 2 ** (order + 1) - 1


def check_capacity(order: int, capacity: int = MAX_SEGMENTS) -> None:
    if order < 0:
        raise SegmentCapacityError(f"Order must be non-negative, got {order}")
    needed = segment_count(order)
    if needed > capacity:
        raise SegmentCapacityError(
            f"Order {order} needs {needed} segments, capacity is {capacity}"
        )


def grow_tree(
    tables: DirectionTables,
    start: tuple[int, int] = START_POINT,
    length: int | None = None,
    direction: int = START_DIRECTION,
    capacity: int = MAX_SEGMENTS,
) -> list[Segment]:
    """Grow the segment tree described by ``tables``.

    ``length`` defaults to the order gene. The walk uses an explicit LIFO stack
    so the right branch is pushed before the left one and pre-order emission
    is kept.
    """
    if length is None:
        length = tables.order
    check_capacity(length, capacity)

    segments: list[Segment] = []
    stack: list[tuple[int, int, int, int]] = [(start[0], start[1], length, direction)]
    while stack:
        x, y, remaining, d = stack.pop()
        step_x, step_y = tables.step(d)
        new_x = x + remaining * step_x
        new_y = y + remaining * step_y
        segments.append(Segment.planar(x, y, new_x, new_y))

        if remaining > 0:
            stack.append((new_x, new_y, remaining - 1, d + 1))
            stack.append((new_x, new_y, remaining - 1, d - 1))

    logger.debug(
        "grow_tree: order={} start={} direction={} -> {} segments",
        length,
        start,
        direction,
        len(segments),
    )
    return segments

