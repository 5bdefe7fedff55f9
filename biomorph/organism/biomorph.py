from __future__ import annotations

import random
from typing import Sequence

from loguru import logger

from biomorph.genome.spec import GENOME_SPEC, ORDER_INDEX, GenomeSpec
from biomorph.geometry import BoundingBox, FloatPoint, Segment, bounding_box
from biomorph.organism.development import (
    START_DIRECTION,
    START_POINT,
    check_capacity,
    derive_direction_tables,
    grow_tree,
)


class Biomorph:
    """One organism: a gene vector and the segment tree grown from it.

    ``segments`` is a cache of :meth:`develop`. It is empty until the first
    call and is rebuilt from scratch on every call. Equality and hashing only
    look at the genes.
    """

    def __init__(self, genes: Sequence[int], genome_spec: GenomeSpec = GENOME_SPEC):
        genome_spec.validate_genes(genes)
        self._genes = tuple(int(g) for g in genes)
        self.genome_spec = genome_spec
        self.segments: list[Segment] = []

    @classmethod
    def random(
        cls, rng: random.Random, genome_spec: GenomeSpec = GENOME_SPEC
    ) -> "Biomorph":
        return cls(genome_spec.sample(rng), genome_spec)

    @property
    def genes(self) -> tuple[int, ...]:
        return self._genes

    @property
    def order(self) -> int:
        return self._genes[ORDER_INDEX]

    @property
    def is_developed(self) -> bool:
        return bool(self.segments)

    def develop(
        self,
        start: tuple[int, int] = START_POINT,
        direction: int = START_DIRECTION,
    ) -> list[Segment]:
        """Regrow the segment list from the current genes."""
        check_capacity(self.order)
        tables = derive_direction_tables(self._genes)
        self.segments = grow_tree(tables, start=start, direction=direction)
        return self.segments

    def mutate(self, rng: random.Random) -> "Biomorph":
        """Return an undeveloped copy with one gene nudged by one step."""
        index = rng.randrange(len(self._genes))
        delta = 1 if rng.random() < 0.5 else -1
        genes = list(self._genes)
        genes[index] = self.genome_spec.clamp(index, genes[index] + delta)
        logger.debug(
            "Biomorph: gene {} {} -> {} (delta {:+d})",
            index,
            self._genes[index],
            genes[index],
            delta,
        )
        return Biomorph(genes, self.genome_spec)

    def bounding_box(self) -> BoundingBox:
        return bounding_box(self.segments)

    def center(self) -> FloatPoint:
        return self.bounding_box().center

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Biomorph):
            return NotImplemented
        return self._genes == other._genes

    def __hash__(self) -> int:
        return hash(self._genes)

    def __repr__(self) -> str:
        return f"Biomorph(genes={list(self._genes)}, segments={len(self.segments)})"
