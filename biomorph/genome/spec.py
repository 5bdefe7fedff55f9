from __future__ import annotations

import random
from typing import Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator

from biomorph.exceptions import GenomeIndexError, GenomeValidationError

GENE_COUNT = 9
ORDER_INDEX = 8

Bounds = tuple[int, int]


def _default_bounds() -> list[Bounds]:
    bounds: list[Bounds] = [(-9, 9)] * GENE_COUNT
    bounds[ORDER_INDEX] = (3, 9)
    return bounds


def _default_initial_bounds() -> dict[int, Bounds]:
    # Order is born in the top four values of the shape-gene range.
    upper = _default_bounds()[ORDER_INDEX - 1][1]
    return {ORDER_INDEX: (upper - 3, upper)}


class GenomeSpec(BaseModel):
    """Legal integer interval for every gene, plus the birth distribution.

    ``bounds`` are the inclusive clamp intervals used by mutation.
    ``initial_bounds`` overrides the sampling interval for selected genes when a
    biomorph is created from scratch; genes not listed are sampled over their
    full clamp interval.
    """

    bounds: list[Bounds] = Field(
        default_factory=_default_bounds,
        description="Inclusive (min, max) per gene index",
    )
    initial_bounds: dict[int, Bounds] = Field(
        default_factory=_default_initial_bounds,
        description="Sampling interval overrides for freshly created genomes",
    )
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bounds(self):
        if len(self.bounds) != GENE_COUNT:
            raise ValueError(
                f"Expected {GENE_COUNT} gene bounds, got {len(self.bounds)}"
            )
        for index, (lo, hi) in enumerate(self.bounds):
            # Clamping lands one step inside, so each interval needs room for it.
            if hi - lo < 2:
                raise ValueError(
                    f"Invalid bounds for gene {index}: ({lo}, {hi}) is narrower than 3 values"
                )
        for index, (lo, hi) in self.initial_bounds.items():
            if not 0 <= index < GENE_COUNT:
                raise ValueError(f"Initial bounds for unknown gene {index}")
            clamp_lo, clamp_hi = self.bounds[index]
            if lo > hi or lo < clamp_lo or hi > clamp_hi:
                raise ValueError(
                    f"Initial bounds ({lo}, {hi}) for gene {index} must lie within ({clamp_lo}, {clamp_hi})"
                )
        return self

    def bounds_for(self, index: int) -> Bounds:
        """Return the inclusive ``(min, max)`` clamp interval of gene ``index``."""
        if not 0 <= index < GENE_COUNT:
            raise GenomeIndexError(
                f"Gene index {index} outside 0..{GENE_COUNT - 1}"
            )
        return self.bounds[index]

    def initial_bounds_for(self, index: int) -> Bounds:
        self.bounds_for(index)
        return self.initial_bounds.get(index, self.bounds[index])

    def sample(self, rng: random.Random) -> list[int]:
        """Draw a fresh gene vector from the birth distribution."""
        genes = []
        for index in range(GENE_COUNT):
            lo, hi = self.initial_bounds_for(index)
            genes.append(rng.randint(lo, hi))
        logger.debug("GenomeSpec: sampled genes {}", genes)
        return genes

    def clamp(self, index: int, value: int) -> int:
        """Push an out-of-range value one step inside the violated bound."""
        lo, hi = self.bounds_for(index)
        if value < lo:
            return lo + 1
        if value > hi:
            return hi - 1
        return value

    def validate_genes(self, genes: Sequence[int]) -> None:
        if len(genes) != GENE_COUNT:
            raise GenomeValidationError(
                f"Expected {GENE_COUNT} genes, got {len(genes)}"
            )
        for index, value in enumerate(genes):
            lo, hi = self.bounds[index]
            if not lo <= value <= hi:
                raise GenomeValidationError(
                    f"Gene {index}={value} outside bounds ({lo}, {hi})"
                )


GENOME_SPEC = GenomeSpec()
