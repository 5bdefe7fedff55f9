from __future__ import annotations

import random
from typing import Iterator, Sequence

from loguru import logger

from biomorph.evolution.metrics import PopulationMetrics
from biomorph.evolution.mutation import MutationOperator, PointMutationOperator
from biomorph.exceptions import PopulationError, PopulationIndexError
from biomorph.genome.spec import GENOME_SPEC, GenomeSpec
from biomorph.organism.biomorph import Biomorph
from biomorph.organism.development import START_DIRECTION, START_POINT


class Population:
    """Rectangular grid of biomorphs evolved together.

    Slots are stored row-major: slot ``i`` sits in column ``i % columns`` and
    row ``i // columns``.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        biomorphs: Sequence[Biomorph],
        *,
        rng: random.Random,
        mutator: MutationOperator | None = None,
    ):
        if rows < 1 or columns < 1:
            raise PopulationError(
                f"Population needs at least one row and column, got {rows}x{columns}"
            )
        if len(biomorphs) != rows * columns:
            raise PopulationError(
                f"{rows}x{columns} grid needs {rows * columns} biomorphs, got {len(biomorphs)}"
            )
        self.rows = rows
        self.columns = columns
        self.biomorphs: list[Biomorph] = list(biomorphs)
        self.rng = rng
        self.mutator = mutator or PointMutationOperator()
        self.metrics = PopulationMetrics()

    @classmethod
    def create(
        cls,
        rows: int,
        columns: int,
        *,
        rng: random.Random | None = None,
        genome_spec: GenomeSpec = GENOME_SPEC,
        mutator: MutationOperator | None = None,
    ) -> "Population":
        """Fill a ``rows`` x ``columns`` grid with random, undeveloped biomorphs."""
        rng = rng or random.Random()
        biomorphs = [Biomorph.random(rng, genome_spec) for _ in range(rows * columns)]
        population = cls(rows, columns, biomorphs, rng=rng, mutator=mutator)
        population.metrics.biomorphs_created = len(biomorphs)
        logger.info("Population: created {}x{} grid", rows, columns)
        return population

    def __len__(self) -> int:
        return len(self.biomorphs)

    def __iter__(self) -> Iterator[Biomorph]:
        return iter(self.biomorphs)

    def __getitem__(self, index: int) -> Biomorph:
        return self.biomorphs[self._check_index(index)]

    def develop(self, index: int) -> Biomorph:
        """Grow the segment tree of the biomorph in slot ``index``."""
        biomorph = self.biomorphs[self._check_index(index)]
        segments = biomorph.develop(start=START_POINT, direction=START_DIRECTION)
        self.metrics.record_development(len(segments))
        return biomorph

    def develop_all(self) -> None:
        for index in range(len(self.biomorphs)):
            self.develop(index)

    def reproduce(self, parent_index: int) -> None:
        """Replace every slot, the parent's included, with a developed mutant of the parent."""
        parent = self.biomorphs[self._check_index(parent_index)]
        logger.info(
            "Population: reproducing from slot {} genes={}",
            parent_index,
            list(parent.genes),
        )
        for index in range(len(self.biomorphs)):
            self.biomorphs[index] = self.mutator.mutate(parent, self.rng)
            self.develop(index)
        self.metrics.record_generation(len(self.biomorphs))
        logger.debug("Population: generation {} complete", self.metrics.generations)

    def _check_index(self, index: int) -> int:
        # Negative indexes are a contract breach here, not Python-style wraparound.
        if not 0 <= index < len(self.biomorphs):
            raise PopulationIndexError(
                f"Biomorph index {index} outside 0..{len(self.biomorphs) - 1}"
            )
        return index
