"""Generate / Develop / Reset lifecycle around a single population."""

from __future__ import annotations

from enum import Enum
import random

from loguru import logger

from biomorph.config import GridConfig, SessionConfig
from biomorph.evolution.parent_selector import (
    FixedParentSelector,
    ParentSelector,
    RandomParentSelector,
)
from biomorph.evolution.population import Population
from biomorph.exceptions import SessionStateError
from biomorph.genome.spec import GENOME_SPEC, GenomeSpec


class SessionState(Enum):
    EMPTY = "empty"
    GENERATED = "generated"


class EvolutionSession:
    """Owns the grid configuration and, once generated, the population.

    The grid can only be resized while the session is empty. ``develop``
    advances one generation per call; nothing happens between calls.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        parent_selector: ParentSelector | None = None,
        genome_spec: GenomeSpec = GENOME_SPEC,
    ):
        self.config = config or SessionConfig()
        self.genome_spec = genome_spec
        self.rng = random.Random(self.config.seed)
        self.parent_selector = parent_selector or self._default_selector()
        self.grid = self.config.grid
        self.population: Population | None = None
        self.generation = 0

    @property
    def state(self) -> SessionState:
        return SessionState.EMPTY if self.population is None else SessionState.GENERATED

    @property
    def is_generated(self) -> bool:
        return self.state is SessionState.GENERATED

    def set_grid(self, grid: GridConfig) -> None:
        if self.is_generated:
            raise SessionStateError("Grid size is fixed while a population exists")
        if (
            isinstance(self.parent_selector, FixedParentSelector)
            and self.parent_selector.index >= grid.size
        ):
            raise SessionStateError(
                f"Parent slot {self.parent_selector.index} outside a grid of {grid.size} biomorphs"
            )
        self.grid = grid

    def generate(self) -> Population:
        """Create a random population and develop every member."""
        if self.is_generated:
            raise SessionStateError("Population already generated; reset first")
        population = Population.create(
            self.grid.rows,
            self.grid.columns,
            rng=self.rng,
            genome_spec=self.genome_spec,
        )
        population.develop_all()
        self.population = population
        self.generation = 0
        logger.info(
            "Session: generated {} biomorphs ({}x{})",
            len(population),
            self.grid.rows,
            self.grid.columns,
        )
        return population

    def develop(self) -> Population:
        """Replace the population with mutants of the selected parent."""
        if self.population is None:
            raise SessionStateError("Nothing to develop; generate a population first")
        parent_index = self.parent_selector.select(self.population.biomorphs)
        self.population.reproduce(parent_index)
        self.generation += 1
        logger.info(
            "Session: generation {} developed from slot {}",
            self.generation,
            parent_index,
        )
        return self.population

    def reset(self) -> None:
        self.population = None
        self.generation = 0
        self.grid = self.config.grid
        logger.info("Session: reset")

    def _default_selector(self) -> ParentSelector:
        if self.config.parent_selection == "random":
            return RandomParentSelector(self.rng)
        return FixedParentSelector(self.config.parent_index)
