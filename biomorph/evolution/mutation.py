from __future__ import annotations

from abc import ABC, abstractmethod
import random

from biomorph.organism.biomorph import Biomorph


class MutationOperator(ABC):
    """Produces one offspring genome from a single parent."""

    @abstractmethod
    def mutate(self, parent: Biomorph, rng: random.Random) -> Biomorph:
        """Return a new, undeveloped biomorph derived from ``parent``."""


class PointMutationOperator(MutationOperator):
    """Nudges one uniformly chosen gene by ±1, clamped inside its bounds."""

    def mutate(self, parent: Biomorph, rng: random.Random) -> Biomorph:
        return parent.mutate(rng)
