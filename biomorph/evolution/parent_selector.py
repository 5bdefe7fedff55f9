from abc import ABC, abstractmethod
import random
from typing import Sequence

from loguru import logger

from biomorph.organism.biomorph import Biomorph


class ParentSelector(ABC):
    """Abstract base class for picking the parent of the next generation."""

    @abstractmethod
    def select(self, biomorphs: Sequence[Biomorph]) -> int:
        """Return the index of the biomorph to reproduce from.

        Args:
            biomorphs: Current population, in grid order

        Returns:
            Index into ``biomorphs``
        """


class FixedParentSelector(ParentSelector):
    """Always reproduces from the same grid slot."""

    def __init__(self, index: int = 0):
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")
        self.index = index

    def select(self, biomorphs: Sequence[Biomorph]) -> int:
        return self.index


class RandomParentSelector(ParentSelector):
    """Picks a uniformly random slot."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def select(self, biomorphs: Sequence[Biomorph]) -> int:
        if not biomorphs:
            raise ValueError("Cannot select a parent from an empty population")
        index = self.rng.randrange(len(biomorphs))
        logger.debug("[RandomParentSelector] picked slot {}", index)
        return index
