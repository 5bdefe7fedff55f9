import random

import pytest

from biomorph.organism.biomorph import Biomorph


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def sample_genes() -> list[int]:
    # dx = [-2, -1, 0, 1, 2, 3, 0, -3, 0], dy = [6, 5, 4, 5, 6, 7, 3, 7, 0]
    return [0, 1, 2, 3, 4, 5, 6, 7, 3]


@pytest.fixture
def sample_biomorph(sample_genes) -> Biomorph:
    return Biomorph(sample_genes)
