from biomorph.evolution.metrics import PopulationMetrics
from biomorph.evolution.mutation import MutationOperator, PointMutationOperator
from biomorph.evolution.parent_selector import (
    FixedParentSelector,
    ParentSelector,
    RandomParentSelector,
)
from biomorph.evolution.population import Population

__all__ = [
    "FixedParentSelector",
    "MutationOperator",
    "ParentSelector",
    "PointMutationOperator",
    "Population",
    "PopulationMetrics",
    "RandomParentSelector",
]
