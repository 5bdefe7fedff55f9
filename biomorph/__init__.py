"""Biomorph evolution: integer genomes grown into branching planar trees."""

from biomorph.evolution.population import Population
from biomorph.genome.spec import GENOME_SPEC, GenomeSpec
from biomorph.organism.biomorph import Biomorph
from biomorph.session import EvolutionSession, SessionState

__all__ = [
    "Biomorph",
    "EvolutionSession",
    "GENOME_SPEC",
    "GenomeSpec",
    "Population",
    "SessionState",
]
