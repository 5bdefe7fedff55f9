from biomorph.genome.spec import GENE_COUNT, GENOME_SPEC, ORDER_INDEX, GenomeSpec

__all__ = ["GENE_COUNT", "GENOME_SPEC", "ORDER_INDEX", "GenomeSpec"]
