"""Tests for Biomorph development and mutation."""

import random

import pytest

from biomorph.exceptions import GenomeValidationError, SegmentCapacityError
from biomorph.genome.spec import GENE_COUNT, GENOME_SPEC, ORDER_INDEX, GenomeSpec
from biomorph.organism.biomorph import Biomorph
from biomorph.organism.development import segment_count


def changed_indexes(before, after):
    return [i for i, (a, b) in enumerate(zip(before, after)) if a != b]


class TestConstruction:
    def test_random_biomorph_is_undeveloped(self, rng):
        biomorph = Biomorph.random(rng)
        assert biomorph.segments == []
        assert not biomorph.is_developed
        assert 6 <= biomorph.order <= 9

    def test_rejects_invalid_genes(self):
        with pytest.raises(GenomeValidationError):
            Biomorph([0] * 8 + [10])
        with pytest.raises(GenomeValidationError):
            Biomorph([0, 0, 0])

    def test_equality_uses_genes_only(self, sample_genes):
        developed = Biomorph(sample_genes)
        developed.develop()
        assert developed == Biomorph(sample_genes)
        assert hash(developed) == hash(Biomorph(sample_genes))
        assert developed != Biomorph([1] + sample_genes[1:])


class TestDevelop:
    def test_segment_count_matches_order(self, sample_biomorph):
        segments = sample_biomorph.develop()
        assert len(segments) == segment_count(3) == 15
        assert sample_biomorph.segments is segments

    def test_develop_rebuilds_from_scratch(self, sample_biomorph):
        first = list(sample_biomorph.develop())
        second = sample_biomorph.develop()
        assert first == second
        assert len(second) == 15

    def test_identical_genes_identical_geometry(self, rng):
        genes = GENOME_SPEC.sample(rng)
        a, b = Biomorph(genes), Biomorph(genes)
        assert a.develop() == b.develop()

    def test_over_capacity_order_rejected_before_growth(self):
        wide = GenomeSpec(bounds=[(-9, 9)] * 8 + [(3, 12)])
        biomorph = Biomorph([0] * 8 + [10], wide)
        with pytest.raises(SegmentCapacityError):
            biomorph.develop()
        assert biomorph.segments == []

    def test_bounding_box_and_center(self, sample_biomorph):
        sample_biomorph.develop()
        box = sample_biomorph.bounding_box()
        xs = [p[0] for s in sample_biomorph.segments for p in (s.start, s.end)]
        ys = [p[1] for s in sample_biomorph.segments for p in (s.start, s.end)]
        assert box.min[:2] == (min(xs), min(ys))
        assert box.max[:2] == (max(xs), max(ys))
        assert sample_biomorph.center() == (
            (min(xs) + max(xs)) / 2,
            (min(ys) + max(ys)) / 2,
            0.0,
        )

    def test_undeveloped_bounding_box_is_sentinel(self, sample_biomorph):
        assert sample_biomorph.bounding_box().is_empty
        assert sample_biomorph.center() == (0.0, 0.0, 0.0)


class TestMutate:
    def test_single_gene_changes_by_one(self, rng):
        parent = Biomorph([0] * 8 + [6])
        for _ in range(200):
            child = parent.mutate(rng)
            changed = changed_indexes(parent.genes, child.genes)
            assert len(changed) == 1
            index = changed[0]
            assert abs(child.genes[index] - parent.genes[index]) == 1

    def test_child_is_undeveloped(self, sample_biomorph, rng):
        sample_biomorph.develop()
        child = sample_biomorph.mutate(rng)
        assert child.segments == []
        assert sample_biomorph.is_developed

    def test_parent_unchanged(self, sample_biomorph, sample_genes, rng):
        sample_biomorph.mutate(rng)
        assert list(sample_biomorph.genes) == sample_genes

    def test_upper_extremes_step_inside(self, rng):
        parent = Biomorph([9] * GENE_COUNT)
        for _ in range(200):
            child = parent.mutate(rng)
            changed = changed_indexes(parent.genes, child.genes)
            assert len(changed) == 1
            assert child.genes[changed[0]] == 8

    def test_lower_extremes_step_inside(self, rng):
        parent = Biomorph([-9] * 8 + [3])
        for _ in range(200):
            child = parent.mutate(rng)
            changed = changed_indexes(parent.genes, child.genes)
            assert len(changed) == 1
            index = changed[0]
            lo, _ = GENOME_SPEC.bounds_for(index)
            assert child.genes[index] == lo + 1

    def test_mutations_stay_in_bounds(self):
        rng = random.Random(99)
        biomorph = Biomorph.random(rng)
        for _ in range(2000):
            biomorph = biomorph.mutate(rng)
            GENOME_SPEC.validate_genes(biomorph.genes)
            assert 3 <= biomorph.genes[ORDER_INDEX] <= 9

    def test_every_index_and_direction_reachable(self):
        rng = random.Random(7)
        parent = Biomorph([0] * 8 + [6])
        seen = set()
        for _ in range(1000):
            child = parent.mutate(rng)
            (index,) = changed_indexes(parent.genes, child.genes)
            seen.add((index, child.genes[index] - parent.genes[index]))
        assert seen == {(i, d) for i in range(GENE_COUNT) for d in (-1, 1)}
