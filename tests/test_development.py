"""Tests for direction tables and stack-based tree growth."""

import random

import pytest

from biomorph.exceptions import SegmentCapacityError
from biomorph.genome.spec import GENOME_SPEC
from biomorph.geometry import Segment
from biomorph.organism.development import (
    MAX_SEGMENTS,
    check_capacity,
    derive_direction_tables,
    grow_tree,
    segment_count,
)


class TestDirectionTables:
    def test_known_genes(self, sample_genes):
        tables = derive_direction_tables(sample_genes)
        assert tables.dx == (-2, -1, 0, 1, 2, 3, 0, -3, 0)
        assert tables.dy == (6, 5, 4, 5, 6, 7, 3, 7, 0)
        assert tables.order == 3

    def test_first_gene_does_not_affect_tables(self, sample_genes):
        other = list(sample_genes)
        other[0] = -9
        assert derive_direction_tables(other) == derive_direction_tables(sample_genes)

    def test_bilateral_symmetry(self):
        rng = random.Random(3)
        for _ in range(100):
            tables = derive_direction_tables(GENOME_SPEC.sample(rng))
            dx, dy = tables.dx, tables.dy
            assert dx[1] == -dx[3]
            assert dx[0] == -dx[4]
            assert dx[7] == -dx[5]
            assert dx[2] == dx[6] == 0
            assert dy[0] == dy[4]
            assert dy[1] == dy[3]
            assert dy[7] == dy[5]

    @pytest.mark.parametrize("direction,expected", [(-1, 7), (8, 0), (10, 2), (-9, 7)])
    def test_step_wraps_direction(self, sample_genes, direction, expected):
        tables = derive_direction_tables(sample_genes)
        assert tables.step(direction) == (tables.dx[expected], tables.dy[expected])


class TestGrowTree:
    def test_preorder_emission(self, sample_genes):
        tables = derive_direction_tables(sample_genes)
        segments = grow_tree(tables, length=2)
        assert segments == [
            Segment((0, 0, 0), (0, 8, 0)),
            Segment((0, 8, 0), (-1, 13, 0)),
            Segment((-1, 13, 0), (-1, 13, 0)),
            Segment((-1, 13, 0), (-1, 13, 0)),
            Segment((0, 8, 0), (1, 13, 0)),
            Segment((1, 13, 0), (1, 13, 0)),
            Segment((1, 13, 0), (1, 13, 0)),
        ]

    def test_leaf_only_tree(self, sample_genes):
        tables = derive_direction_tables(sample_genes)
        assert grow_tree(tables, length=0) == [Segment((0, 0, 0), (0, 0, 0))]

    def test_custom_start(self, sample_genes):
        tables = derive_direction_tables(sample_genes)
        segments = grow_tree(tables, start=(5, -5), length=1, direction=4)
        assert segments[0] == Segment((5, -5, 0), (7, 1, 0))

    @pytest.mark.parametrize("order,expected", [(3, 15), (6, 127), (9, 1023)])
    def test_segment_count(self, order, expected):
        genes = [1, 2, 3, 4, 5, 6, 7, 8, order]
        segments = grow_tree(derive_direction_tables(genes))
        assert len(segments) == expected == segment_count(order)

    def test_planar(self):
        genes = [0, -4, 9, -9, 2, -3, 8, 1, 5]
        segments = grow_tree(derive_direction_tables(genes))
        assert all(s.start[2] == 0 and s.end[2] == 0 for s in segments)

    def test_deterministic(self):
        genes = [3, -2, 7, 1, -5, 4, 0, 9, 7]
        first = grow_tree(derive_direction_tables(genes))
        second = grow_tree(derive_direction_tables(genes))
        assert first == second


class TestCapacity:
    def test_largest_legal_order_fits(self):
        check_capacity(9)
        assert segment_count(9) <= MAX_SEGMENTS

    def test_order_over_ceiling_rejected(self):
        with pytest.raises(SegmentCapacityError):
            check_capacity(10)

    def test_negative_order_rejected(self):
        with pytest.raises(SegmentCapacityError):
            check_capacity(-1)

    def test_custom_capacity(self):
        with pytest.raises(SegmentCapacityError):
            check_capacity(3, capacity=14)
        check_capacity(3, capacity=15)

    def test_grow_tree_rejects_before_growing(self, sample_genes):
        tables = derive_direction_tables(sample_genes)
        with pytest.raises(SegmentCapacityError):
            grow_tree(tables, length=10)
