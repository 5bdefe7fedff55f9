from biomorph.organism.biomorph import Biomorph
from biomorph.organism.development import (
    MAX_SEGMENTS,
    DirectionTables,
    derive_direction_tables,
    grow_tree,
    segment_count,
)

__all__ = [
    "Biomorph",
    "DirectionTables",
    "MAX_SEGMENTS",
    "derive_direction_tables",
    "grow_tree",
    "segment_count",
]
