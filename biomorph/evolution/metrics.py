from __future__ import annotations

from pydantic import BaseModel, Field


class PopulationMetrics(BaseModel):
    """Running counters for one population."""

    generations: int = Field(default=0, ge=0, description="Reproduction steps taken")
    biomorphs_created: int = Field(
        default=0, ge=0, description="Random biomorphs created at generation 0"
    )
    mutations_created: int = Field(
        default=0, ge=0, description="Total offspring produced by mutation"
    )
    developments: int = Field(
        default=0, ge=0, description="Total segment trees grown"
    )
    segments_grown: int = Field(
        default=0, ge=0, description="Total segments emitted across all developments"
    )

    def record_development(self, segments: int) -> None:
        self.developments += 1
        self.segments_grown += segments

    def record_generation(self, mutations_created: int) -> None:
        self.generations += 1
        self.mutations_created += mutations_created
