from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

GRID_MIN = 1
GRID_MAX = 5


class GridConfig(BaseModel):
    """Size of the biomorph grid."""

    rows: int = Field(default=3, ge=GRID_MIN, le=GRID_MAX)
    columns: int = Field(default=3, ge=GRID_MIN, le=GRID_MAX)
    model_config = ConfigDict(frozen=True)

    @property
    def size(self) -> int:
        return self.rows * self.columns


class RenderConfig(BaseModel):
    enabled: bool = Field(default=False, description="Save a PNG per generation")
    output_dir: str = Field(default="renders")
    width: float = Field(default=800.0, gt=0, description="Canvas width in pixels")
    height: float = Field(default=800.0, gt=0, description="Canvas height in pixels")
    fill_ratio: float = Field(
        default=0.9, gt=0, le=1, description="Share of a grid cell a biomorph may fill"
    )
    dpi: int = Field(default=100, gt=0)


class LoggingConfig(BaseModel):
    log_dir: str = "logs"
    level: str = "INFO"
    rotation: str = "50 MB"
    retention: str = "30 days"


class SessionConfig(BaseModel):
    """Configuration options controlling an EvolutionSession run."""

    grid: GridConfig = Field(default_factory=GridConfig)
    seed: int | None = Field(
        default=None, description="Seed for the random source (None = nondeterministic)"
    )
    parent_selection: Literal["fixed", "random"] = Field(
        default="fixed", description="How the parent of each generation is chosen"
    )
    parent_index: int = Field(
        default=0, ge=0, description="Slot used by fixed parent selection"
    )
    generations: int = Field(
        default=10, ge=0, description="Generations to develop when run from the CLI"
    )
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_parent_index(self):
        if self.parent_index >= self.grid.size:
            raise ValueError(
                f"parent_index {self.parent_index} outside a grid of {self.grid.size} biomorphs"
            )
        return self
