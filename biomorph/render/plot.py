from __future__ import annotations

from abc import ABC, abstractmethod
import os

from loguru import logger
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from biomorph.config import GridConfig, RenderConfig
from biomorph.evolution.population import Population
from biomorph.render.layout import GridLayout


class Renderer(ABC):
    @abstractmethod
    def draw(self, population: Population, ax: Axes | None = None, **kwargs) -> Figure:
        """Draw ``population`` on its grid, into ``ax`` when given, and return the figure."""

    def close(self) -> None:
        pass


class MatplotlibRenderer(Renderer):
    """Draws a population as white line art on a dark grid."""

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

    def layout_for(self, population: Population) -> GridLayout:
        return GridLayout(
            GridConfig(rows=population.rows, columns=population.columns),
            self.config.width,
            self.config.height,
            fill_ratio=self.config.fill_ratio,
        )

    def draw(self, population: Population, ax: Axes | None = None, **kwargs) -> Figure:
        layout = self.layout_for(population)
        if ax is None:
            figure = Figure(
                figsize=(
                    self.config.width / self.config.dpi,
                    self.config.height / self.config.dpi,
                ),
                dpi=self.config.dpi,
            )
            ax = figure.add_axes((0, 0, 1, 1))
        else:
            figure = ax.figure

        half_w, half_h = layout.width / 2, layout.height / 2
        ax.set_facecolor("black")
        ax.set_xlim(-half_w, half_w)
        ax.set_ylim(-half_h, half_h)
        ax.set_aspect("equal")
        ax.set_xticks([])
        ax.set_yticks([])

        cell_w, cell_h = layout.cell_size
        for col in range(population.columns + 1):
            ax.axvline(-half_w + col * cell_w, color="white", linewidth=0.5)
        for row in range(population.rows + 1):
            ax.axhline(-half_h + row * cell_h, color="white", linewidth=0.5)

        for index, biomorph in enumerate(population):
            if not biomorph.segments:
                logger.debug("MatplotlibRenderer: slot {} not developed, skipped", index)
                continue
            lines = layout.project(index, biomorph.segments, biomorph.bounding_box())
            ax.add_collection(
                LineCollection(lines, colors=kwargs.get("color", "white"), linewidths=0.8)
            )
        return figure

    def save(self, population: Population, path: str) -> str:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        figure = self.draw(population)
        figure.savefig(path, dpi=self.config.dpi, facecolor="black")
        logger.info("MatplotlibRenderer: saved {}", path)
        return path
