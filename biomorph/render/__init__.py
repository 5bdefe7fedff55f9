from biomorph.render.layout import CellTransform, GridLayout
from biomorph.render.plot import MatplotlibRenderer, Renderer

__all__ = ["CellTransform", "GridLayout", "MatplotlibRenderer", "Renderer"]
