"""Core rendering pipeline for asciigrid.

This module contains the stages that turn shapes into text:

- Outline collection (walking each shape's begin/next cycle)
- Frame computation (minimal bounding box of all points)
- Canvas allocation, painting and flushing
- Pipeline orchestration

Key functions:
- iter_outline / collect / collect_all: Gather outline points
- compute_frame: Minimal frame enclosing a point sequence
- paint / flush: Functional wrappers around Canvas
- render / render_to: One-call rendering helpers

Key classes:
- Canvas: Row-major character grid sized to a frame
- Renderer: Settings-driven pipeline with statistics
"""

from asciigrid.core.canvas import Canvas, flush, paint
from asciigrid.core.frame import compute_frame
from asciigrid.core.outline import collect, collect_all, iter_outline
from asciigrid.core.renderer import Renderer, render, render_to

__all__ = [
    # Canvas
    "Canvas",
    "flush",
    "paint",
    # Frame
    "compute_frame",
    # Outline
    "collect",
    "collect_all",
    "iter_outline",
    # Renderer
    "Renderer",
    "render",
    "render_to",
]
