"""
Visualization Tools

Provides drawing utilities for:
- Axes and exact lines
- Intersection points
- Saved output images
"""

from .draw_lines import blank_canvas, draw_axes, draw_lines, draw_points
from .save_outputs import (
    save_all_outputs,
    save_lines_image,
)

__all__ = [
    "blank_canvas",
    "draw_axes",
    "draw_lines",
    "draw_points",
    "save_all_outputs",
    "save_lines_image",
]
