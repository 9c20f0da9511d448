"""
Analyzers Package

Contains the analysis stages used by the demo driver:
- Line / pair report
- Rasterization onto a pixel canvas
"""

from .line_report import (
    LineReport,
    PairReport,
    AnalysisReport,
    analyze_lines,
    format_point,
    format_report,
)
from .rasterizer import (
    viewport_bounds,
    world_to_pixel,
    line_pixel_segment,
)

__all__ = [
    "LineReport",
    "PairReport",
    "AnalysisReport",
    "analyze_lines",
    "format_point",
    "format_report",
    "viewport_bounds",
    "world_to_pixel",
    "line_pixel_segment",
]
