"""
Centralized output-saving utilities for the line-analysis demo.

This module provides:
    • save_all_outputs(...)
    • save_lines_image(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

from typing import List

from models.line_equation import LineEquation
from analyzers.line_report import AnalysisReport
from visualization.draw_lines import blank_canvas, draw_axes, draw_lines, draw_points
from utils.image_io import save_image, ensure_output_dir
from config import get_active_params


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_lines_image(path: str, lines: List[LineEquation], points, params=None):
    """
    Draw axes, lines and intersection points on a blank canvas and save it.
    """
    vis = blank_canvas(params)
    draw_axes(vis, params)
    draw_lines(vis, lines, params)
    draw_points(vis, points, params)
    save_image(path, vis)
    return vis


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(output_dir: str, run_id: str, report: AnalysisReport, params=None):
    """
    Saves every output artifact for one analysed set of lines.

    Example output:
        <id>_lines.png

    Returns the list of written paths.
    """
    if params is None:
        params = get_active_params()

    ensure_output_dir(output_dir)

    lines_path = f"{output_dir}/{run_id}_lines.png"

    # Rendered lines with every intersection point
    save_lines_image(lines_path, report.lines, report.intersection_points(), params)

    return [lines_path]
