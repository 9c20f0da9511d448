"""
Visualization utilities for rendering exact lines.

This module provides:
    • blank_canvas(params)
    • draw_axes(img, params)
    • draw_lines(img, lines, params)
    • draw_points(img, points, params)

It is used by:
    - visualization.save_outputs
"""

import cv2
import numpy as np
from typing import List

from models.line_equation import LineEquation
from analyzers.rasterizer import line_pixel_segment, world_to_pixel
from config import get_active_params


# ---------------------------------------------------------------------
#  Canvas
# ---------------------------------------------------------------------

def blank_canvas(params=None) -> np.ndarray:
    """
    Returns a BGR uint8 image filled with the background color.
    """
    if params is None:
        params = get_active_params()

    h, w = params["CANVAS_HEIGHT"], params["CANVAS_WIDTH"]
    canvas = np.empty((h, w, 3), dtype=np.uint8)
    canvas[:] = params["COLOR_BACKGROUND"]
    return canvas


def draw_axes(image, params=None):
    """
    Draws the x and y axes through the canvas origin.
    """
    if params is None:
        params = get_active_params()

    h, w = image.shape[:2]
    ox, oy = w // 2, h // 2
    cv2.line(image, (0, oy), (w - 1, oy), params["COLOR_AXES"], 1)
    cv2.line(image, (ox, 0), (ox, h - 1), params["COLOR_AXES"], 1)
    return image


# ---------------------------------------------------------------------
#  Lines & points
# ---------------------------------------------------------------------

def draw_lines(image, lines: List[LineEquation], params=None):
    """
    Draws every line clipped to the canvas, cycling through LINE_COLORS.

    Args:
        image: BGR numpy array (modified in-place)
        lines: list of LineEquation objects
    """
    if params is None:
        params = get_active_params()

    colors = params["LINE_COLORS"]
    shape_hw = image.shape[:2]

    for idx, ln in enumerate(lines):
        segment = line_pixel_segment(ln, shape_hw, params)
        if segment is None:
            continue
        p1, p2 = segment
        cv2.line(image, p1, p2, colors[idx % len(colors)], params["LINE_THICKNESS"])

    return image


def draw_points(image, points, params=None):
    """
    Draws filled circles at exact (x, y) points; points off the canvas are
    skipped.
    """
    if params is None:
        params = get_active_params()

    h, w = image.shape[:2]

    for p in points:
        col, row = world_to_pixel(p, (h, w), params)
        if not (0 <= col < w and 0 <= row < h):
            continue
        cv2.circle(image, (col, row), params["POINT_RADIUS"], params["COLOR_POINT"], thickness=-1)

    return image
