"""
Maps exact lines onto the pixel canvas used by the drawing code.

This module provides:
    • world_to_pixel(point, shape_hw, params)
    • viewport_bounds(shape_hw, params)
    • line_pixel_segment(line, shape_hw, params)

World origin is the centre pixel (w // 2, h // 2); world y grows upwards,
pixel rows grow downwards. Clipping is done in exact arithmetic and only the
final pixel coordinates are rounded.
"""

from typing import Optional, Tuple

from models.fraction import ExactFraction, as_fraction
from models.line_equation import LineEquation
from utils.geometry import clip_to_viewport
from config import get_active_params


def _round_half_up(value: ExactFraction) -> int:
    n, d = value.numerator, value.denominator
    return (2 * n + d) // (2 * d)


def viewport_bounds(shape_hw, params=None):
    """
    World rectangle covered by the canvas, as exact fractions:
        (x_min, x_max, y_min, y_max)
    """
    if params is None:
        params = get_active_params()

    h, w = shape_hw
    ppu = params["PIXELS_PER_UNIT"]
    ox, oy = w // 2, h // 2

    x_min = ExactFraction(-ox, ppu)
    x_max = ExactFraction(w - 1 - ox, ppu)
    y_min = ExactFraction(-(h - 1 - oy), ppu)
    y_max = ExactFraction(oy, ppu)
    return x_min, x_max, y_min, y_max


def world_to_pixel(point, shape_hw, params=None) -> Tuple[int, int]:
    """
    Exact world (x, y) -> integer pixel (col, row).

    Example (400x400 canvas, 20 px per unit):
        (3, 0) -> (260, 200)
    """
    if params is None:
        params = get_active_params()

    h, w = shape_hw
    ppu = params["PIXELS_PER_UNIT"]
    x, y = (as_fraction(v) for v in point)

    col = w // 2 + _round_half_up(x * ppu)
    row = h // 2 - _round_half_up(y * ppu)
    return col, row


def line_pixel_segment(line: LineEquation, shape_hw, params=None) -> Optional[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """
    Pixel end points of the visible part of `line`, or None when the line
    does not cross the canvas.
    """
    if params is None:
        params = get_active_params()

    clipped = clip_to_viewport(line, *viewport_bounds(shape_hw, params))
    if clipped is None:
        return None

    p1, p2 = clipped
    return world_to_pixel(p1, shape_hw, params), world_to_pixel(p2, shape_hw, params)
