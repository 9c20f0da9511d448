"""
This module provides:
    - pairwise_intersections
    - count_parallel_pairs
    - clip_to_viewport

All results are exact; errors raised by the line queries propagate.
"""

from typing import List, Optional, Tuple

from models.fraction import ExactFraction, as_fraction
from models.line_equation import LineEquation

Point = Tuple[ExactFraction, ExactFraction]


# ----------------------------------------------------------------------
#  PAIRWISE INTERSECTIONS
# ----------------------------------------------------------------------

def pairwise_intersections(lines: List[LineEquation]) -> List[Tuple[int, int, Optional[Point]]]:
    """
    Intersects every unordered pair of lines.

    Output:
        list of (i, j, point) with i < j; point is None for parallel pairs
    """
    result = []
    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            result.append((i, j, lines[i].intersection_with(lines[j])))
    return result


# ----------------------------------------------------------------------
#  PARALLEL PAIR COUNT
# ----------------------------------------------------------------------

def count_parallel_pairs(lines: List[LineEquation]):
    """
    Checks how many line pairs are parallel.

    Output:
        count: number of parallel pairs
        idx_pairs: list of (i, j) index tuples
    """
    count = 0
    idx_pairs = []

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            if lines[i].is_parallel(lines[j]):
                count += 1
                idx_pairs.append((i, j))

    return count, idx_pairs


# ----------------------------------------------------------------------
#  VIEWPORT CLIPPING
# ----------------------------------------------------------------------

def clip_to_viewport(line: LineEquation, x_min, x_max, y_min, y_max) -> Optional[Tuple[Point, Point]]:
    """
    Returns the two end points of the part of `line` that lies inside the
    closed rectangle [x_min, x_max] x [y_min, y_max], or None when the line
    misses it.

    A line touching only a corner yields the same point twice.
    """
    a, b, c = line.coefficients
    x_min, x_max = as_fraction(x_min), as_fraction(x_max)
    y_min, y_max = as_fraction(y_min), as_fraction(y_max)

    hits = []

    # crossings with the vertical borders
    if not b.is_zero():
        for x in (x_min, x_max):
            y = -(a * x + c) / b
            if y_min <= y <= y_max:
                hits.append((x, y))

    # crossings with the horizontal borders
    if not a.is_zero():
        for y in (y_min, y_max):
            x = -(b * y + c) / a
            if x_min <= x <= x_max:
                hits.append((x, y))

    unique = []
    for p in hits:
        if p not in unique:
            unique.append(p)

    if not unique:
        return None
    return unique[0], unique[-1]
