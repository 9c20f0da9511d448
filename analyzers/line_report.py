"""
Line analysis report.

This module provides:
    • analyze_lines(lines)
    • format_point(point)
    • format_report(report)

The report is the only place where DivisionByZeroError from an axis query
is caught: it is recorded on the LineReport so the remaining lines are
still analysed.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from models.errors import DivisionByZeroError
from models.fraction import ExactFraction
from models.line_equation import LineEquation
from utils.clustering import parallel_groups_by_display, parallel_classes
from utils.geometry import pairwise_intersections, count_parallel_pairs
from config import LABEL_LINE, LABEL_X_AXIS, LABEL_Y_AXIS, LABEL_NONE

Point = Tuple[ExactFraction, ExactFraction]


@dataclass
class LineReport:
    line: LineEquation
    x_intersection: Optional[Point] = None
    y_intersection: Optional[Point] = None
    x_error: Optional[str] = None
    y_error: Optional[str] = None


@dataclass
class PairReport:
    i: int
    j: int
    parallel: bool
    intersection: Optional[Point] = None


@dataclass
class AnalysisReport:
    lines: List[LineEquation]
    line_reports: List[LineReport] = field(default_factory=list)
    pair_reports: List[PairReport] = field(default_factory=list)
    parallel_groups: Dict[str, List[LineEquation]] = field(default_factory=dict)
    parallel_classes: List[List[LineEquation]] = field(default_factory=list)

    def intersection_points(self) -> List[Point]:
        """Every distinct point found: axis crossings first, then pairs."""
        points = []
        for lr in self.line_reports:
            for p in (lr.x_intersection, lr.y_intersection):
                if p is not None and p not in points:
                    points.append(p)
        for pr in self.pair_reports:
            if pr.intersection is not None and pr.intersection not in points:
                points.append(pr.intersection)
        return points


# ========================================================================
# 1. ANALYSIS
# ========================================================================

def _analyze_line(line: LineEquation) -> LineReport:
    report = LineReport(line=line)

    try:
        report.x_intersection = line.intersection_with_x_axis()
    except DivisionByZeroError as exc:
        report.x_error = str(exc)

    try:
        report.y_intersection = line.intersection_with_y_axis()
    except DivisionByZeroError as exc:
        report.y_error = str(exc)

    return report


def analyze_lines(lines: List[LineEquation]) -> AnalysisReport:
    """
    Runs every query over the given lines:
      1. x / y axis intersections per line
      2. parallel flag + intersection for every pair i < j
      3. display-keyed parallel groups and structural parallel classes
    """
    report = AnalysisReport(lines=list(lines))

    report.line_reports = [_analyze_line(ln) for ln in lines]

    _, parallel_pairs = count_parallel_pairs(lines)
    parallel_pairs = set(parallel_pairs)

    for i, j, point in pairwise_intersections(lines):
        report.pair_reports.append(PairReport(
            i=i,
            j=j,
            parallel=(i, j) in parallel_pairs,
            intersection=point,
        ))

    report.parallel_groups = parallel_groups_by_display(lines)
    report.parallel_classes = parallel_classes(lines)

    return report


# ========================================================================
# 2. FORMATTING
# ========================================================================

def format_point(point: Optional[Point], none_label: str = LABEL_NONE) -> str:
    if point is None:
        return none_label
    return f"({point[0]}, {point[1]})"


def _format_axis(point, error, none_label):
    if error is not None:
        return f"error: {error}"
    return format_point(point, none_label)


def format_report(report: AnalysisReport, none_label: str = LABEL_NONE) -> List[str]:
    """
    Console lines, e.g.:

        Line: 1/1*x + -1/1*y + -3/1 = 0
          Intersection with X axis: (3/1, 0/1)
          Intersection with Y axis: (0/1, -3/1)
    """
    out = []

    for lr in report.line_reports:
        out.append(f"{LABEL_LINE}: {lr.line}")
        out.append(f"  {LABEL_X_AXIS}: {_format_axis(lr.x_intersection, lr.x_error, none_label)}")
        out.append(f"  {LABEL_Y_AXIS}: {_format_axis(lr.y_intersection, lr.y_error, none_label)}")

    out.append("")
    out.append("Pairwise intersections:")
    for pr in report.pair_reports:
        tag = " (parallel)" if pr.parallel else ""
        out.append(
            f"  {report.lines[pr.i]} & {report.lines[pr.j]}: "
            f"{format_point(pr.intersection, none_label)}{tag}"
        )

    out.append("")
    out.append("Parallel line groups:")
    for key, partners in report.parallel_groups.items():
        out.append(f"{LABEL_LINE} {key} is parallel to: [{', '.join(str(p) for p in partners)}]")

    return out
