"""
Utility Functions

Provides geometry helpers over exact lines, parallel grouping and image I/O utilities.
"""

from .geometry import (
    pairwise_intersections,
    count_parallel_pairs,
    clip_to_viewport,
)
from .clustering import (
    group_by_connectivity,
    parallel_groups_by_display,
    parallel_classes,
)
from .image_io import ensure_output_dir, save_image, load_image

__all__ = [
    "pairwise_intersections",
    "count_parallel_pairs",
    "clip_to_viewport",
    "group_by_connectivity",
    "parallel_groups_by_display",
    "parallel_classes",
    "ensure_output_dir",
    "save_image",
    "load_image",
]
