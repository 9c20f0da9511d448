"""
This module provides:
    • group_by_connectivity()
    • parallel_groups_by_display()
    • parallel_classes()
"""

from typing import Any, Callable, Dict, List
from collections import deque

from models.line_equation import LineEquation


# -------------------------------------------------------------------------
#  CONNECTED COMPONENT GROUPING (BFS)
# -------------------------------------------------------------------------

def group_by_connectivity(items: List[Any], is_connected: Callable[[Any, Any], bool]):
    """
    Groups items based on a boolean connectivity rule.

    Used for:
        - grouping lines into parallel classes
    """
    visited = set()
    groups = []

    for i, obj in enumerate(items):
        if i in visited:
            continue

        queue = deque([i])
        comp = []

        while queue:
            idx = queue.popleft()
            if idx in visited:
                continue
            visited.add(idx)
            comp.append(items[idx])

            for j, other in enumerate(items):
                if j in visited:
                    continue
                if is_connected(items[idx], other):
                    queue.append(j)

        groups.append(comp)

    return groups


# -------------------------------------------------------------------------
#  DISPLAY-KEYED GROUPING (demo behavior)
# -------------------------------------------------------------------------

def parallel_groups_by_display(lines: List[LineEquation]) -> Dict[str, List[LineEquation]]:
    """
    For every line, lists the *other* lines parallel to it, keyed by the
    line's display string.

    "Other" means a different list entry (identity), so a duplicated entry is
    reported as parallel to its twin. Entries with the same display string
    share a key and their partners accumulate under it.

    Example:
        [1x-1y-3, 2x-2y+1] ->
            {"1/1*x + -1/1*y + -3/1 = 0": [2x-2y+1],
             "2/1*x + -2/1*y + 1/1 = 0":  [1x-1y-3]}
    """
    groups: Dict[str, List[LineEquation]] = {}

    for line1 in lines:
        key = line1.to_display_string()
        groups.setdefault(key, [])
        for line2 in lines:
            if line1 is not line2 and line1.is_parallel(line2):
                groups[key].append(line2)

    return groups


# -------------------------------------------------------------------------
#  STRUCTURAL GROUPING
# -------------------------------------------------------------------------

def parallel_classes(lines: List[LineEquation]) -> List[List[LineEquation]]:
    """
    Partitions lines into classes of mutually parallel lines, in first-seen
    order. A degenerate line (a == b == 0) counts as parallel to everything.
    """
    return group_by_connectivity(lines, lambda l1, l2: l1.is_parallel(l2))
