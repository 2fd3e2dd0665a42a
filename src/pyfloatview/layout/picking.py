"""Hit testing over layout results.

Provides vectorised point and rectangle queries against the placements
of a finished layout pass, e.g. to map a mouse position back to the
child under it.
"""

from collections.abc import Sequence

import numpy as np

from pyfloatview.layout.engine import LayoutResult
from pyfloatview.layout.position import Placement


def placements_to_array(placements: Sequence[Placement]) -> np.ndarray:
    """Convert placements to an ``(n, 4)`` array of ``[x, y, w, h]``.

    Args:
        placements: Placements to convert

    Returns:
        float64 array; shape ``(0, 4)`` when there are no placements
    """
    if not placements:
        return np.zeros((0, 4), dtype=np.float64)
    return np.array([p.as_tuple() for p in placements], dtype=np.float64)


def placement_at(result: LayoutResult, px: float, py: float) -> int | None:
    """Find the placement containing a point.

    Edges are inclusive. When placements overlap (oversized boxes or
    negative spacing) the first one in layout order wins.

    Args:
        result: Layout result to query
        px: X coordinate in container space
        py: Y coordinate in container space

    Returns:
        Index of the matching placement or None
    """
    rects = placements_to_array(result.placements)
    if rects.shape[0] == 0:
        return None

    inside = (
        (rects[:, 0] <= px)
        & (px <= rects[:, 0] + rects[:, 2])
        & (rects[:, 1] <= py)
        & (py <= rects[:, 1] + rects[:, 3])
    )
    hits = np.flatnonzero(inside)
    if hits.size == 0:
        return None
    return int(hits[0])


def placements_in_rect(
    result: LayoutResult,
    x: float,
    y: float,
    width: float,
    height: float,
) -> list[int]:
    """Find all placements intersecting a rectangle.

    Touching edges do not count as an intersection.

    Args:
        result: Layout result to query
        x: Left edge of the query rectangle
        y: Top edge of the query rectangle
        width: Width of the query rectangle
        height: Height of the query rectangle

    Returns:
        Indices of intersecting placements, in layout order
    """
    rects = placements_to_array(result.placements)
    if rects.shape[0] == 0:
        return []

    overlaps = (
        (rects[:, 0] < x + width)
        & (rects[:, 0] + rects[:, 2] > x)
        & (rects[:, 1] < y + height)
        & (rects[:, 1] + rects[:, 3] > y)
    )
    return [int(i) for i in np.flatnonzero(overlaps)]
