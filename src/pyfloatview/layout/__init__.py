"""Flow layout for rectangular children of a fixed-width container.

This module contains the row-packing algorithm, the box and placement
value types it works with, and the content height change tracker.
"""

from pyfloatview.layout.box import (
    MeasurableBox,
    SizedBox,
    resolve_height,
    resolve_size,
    resolve_width,
)
from pyfloatview.layout.engine import (
    FlowLayoutEngine,
    LayoutParameters,
    LayoutResult,
    flow_layout,
)
from pyfloatview.layout.picking import placement_at, placements_in_rect, placements_to_array
from pyfloatview.layout.position import Placement
from pyfloatview.layout.tracker import ContentHeightTracker

__all__ = [
    "MeasurableBox",
    "SizedBox",
    "resolve_width",
    "resolve_height",
    "resolve_size",
    "FlowLayoutEngine",
    "LayoutParameters",
    "LayoutResult",
    "flow_layout",
    "Placement",
    "ContentHeightTracker",
    "placement_at",
    "placements_in_rect",
    "placements_to_array",
]
