"""Flow layout engine.

Packs boxes left to right into rows of a fixed-width container. A box
that would run past the right edge starts a new row below the tallest
box of the current row.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from pyfloatview.layout.box import MeasurableBox, resolve_size
from pyfloatview.layout.position import Placement


@dataclass(frozen=True)
class LayoutParameters:
    """Inputs of a single layout pass.

    Spacing values are used as given; negative spacing is not clamped.

    Attributes:
        container_width: Width available for each row
        row_spacing: Vertical gap between two rows
        column_spacing: Horizontal gap between two boxes in a row
    """

    container_width: float
    row_spacing: float = 0.0
    column_spacing: float = 0.0


@dataclass
class LayoutResult:
    """Result of a layout pass.

    Attributes:
        placements: One placement per input box, in input order
        content_height: Total height of all rows including the gaps
            between them
        rows: Indices of the boxes in each row, top to bottom
    """

    placements: list[Placement] = field(default_factory=list)
    content_height: float = 0.0
    rows: list[list[int]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        """Number of rows produced."""
        return len(self.rows)


class FlowLayoutEngine:
    """Greedy row-packing layout for measurable boxes.

    The engine holds no state; every call to :meth:`layout` derives the
    result from its arguments alone.
    """

    def layout(self, boxes: Sequence[MeasurableBox], params: LayoutParameters) -> LayoutResult:
        """Place boxes into rows.

        The first box of a row is always placed, even if it is wider than
        the container, so oversized boxes overflow instead of being
        dropped. Any later box starts a new row when ``x + width`` would
        exceed the container width; a box ending exactly on the edge
        stays in the row.

        Args:
            boxes: Boxes to place, in order
            params: Container width and spacing

        Returns:
            LayoutResult with one placement per box
        """
        result = LayoutResult()
        x = 0.0
        y = 0.0
        row_height = 0.0
        row: list[int] = []

        for index, box in enumerate(boxes):
            width, height = resolve_size(box)

            if row and x + width > params.container_width:
                # Close the current row
                result.rows.append(row)
                y += row_height + params.row_spacing
                x = 0.0
                row_height = 0.0
                row = []

            result.placements.append(Placement(x=x, y=y, width=width, height=height))
            row.append(index)
            x += width + params.column_spacing
            row_height = max(row_height, height)

        if row:
            result.rows.append(row)
            result.content_height = y + row_height

        return result

    def measure_height(self, boxes: Sequence[MeasurableBox], params: LayoutParameters) -> float:
        """Content height the boxes would need, without keeping placements.

        Args:
            boxes: Boxes to measure
            params: Container width and spacing

        Returns:
            Content height for the given parameters
        """
        return self.layout(boxes, params).content_height


_default_engine = FlowLayoutEngine()


def flow_layout(boxes: Sequence[MeasurableBox], params: LayoutParameters) -> LayoutResult:
    """Run a layout pass with the shared engine instance."""
    return _default_engine.layout(boxes, params)
