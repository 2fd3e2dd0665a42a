"""Placement rectangles produced by the flow layout."""

from dataclasses import dataclass


@dataclass
class Placement:
    """2D position with dimensions assigned to one child.

    Attributes:
        x: Left edge, relative to the container
        y: Top edge, relative to the container
        width: Resolved width of the child
        height: Resolved height of the child
    """

    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)

    def __repr__(self) -> str:
        """String representation."""
        return f"Placement(x={self.x:.2f}, y={self.y:.2f}, " f"w={self.width:.2f}, h={self.height:.2f})"
