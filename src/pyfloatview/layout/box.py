"""Measurable boxes consumed by the flow layout.

A box exposes an optional preferred size and a current size. ``None``
marks a preferred dimension as unspecified, in which case the current
dimension is used instead.
"""

from dataclasses import dataclass
from typing import Protocol


class MeasurableBox(Protocol):
    """Anything the flow layout can measure.

    Attributes:
        preferred_width: Declared width, or None when unspecified
        preferred_height: Declared height, or None when unspecified
        current_width: Fallback width (e.g. the child's current frame)
        current_height: Fallback height (e.g. the child's current frame)
    """

    @property
    def preferred_width(self) -> float | None: ...

    @property
    def preferred_height(self) -> float | None: ...

    @property
    def current_width(self) -> float: ...

    @property
    def current_height(self) -> float: ...


@dataclass
class SizedBox:
    """Plain value implementation of :class:`MeasurableBox`.

    Attributes:
        current_width: Fallback width
        current_height: Fallback height
        preferred_width: Declared width (None = unspecified)
        preferred_height: Declared height (None = unspecified)
    """

    current_width: float = 0.0
    current_height: float = 0.0
    preferred_width: float | None = None
    preferred_height: float | None = None

    @classmethod
    def preferred(cls, width: float, height: float) -> "SizedBox":
        """Create a box that declares both preferred dimensions.

        Args:
            width: Preferred width
            height: Preferred height

        Returns:
            A new SizedBox whose current size is zero
        """
        return cls(preferred_width=width, preferred_height=height)

    @classmethod
    def framed(cls, width: float, height: float) -> "SizedBox":
        """Create a box with no preferred size, only a current frame."""
        return cls(current_width=width, current_height=height)


def resolve_width(box: MeasurableBox) -> float:
    """Preferred width when specified, else the current width."""
    width = box.preferred_width
    if width is None:
        return box.current_width
    return width


def resolve_height(box: MeasurableBox) -> float:
    """Preferred height when specified, else the current height."""
    height = box.preferred_height
    if height is None:
        return box.current_height
    return height


def resolve_size(box: MeasurableBox) -> tuple[float, float]:
    """Resolve both dimensions of a box.

    Each dimension falls back independently, so a box may declare only
    a preferred width and still take its height from its current frame.

    Args:
        box: Box to measure

    Returns:
        ``(width, height)`` tuple
    """
    return resolve_width(box), resolve_height(box)
