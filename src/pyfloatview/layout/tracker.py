"""Change detection for the reported content height."""

from collections.abc import Callable


class ContentHeightTracker:
    """Remembers the last reported content height of one container.

    The owner feeds every pass result through :meth:`update` and only
    invalidates its intrinsic size when the method returns True, so an
    unchanged height never triggers another round of parent layout.
    """

    def __init__(
        self,
        on_change: Callable[[float], None] | None = None,
        baseline: float = 0.0,
    ) -> None:
        """Initialize the tracker.

        Args:
            on_change: Optional callback invoked with the new height
                whenever it changes
            baseline: Height assumed before the first pass
        """
        self._on_change = on_change
        self._baseline = baseline
        self._reported_height = baseline

    @property
    def reported_height(self) -> float:
        """The most recently reported content height."""
        return self._reported_height

    def update(self, content_height: float) -> bool:
        """Record the content height of a finished pass.

        Args:
            content_height: Height computed by the pass

        Returns:
            True if the height differs from the previously reported one
        """
        if content_height == self._reported_height:
            return False

        self._reported_height = content_height
        if self._on_change is not None:
            self._on_change(content_height)
        return True

    def reset(self) -> None:
        """Forget the reported height and return to the baseline."""
        self._reported_height = self._baseline
