"""Floating view container widget.

Lays out its direct child widgets with the flow layout engine: each
child follows the previous one with ``columnSpacing`` in between, and
floats into the next row when it would run past the container's right
edge. The container has no intrinsic width; its height is derived from
the layout and reported to the parent layout system.
"""

import logging
import math

from PyQt6.QtCore import QEvent, QRect, QSize, Qt, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QApplication, QSizePolicy, QWidget

from pyfloatview.layout.engine import FlowLayoutEngine, LayoutParameters, LayoutResult
from pyfloatview.layout.picking import placement_at
from pyfloatview.layout.tracker import ContentHeightTracker

logger = logging.getLogger(__name__)


class WidgetBox:
    """Measures a child widget for the layout engine.

    The preferred size comes from ``sizeHint()``; a negative hint
    dimension means the widget declares none, and the widget's current
    geometry is used for that dimension instead.
    """

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget
        self._hint = widget.sizeHint()
        self._geometry = widget.geometry()

    @property
    def widget(self) -> QWidget:
        return self._widget

    @property
    def preferred_width(self) -> float | None:
        width = self._hint.width()
        return float(width) if width >= 0 else None

    @property
    def preferred_height(self) -> float | None:
        height = self._hint.height()
        return float(height) if height >= 0 else None

    @property
    def current_width(self) -> float:
        return float(self._geometry.width())

    @property
    def current_height(self) -> float:
        return float(self._geometry.height())


class FloatingViewContainer(QWidget):
    """Widget that lays out its children in floating rows.

    Usage:
        container = FloatingViewContainer(row_spacing=4, column_spacing=8)
        QLabel("one", container)
        QLabel("two", container)
        container.content_height_changed.connect(on_height)

    Children must either report a size hint or have a geometry set.
    Children hidden with ``hide()`` are skipped and take up no space.
    """

    # Emitted with the new content height, only when it changes
    content_height_changed = pyqtSignal(float)

    # Emitted with the index of the clicked child
    child_clicked = pyqtSignal(int)

    def __init__(
        self,
        parent: QWidget | None = None,
        row_spacing: float = 0.0,
        column_spacing: float = 0.0,
    ) -> None:
        """Initialize the container.

        Args:
            parent: Parent widget
            row_spacing: Vertical gap between rows
            column_spacing: Horizontal gap between children in a row
        """
        super().__init__(parent)

        self._row_spacing = float(row_spacing)
        self._column_spacing = float(column_spacing)

        self._engine = FlowLayoutEngine()
        self._tracker = ContentHeightTracker()
        self._last_result: LayoutResult | None = None
        self._laid_out: list[QWidget] = []
        self._layout_pending = False

        policy = QSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)

    # Spacing properties

    def _get_row_spacing(self) -> float:
        return self._row_spacing

    def _set_row_spacing(self, value: float) -> None:
        value = float(value)
        if value != self._row_spacing:
            self._row_spacing = value
            self.perform_layout()

    def _get_column_spacing(self) -> float:
        return self._column_spacing

    def _set_column_spacing(self, value: float) -> None:
        value = float(value)
        if value != self._column_spacing:
            self._column_spacing = value
            self.perform_layout()

    # Qt properties, settable through setProperty() or Designer
    rowSpacing = pyqtProperty(float, fget=_get_row_spacing, fset=_set_row_spacing)
    columnSpacing = pyqtProperty(float, fget=_get_column_spacing, fset=_set_column_spacing)

    row_spacing = property(_get_row_spacing, _set_row_spacing)
    column_spacing = property(_get_column_spacing, _set_column_spacing)

    @property
    def last_result(self) -> LayoutResult | None:
        """Result of the last finished pass (None before the first pass)."""
        return self._last_result

    @property
    def content_height(self) -> float:
        """The most recently reported content height."""
        return self._tracker.reported_height

    def layout_parameters(self, width: float | None = None) -> LayoutParameters:
        """Parameters for a pass at the given width (default: current width)."""
        return LayoutParameters(
            container_width=float(self.width() if width is None else width),
            row_spacing=self._row_spacing,
            column_spacing=self._column_spacing,
        )

    def layout_widgets(self) -> list[QWidget]:
        """Child widgets taking part in the layout, in stacking order."""
        widgets = []
        for child in self.children():
            if not isinstance(child, QWidget) or child.isWindow():
                continue
            if child.isHidden() and child.testAttribute(Qt.WidgetAttribute.WA_WState_ExplicitShowHide):
                continue
            widgets.append(child)
        return widgets

    def perform_layout(self) -> LayoutResult:
        """Run a layout pass and apply it to the children.

        Returns:
            The LayoutResult of this pass

        Emits:
            content_height_changed: If the content height differs from
                the previously reported one
        """
        self._layout_pending = False
        widgets = self.layout_widgets()
        boxes = [WidgetBox(w) for w in widgets]
        result = self._engine.layout(boxes, self.layout_parameters())

        for widget, placement in zip(widgets, result.placements):
            widget.setGeometry(
                QRect(
                    round(placement.x),
                    round(placement.y),
                    round(placement.width),
                    round(placement.height),
                )
            )

        self._last_result = result
        self._laid_out = widgets

        changed = self._tracker.update(result.content_height)
        logger.debug(
            f"Laid out {len(widgets)} children in {result.row_count} rows, "
            f"content height {result.content_height:.1f} (changed={changed})"
        )
        if changed:
            self.updateGeometry()
            self.content_height_changed.emit(result.content_height)

        return result

    def request_layout(self) -> None:
        """Schedule a pass for the next event loop iteration."""
        if not self._layout_pending:
            self._layout_pending = True
            QApplication.postEvent(self, QEvent(QEvent.Type.LayoutRequest))

    def child_at_position(self, x: float, y: float) -> QWidget | None:
        """Find the laid out child at a point in container coordinates."""
        if self._last_result is None:
            return None
        index = placement_at(self._last_result, x, y)
        if index is None:
            return None
        return self._laid_out[index]

    # Intrinsic size

    def sizeHint(self) -> QSize:
        """Current width and the reported content height."""
        return QSize(self.width(), math.ceil(self._tracker.reported_height))

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        """Height the content would need at the given width.

        Measures only; children are not moved and no signal is emitted.
        """
        boxes = [WidgetBox(w) for w in self.layout_widgets()]
        return math.ceil(self._engine.measure_height(boxes, self.layout_parameters(width)))

    # Events

    def event(self, event: QEvent) -> bool:
        event_type = event.type()
        if event_type == QEvent.Type.LayoutRequest:
            self.perform_layout()
            return True
        if event_type in (QEvent.Type.ChildAdded, QEvent.Type.ChildRemoved):
            self.request_layout()
        return super().event(event)

    def resizeEvent(self, event) -> None:
        """Relayout for the new width."""
        super().resizeEvent(event)
        self.perform_layout()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Report which child was clicked."""
        if self._last_result is not None:
            pos = event.position()
            index = placement_at(self._last_result, pos.x(), pos.y())
            if index is not None:
                self.child_clicked.emit(index)
        super().mousePressEvent(event)
