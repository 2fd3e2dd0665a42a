#!/usr/bin/env python3
"""Integration tests for the FloatingViewContainer widget.

Runs offscreen against a shared QApplication.
"""

import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from PyQt6.QtCore import QRect
from PyQt6.QtWidgets import QWidget

from pyfloatview.view.container import FloatingViewContainer, WidgetBox
from pyfloatview.view.tiles import ColorTile


@pytest.fixture
def container(qapp):
    widget = FloatingViewContainer(row_spacing=5, column_spacing=10)
    widget.resize(100, 50)
    yield widget
    widget.deleteLater()


def add_tiles(container, sizes):
    return [ColorTile(i, w, h, container) for i, (w, h) in enumerate(sizes)]


def test_widget_box_uses_size_hint_or_geometry(qapp):
    """Test WidgetBox reads the size hint, else the geometry."""
    tile = ColorTile(0, 30, 20)
    box = WidgetBox(tile)
    assert (box.preferred_width, box.preferred_height) == (30.0, 20.0)

    plain = QWidget()
    plain.setGeometry(0, 0, 40, 20)
    box = WidgetBox(plain)
    assert box.preferred_width is None
    assert box.preferred_height is None
    assert (box.current_width, box.current_height) == (40.0, 20.0)

    print("✓ WidgetBox test passed")


def test_perform_layout_applies_placements(container):
    """Test a pass moves the children to their placements."""
    tiles = add_tiles(container, [(30, 20)] * 3)
    result = container.perform_layout()

    assert result.content_height == 45
    assert tiles[0].geometry() == QRect(0, 0, 30, 20)
    assert tiles[1].geometry() == QRect(40, 0, 30, 20)
    assert tiles[2].geometry() == QRect(0, 25, 30, 20)
    assert container.last_result is result
    assert container.content_height == 45

    print("✓ Apply placements test passed")


def test_child_without_size_hint_keeps_its_frame_size(container):
    """Test a child without size hint keeps its current size."""
    plain = QWidget(container)
    plain.setGeometry(60, 60, 40, 20)
    container.perform_layout()

    assert plain.geometry() == QRect(0, 0, 40, 20)

    print("✓ Frame size fallback test passed")


def test_notification_only_when_height_changes(container):
    """Test content_height_changed fires only when the height changes."""
    heights = []
    container.content_height_changed.connect(heights.append)
    add_tiles(container, [(30, 20)] * 3)

    container.perform_layout()
    container.perform_layout()
    assert heights == [45.0]

    # Same row structure, different x positions
    container.column_spacing = 12
    assert container.last_result.placements[1].x == 42
    assert heights == [45.0]

    container.row_spacing = 10
    assert heights == [45.0, 50.0]

    print("✓ Height notification test passed")


def test_empty_container_does_not_notify(container):
    """Test an empty container reports zero height without a signal."""
    heights = []
    container.content_height_changed.connect(heights.append)
    result = container.perform_layout()

    assert result
    assert result.placements == []
    assert result.content_height == 0
    assert heights == []

    print("✓ Empty container test passed")


def test_hidden_children_are_skipped(container):
    """Test children hidden with hide() take up no space."""
    tiles = add_tiles(container, [(30, 20)] * 3)
    tiles[1].hide()
    result = container.perform_layout()

    assert len(result.placements) == 2
    assert tiles[2].geometry() == QRect(40, 0, 30, 20)
    assert result.content_height == 20

    print("✓ Hidden children test passed")


def test_qt_properties(container):
    """Test spacing is reachable through Qt properties."""
    assert container.setProperty("rowSpacing", 7.0)
    assert container.row_spacing == 7.0
    assert container.property("columnSpacing") == 10.0

    print("✓ Qt properties test passed")


def test_height_for_width_measures_without_notifying(container):
    """Test heightForWidth measures without moving children or emitting."""
    heights = []
    container.content_height_changed.connect(heights.append)
    tiles = add_tiles(container, [(30, 20)] * 3)

    assert container.hasHeightForWidth()
    assert container.heightForWidth(50) == 20 * 3 + 5 * 2
    assert heights == []
    assert tiles[1].geometry() != QRect(0, 25, 30, 20)

    print("✓ Height for width test passed")


def test_size_hint_reports_content_height(container):
    """Test sizeHint carries the reported content height."""
    add_tiles(container, [(30, 20)] * 3)
    container.perform_layout()

    assert container.sizeHint().height() == 45

    print("✓ Size hint test passed")


def test_posted_layout_request_runs_pass(qapp, container):
    """Test adding children schedules a pass on the event loop."""
    add_tiles(container, [(30, 20)] * 2)
    qapp.processEvents()

    assert container.last_result is not None
    assert len(container.last_result.placements) == 2

    print("✓ Posted layout request test passed")


def test_resize_relayouts(qapp, container):
    """Test resizing a shown container lays it out again."""
    tiles = add_tiles(container, [(30, 20)] * 3)
    container.show()
    container.resize(200, 50)
    qapp.processEvents()

    assert tiles[2].geometry() == QRect(80, 0, 30, 20)
    assert container.content_height == 20

    print("✓ Resize relayout test passed")


def test_child_at_position(container):
    """Test child_at_position maps points to laid out children."""
    tiles = add_tiles(container, [(30, 20)] * 3)
    assert container.child_at_position(10, 10) is None

    container.perform_layout()
    assert container.child_at_position(45, 10) is tiles[1]
    assert container.child_at_position(35, 10) is None

    print("✓ Child at position test passed")


def test_main_window_follows_settings(qapp, tmp_path):
    """Test the demo window applies settings changes to the container."""
    from pyfloatview.settings import SettingsManager
    from pyfloatview.view.main_window import MainWindow

    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.update(tile_count=5, column_spacing=4)
    window = MainWindow(manager, seed=1)

    assert len(window.container.layout_widgets()) == 5
    assert window.container.column_spacing == 4

    manager.update(row_spacing=6, tile_count=3)
    assert window.container.row_spacing == 6
    assert len(window.container.layout_widgets()) == 3
    assert len(window.container.last_result.placements) == 3
    window.deleteLater()

    print("✓ Main window settings test passed")
