"""View layer for pyfloatview.

This module provides the Qt integration of the flow layout:

- FloatingViewContainer: QWidget that lays out its children in floating rows
- WidgetBox: Adapter measuring a QWidget for the layout engine
- ColorTile: Sample tile widget
- MainWindow: Demo window with spacing controls
"""

from pyfloatview.view.container import FloatingViewContainer, WidgetBox
from pyfloatview.view.main_window import ControlPanel, MainWindow
from pyfloatview.view.tiles import ColorTile, create_tiles, tile_color

__all__ = [
    "FloatingViewContainer",
    "WidgetBox",
    "ControlPanel",
    "MainWindow",
    "ColorTile",
    "create_tiles",
    "tile_color",
]
