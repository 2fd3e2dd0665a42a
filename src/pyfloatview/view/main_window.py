"""Demo window for pyfloatview.

Hosts a FloatingViewContainer inside a scroll area together with a
control panel for the spacing and the number of tiles.
"""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QDoubleSpinBox,
    QFormLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QSpinBox,
    QSplitter,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from pyfloatview.errors import SettingsError
from pyfloatview.settings import MAX_TILE_COUNT, ContainerSettings, SettingsManager
from pyfloatview.view.container import FloatingViewContainer
from pyfloatview.view.tiles import ColorTile, create_tiles

logger = logging.getLogger(__name__)


class ControlPanel(QWidget):
    """Side panel with spacing and tile count controls."""

    # Signals
    row_spacing_changed = pyqtSignal(float)
    column_spacing_changed = pyqtSignal(float)
    tile_count_changed = pyqtSignal(int)

    def __init__(self, settings: ContainerSettings, parent=None) -> None:
        """Initialize control panel.

        Args:
            settings: Initial values for the controls
            parent: Parent widget
        """
        super().__init__(parent)
        self._setup_ui(settings)

    def _setup_ui(self, settings: ContainerSettings) -> None:
        """Set up the control panel UI."""
        self.setFixedWidth(220)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        title = QLabel("<b>pyfloatview</b>")
        title.setStyleSheet("font-size: 14px;")
        layout.addWidget(title)

        layout.addSpacing(8)
        layout.addWidget(QLabel("<b>Spacing:</b>"))

        form = QFormLayout()
        self._row_spacing_spin = QDoubleSpinBox()
        self._row_spacing_spin.setRange(0.0, 200.0)
        self._row_spacing_spin.setDecimals(1)
        self._row_spacing_spin.setValue(settings.row_spacing)
        self._row_spacing_spin.setToolTip("Vertical gap between rows")
        form.addRow("Rows:", self._row_spacing_spin)

        self._column_spacing_spin = QDoubleSpinBox()
        self._column_spacing_spin.setRange(0.0, 200.0)
        self._column_spacing_spin.setDecimals(1)
        self._column_spacing_spin.setValue(settings.column_spacing)
        self._column_spacing_spin.setToolTip("Horizontal gap between tiles")
        form.addRow("Columns:", self._column_spacing_spin)

        self._tile_count_spin = QSpinBox()
        self._tile_count_spin.setRange(0, MAX_TILE_COUNT)
        self._tile_count_spin.setValue(settings.tile_count)
        form.addRow("Tiles:", self._tile_count_spin)
        layout.addLayout(form)

        self._row_spacing_spin.valueChanged.connect(self.row_spacing_changed.emit)
        self._column_spacing_spin.valueChanged.connect(self.column_spacing_changed.emit)
        self._tile_count_spin.valueChanged.connect(self.tile_count_changed.emit)

        layout.addStretch()

        self._stats_label = QLabel("<b>Stats:</b><br>Tiles: 0")
        self._stats_label.setStyleSheet("font-size: 10px;")
        layout.addWidget(self._stats_label)

    def set_settings(self, settings: ContainerSettings) -> None:
        """Show new settings without re-emitting change signals."""
        for spin, value in (
            (self._row_spacing_spin, settings.row_spacing),
            (self._column_spacing_spin, settings.column_spacing),
            (self._tile_count_spin, settings.tile_count),
        ):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)

    def update_stats(self, tile_count: int, row_count: int, content_height: float) -> None:
        """Update statistics display.

        Args:
            tile_count: Number of tiles in the container
            row_count: Number of rows of the last pass
            content_height: Reported content height
        """
        self._stats_label.setText(
            f"<b>Stats:</b><br>Tiles: {tile_count}<br>Rows: {row_count}"
            f"<br>Height: {content_height:.0f}px"
        )


class MainWindow(QMainWindow):
    """Main window showing a floating view container with sample tiles."""

    def __init__(self, settings_manager: SettingsManager, seed: int | None = None) -> None:
        """Initialize main window.

        Args:
            settings_manager: Source of spacing and tile settings
            seed: RNG seed for the sample tile sizes
        """
        super().__init__()

        self._settings_manager = settings_manager
        self._seed = seed
        self._tiles: list[ColorTile] = []

        self._setup_ui()
        self._setup_menu_bar()
        self._connect_signals()
        self._populate_tiles(settings_manager.settings.tile_count)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        settings = self._settings_manager.settings
        self.setWindowTitle("pyfloatview")
        self.resize(int(settings.container_width) + 260, 600)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        self._scroll_area = QScrollArea()
        self._scroll_area.setWidgetResizable(True)
        self._scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self._container = FloatingViewContainer(
            row_spacing=settings.row_spacing,
            column_spacing=settings.column_spacing,
        )
        self._scroll_area.setWidget(self._container)
        splitter.addWidget(self._scroll_area)

        self._control_panel = ControlPanel(settings)
        splitter.addWidget(self._control_panel)
        splitter.setSizes([int(settings.container_width), 220])

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _setup_menu_bar(self) -> None:
        """Set up the menu bar."""
        file_menu = self.menuBar().addMenu("&File")

        save_action = QAction("&Save Settings", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self._save_settings)
        file_menu.addAction(save_action)

        reset_action = QAction("&Reset Settings", self)
        reset_action.triggered.connect(self._settings_manager.reset_to_default)
        file_menu.addAction(reset_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def _connect_signals(self) -> None:
        """Connect internal signals."""
        self._control_panel.row_spacing_changed.connect(
            lambda value: self._settings_manager.update(row_spacing=value)
        )
        self._control_panel.column_spacing_changed.connect(
            lambda value: self._settings_manager.update(column_spacing=value)
        )
        self._control_panel.tile_count_changed.connect(
            lambda value: self._settings_manager.update(tile_count=value)
        )
        self._settings_manager.settings_changed.connect(self._apply_settings)

        self._container.content_height_changed.connect(self._on_content_height_changed)
        self._container.child_clicked.connect(self._on_tile_clicked)

    def _apply_settings(self, settings: ContainerSettings) -> None:
        """Push changed settings into the container and controls."""
        self._control_panel.set_settings(settings)
        self._container.row_spacing = settings.row_spacing
        self._container.column_spacing = settings.column_spacing
        if settings.tile_count != len(self._tiles):
            self._populate_tiles(settings.tile_count)
        self._update_stats()

    def _populate_tiles(self, count: int) -> None:
        """Replace all tiles with ``count`` new ones."""
        for tile in self._tiles:
            tile.setParent(None)
            tile.deleteLater()
        self._tiles = create_tiles(self._container, count, self._seed)
        self._container.perform_layout()
        self._update_stats()

    def _update_stats(self) -> None:
        result = self._container.last_result
        row_count = result.row_count if result is not None else 0
        self._control_panel.update_stats(len(self._tiles), row_count, self._container.content_height)

    def _on_content_height_changed(self, height: float) -> None:
        self._status_bar.showMessage(f"Content height: {height:.0f}px")
        self._update_stats()

    def _on_tile_clicked(self, index: int) -> None:
        tile = self._tiles[index]
        self._status_bar.showMessage(f"Tile {index}: {tile.width()}x{tile.height()} at ({tile.x()}, {tile.y()})")

    def _save_settings(self) -> None:
        try:
            self._settings_manager.save()
        except SettingsError as e:
            logger.error(f"Failed to save settings: {e}")
            self._status_bar.showMessage(str(e))
            return
        self._status_bar.showMessage(f"Settings saved to {self._settings_manager.path}")

    @property
    def container(self) -> FloatingViewContainer:
        """Get the floating view container."""
        return self._container

    @property
    def control_panel(self) -> ControlPanel:
        """Get the control panel."""
        return self._control_panel
