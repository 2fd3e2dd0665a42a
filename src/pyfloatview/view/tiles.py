"""Sample tiles shown by the demo window."""

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QFrame, QWidget

from pyfloatview.samples import generate_tile_sizes

# Golden ratio conjugate, spreads consecutive hues evenly
_HUE_STEP = 0.618033988749895


def tile_color(index: int) -> QColor:
    """Distinct pastel color for the tile at ``index``."""
    hue = (index * _HUE_STEP) % 1.0
    return QColor.fromHsvF(hue, 0.45, 0.92)


class ColorTile(QFrame):
    """Colored tile with a fixed preferred size and an index label."""

    def __init__(self, index: int, width: int, height: int, parent: QWidget | None = None) -> None:
        """Initialize the tile.

        Args:
            index: Position of the tile in the container
            width: Preferred width
            height: Preferred height
            parent: Parent widget (usually the container)
        """
        super().__init__(parent)
        self._index = index
        self._preferred = QSize(width, height)
        self._color = tile_color(index)
        self.setFrameShape(QFrame.Shape.Box)
        self.setToolTip(f"Tile {index}: {width}x{height}")

    @property
    def index(self) -> int:
        return self._index

    def sizeHint(self) -> QSize:
        return QSize(self._preferred)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._color)
        painter.setPen(QColor(40, 40, 40))
        painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, str(self._index))
        painter.end()
        super().paintEvent(event)


def create_tiles(container: QWidget, count: int, seed: int | None = None) -> list[ColorTile]:
    """Add ``count`` randomly sized tiles to a container.

    Args:
        container: Parent widget for the tiles
        count: Number of tiles
        seed: RNG seed for the tile sizes

    Returns:
        The created tiles, in layout order
    """
    tiles = []
    for index, (width, height) in enumerate(generate_tile_sizes(count, seed)):
        tile = ColorTile(index, int(width), int(height), container)
        tile.show()
        tiles.append(tile)
    return tiles
