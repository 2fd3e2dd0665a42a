"""Settings for the floating view container.

Holds the spacing configuration and the demo window options, and
manages their persistence and change notifications.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from pyfloatview.errors import SettingsError, ValidationError, validate_non_negative, validate_range
from pyfloatview.layout.engine import LayoutParameters

logger = logging.getLogger(__name__)

MAX_TILE_COUNT = 10000
SETTINGS_VERSION = "1.0"


@dataclass
class ContainerSettings:
    """Container configuration.

    Attributes:
        row_spacing: Vertical gap between rows
        column_spacing: Horizontal gap between boxes in a row
        tile_count: Number of sample tiles shown by the demo
        container_width: Initial container width used by the demo
    """

    row_spacing: float = 0.0
    column_spacing: float = 0.0
    tile_count: int = 24
    container_width: float = 480.0

    def to_parameters(self, container_width: float | None = None) -> LayoutParameters:
        """Build layout parameters from these settings.

        Args:
            container_width: Width override (e.g. the live widget width)

        Returns:
            LayoutParameters for one pass
        """
        width = self.container_width if container_width is None else container_width
        return LayoutParameters(
            container_width=width,
            row_spacing=self.row_spacing,
            column_spacing=self.column_spacing,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContainerSettings":
        """Create settings from a dict, ignoring unknown keys.

        Args:
            data: Mapping of field names to values

        Returns:
            A new ContainerSettings instance

        Raises:
            ValidationError: If a value is out of range
            TypeError, ValueError: If a value has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"settings must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}

        settings = cls(**values)
        settings.row_spacing = float(settings.row_spacing)
        settings.column_spacing = float(settings.column_spacing)
        settings.container_width = float(settings.container_width)
        if isinstance(settings.tile_count, bool) or not isinstance(settings.tile_count, int):
            raise ValidationError("tile_count", settings.tile_count, "integer")

        validate_range(settings.tile_count, 0, MAX_TILE_COUNT, "tile_count")
        validate_non_negative(settings.container_width, "container_width")
        return settings


class SettingsManager(QObject):
    """Manager for container settings.

    Usage:
        manager = SettingsManager()
        manager.load()
        manager.update(row_spacing=8)
        manager.save()
    """

    # Signal emitted when settings change
    settings_changed = pyqtSignal(object)

    def __init__(self, path: Path | None = None, parent: QObject | None = None) -> None:
        """Initialize the settings manager.

        Args:
            path: Optional custom settings file path.
                  Defaults to ~/.config/pyfloatview/settings.json
            parent: Parent QObject (optional)
        """
        super().__init__(parent)

        self._settings = ContainerSettings()
        self._path: Path = path or Path.home() / ".config" / "pyfloatview" / "settings.json"

    @property
    def settings(self) -> ContainerSettings:
        """Get the current settings."""
        return self._settings

    @property
    def path(self) -> Path:
        """Get the settings file path."""
        return self._path

    def update(self, **changes: Any) -> ContainerSettings:
        """Replace individual settings values.

        Args:
            **changes: Field names and new values

        Returns:
            The new settings

        Raises:
            ValidationError: If a value is invalid

        Emits:
            settings_changed: With the new settings
        """
        data = self._settings.to_dict()
        data.update(changes)
        self._settings = ContainerSettings.from_dict(data)
        self.settings_changed.emit(self._settings)
        return self._settings

    def save(self, path: Path | None = None) -> None:
        """Save current settings to disk.

        Args:
            path: Optional custom path for the settings file

        Raises:
            SettingsError: If the file cannot be written
        """
        save_path = path or self._path

        preferences = {
            "settings": self._settings.to_dict(),
            "version": SETTINGS_VERSION,
        }

        try:
            save_path.parent.mkdir(parents=True, exist_ok=True)
            with open(save_path, "w") as f:
                json.dump(preferences, f, indent=2)
        except OSError as e:
            raise SettingsError(save_path, str(e)) from e

        logger.debug(f"Saved settings to {save_path}")

    def load(self, path: Path | None = None) -> ContainerSettings:
        """Load settings from disk.

        Args:
            path: Optional custom path for the settings file

        Returns:
            The loaded settings, or defaults if loading fails

        Note:
            Emits settings_changed when settings are loaded from a file.
        """
        load_path = path or self._path

        if not load_path.exists():
            self._settings = ContainerSettings()
            return self._settings

        try:
            with open(load_path, "r") as f:
                preferences = json.load(f)
            settings = ContainerSettings.from_dict(preferences["settings"])
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable settings file {load_path}: {e}")
            self._settings = ContainerSettings()
            return self._settings

        self._settings = settings
        self.settings_changed.emit(settings)
        return settings

    def reset_to_default(self) -> ContainerSettings:
        """Reset to the default settings.

        Emits:
            settings_changed: With the default settings
        """
        self._settings = ContainerSettings()
        self.settings_changed.emit(self._settings)
        return self._settings
