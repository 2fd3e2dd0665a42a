"""Main entry point for pyfloatview."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pyfloatview.errors import ValidationError, validate_non_negative, validate_range
from pyfloatview.layout.engine import FlowLayoutEngine, LayoutResult
from pyfloatview.samples import sample_boxes
from pyfloatview.settings import MAX_TILE_COUNT, ContainerSettings, SettingsManager

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="pyfloatview",
        description="Floating view container - flow layout of boxes in a fixed-width container",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        metavar="N",
        help="Number of sample tiles (default: from settings)",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=None,
        metavar="W",
        help="Container width (default: from settings)",
    )
    parser.add_argument(
        "--row-spacing",
        type=float,
        default=None,
        metavar="R",
        help="Vertical gap between rows (default: from settings)",
    )
    parser.add_argument(
        "--column-spacing",
        type=float,
        default=None,
        metavar="C",
        help="Horizontal gap between tiles (default: from settings)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random tile sizes",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        metavar="PATH",
        help="Settings file (default: ~/.config/pyfloatview/settings.json)",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the layout of the sample tiles as JSON instead of opening a window",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: ContainerSettings) -> ContainerSettings:
    """Apply command line overrides to loaded settings.

    Raises:
        ValidationError: If an override is out of range
    """
    overrides = {
        "tile_count": args.count,
        "container_width": args.width,
        "row_spacing": args.row_spacing,
        "column_spacing": args.column_spacing,
    }
    data = base.to_dict()
    data.update({key: value for key, value in overrides.items() if value is not None})

    validate_range(data["tile_count"], 0, MAX_TILE_COUNT, "count")
    validate_non_negative(data["container_width"], "width")
    return ContainerSettings.from_dict(data)


def result_to_dict(result: LayoutResult, settings: ContainerSettings) -> dict:
    """JSON representation of a layout result."""
    return {
        "container_width": settings.container_width,
        "row_spacing": settings.row_spacing,
        "column_spacing": settings.column_spacing,
        "content_height": result.content_height,
        "row_count": result.row_count,
        "placements": [
            {"x": p.x, "y": p.y, "width": p.width, "height": p.height}
            for p in result.placements
        ],
    }


def dump_layout(settings: ContainerSettings, seed: int | None) -> int:
    """Lay out sample boxes headlessly and print the result.

    Returns:
        Exit code
    """
    boxes = sample_boxes(settings.tile_count, seed)
    result = FlowLayoutEngine().layout(boxes, settings.to_parameters())
    logger.debug(f"Dumping {len(result.placements)} placements in {result.row_count} rows")
    json.dump(result_to_dict(result, settings), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def run_window(manager: SettingsManager, seed: int | None) -> int:
    """Open the demo window.

    Returns:
        Exit code of the Qt event loop
    """
    from PyQt6.QtWidgets import QApplication

    from pyfloatview.view.main_window import MainWindow

    app = QApplication(sys.argv)
    window = MainWindow(manager, seed=seed)
    window.show()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    manager = SettingsManager(path=args.settings)
    manager.load()

    try:
        settings = resolve_settings(args, manager.settings)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dump:
        return dump_layout(settings, args.seed)

    manager.update(**settings.to_dict())
    return run_window(manager, args.seed)


if __name__ == "__main__":
    sys.exit(main())
