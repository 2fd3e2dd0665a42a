#!/usr/bin/env python3
"""Tests for the command line entry point."""

import json
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from pyfloatview.__main__ import main, parse_args
from pyfloatview.layout.engine import FlowLayoutEngine, LayoutParameters
from pyfloatview.samples import sample_boxes


def dump_args(tmp_path, *extra):
    return [
        "--dump",
        "--settings", str(tmp_path / "settings.json"),
        "--width", "100",
        "--row-spacing", "5",
        "--column-spacing", "10",
        *extra,
    ]


def test_parse_args_defaults():
    """Test options default to None so settings can fill them in."""
    args = parse_args([])

    assert args.count is None
    assert args.width is None
    assert not args.dump
    assert not args.verbose

    print("✓ Argument defaults test passed")


def test_dump_prints_layout(tmp_path, capsys):
    """Test --dump prints the engine result as JSON."""
    exit_code = main(dump_args(tmp_path, "--count", "5", "--seed", "42"))
    output = json.loads(capsys.readouterr().out)

    expected = FlowLayoutEngine().layout(
        sample_boxes(5, 42),
        LayoutParameters(container_width=100, row_spacing=5, column_spacing=10),
    )
    assert exit_code == 0
    assert output["container_width"] == 100
    assert output["content_height"] == expected.content_height
    assert output["row_count"] == expected.row_count
    assert [(p["x"], p["y"], p["width"], p["height"]) for p in output["placements"]] == [
        p.as_tuple() for p in expected.placements
    ]

    print("✓ Dump layout test passed")


def test_dump_zero_tiles(tmp_path, capsys):
    """Test --dump with no tiles prints an empty layout."""
    assert main(dump_args(tmp_path, "--count", "0")) == 0
    output = json.loads(capsys.readouterr().out)

    assert output["placements"] == []
    assert output["content_height"] == 0

    print("✓ Dump zero tiles test passed")


def test_dump_uses_saved_settings(tmp_path, capsys):
    """Test values missing on the command line come from the settings file."""
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"settings": {"tile_count": 3, "row_spacing": 2}}))

    assert main(["--dump", "--settings", str(settings_path), "--seed", "1"]) == 0
    output = json.loads(capsys.readouterr().out)

    assert len(output["placements"]) == 3
    assert output["row_spacing"] == 2

    print("✓ Dump saved settings test passed")


def test_invalid_count_is_reported(tmp_path, capsys):
    """Test a negative count exits with an error."""
    assert main(dump_args(tmp_path, "--count", "-1")) == 1
    assert "count" in capsys.readouterr().err

    print("✓ Invalid count test passed")


@pytest.mark.parametrize("width", ["-5", "nan", "inf"])
def test_invalid_width_is_reported(tmp_path, capsys, width):
    """Test negative and non-finite widths exit with an error."""
    args = ["--dump", "--settings", str(tmp_path / "s.json"), "--width", width]

    assert main(args) == 1
    captured = capsys.readouterr()
    assert "width" in captured.err
    assert captured.out == ""

    print("✓ Invalid width test passed")
