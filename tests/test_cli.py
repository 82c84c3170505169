"""
Tests for the mystery-letter command line entry point.
"""

import json

import pytest

from mystery_letter.cli import build_parser, main


def test_builds_pdf(sample_image_path, tmp_path, capsys):
    # Arrange
    out_dir = tmp_path / "out"

    # Act
    code = main([
        str(sample_image_path), "--grid", "3", "--pages", "2",
        "--output", str(out_dir), "--seed", "1",
    ])

    # Assert
    assert code == 0
    assert (out_dir / "combined_images.pdf").exists()
    assert "Wrote 2 pages" in capsys.readouterr().out


def test_metadata_flag(sample_image_path, tmp_path, capsys):
    code = main([
        str(sample_image_path), "-g", "2", "-n", "2", "-o", str(tmp_path),
        "--name", "note.pdf", "--metadata",
    ])

    assert code == 0
    data = json.loads((tmp_path / "note.json").read_text())
    assert data["page_count"] == 2
    assert "Answer key" in capsys.readouterr().out


def test_missing_image_reports_error(tmp_path, capsys):
    code = main(["--output", str(tmp_path)])

    assert code == 1
    assert "Please upload an image first." in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_invalid_grid_is_usage_error(sample_image_path):
    with pytest.raises(SystemExit) as exc:
        main([str(sample_image_path), "--grid", "0"])

    assert exc.value.code == 2


def test_parser_defaults():
    args = build_parser().parse_args(["letter.png"])

    assert args.grid == 20
    assert args.pages == 5
    assert args.page_size == "A4"
    assert args.image_format == "JPEG"
    assert args.seed is None
    assert args.quality == 100
