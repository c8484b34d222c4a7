"""Tests for the command line interface."""

import logging

from PIL import Image
from typer.testing import CliRunner

from life_calendar.cli import app

runner = CliRunner()


def test_writes_life_calendar(tmp_path):
    output = tmp_path / "life.png"
    result = runner.invoke(
        app,
        [
            "--birth-date", "1990-05-15",
            "--reference-date", "2024-05-15",
            "--life-expectancy", "80",
            "--output", str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "1,774" in result.output
    with Image.open(output) as img:
        assert img.size == (1170, 2532)


def test_writes_year_calendar(tmp_path):
    output = tmp_path / "year.png"
    result = runner.invoke(
        app,
        ["year", "--theme", "light", "--reference-date", "2024-12-31", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    assert "Week 52 of 52" in result.output
    assert output.exists()


def test_invalid_life_expectancy_exits_with_error(tmp_path):
    result = runner.invoke(
        app,
        ["--birth-date", "1990-05-15", "--life-expectancy", "0", "-o", str(tmp_path / "x.png")],
    )

    assert result.exit_code == 1
    assert "lifeExpectancy" in result.output
    assert not (tmp_path / "x.png").exists()


def test_unsupported_output_format(tmp_path):
    result = runner.invoke(app, ["--birth-date", "1990-05-15", "-o", str(tmp_path / "x.gif")])

    assert result.exit_code == 1
    assert "Unsupported output format" in result.output


def test_unknown_mode_argument_is_rejected(tmp_path):
    result = runner.invoke(app, ["decade", "-o", str(tmp_path / "x.png")])

    assert result.exit_code == 1
    assert "mode must be either" in result.output


def test_verbose_enables_debug_logging(tmp_path):
    result = runner.invoke(
        app,
        ["year", "--reference-date", "2024-01-01", "--verbose", "-o", str(tmp_path / "year.png")],
    )

    assert result.exit_code == 0, result.output
    assert logging.getLogger("life_calendar").level == logging.DEBUG
