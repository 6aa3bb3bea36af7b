"""
Tests for the console commands.
"""

import logging

import pytest
from typer.testing import CliRunner

from astromind.cli import app
from astromind.config import ConfigIO, MissionConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Commands reconfigure the package logger; undo that after each test."""
    logger = logging.getLogger("astromind")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)


@pytest.fixture
def empty_field_config(tmp_path):
    config = MissionConfig.create_with_overrides(
        {"asteroid_field": {"asteroid_count": 0}},
        base_config=MissionConfig.create_default(seed=1),
    )
    path = tmp_path / "empty.yaml"
    ConfigIO.save(config, path)
    return path


def test_telemetry_command():
    result = runner.invoke(app, ["telemetry", "--ticks", "3", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Telemetry" in result.output


def test_telemetry_command_with_mission():
    result = runner.invoke(app, ["telemetry", "-n", "2", "--mission", "--seed", "2"])
    assert result.exit_code == 0, result.output


def test_route_command(empty_field_config):
    result = runner.invoke(app, ["route", "--config", str(empty_field_config)])
    assert result.exit_code == 0, result.output
    assert "Route:" in result.output


def test_route_command_rejects_bad_grid_step(empty_field_config):
    result = runner.invoke(
        app, ["route", "--config", str(empty_field_config), "--grid-step", "-1"]
    )
    assert result.exit_code == 1
    assert "Invalid planner input" in result.output


def test_plan_command():
    result = runner.invoke(app, ["plan", "--target", "30000", "0", "0", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Navigation to Target 30000, 0" in result.output


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["telemetry", "--config", str(tmp_path / "absent.yaml")])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_route_command_reports_clearance_and_resources(tmp_path):
    config = MissionConfig.create_with_overrides(
        {"asteroid_field": {"asteroid_count": 3, "min_radius": 1.0, "max_radius": 1.0}},
        base_config=MissionConfig.create_default(seed=4),
    )
    path = tmp_path / "sparse.json"
    ConfigIO.save(config, path)

    result = runner.invoke(app, ["route", "--config", str(path), "--safety-margin", "0"])

    assert result.exit_code == 0, result.output
    assert "min clearance" in result.output
    assert "Richest platinum asteroid" in result.output
