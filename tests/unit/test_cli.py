from __future__ import annotations

from typer.testing import CliRunner

from notification_hub.presentation.cli.main import app

runner = CliRunner()


def test_demo_prints_every_display_for_each_reading():
    result = runner.invoke(app, ["--log-level", "WARNING", "demo", "--policy", "abort"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[:3] == [
        "Current conditions: 80.0C and 65.0% humidity",
        "Avg/Max/Min temperature = 80.0/80.0/80.0",
        "Forecast: Improving weather on the way!",
    ]
    assert lines[-3:] == [
        "Current conditions: 78.0C and 90.0% humidity",
        "Avg/Max/Min temperature = 80.0/82.0/78.0",
        "Forecast: More of the same",
    ]


def test_demo_with_faulty_listener_aborts():
    result = runner.invoke(app, ["demo", "--policy", "abort", "--faulty-listener"])
    assert result.exit_code == 1
    assert "Delivery aborted" in result.output
    assert "Current conditions" not in result.output


def test_demo_with_faulty_listener_collects():
    result = runner.invoke(app, ["demo", "--policy", "continue-and-collect", "--faulty-listener"])
    assert result.exit_code == 0, result.output
    assert "Forecast: More of the same" in result.output
    assert result.output.count("Listener hub") == 3


def test_publish_single_reading():
    result = runner.invoke(app, ["publish", "21.5", "40", "30.1"])
    assert result.exit_code == 0, result.output
    assert "Current conditions: 21.5C and 40.0% humidity" in result.output


def test_publish_invalid_reading_exits_2():
    result = runner.invoke(app, ["publish", "21.5", "140", "30.1"])
    assert result.exit_code == 2
    assert "Invalid reading" in result.output
