"""
AstroMind Console
=================

Console front end standing in for the operator display. Runs the
telemetry engine with its advisors, plans routes through a generated
asteroid field, and prints mission plans.
"""

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from astromind.advisory.anomaly_detection import AnomalyDetector
from astromind.advisory.mission_planner import generate_mission_plan
from astromind.advisory.recommendations import RecommendationEngine, sort_by_priority
from astromind.config.io import ConfigIO
from astromind.config.mission_config import MissionConfig
from astromind.core.exceptions import AstroMindException, format_exception_message
from astromind.core.telemetry import Telemetry, TelemetryStatus
from astromind.core.telemetry_engine import TelemetryEngine
from astromind.core.telemetry_ticker import TelemetryTicker
from astromind.planning.astar import AStarPathfinder
from astromind.planning.asteroid_field import generate_asteroid_field
from astromind.utils.logging_config import setup_logging

app = typer.Typer(
    help="AstroMind - spacecraft telemetry, advisories and route planning",
    add_completion=False,
)
console = Console()

STATUS_STYLE = {
    TelemetryStatus.ACTIVE: "green",
    TelemetryStatus.MAINTENANCE: "yellow",
    TelemetryStatus.CRITICAL: "bold red",
}

ConfigOption = typer.Option(None, "--config", "-c", help="Config file (JSON/YAML)")
SeedOption = typer.Option(None, "--seed", "-s", help="Random seed (overrides config)")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def _configure_logging(verbose: bool) -> None:
    setup_logging("astromind", level=logging.DEBUG if verbose else logging.WARNING)


def _load_config(config_path: Optional[Path], seed: Optional[int]) -> MissionConfig:
    try:
        config = ConfigIO.load(config_path) if config_path else MissionConfig.create_default()
    except AstroMindException as e:
        console.print(f"[bold red]Configuration error:[/bold red] {format_exception_message(e)}")
        raise typer.Exit(code=1)
    if seed is not None:
        config = MissionConfig(app_config=config.app_config, seed=seed)
    return config


def _km(value: float) -> str:
    return "-" if math.isinf(value) else f"{value:.1f}"


@app.command()
def telemetry(
    ticks: int = typer.Option(10, "--ticks", "-n", min=1, help="Number of ticks to simulate"),
    mission: bool = typer.Option(
        False, "--mission/--no-mission", help="Activate the mission before ticking"
    ),
    config_path: Optional[Path] = ConfigOption,
    seed: Optional[int] = SeedOption,
    verbose: bool = VerboseOption,
):
    """
    Simulate telemetry ticks and show advisories.
    """
    _configure_logging(verbose)
    config = _load_config(config_path, seed)
    app_config = config.app_config

    engine = TelemetryEngine(config=app_config, rng=config.make_rng())
    ticker = TelemetryTicker(engine, interval=app_config.timing.tick_interval)
    recommender = RecommendationEngine(app_config.advisory)
    detector = AnomalyDetector(app_config.advisory)

    if mission:
        engine.set_mission_active(True)

    table = Table(title=f"◇ {engine.telemetry.name} Telemetry", style="cyan")
    for column in ("Tick", "Fuel %", "Temp °C", "Rad mSv/h", "Battery %", "Health %", "Status"):
        table.add_column(column, justify="right")
    table.add_column("Advisories", justify="left")

    def on_tick(snapshot: Telemetry) -> None:
        advisories: List[str] = [
            f"{r.priority.value.upper()}: {r.action}"
            for r in sort_by_priority(recommender.analyze(snapshot))
        ]
        advisories.extend(detector.observe(snapshot))
        style = STATUS_STYLE[snapshot.status]
        table.add_row(
            str(engine.tick_count),
            f"{snapshot.fuel:.2f}",
            f"{snapshot.temperature:.1f}",
            f"{snapshot.radiation:.0f}",
            f"{snapshot.battery_level:.1f}",
            f"{snapshot.system_health:.1f}",
            f"[{style}]{snapshot.status.value}[/{style}]",
            "\n".join(advisories) or "-",
        )

    ticker.run_ticks(ticks, on_tick)
    console.print(table)


@app.command()
def route(
    grid_step: Optional[float] = typer.Option(None, "--grid-step", help="Lattice spacing in km"),
    safety_margin: Optional[float] = typer.Option(
        None, "--safety-margin", help="Clearance around asteroids in km"
    ),
    config_path: Optional[Path] = ConfigOption,
    seed: Optional[int] = SeedOption,
    verbose: bool = VerboseOption,
):
    """
    Plan a route across a generated asteroid field.
    """
    _configure_logging(verbose)
    config = _load_config(config_path, seed)
    app_config = config.app_config

    field = generate_asteroid_field(app_config.asteroid_field, rng=config.make_rng())
    start, goal = field.default_start_goal()

    try:
        pathfinder = AStarPathfinder(
            field.asteroids,
            grid_step=grid_step if grid_step is not None else app_config.pathfinder.grid_step,
            safety_margin=(
                safety_margin if safety_margin is not None else app_config.pathfinder.safety_margin
            ),
            bounds=field.bounds,
        )
    except AstroMindException as e:
        console.print(f"[bold red]Invalid planner input:[/bold red] {format_exception_message(e)}")
        raise typer.Exit(code=1)

    found = pathfinder.find_path(start, goal)

    console.print(
        Panel.fit(
            f"{len(field)} asteroids in {field.bounds.max_x:.0f} x {field.bounds.max_y:.0f} km\n"
            f"Start ({start.x:.0f}, {start.y:.0f}) -> Goal ({goal.x:.0f}, {goal.y:.0f})\n"
            f"Grid step {pathfinder.grid_step:g} km, margin {pathfinder.safety_margin:g} km",
            title="Route Planner",
            style="bold blue",
        )
    )
    if not found:
        console.print(f"[yellow]No route found ({found.expanded} nodes expanded).[/yellow]")
        raise typer.Exit(code=2)

    table = Table(title="◇ Route", style="green")
    table.add_column("#", justify="right")
    table.add_column("Position (km)")
    table.add_column("Cost", justify="right")
    table.add_column("Clearance", justify="right")
    clearances = [pathfinder.clearance(point) for point in found.points]
    for i, (point, cost, clear) in enumerate(zip(found.points, found.costs, clearances)):
        table.add_row(str(i), f"({point.x:.1f}, {point.y:.1f})", f"{cost:.1f}", _km(clear))
    console.print(table)
    console.print(
        f"[green]Route: {len(found)} points, {found.total_length():.1f} km, "
        f"min clearance {_km(min(clearances))}, {found.expanded} nodes expanded[/green]"
    )

    richest = field.richest("platinum")
    if richest is not None:
        console.print(
            f"Richest platinum asteroid: {richest.id} at "
            f"({richest.position.x:.0f}, {richest.position.y:.0f}), "
            f"{richest.resources.platinum:.0f}% platinum"
        )


@app.command()
def plan(
    target: Tuple[float, float, float] = typer.Option(
        (10000.0, 5000.0, 0.0), "--target", help="Target position x y z in km"
    ),
    config_path: Optional[Path] = ConfigOption,
    seed: Optional[int] = SeedOption,
    verbose: bool = VerboseOption,
):
    """
    Print a direct mission plan from the current position to a target.
    """
    _configure_logging(verbose)
    config = _load_config(config_path, seed)
    engine = TelemetryEngine(config=config.app_config, rng=config.make_rng())
    current = engine.telemetry

    mission_plan = generate_mission_plan(current.position, target, current)

    table = Table(title=f"◇ {mission_plan.name}", style="green")
    table.add_column("Parameter", style="bold")
    table.add_column("Value", style="cyan")
    table.add_row("Mission ID", mission_plan.id)
    table.add_row("Duration", f"{mission_plan.duration:.2f} h")
    table.add_row("Fuel requirement", f"{mission_plan.fuel_requirement:.2f} %")
    table.add_row("Risk", mission_plan.risk_level.value)
    table.add_row(
        "Optimal launch", mission_plan.launch_window.optimal.strftime("%Y-%m-%d %H:%M UTC")
    )
    for i, objective in enumerate(mission_plan.objectives, 1):
        table.add_row(f"Objective {i}", objective)
    console.print(table)


if __name__ == "__main__":
    app()
