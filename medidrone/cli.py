"""Headless mission runner.

Flies one mission from the built-in catalog at full speed and prints the
outcome with rich.

Example:
    $ medidrone --mission 2 --seed 7 --manual-deploy -v
    $ python -m medidrone --emergency-at 300 --csv track.csv
"""

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from medidrone.mission import MissionReport, MissionSummary
from medidrone.simulator import LogLevel, MissionSimulator
from medidrone.vehicles import MissionPhase

CONSOLE = Console()

EXIT_COMPLETED = 0
EXIT_INCOMPLETE = 1
EXIT_REJECTED = 2

_LOG_STYLES = {
    LogLevel.SUCCESS: "green",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="medidrone", description="Medical delivery drone mission simulator")
    parser.add_argument("--mission", default="1", help="catalog id of the mission to fly")
    parser.add_argument("--seed", type=int, default=None, help="seed for the delivery target")
    parser.add_argument("--max-ticks", type=int, default=5000, help="tick budget for the run")
    parser.add_argument(
        "--manual-deploy",
        action="store_true",
        help="deploy as soon as the delivery zone is reached instead of waiting for auto-deploy",
    )
    parser.add_argument("--return-home-at", type=int, default=None, metavar="TICK", help="order return to home at TICK")
    parser.add_argument("--emergency-at", type=int, default=None, metavar="TICK", help="order an emergency landing at TICK")
    parser.add_argument("--csv", default=None, metavar="PATH", help="write the recorded track to PATH")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=CONSOLE, show_path=False)],
        force=True,
    )


def summary_table(summary: MissionSummary) -> Table:
    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Mission[/b]: ", summary.name)
    t.add_row("[b]Urgency[/b]: ", summary.urgency)
    t.add_row("[b]Payload[/b]: ", f"{summary.payload_weight_kg:.1f} kg")
    t.add_row("[b]Supplies[/b]: ", ", ".join(summary.supply_names))
    t.add_row("[b]Weather[/b]: ", f"{summary.weather.type} ({summary.weather.impact})")
    t.add_row("[b]Threat Level[/b]: ", summary.threat_level)
    for factor in summary.threat_factors:
        t.add_row("", f"• {factor}")
    t.add_row("[b]Target[/b]: ", f"({summary.target.x:.1f}, {summary.target.y:.1f})")
    return t


def report_table(report: MissionReport) -> Table:
    t = Table(title="Mission Report", show_header=False)
    t.add_column(style="bold")
    t.add_column()
    t.add_row("Mission", report.mission_name)
    style = "green" if report.successful else "red"
    t.add_row("Status", f"[{style}]{report.status}[/{style}]")
    t.add_row("Duration", str(report.duration))
    t.add_row("Distance", f"{report.distance_travelled:.1f} units")
    t.add_row("Payload", report.payload_status)
    t.add_row("Max Altitude", f"{report.max_altitude:.1f} m")
    t.add_row("Battery Used", f"{report.battery_consumed:.2f} %")
    t.add_row("Average Speed", f"{report.average_speed:.1f}")
    t.add_row("Weather", report.weather)
    t.add_row("Threat Level", report.threat_level)
    return t


def log_table(sim: MissionSimulator, limit: int = 15) -> Table:
    t = Table(title="Mission Log")
    t.add_column("Time")
    t.add_column("Message")
    for entry in reversed(sim.log.entries[:limit]):
        style = _LOG_STYLES[entry.level]
        t.add_row(str(entry.time), f"[{style}]{entry.message}[/{style}]")
    return t


def fly(sim: MissionSimulator, args: argparse.Namespace) -> None:
    """Drive the simulator until the mission settles or the tick budget runs out."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=40),
        TextColumn("WP {task.fields[waypoint]}"),
        TimeElapsedColumn(),
        console=CONSOLE,
    ) as progress:
        p = progress.add_task(sim.status_text, total=args.max_ticks, waypoint=0)
        for _ in range(args.max_ticks):
            if sim.finished:
                break
            sim.tick()
            tick = sim.clock.ticks

            if args.manual_deploy and sim.phase is MissionPhase.DELIVERY:
                sim.deploy_payload()
            if args.return_home_at is not None and tick == args.return_home_at:
                sim.return_to_home()
            if args.emergency_at is not None and tick == args.emergency_at:
                sim.emergency_landing()

            progress.update(p, advance=1, description=sim.status_text, waypoint=sim.current_waypoint_index)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    sim = MissionSimulator(seed=args.seed)
    selected = sim.select_mission(args.mission)
    if not selected:
        CONSOLE.print(f"[red]Mission selection rejected:[/red] {selected.error}")
        return EXIT_REJECTED
    CONSOLE.print(summary_table(selected.value))

    started = sim.initiate_flight()
    if not started:
        CONSOLE.print(f"[red]Takeoff rejected:[/red] {started.error}")
        return EXIT_REJECTED

    fly(sim, args)

    report = sim.last_report
    if report is None:
        report = sim.generate_report().value
    CONSOLE.print(report_table(report))
    CONSOLE.print(log_table(sim))

    flight = sim.recorder.summary()
    CONSOLE.print(
        f"[b]Recorded[/b] {flight.samples} ticks, "
        f"{flight.distance:.1f} units, mean moving speed {flight.mean_moving_speed:.1f}"
    )
    if args.csv:
        sim.recorder.to_dataframe().to_csv(args.csv)
        CONSOLE.print(f"Track written to {args.csv}")

    return EXIT_COMPLETED if sim.phase is MissionPhase.COMPLETED else EXIT_INCOMPLETE
