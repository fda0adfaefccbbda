"""
Command-line interface for Hostsnap.

Provides commands for serving host snapshots over HTTP and taking them locally.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hostsnap import __version__
from hostsnap.config import Config
from hostsnap.exceptions import TelemetrySourceError
from hostsnap.models import Snapshot
from hostsnap.normalizer import SENSOR_LABELS, collect_snapshot

console = Console()


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging with rich handler."""
    handlers: list[logging.Handler] = [RichHandler(console=console, rich_tracebacks=True)]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
    )


@click.group()
@click.version_option(version=__version__, prog_name="hostsnap")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "-V",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def main(ctx: click.Context, config: Path | None, verbose: bool) -> None:
    """
    Hostsnap - Host telemetry snapshots.

    Serve identity, memory, disk, and sensor readings as JSON, or take a
    snapshot locally.
    """
    ctx.ensure_object(dict)

    try:
        ctx.obj["config"] = Config.load(config)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    log_level = "DEBUG" if verbose else ctx.obj["config"].log_level
    setup_logging(log_level, ctx.obj["config"].log_file)


@main.command()
@click.option(
    "--port",
    "-p",
    type=click.IntRange(0, 65535),
    default=None,
    help="Port to listen on (default: 7878)",
)
@click.option(
    "--host",
    "-H",
    default=None,
    help="Address to bind (default: 0.0.0.0)",
)
@click.pass_context
def serve(ctx: click.Context, port: int | None, host: str | None) -> None:
    """
    Start the HTTP server.

    Serves the current snapshot at GET /get_info.
    """
    from hostsnap.server import serve as run_server

    config: Config = ctx.obj["config"]
    if port is not None:
        config.port = port
    if host is not None:
        config.host = host

    run_server(config)


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Write output to file instead of stdout",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["json", "pretty"]),
    default="pretty",
    help="Output format",
)
@click.option(
    "--from-file",
    type=click.Path(exists=True, path_type=Path),
    help="Normalize raw readings from a YAML file instead of the live host",
)
def collect(output: Path | None, format: str, from_file: Path | None) -> None:
    """
    Take one snapshot.

    By default reads the live host and displays the result as tables.
    """
    source = None
    if from_file:
        from hostsnap.sources.static import StaticSource

        try:
            source = StaticSource.from_file(from_file)
        except (TypeError, yaml.YAMLError) as e:
            console.print(f"[red]✗ Invalid readings file {escape(str(from_file))}: {escape(str(e))}[/]")
            sys.exit(1)

    try:
        snapshot = collect_snapshot(source)
    except TelemetrySourceError as e:
        console.print(f"[red]✗ Snapshot failed: {e}[/]")
        sys.exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(snapshot.to_json())
        console.print(f"[dim]Snapshot saved to: {output}[/]")
    elif format == "json":
        console.print_json(snapshot.to_json())
    else:
        _display_snapshot(snapshot)


def _display_snapshot(snapshot: Snapshot) -> None:
    """Display a snapshot as a set of tables."""
    identity = snapshot.identity
    console.print()
    console.print(
        Panel.fit(
            f"[bold blue]{escape(identity.host_name) or 'unknown host'}[/]\n"
            + escape(f"{identity.name} {identity.os_version} (kernel {identity.kernel_version})"),
            border_style="blue",
        )
    )

    memory = snapshot.memory
    table = Table(title="Memory", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Used (GB)", justify="right")
    table.add_column("Total (GB)", justify="right")
    table.add_column("Usage", justify="right")
    table.add_row(
        "RAM",
        f"{memory.used_ram_gb:.2f}",
        f"{memory.total_ram_gb:.2f}",
        f"{memory.ram_percent:.1f}%",
    )
    table.add_row(
        "Swap",
        f"{memory.used_swap_gb:.2f}",
        f"{memory.total_swap_gb:.2f}",
        f"{memory.swap_percent:.1f}%",
    )
    console.print(table)

    table = Table(title="Disks", show_header=True)
    table.add_column("Device", style="cyan")
    table.add_column("Mount Point")
    table.add_column("Available (GB)", justify="right")
    table.add_column("Total (GB)", justify="right")
    for disk in snapshot.disks:
        table.add_row(
            escape(disk.name),
            escape(disk.mount_point),
            f"{disk.available_space_gb:.2f}",
            f"{disk.total_space_gb:.2f}",
        )
    console.print(table)

    table = Table(title="Sensors", show_header=True)
    table.add_column("Label", style="cyan")
    table.add_column("Temperature", justify="right")
    for sensor in snapshot.sensors:
        temperature = "[dim]n/a[/]" if sensor.temperature is None else f"{sensor.temperature:.1f} °C"
        table.add_row(escape(sensor.label), temperature)
    console.print(table)


@main.command("labels")
def list_labels() -> None:
    """List the sensor label mappings."""
    table = Table(title="Sensor Labels", show_header=True)
    table.add_column("Raw Label", style="cyan")
    table.add_column("Display Name")

    for raw, friendly in SENSOR_LABELS.items():
        table.add_row(raw, friendly)

    console.print()
    console.print(table)


@main.command("version", short_help="Display version information")
def version() -> None:
    """Display version information for Hostsnap."""
    console.print()
    console.print(
        Panel.fit(
            f"[bold blue]Hostsnap[/]\nVersion: [cyan]{__version__}[/]",
            border_style="blue",
            title="Version Information",
        )
    )
    console.print()

    table = Table(show_header=False, box=None)
    table.add_column("Component", style="dim", width=20)
    table.add_column("Version", style="cyan")

    table.add_row("Hostsnap", __version__)
    table.add_row("Python", sys.version.split()[0])

    console.print(table)
    console.print()


@main.command()
@click.argument("output_path", type=click.Path(path_type=Path))
def init_config(output_path: Path) -> None:
    """
    Generate a sample configuration file.

    Creates a YAML configuration file with all available options
    and helpful comments.
    """
    sample_config = """# Hostsnap Configuration

# Server settings
server:
  # Address to bind
  host: 0.0.0.0

  # Port to listen on
  port: 7878

# Logging
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR
  level: INFO

  # Log file path (null = console only)
  file: null
"""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(sample_config)
    console.print(f"[green]✓ Configuration file created: {output_path}[/]")
    console.print()
    console.print("Next steps:")
    console.print("  1. Edit the configuration file if the defaults do not suit you")
    console.print("  2. Start the server: [cyan]hostsnap serve[/]")
    console.print("  3. Fetch a snapshot: [cyan]curl http://localhost:7878/get_info[/]")


if __name__ == "__main__":
    main()
