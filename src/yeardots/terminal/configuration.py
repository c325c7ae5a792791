# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from yeardots import configuration
from yeardots.repository.configuration import CONFIGURATION_REPO
from yeardots.repository.tracker import TRACKER_REGISTRY
from yeardots.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "use_color",
        "✓ Enabled" if config["use_color"] else "✗ Disabled",
    )
    table.add_row("grid_columns", str(config["grid_columns"]))
    table.add_row("initial_tracker", config["initial_tracker"])
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    use_color: Annotated[
        Optional[bool],
        typer.Option(
            "--use-color/--no-use-color",
            help="Enable/disable tracker colors in the grid",
        ),
    ] = None,
    grid_columns: Annotated[
        Optional[int],
        typer.Option("--grid-columns", min=1, help="Cells per grid row"),
    ] = None,
    initial_tracker: Annotated[
        Optional[str],
        typer.Option("--initial-tracker", help="Tracker id active at start"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if initial_tracker is not None and TRACKER_REGISTRY.find_tracker(
        initial_tracker
    ) is None:
        valid_ids = ", ".join(t["id"] for t in TRACKER_REGISTRY.trackers)
        typer.echo(
            f"Invalid tracker: {initial_tracker}. Valid options: {valid_ids}"
        )
        raise typer.Exit(1)

    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in VALID_LOG_LEVELS:
            valid_levels = ", ".join(VALID_LOG_LEVELS)
            typer.echo(f"Invalid log level: {log_level}. Valid options: {valid_levels}")
            raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        use_color=use_color,
        grid_columns=grid_columns,
        initial_tracker=initial_tracker,
        log_level=log_level,  # type: ignore[arg-type]
    )
    CONFIGURATION_REPO.flush()

    typer.echo("Configuration updated.")
