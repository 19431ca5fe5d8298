# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ganttline import configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("min_row_height", f"{config['min_row_height']}px")
    table.add_row("min_bar_width", f"{config['min_bar_width']}px")
    table.add_row("default_color", config["default_color"])
    table.add_row("time_format", config["time_format"])
    table.add_row(
        "container_width",
        "None"
        if config["container_width"] is None
        else f"{config['container_width']}px",
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config.get("show_header", True) else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    min_row_height: Annotated[Optional[int], typer.Option("--min-row-height")] = None,
    min_bar_width: Annotated[Optional[int], typer.Option("--min-bar-width")] = None,
    default_color: Annotated[Optional[str], typer.Option("--default-color")] = None,
    time_format: Annotated[
        Optional[str],
        typer.Option("--time-format", help="pendulum tokens, e.g. HH:mm:ss or MM/DD HH:mm"),
    ] = None,
    container_width: Annotated[Optional[int], typer.Option("--container-width")] = None,
    remove_container_width: Annotated[
        bool, typer.Option("--remove-container-width")
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
) -> None:
    """Update configuration settings."""
    if min_row_height is not None and min_row_height <= 0:
        raise typer.BadParameter("min row height must be positive")
    if min_bar_width is not None and min_bar_width <= 0:
        raise typer.BadParameter("min bar width must be positive")

    CONFIGURATION_REPO.update_config(
        min_row_height=min_row_height,
        min_bar_width=min_bar_width,
        default_color=default_color,
        time_format=time_format,
        container_width=container_width,
        remove_container_width=remove_container_width,
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()
    view()
