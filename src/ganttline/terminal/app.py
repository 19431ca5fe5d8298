# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from ganttline.logging_setup import configure_logging
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal import configuration
from ganttline.terminal.custom_typer import OrderedTyperGroup
from ganttline.terminal.timeline import layout, render
from ganttline.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="ganttline - hierarchical timeline layout in the CLI",
    no_args_is_help=True,
)
app.command(name="layout, l")(layout)
app.command(name="render, r")(render)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show diagnostic log output"),
    ] = False,
) -> None:
    """
    ganttline - hierarchical timeline layout in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    view_state.set_show_header(
        CONFIGURATION_REPO.get_config().get("show_header", True) and not no_header
    )


def run() -> None:
    app()
