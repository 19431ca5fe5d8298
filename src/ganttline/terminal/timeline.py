# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.progress import Progress

from ganttline.model.record import default_accessors
from ganttline.model.timeline import TimelineResult
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.repository.record import RecordFileError, load_records
from ganttline.service.layout import resolve_window
from ganttline.service.transform import build_timeline
from ganttline.terminal.parse import parse_datetime
from ganttline.view.gantt import gantt_view
from ganttline.view.layout import layout_view

console = Console()

DATETIME_HELP = "valid inputs: YYYY-MM-DD[ HH:mm], now, today, yesterday, tomorrow, or day offset like 1, -1"

RecordFile = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML or JSON file holding a list of records",
    ),
]
StartOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
]
EndOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
]
SortOption = Annotated[
    bool,
    typer.Option("--sort/--no-sort", help="Order rows by the records' sort_key"),
]
GroupOption = Annotated[
    bool,
    typer.Option("--group/--no-group", help="Group records under their parent_id"),
]
ContainerWidthOption = Annotated[
    Optional[int],
    typer.Option("--container-width", "-w", help="Chart container width in pixels"),
]
MinRowHeightOption = Annotated[
    Optional[int],
    typer.Option("--min-row-height", help="Minimum row height in pixels"),
]


def _build(
    file: Path,
    start: Optional[pendulum.DateTime],
    end: Optional[pendulum.DateTime],
    sort: bool,
    group: bool,
    container_width: Optional[int],
    min_row_height: Optional[int],
) -> TimelineResult:
    if start is not None and end is not None and end < start:
        raise typer.BadParameter(
            f"End {end.to_datetime_string()} is before start {start.to_datetime_string()}"
        )

    config = CONFIGURATION_REPO.get_config()
    if container_width is not None:
        config["container_width"] = container_width
    if min_row_height is not None:
        config["min_row_height"] = min_row_height

    try:
        records = load_records(file)
    except RecordFileError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    accessors = default_accessors(parent_id=group, sort_key=sort)

    with Progress(console=console, transient=True) as progress:
        task_id = progress.add_task("Processing records", total=100)
        return build_timeline(
            records,
            accessors=accessors,
            window=resolve_window(start, end),
            config=config,
            on_progress=lambda value: progress.update(task_id, completed=value),
        )


def layout(
    file: RecordFile,
    start: StartOption = None,
    end: EndOption = None,
    sort: SortOption = False,
    group: GroupOption = True,
    container_width: ContainerWidthOption = None,
    min_row_height: MinRowHeightOption = None,
) -> None:
    """Print the rows, intervals and layout parameters for a record file."""
    result = _build(file, start, end, sort, group, container_width, min_row_height)
    layout_view(
        console,
        file.name,
        result,
        time_format=CONFIGURATION_REPO.get_config()["time_format"],
    )
    if result["error"] is not None:
        raise typer.Exit(1)


def render(
    file: RecordFile,
    start: StartOption = None,
    end: EndOption = None,
    sort: SortOption = False,
    group: GroupOption = True,
    min_row_height: MinRowHeightOption = None,
    all_rows: Annotated[
        bool,
        typer.Option("--all-rows", "-a", help="Show every row, not just the first screen"),
    ] = False,
    left_column_width: Annotated[
        int, typer.Option("--left-column-width", help="Width of the row name column")
    ] = 40,
    width: Annotated[
        Optional[int],
        typer.Option("--width", help="Chart width in characters, the terminal width by default"),
    ] = None,
) -> None:
    """Draw the timeline for a record file in the terminal."""
    config = CONFIGURATION_REPO.get_config()
    result = _build(file, start, end, sort, group, None, min_row_height)
    gantt_view(
        console,
        file.name,
        result,
        min_row_height=min_row_height or config["min_row_height"],
        min_bar_width=config["min_bar_width"],
        time_format=config["time_format"],
        left_column_width=left_column_width,
        all_rows=all_rows,
        width=width,
    )
    if result["error"] is not None:
        raise typer.Exit(1)
