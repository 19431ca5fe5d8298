# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.color import Color, ColorParseError
from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from ganttline.color import (
    AXIS_STYLE,
    CHILD_ROW_STYLE,
    DEFAULT_BAR_COLOR,
    GROUP_ROW_STYLE,
)
from ganttline.configuration import CHART_CONFIG
from ganttline.model.geometry import BarGeometry, Rect
from ganttline.model.interval import Interval
from ganttline.model.row import Row
from ganttline.model.timeline import TimelineResult
from ganttline.service.geometry import LinearCoordinateMapper, compute_bar_geometry
from ganttline.time import format_time_label
from ganttline.view.header import header

# One terminal cell stands in for one average label glyph
CELL_WIDTH = CHART_CONFIG["LABEL_CHAR_WIDTH"]


def gantt_view(
    console: Console,
    source_name: str,
    result: TimelineResult,
    min_row_height: int = CHART_CONFIG["DEFAULT_MIN_ROW_HEIGHT"],
    min_bar_width: int = CHART_CONFIG["DEFAULT_MIN_BAR_WIDTH"],
    time_format: str = "HH:mm:ss",
    left_column_width: int = 40,
    all_rows: bool = False,
    width: Optional[int] = None,
) -> None:
    """
    Draw the timeline in the terminal, one line per row.

    Bars are laid out in pixel space with the bar geometry engine and then scaled
    to character cells. Only the initially visible share of the rows is printed
    unless all_rows is set.

    Args:
        console: Console to print to
        source_name: The file the records were loaded from
        result: Output of build_timeline
        min_row_height: Pixel height of one row band
        min_bar_width: Minimum bar width in pixels
        time_format: Pendulum format tokens for the axis labels
        left_column_width: Width of the row name column in characters
        all_rows: Print every row instead of the initial scroll window
        width: Total width in characters, the console width when omitted
    """
    header(console, source_name, "gantt")

    if result["error"] is not None:
        console.print(f"\n[red]{result['error']}[/red]\n")
        return

    layout = result["layout"]
    if layout is None or layout["time_window"] is None or not result["intervals"]:
        console.print("\n[dim]No intervals to display[/dim]\n")
        return

    rows = result["rows"]
    scroll_window_end = 100.0 if all_rows else layout["row_scroll_window_end"]
    visible_count = min(len(rows), math.ceil(len(rows) * scroll_window_end / 100))
    visible_rows = rows[:visible_count]

    available_cells = max((width or console.width) - left_column_width, 10)
    plot_rect: Rect = {
        "x": 0,
        "y": 0,
        "width": available_cells * CELL_WIDTH,
        "height": visible_count * min_row_height,
    }
    mapper = LinearCoordinateMapper(
        plot_rect, layout["time_window"], len(rows), scroll_window_end
    )
    intervals_by_row = {interval["row_index"]: interval for interval in result["intervals"]}

    chart_elements: list[Text] = [
        _build_axis_row(
            format_time_label(layout["time_window"]["min"], time_format),
            format_time_label(layout["time_window"]["max"], time_format),
            available_cells,
            left_column_width,
        ),
        Text("─" * (left_column_width + available_cells), style=AXIS_STYLE),
    ]

    for row in visible_rows:
        interval = intervals_by_row.get(row["index"])
        geometry: Optional[BarGeometry] = None
        if interval is not None:
            geometry = compute_bar_geometry(
                mapper.coord(interval["start_time"], row["index"]),
                mapper.coord(interval["end_time"], row["index"]),
                mapper.row_height,
                plot_rect,
                interval["label"],
                min_bar_width,
            )
        chart_elements.append(
            _build_row(row, interval, geometry, available_cells, left_column_width)
        )

    console.print()
    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))
    if visible_count < len(rows):
        console.print(
            f"[dim]Showing {visible_count} of {len(rows)} rows "
            f"({scroll_window_end:.0f}%), use --all-rows to show every row[/dim]\n"
        )


def _build_axis_row(
    left_label: str, right_label: str, available_cells: int, left_column_width: int
) -> Text:
    gap = max(available_cells - len(left_label) - len(right_label), 1)
    return Text(
        " " * left_column_width + left_label + " " * gap + right_label,
        style=AXIS_STYLE,
    )


def _bar_color(interval: Interval) -> str:
    try:
        Color.parse(interval["color"])
    except ColorParseError:
        return DEFAULT_BAR_COLOR
    return interval["color"]


def _build_row(
    row: Row,
    interval: Optional[Interval],
    geometry: Optional[BarGeometry],
    available_cells: int,
    left_column_width: int,
) -> Text:
    name = row["axis_label"]
    if not row["is_group"]:
        name = f"  {name}"
    if len(name) > left_column_width - 1:
        name = name[: left_column_width - 4] + "..."

    line = Text(
        name.ljust(left_column_width),
        style=GROUP_ROW_STYLE if row["is_group"] else CHILD_ROW_STYLE,
    )
    if interval is None or geometry is None:
        return line

    rect = geometry["rect"]
    first_cell = min(int(rect["x"] // CELL_WIDTH), available_cells - 1)
    last_cell = min(
        max(math.ceil((rect["x"] + rect["width"]) / CELL_WIDTH), first_cell + 1),
        available_cells,
    )
    bar_cells = last_cell - first_cell
    color = _bar_color(interval)
    label = geometry["label"]

    line.append(" " * first_cell)
    if label["placement"] == "inside":
        text = label["text"][:bar_cells].center(bar_cells)
        line.append(text, style=f"bold {label['fill']} on {color}")
    else:
        line.append(" " * bar_cells, style=f"on {color}")
        room = available_cells - last_cell - 1
        if room > 0:
            line.append(" " + label["text"][:room], style="bold")

    return line
