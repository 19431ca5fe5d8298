# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from ganttline.color import CHILD_ROW_STYLE, GROUP_ROW_STYLE
from ganttline.model.timeline import TimelineResult
from ganttline.time import format_time_label
from ganttline.view.header import header


def layout_view(
    console: Console,
    source_name: str,
    result: TimelineResult,
    time_format: str = "HH:mm:ss",
) -> None:
    """
    Print the rows, intervals and layout parameters computed for a record file.

    Args:
        console: Console to print to
        source_name: The file the records were loaded from
        result: Output of build_timeline
        time_format: Pendulum format tokens for the time window bounds
    """
    header(console, source_name, "layout")

    if result["error"] is not None:
        console.print(f"\n[red]{result['error']}[/red]\n")
        return

    rows_table = Table(title="Rows")
    rows_table.add_column("index", justify="right")
    rows_table.add_column("name")
    rows_table.add_column("group")
    for row in result["rows"]:
        style = GROUP_ROW_STYLE if row["is_group"] else CHILD_ROW_STYLE
        rows_table.add_row(
            str(row["index"]),
            row["axis_label"],
            "✓" if row["is_group"] else "",
            style=style,
        )

    intervals_table = Table(title="Intervals")
    intervals_table.add_column("row", justify="right")
    intervals_table.add_column("id")
    intervals_table.add_column("start")
    intervals_table.add_column("end")
    intervals_table.add_column("minutes", justify="right")
    intervals_table.add_column("label")
    intervals_table.add_column("color")
    for interval in result["intervals"]:
        intervals_table.add_row(
            str(interval["row_index"]),
            interval["record_id"],
            interval["start_str"],
            interval["end_str"],
            str(interval["duration_minutes"]),
            interval["label"],
            interval["color"],
        )

    console.print()
    console.print(rows_table)
    console.print(intervals_table)

    layout = result["layout"]
    if layout is None:
        return

    layout_table = Table(title="Layout")
    layout_table.add_column("Setting", style="cyan")
    layout_table.add_column("Value", style="magenta")
    if layout["time_window"] is None:
        layout_table.add_row("time_window", "None (nothing to render)")
    else:
        layout_table.add_row(
            "time_window",
            f"{format_time_label(layout['time_window']['min'], time_format)} → "
            f"{format_time_label(layout['time_window']['max'], time_format)}",
        )
    layout_table.add_row("canvas_height", f"{layout['canvas_height']}px")
    layout_table.add_row(
        "row_scroll_window_end", f"{layout['row_scroll_window_end']:.2f}%"
    )
    layout_table.add_row("row_label_width", f"{layout['row_label_width']}px")
    console.print(layout_table)

    for advisory in layout["advisories"]:
        console.print(f"[yellow]⚠ {advisory}[/yellow]")
    console.print()
