# SPDX-License-Identifier: MIT

from typing import Any, Optional

from ganttline.color import DEFAULT_BAR_COLOR
from ganttline.model.interval import Interval
from ganttline.model.record import Accessors, read_attribute
from ganttline.model.record_id import to_record_id
from ganttline.model.row import Row
from ganttline.service.validate import ValidSpan
from ganttline.time import duration_minutes, epoch_ms_to_display_str


def duration_label(minutes: int) -> str:
    return f"{minutes}m"


def _optional_str(value: Any) -> Optional[str]:
    if not value:
        return None
    return str(value)


def build_interval(
    accessors: Accessors,
    record: Any,
    row: Row,
    span: ValidSpan,
    default_color: str = DEFAULT_BAR_COLOR,
) -> Interval:
    """
    Bind a validated record to its own row.

    The label falls back to the rounded duration ("42m") and the color to
    default_color when the attribute is not configured or resolves empty.
    """
    minutes = duration_minutes(span["start_time"], span["end_time"])
    bar_label = _optional_str(read_attribute(accessors, "bar_label", record))

    return {
        "record_id": to_record_id(accessors["id"](record)),
        "row_index": row["index"],
        "name": row["name"],
        "start_time": span["start_time"],
        "end_time": span["end_time"],
        "duration_minutes": minutes,
        "color": _optional_str(read_attribute(accessors, "color", record))
        or default_color,
        "label": bar_label if bar_label is not None else duration_label(minutes),
        "tooltip_content": _optional_str(
            read_attribute(accessors, "tooltip_content", record)
        ),
        "start_str": epoch_ms_to_display_str(span["start_time"]),
        "end_str": epoch_ms_to_display_str(span["end_time"]),
    }


def format_default_tooltip(interval: Interval) -> str:
    """Tooltip text for an interval, preferring the configured tooltip content."""
    if interval["tooltip_content"] is not None:
        return interval["tooltip_content"]
    return "\n".join(
        [
            interval["name"],
            f"Start: {interval['start_str']}",
            f"End: {interval['end_str']}",
            f"Duration: {interval['duration_minutes']} min",
        ]
    )
