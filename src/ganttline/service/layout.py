# SPDX-License-Identifier: MIT

import logging
import math
from typing import Any, Optional

from ganttline.configuration import CHART_CONFIG
from ganttline.model.interval import Interval
from ganttline.model.layout import LayoutParameters, TimeWindow
from ganttline.time import parse_epoch_ms

logger = logging.getLogger(__name__)


def calculate_time_range(intervals: list[Interval]) -> Optional[TimeWindow]:
    """
    Data derived time window: the extent of all intervals, padded on both sides
    by 5% of its span. None for an empty series, which must not be rendered.
    """
    if not intervals:
        return None

    min_time = min(interval["start_time"] for interval in intervals)
    max_time = max(interval["end_time"] for interval in intervals)
    padding = (max_time - min_time) * CHART_CONFIG["TIME_PADDING_PERCENT"]
    return {"min": min_time - padding, "max": max_time + padding}


def data_extent(intervals: list[Interval]) -> Optional[TimeWindow]:
    if not intervals:
        return None
    return {
        "min": min(interval["start_time"] for interval in intervals),
        "max": max(interval["end_time"] for interval in intervals),
    }


def window_advisory(
    window: TimeWindow, intervals: list[Interval]
) -> Optional[str]:
    """
    Describe a supplied window that is far wider than the data it shows.

    The ratio of window length to data length must exceed 10 to be reported.
    Zero length data counts as exceeding it whenever the window has any length.
    """
    extent = data_extent(intervals)
    if extent is None:
        return None

    window_span = window["max"] - window["min"]
    data_span = extent["max"] - extent["min"]
    threshold = CHART_CONFIG["WINDOW_RATIO_ADVISORY"]

    if data_span <= 0:
        exceeded = window_span > 0
        ratio = math.inf
    else:
        ratio = window_span / data_span
        exceeded = ratio > threshold

    if not exceeded:
        return None
    if math.isinf(ratio):
        return "Fixed time window is wider than the data, which spans a single instant"
    return (
        f"Fixed time window is {ratio:.1f}x wider than the data extent "
        f"(advisory threshold {threshold:g}x)"
    )


def calculate_chart_height(row_count: int, min_row_height: int) -> int:
    return max(
        CHART_CONFIG["MIN_HEIGHT"],
        min(
            CHART_CONFIG["MAX_HEIGHT"],
            row_count * min_row_height + CHART_CONFIG["FIXED_MARGIN"],
        ),
    )


def calculate_row_scroll_window_end(row_count: int) -> float:
    """Percentage of the rows initially visible; all of them up to ten rows."""
    max_visible_rows = CHART_CONFIG["MAX_VISIBLE_ROWS"]
    if row_count > max_visible_rows:
        return max_visible_rows / row_count * 100
    return 100.0


def row_label_width(container_width: Optional[int] = None) -> int:
    """Width for category axis labels, 15% of the container less 20px."""
    if not container_width:
        return CHART_CONFIG["DEFAULT_ROW_LABEL_WIDTH"]
    return math.floor(container_width * 0.15) - 20


def calculate_layout(
    intervals: list[Interval],
    row_count: int,
    min_row_height: int = CHART_CONFIG["DEFAULT_MIN_ROW_HEIGHT"],
    window: Optional[TimeWindow] = None,
    container_width: Optional[int] = None,
) -> LayoutParameters:
    """
    Compute the layout parameters for one render.

    A caller supplied window is used verbatim with no padding. Otherwise the
    window is derived from the data. Advisories are non-fatal and rendering
    goes ahead regardless.
    """
    advisories: list[str] = []

    time_window: Optional[TimeWindow]
    if window is not None:
        time_window = {"min": window["min"], "max": window["max"]}
        advisory = window_advisory(time_window, intervals)
        if advisory is not None:
            logger.warning(advisory)
            advisories.append(advisory)
    else:
        time_window = calculate_time_range(intervals)

    return {
        "time_window": time_window,
        "canvas_height": calculate_chart_height(row_count, min_row_height),
        "row_scroll_window_end": calculate_row_scroll_window_end(row_count),
        "row_label_width": row_label_width(container_width),
        "advisories": advisories,
    }


def resolve_window(start: Any, end: Any) -> Optional[TimeWindow]:
    """
    Build a fixed window from two raw bounds.

    Both bounds must parse, otherwise there is no fixed window and the layout falls
    back to the data derived one.
    """
    start_time = parse_epoch_ms(start)
    end_time = parse_epoch_ms(end)
    if start_time is None or end_time is None:
        return None
    return {"min": start_time, "max": end_time}
