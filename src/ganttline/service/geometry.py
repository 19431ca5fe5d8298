# SPDX-License-Identifier: MIT

from typing import Optional

from ganttline.color import LABEL_ABOVE_COLOR, LABEL_INSIDE_COLOR
from ganttline.configuration import CHART_CONFIG
from ganttline.model.geometry import BarGeometry, BarLabel, Point, Rect
from ganttline.model.layout import TimeWindow


def clip_rect_by_rect(target: Rect, bounds: Rect) -> Optional[Rect]:
    """Intersect target with bounds; None when nothing with an area is left."""
    x = max(target["x"], bounds["x"])
    x2 = min(target["x"] + target["width"], bounds["x"] + bounds["width"])
    y = max(target["y"], bounds["y"])
    y2 = min(target["y"] + target["height"], bounds["y"] + bounds["height"])
    if x2 <= x or y2 <= y:
        return None
    return {"x": x, "y": y, "width": x2 - x, "height": y2 - y}


def estimate_label_width(text: str) -> int:
    # Fixed average glyph width, not a text measurement
    return len(text) * CHART_CONFIG["LABEL_CHAR_WIDTH"]


def should_place_label_above(bar_width: float, text: str) -> bool:
    return bar_width < estimate_label_width(text) + CHART_CONFIG["LABEL_PADDING"]


def place_label(
    text: str, pixel_start: Point, bar_width: float, bar_height: float
) -> BarLabel:
    x = pixel_start["x"] + bar_width / 2
    if should_place_label_above(bar_width, text):
        return {
            "text": text,
            "x": x,
            "y": pixel_start["y"] - bar_height / 2 - CHART_CONFIG["LABEL_OFFSET_ABOVE"],
            "fill": LABEL_ABOVE_COLOR,
            "align": "center",
            "placement": "above",
        }
    return {
        "text": text,
        "x": x,
        "y": pixel_start["y"],
        "fill": LABEL_INSIDE_COLOR,
        "align": "center",
        "placement": "inside",
    }


def compute_bar_geometry(
    pixel_start: Point,
    pixel_end: Point,
    row_pixel_height: float,
    plot_rect: Rect,
    label: str,
    min_bar_width: Optional[float] = None,
) -> Optional[BarGeometry]:
    """
    Lay out one interval bar for the current frame.

    The coordinates come from the host's coordinate mapper and are only valid
    for this render pass. The bar is at least min_bar_width pixels wide so that
    zero length intervals remain visible, takes 60% of the row height, and is
    clipped to the plot rectangle. Returns None when the bar is entirely off
    screen.

    Args:
        pixel_start: Pixel centre of the interval start on its row
        pixel_end: Pixel centre of the interval end on its row
        row_pixel_height: Height of one row band in pixels
        plot_rect: The visible plotting rectangle
        label: Resolved bar label of the interval
        min_bar_width: Minimum drawn width, 2px when not configured
    """
    if not min_bar_width:
        min_bar_width = CHART_CONFIG["DEFAULT_MIN_BAR_WIDTH"]

    bar_width = max(pixel_end["x"] - pixel_start["x"], min_bar_width)
    bar_height = row_pixel_height * CHART_CONFIG["BAR_HEIGHT_FRACTION"]

    rect = clip_rect_by_rect(
        {
            "x": pixel_start["x"],
            "y": pixel_start["y"] - bar_height / 2,
            "width": bar_width,
            "height": bar_height,
        },
        plot_rect,
    )
    if rect is None:
        return None

    return {
        "rect": rect,
        "bar_width": bar_width,
        "bar_height": bar_height,
        "label": place_label(label, pixel_start, bar_width, bar_height),
    }


class LinearCoordinateMapper:
    """
    Maps (time, row index) to pixel centres inside a plot rectangle.

    Time is linear across the window. Rows are laid out top down starting at
    first_row, and only scroll_window_end percent of them share the plot height,
    matching the initial state of a vertical scroll control.
    """

    def __init__(
        self,
        plot_rect: Rect,
        time_window: TimeWindow,
        row_count: int,
        scroll_window_end: float = 100.0,
        first_row: int = 0,
    ) -> None:
        self.plot_rect = plot_rect
        self.time_window = time_window
        self.row_count = row_count
        self.first_row = first_row
        self.visible_rows = max(row_count * scroll_window_end / 100, 1)

    @property
    def row_height(self) -> float:
        return self.plot_rect["height"] / self.visible_rows

    def x_for_time(self, time_ms: float) -> float:
        span = self.time_window["max"] - self.time_window["min"]
        if span <= 0:
            return self.plot_rect["x"]
        fraction = (time_ms - self.time_window["min"]) / span
        return self.plot_rect["x"] + fraction * self.plot_rect["width"]

    def y_for_row(self, row_index: int) -> float:
        return self.plot_rect["y"] + (row_index - self.first_row + 0.5) * self.row_height

    def coord(self, time_ms: float, row_index: int) -> Point:
        return {"x": self.x_for_time(time_ms), "y": self.y_for_row(row_index)}
