# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class TimeWindow(TypedDict):
    min: float
    max: float


class LayoutParameters(TypedDict):
    # None when there is nothing to draw
    time_window: Optional[TimeWindow]
    canvas_height: int
    row_scroll_window_end: float
    row_label_width: int
    advisories: list[str]
