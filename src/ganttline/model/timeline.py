# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

from ganttline.model.hierarchy import Hierarchy
from ganttline.model.interval import Interval
from ganttline.model.layout import LayoutParameters
from ganttline.model.row import Row


class TransformOutput(TypedDict):
    rows: list[Row]
    intervals: list[Interval]
    # row index -> the record that produced the interval on that row
    lookup: dict[int, Any]
    hierarchy: Hierarchy


class TimelineResult(TypedDict):
    rows: list[Row]
    intervals: list[Interval]
    layout: Optional[LayoutParameters]
    lookup: dict[int, Any]
    hierarchy: Hierarchy
    progress_events: list[int]
    error: Optional[str]
