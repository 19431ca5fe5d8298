# SPDX-License-Identifier: MIT

import math
from typing import Callable, Optional, TypeAlias

from ganttline.configuration import CHART_CONFIG

ProgressCallback: TypeAlias = Callable[[int], None]


class ProgressReporter:
    """
    Collects the progress values of one transform and forwards them to the host.

    Values never go backwards: a report lower than the last one is recorded as the
    last value again.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None) -> None:
        self.callback = callback
        self.events: list[int] = []

    @property
    def value(self) -> int:
        if not self.events:
            return 0
        return self.events[-1]

    def report(self, value: int) -> None:
        if self.events:
            value = max(value, self.events[-1])
        value = min(max(value, 0), 100)
        self.events.append(value)
        if self.callback is not None:
            self.callback(value)

    def report_empty(self) -> None:
        self.events.append(0)
        if self.callback is not None:
            self.callback(0)

    def report_grouping(self, index: int, total: int) -> None:
        steps = CHART_CONFIG["PROGRESS_STEPS"]
        self.report(
            _interpolate(steps["START"], steps["GROUPING_END"], index, total)
        )

    def report_transform(self, index: int, total: int) -> None:
        steps = CHART_CONFIG["PROGRESS_STEPS"]
        self.report(
            _interpolate(steps["TRANSFORM_START"], steps["TRANSFORM_END"], index, total)
        )


def _interpolate(start: int, end: int, index: int, total: int) -> int:
    return start + math.floor(index / total * (end - start))
