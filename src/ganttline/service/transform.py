# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Literal, Optional

from ganttline.color import DEFAULT_BAR_COLOR
from ganttline.configuration import (
    CHART_CONFIG,
    Configuration,
    get_default_configuration,
)
from ganttline.model.hierarchy import Hierarchy
from ganttline.model.interval import Interval
from ganttline.model.layout import TimeWindow
from ganttline.model.record import Accessors, default_accessors
from ganttline.model.timeline import TimelineResult, TransformOutput
from ganttline.service.hierarchy import add_to_hierarchy, get_hierarchy_template
from ganttline.service.layout import calculate_layout
from ganttline.service.progress import ProgressCallback, ProgressReporter
from ganttline.service.sequence import RowSequencer, order_records
from ganttline.service.series import build_interval
from ganttline.service.validate import validate_record

logger = logging.getLogger(__name__)

Phase = Literal["grouping", "sequencing", "done", "cancelled"]


class TransformCancelledError(Exception):
    """The host cancelled the transform. No partial result is available."""


class TimelineTransform:
    """
    One invocation of the record to rows/intervals transform.

    Work is split into chunks of 100 records. step() runs one chunk and returns the
    progress value, so a host with a single UI thread can yield between chunks;
    run() loops until done. Running it in chunks or in one go gives the same
    result. Cancellation is polled before each chunk and is all-or-nothing: once
    cancelled, the transform raises TransformCancelledError and never exposes rows.

    The input list is copied up front and never reordered or mutated.
    """

    def __init__(
        self,
        records: list[Any],
        accessors: Optional[Accessors] = None,
        default_color: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.records = list(records)
        self.accessors = accessors if accessors is not None else default_accessors()
        self.default_color = default_color or DEFAULT_BAR_COLOR
        self.is_cancelled = is_cancelled
        self.chunk_size = CHART_CONFIG["CHUNK_SIZE"]

        self.progress = ProgressReporter(on_progress)
        self.hierarchy: Hierarchy = get_hierarchy_template()
        self.ordered: list[Any] = []
        self.sequencer = RowSequencer(self.accessors, self.hierarchy)
        self.intervals: list[Interval] = []
        self.lookup: dict[int, Any] = {}
        self.position = 0

        self.phase: Phase
        if not self.records:
            self.progress.report_empty()
            self.phase = "done"
        else:
            self.progress.report(CHART_CONFIG["PROGRESS_STEPS"]["START"])
            self.phase = "grouping"

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def done(self) -> bool:
        return self.phase == "done"

    def step(self) -> int:
        if self.phase == "cancelled":
            raise TransformCancelledError()
        if self.done:
            return self.progress.value

        if self.is_cancelled is not None and self.is_cancelled():
            self.phase = "cancelled"
            self.__discard()
            raise TransformCancelledError()

        end = min(self.position + self.chunk_size, self.total)
        if self.phase == "grouping":
            self.__group(self.position, end)
        else:
            self.__sequence(self.position, end)
        self.position = end

        if self.position == self.total:
            self.__finish_phase()

        return self.progress.value

    def run(self) -> TransformOutput:
        while not self.done:
            self.step()
        return self.result()

    def result(self) -> TransformOutput:
        if not self.done:
            raise RuntimeError("transform has not completed")
        return {
            "rows": self.sequencer.rows,
            "intervals": self.intervals,
            "lookup": self.lookup,
            "hierarchy": self.hierarchy,
        }

    def __group(self, start: int, end: int) -> None:
        for index in range(start, end):
            if index % self.chunk_size == 0:
                self.progress.report_grouping(index, self.total)
            add_to_hierarchy(self.hierarchy, self.accessors, self.records[index])

    def __sequence(self, start: int, end: int) -> None:
        for index in range(start, end):
            if index % self.chunk_size == 0:
                self.progress.report_transform(index, self.total)
            record = self.ordered[index]

            span = validate_record(self.accessors, record)
            if span is None:
                continue

            row = self.sequencer.emit(record)
            self.lookup[row["index"]] = record
            self.intervals.append(
                build_interval(self.accessors, record, row, span, self.default_color)
            )

    def __finish_phase(self) -> None:
        steps = CHART_CONFIG["PROGRESS_STEPS"]
        if self.phase == "grouping":
            self.progress.report(steps["SORTING"])
            self.ordered = order_records(self.accessors, self.records)
            self.progress.report(steps["TRANSFORM_START"])
            self.phase = "sequencing"
            self.position = 0
        else:
            self.progress.report(steps["COMPLETE"])
            self.phase = "done"

    def __discard(self) -> None:
        self.hierarchy = get_hierarchy_template()
        self.ordered = []
        self.sequencer = RowSequencer(self.accessors, self.hierarchy)
        self.intervals = []
        self.lookup = {}


def get_empty_result(
    error: Optional[str] = None, progress_events: Optional[list[int]] = None
) -> TimelineResult:
    return {
        "rows": [],
        "intervals": [],
        "layout": None,
        "lookup": {},
        "hierarchy": get_hierarchy_template(),
        "progress_events": progress_events if progress_events is not None else [],
        "error": error,
    }


def build_timeline(
    records: list[Any],
    accessors: Optional[Accessors] = None,
    window: Optional[TimeWindow] = None,
    config: Optional[Configuration] = None,
    on_progress: Optional[ProgressCallback] = None,
    is_cancelled: Optional[Callable[[], bool]] = None,
) -> TimelineResult:
    """
    Transform records into rows, intervals and layout parameters.

    This is the error boundary of the engine. An exception raised by an attribute
    accessor fails the whole invocation: it is logged and returned as a single
    error message with every other output empty. Cancellation is not an error and
    propagates to the caller as TransformCancelledError.

    Args:
        records: Host records, in input order
        accessors: Attribute capabilities, mapping keys of SourceRecord by default
        window: Fixed time window in epoch milliseconds, used without padding
        config: Layout configuration, the defaults when omitted
        on_progress: Receives each progress value in [0, 100]
        is_cancelled: Polled every 100 records
    """
    if config is None:
        config = get_default_configuration()

    transform: Optional[TimelineTransform] = None
    try:
        transform = TimelineTransform(
            records,
            accessors=accessors,
            default_color=config["default_color"],
            on_progress=on_progress,
            is_cancelled=is_cancelled,
        )
        output = transform.run()
        layout = calculate_layout(
            output["intervals"],
            len(output["rows"]),
            min_row_height=config["min_row_height"],
            window=window,
            container_width=config["container_width"],
        )
    except TransformCancelledError:
        raise
    except Exception as e:
        logger.error("Timeline transform failed: %s", e, exc_info=True)
        progress_events = transform.progress.events if transform is not None else []
        return get_empty_result(
            error=f"Chart render error: {e}", progress_events=list(progress_events)
        )

    return {
        "rows": output["rows"],
        "intervals": output["intervals"],
        "layout": layout,
        "lookup": output["lookup"],
        "hierarchy": output["hierarchy"],
        "progress_events": list(transform.progress.events),
        "error": None,
    }


def is_renderable(result: TimelineResult) -> bool:
    return (
        result["error"] is None
        and len(result["rows"]) > 0
        and len(result["intervals"]) > 0
        and result["layout"] is not None
        and result["layout"]["time_window"] is not None
    )
