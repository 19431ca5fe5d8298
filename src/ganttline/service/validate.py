# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

from ganttline.model.record import Accessors
from ganttline.time import parse_epoch_ms


class ValidSpan(TypedDict):
    start_time: int
    end_time: int


def validate_record(accessors: Accessors, record: Any) -> Optional[ValidSpan]:
    """
    Check that a record carries a usable time interval.

    Returns the parsed span in epoch milliseconds, or None when start or end is
    missing or unparseable. Rejection is not an error: the caller drops the
    record and carries on with the batch.
    """
    start_time = parse_epoch_ms(accessors["start"](record))
    if start_time is None:
        return None
    end_time = parse_epoch_ms(accessors["end"](record))
    if end_time is None:
        return None
    return {"start_time": start_time, "end_time": end_time}
