# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from ganttline.model.record_id import RecordId


class Interval(TypedDict):
    record_id: RecordId
    row_index: int
    name: str
    start_time: int
    end_time: int
    duration_minutes: int
    color: str
    label: str
    tooltip_content: Optional[str]
    start_str: str
    end_str: str
