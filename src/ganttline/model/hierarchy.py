# SPDX-License-Identifier: MIT

from typing import Any, TypedDict

from ganttline.model.record_id import RecordId


class Hierarchy(TypedDict):
    """
    Bookkeeping built in one pass over the full input.

    records_by_id: record id -> record, last occurrence wins on duplicate ids
    children_by_parent: parent id -> child records in input order, including
        parents that are not present in the input
    """

    records_by_id: dict[RecordId, Any]
    children_by_parent: dict[RecordId, list[Any]]
