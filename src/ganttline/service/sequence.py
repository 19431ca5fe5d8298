# SPDX-License-Identifier: MIT

import math
from typing import Any, Optional

from ganttline.model.hierarchy import Hierarchy
from ganttline.model.record import Accessors, read_attribute
from ganttline.model.record_id import RecordId
from ganttline.model.row import Row
from ganttline.service.hierarchy import resolve_parent_id
from ganttline.service.options import strip_html_tags


def sort_key_value(accessors: Accessors, record: Any) -> float:
    """Numeric sort value of a record; absent or non-numeric values count as 0."""
    value = read_attribute(accessors, "sort_key", record)
    if not value or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def order_records(accessors: Accessors, records: list[Any]) -> list[Any]:
    """
    Return the records in row emission order.

    With a sort key configured this is one stable ascending sort over the whole
    input. Without one it is input order. The input list is never reordered.
    """
    if accessors.get("sort_key") is None:
        return list(records)
    return sorted(records, key=lambda record: sort_key_value(accessors, record))


def display_name(accessors: Accessors, record: Any) -> Optional[str]:
    value = read_attribute(accessors, "display_name", record)
    if not value:
        return None
    return str(value)


def item_row_name(accessors: Accessors, record: Any) -> str:
    row_label = read_attribute(accessors, "row_label", record)
    if row_label:
        return str(row_label)
    name = display_name(accessors, record)
    if name is not None:
        return name
    return f"Item {accessors['id'](record)}"


def group_row_name(accessors: Accessors, parent: Any, parent_id: RecordId) -> str:
    name = display_name(accessors, parent)
    if name is not None:
        return name
    return f"Parent {parent_id}"


def make_row(index: int, name: str, is_group: bool) -> Row:
    return {
        "index": index,
        "name": name,
        "axis_label": strip_html_tags(name),
        "is_group": is_group,
    }


class RowSequencer:
    """
    Assigns dense row indices in emission order.

    A record with a parent present in the input is preceded by one group row for
    that parent, emitted the first time any of its children is sequenced. A parent
    id that names no input record is ignored and the child becomes an ordinary row.
    """

    def __init__(self, accessors: Accessors, hierarchy: Hierarchy) -> None:
        self.accessors = accessors
        self.hierarchy = hierarchy
        self.rows: list[Row] = []
        self.emitted_parents: set[RecordId] = set()

    @property
    def next_index(self) -> int:
        return len(self.rows)

    def emit(self, record: Any) -> Row:
        parent_id = resolve_parent_id(self.accessors, record)
        if parent_id is not None and parent_id not in self.emitted_parents:
            parent = self.hierarchy["records_by_id"].get(parent_id)
            if parent is not None:
                self.rows.append(
                    make_row(
                        self.next_index,
                        group_row_name(self.accessors, parent, parent_id),
                        True,
                    )
                )
                self.emitted_parents.add(parent_id)

        row = make_row(self.next_index, item_row_name(self.accessors, record), False)
        self.rows.append(row)
        return row
