# SPDX-License-Identifier: MIT

from typing import Any, Optional

from ganttline.model.hierarchy import Hierarchy
from ganttline.model.record import Accessors, read_attribute
from ganttline.model.record_id import RecordId, to_record_id


def get_hierarchy_template() -> Hierarchy:
    return {"records_by_id": {}, "children_by_parent": {}}


def resolve_parent_id(accessors: Accessors, record: Any) -> Optional[RecordId]:
    """Return the parent key of a record, or None when it declares no parent."""
    parent_id = read_attribute(accessors, "parent_id", record)
    if not parent_id:
        return None
    return to_record_id(parent_id)


def add_to_hierarchy(hierarchy: Hierarchy, accessors: Accessors, record: Any) -> None:
    hierarchy["records_by_id"][to_record_id(accessors["id"](record))] = record

    parent_id = resolve_parent_id(accessors, record)
    if parent_id is not None:
        hierarchy["children_by_parent"].setdefault(parent_id, []).append(record)


def build_hierarchy(accessors: Accessors, records: list[Any]) -> Hierarchy:
    hierarchy = get_hierarchy_template()
    for record in records:
        add_to_hierarchy(hierarchy, accessors, record)
    return hierarchy
