# SPDX-License-Identifier: MIT

from typing import Any

from factories import record

from ganttline.model.record import default_accessors
from ganttline.service.hierarchy import build_hierarchy, resolve_parent_id


def test_indexes_records_and_children(grouped_records: list[dict[str, Any]]) -> None:
    hierarchy = build_hierarchy(default_accessors(), grouped_records)

    assert set(hierarchy["records_by_id"]) == {"c1", "p", "c2", "orphan", "bad"}
    assert [child["id"] for child in hierarchy["children_by_parent"]["p"]] == [
        "c1",
        "c2",
    ]
    # Bookkeeping only, dangling references are kept
    assert [child["id"] for child in hierarchy["children_by_parent"]["missing"]] == [
        "orphan"
    ]


def test_ids_are_compared_as_strings() -> None:
    records = [record(7), record("c", parent_id=7)]  # type: ignore[arg-type]
    hierarchy = build_hierarchy(default_accessors(), records)

    assert "7" in hierarchy["records_by_id"]
    assert "7" in hierarchy["children_by_parent"]


def test_parent_attribute_not_configured(grouped_records: list[dict[str, Any]]) -> None:
    hierarchy = build_hierarchy(default_accessors(parent_id=False), grouped_records)

    assert hierarchy["children_by_parent"] == {}
    assert len(hierarchy["records_by_id"]) == 5


def test_falsy_parent_ids_mean_no_parent() -> None:
    accessors = default_accessors()
    assert resolve_parent_id(accessors, record("a", parent_id="")) is None
    assert resolve_parent_id(accessors, {"id": "a", "parent_id": 0}) is None
    assert resolve_parent_id(accessors, record("a")) is None
    assert resolve_parent_id(accessors, record("a", parent_id="p")) == "p"
