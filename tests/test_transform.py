# SPDX-License-Identifier: MIT

import time
from copy import deepcopy
from typing import Any

import pytest
from factories import record

from ganttline.model.record import Accessors, default_accessors
from ganttline.service.transform import (
    TimelineTransform,
    TransformCancelledError,
    build_timeline,
    is_renderable,
)


def many_records(count: int) -> list[dict[str, Any]]:
    return [
        record(
            f"r{index}",
            start=1704067200000 + index * 60000,
            end=1704067200000 + index * 60000 + 30 * 60000,
            parent_id=f"r{index - 1}" if index % 7 == 3 else None,
        )
        for index in range(count)
    ]


class TestBuildTimeline:
    def test_rows_and_intervals(self, grouped_records: list[dict[str, Any]]) -> None:
        result = build_timeline(grouped_records)

        assert result["error"] is None
        assert [(row["name"], row["is_group"]) for row in result["rows"]] == [
            ("Parent", True),
            ("Child 1", False),
            ("Parent", False),
            ("Child 2", False),
            ("Orphan", False),
        ]
        assert [i["record_id"] for i in result["intervals"]] == [
            "c1",
            "p",
            "c2",
            "orphan",
        ]
        assert [i["row_index"] for i in result["intervals"]] == [1, 2, 3, 4]
        assert {index: r["id"] for index, r in result["lookup"].items()} == {
            1: "c1",
            2: "p",
            3: "c2",
            4: "orphan",
        }

    def test_row_count_is_valid_records_plus_present_parents(
        self, grouped_records: list[dict[str, Any]]
    ) -> None:
        result = build_timeline(grouped_records)

        valid_records = 4
        present_parents = 1
        assert len(result["rows"]) == valid_records + present_parents

    def test_row_indices_are_dense(self) -> None:
        result = build_timeline(many_records(250))

        indices = [row["index"] for row in result["rows"]]
        assert indices == list(range(len(result["rows"])))

    def test_group_rows_precede_their_children(self) -> None:
        records = many_records(250)
        result = build_timeline(records)

        groups = [row for row in result["rows"] if row["is_group"]]
        assert len(groups) == len([r for r in records if "parent_id" in r])
        for interval in result["intervals"]:
            source = result["lookup"][interval["row_index"]]
            if "parent_id" in source:
                group_row = result["rows"][interval["row_index"] - 1]
                assert group_row["is_group"]
                assert group_row["index"] < interval["row_index"]

    def test_invalid_record_alone_yields_nothing(self) -> None:
        result = build_timeline([record("bad", start="not-a-date", end="2024-01-01")])

        assert result["rows"] == []
        assert result["intervals"] == []
        assert not is_renderable(result)

    def test_invalid_child_does_not_emit_group_row(self) -> None:
        records = [record("p"), record("c", start=None, parent_id="p")]
        result = build_timeline(records)

        assert [row["is_group"] for row in result["rows"]] == [False]

    def test_sort_key_orders_rows(self) -> None:
        records = [
            record("c", sort_key=3, display_name="key 3"),
            record("a", sort_key=1, display_name="key 1 first"),
            record("b", sort_key=1, display_name="key 1 second"),
        ]
        result = build_timeline(records, accessors=default_accessors(sort_key=True))

        assert [row["name"] for row in result["rows"]] == [
            "key 1 first",
            "key 1 second",
            "key 3",
        ]
        assert [r["id"] for r in records] == ["c", "a", "b"]

    def test_group_row_at_first_child_in_sort_order(self) -> None:
        records = [
            record("p", sort_key=0, display_name="P"),
            record("late", sort_key=5, parent_id="p"),
            record("early", sort_key=2, parent_id="p"),
        ]
        result = build_timeline(records, accessors=default_accessors(sort_key=True))

        assert [row["name"] for row in result["rows"]] == [
            "P",
            "P",
            "Item early",
            "Item late",
        ]
        assert [row["is_group"] for row in result["rows"]] == [False, True, False, False]

    def test_identical_inputs_give_identical_outputs(
        self, grouped_records: list[dict[str, Any]]
    ) -> None:
        snapshot = deepcopy(grouped_records)

        first = build_timeline(grouped_records)
        second = build_timeline(grouped_records)

        assert first == second
        assert grouped_records == snapshot

    def test_clock_relative_values_are_dropped(self) -> None:
        records = [
            record("a", start="now", end="2099-01-01T00:00:00Z"),
            record("b", start="10:30", end="11:00"),
            record("c", start="2024-01-01", end="2024-01-01T00:30:00Z"),
        ]

        first = build_timeline(records)
        time.sleep(0.01)
        second = build_timeline(records)

        assert first == second
        assert [row["name"] for row in first["rows"]] == ["Item c"]
        assert first["intervals"][0]["start_time"] == 1704067200000
        assert first["intervals"][0]["duration_minutes"] == 30

    def test_layout_is_computed(self, grouped_records: list[dict[str, Any]]) -> None:
        result = build_timeline(grouped_records)

        layout = result["layout"]
        assert layout is not None
        assert layout["canvas_height"] == 400
        assert layout["row_scroll_window_end"] == 100
        assert layout["time_window"] is not None
        # 09:00 to 12:00, padded by 9 minutes on each side
        assert layout["time_window"]["min"] == 1704099600000 - 9 * 60000
        assert layout["time_window"]["max"] == 1704110400000 + 9 * 60000
        assert is_renderable(result)

    def test_fixed_window_is_used_verbatim(
        self, grouped_records: list[dict[str, Any]]
    ) -> None:
        window = {"min": 1704067200000.0, "max": 1704153600000.0}
        result = build_timeline(grouped_records, window=window)  # type: ignore[arg-type]

        assert result["layout"] is not None
        assert result["layout"]["time_window"] == window
        # One day shown, three hours of data
        assert result["layout"]["advisories"] == []

    def test_accessor_failure_fails_the_whole_invocation(self) -> None:
        def broken(item: Any) -> Any:
            raise RuntimeError("attribute unavailable")

        accessors: Accessors = default_accessors()
        accessors["color"] = broken

        result = build_timeline([record("a"), record("b")], accessors=accessors)

        assert result["error"] == "Chart render error: attribute unavailable"
        assert result["rows"] == []
        assert result["intervals"] == []
        assert result["lookup"] == {}
        assert result["layout"] is None
        assert not is_renderable(result)


class TestProgress:
    def test_empty_input_reports_zero(self) -> None:
        seen: list[int] = []
        result = build_timeline([], on_progress=seen.append)

        assert seen == [0]
        assert result["progress_events"] == [0]
        assert result["rows"] == []

    def test_small_input(self, grouped_records: list[dict[str, Any]]) -> None:
        result = build_timeline(grouped_records)

        assert result["progress_events"] == [10, 10, 35, 40, 40, 100]

    def test_checkpoints_every_hundred_records(self) -> None:
        seen: list[int] = []
        build_timeline(many_records(250), on_progress=seen.append)

        assert seen == [10, 10, 18, 26, 35, 40, 40, 60, 80, 100]
        assert seen == sorted(seen)


class TestChunkedExecution:
    def test_stepping_matches_run(self) -> None:
        records = many_records(345)

        stepped = TimelineTransform(records)
        progress_values = []
        while not stepped.done:
            progress_values.append(stepped.step())

        assert stepped.result() == TimelineTransform(records).run()
        assert progress_values == sorted(progress_values)
        assert progress_values[-1] == 100
        # four grouping chunks and four sequencing chunks
        assert len(progress_values) == 8

    def test_result_before_completion_raises(self) -> None:
        transform = TimelineTransform(many_records(150))
        transform.step()

        with pytest.raises(RuntimeError):
            transform.result()

    def test_cancellation_is_all_or_nothing(self) -> None:
        calls = {"count": 0}

        def is_cancelled() -> bool:
            calls["count"] += 1
            return calls["count"] > 3

        transform = TimelineTransform(many_records(500), is_cancelled=is_cancelled)
        with pytest.raises(TransformCancelledError):
            transform.run()

        assert transform.intervals == []
        assert transform.lookup == {}
        with pytest.raises(TransformCancelledError):
            transform.step()
        with pytest.raises(RuntimeError):
            transform.result()

    def test_build_timeline_propagates_cancellation(self) -> None:
        with pytest.raises(TransformCancelledError):
            build_timeline(many_records(10), is_cancelled=lambda: True)
