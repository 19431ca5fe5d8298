# SPDX-License-Identifier: MIT

import pytest

from ganttline.model.geometry import Rect
from ganttline.service.geometry import (
    LinearCoordinateMapper,
    clip_rect_by_rect,
    compute_bar_geometry,
    estimate_label_width,
    should_place_label_above,
)

PLOT: Rect = {"x": 0, "y": 0, "width": 1000, "height": 500}


class TestBarGeometry:
    def test_minimum_bar_width(self) -> None:
        geometry = compute_bar_geometry(
            {"x": 100, "y": 50}, {"x": 100.4, "y": 50}, 40, PLOT, "0m", min_bar_width=2
        )

        assert geometry is not None
        assert geometry["bar_width"] == 2
        assert geometry["rect"]["width"] == 2
        assert geometry["rect"]["x"] == 100
        assert geometry["rect"]["y"] == pytest.approx(38)
        assert geometry["rect"]["height"] == pytest.approx(24)

    def test_default_minimum_when_not_configured(self) -> None:
        geometry = compute_bar_geometry(
            {"x": 100, "y": 50}, {"x": 100, "y": 50}, 40, PLOT, "0m", min_bar_width=0
        )

        assert geometry is not None
        assert geometry["bar_width"] == 2

    def test_narrow_bar_puts_label_above(self) -> None:
        geometry = compute_bar_geometry(
            {"x": 100, "y": 50}, {"x": 120, "y": 50}, 40, PLOT, "30m"
        )

        assert geometry is not None
        label = geometry["label"]
        assert label["placement"] == "above"
        assert label["fill"] == "#333"
        assert label["x"] == 110
        assert label["y"] == pytest.approx(50 - 12 - 5)

    def test_wide_bar_puts_label_inside(self) -> None:
        geometry = compute_bar_geometry(
            {"x": 100, "y": 50}, {"x": 300, "y": 50}, 40, PLOT, "30m"
        )

        assert geometry is not None
        label = geometry["label"]
        assert label["placement"] == "inside"
        assert label["fill"] == "#fff"
        assert label["align"] == "center"
        assert (label["x"], label["y"]) == (200, 50)

    def test_off_screen_bar_is_not_drawn(self) -> None:
        assert (
            compute_bar_geometry(
                {"x": 2000, "y": 50}, {"x": 2100, "y": 50}, 40, PLOT, "1m"
            )
            is None
        )

    def test_partially_visible_bar_is_clipped(self) -> None:
        geometry = compute_bar_geometry(
            {"x": -50, "y": 50}, {"x": 50, "y": 50}, 40, PLOT, "1m"
        )

        assert geometry is not None
        assert geometry["rect"]["x"] == 0
        assert geometry["rect"]["width"] == 50
        # Label placement uses the unclipped width
        assert geometry["bar_width"] == 100


def test_label_width_heuristic() -> None:
    assert estimate_label_width("120m") == 24
    # 24 + 10 padding
    assert should_place_label_above(33.9, "120m")
    assert not should_place_label_above(34, "120m")


def test_clip_rect_by_rect() -> None:
    assert clip_rect_by_rect({"x": 10, "y": 10, "width": 20, "height": 20}, PLOT) == {
        "x": 10,
        "y": 10,
        "width": 20,
        "height": 20,
    }
    # Touching the edge leaves nothing to draw
    assert clip_rect_by_rect({"x": 1000, "y": 10, "width": 5, "height": 5}, PLOT) is None


class TestLinearCoordinateMapper:
    def test_maps_time_and_rows(self) -> None:
        mapper = LinearCoordinateMapper(
            {"x": 0, "y": 0, "width": 1000, "height": 400},
            {"min": 0, "max": 1000},
            row_count=4,
        )

        assert mapper.row_height == 100
        assert mapper.coord(500, 1) == {"x": 500, "y": 150}

    def test_scroll_window_enlarges_rows(self) -> None:
        mapper = LinearCoordinateMapper(
            {"x": 10, "y": 20, "width": 1000, "height": 400},
            {"min": 0, "max": 1000},
            row_count=4,
            scroll_window_end=50,
        )

        assert mapper.row_height == 200
        assert mapper.coord(0, 0) == {"x": 10, "y": 120}

    def test_zero_length_window(self) -> None:
        mapper = LinearCoordinateMapper(PLOT, {"min": 5, "max": 5}, row_count=1)

        assert mapper.x_for_time(5) == 0
