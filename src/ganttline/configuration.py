# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import platformdirs

from ganttline.color import DEFAULT_BAR_COLOR

APP_NAME = "ganttline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class ProgressSteps(TypedDict):
    START: int
    GROUPING_END: int
    SORTING: int
    TRANSFORM_START: int
    TRANSFORM_END: int
    COMPLETE: int


class ChartConfig(TypedDict):
    MIN_HEIGHT: int
    MAX_HEIGHT: int
    FIXED_MARGIN: int
    MAX_VISIBLE_ROWS: int
    DEFAULT_MIN_ROW_HEIGHT: int
    DEFAULT_MIN_BAR_WIDTH: int
    TIME_PADDING_PERCENT: float
    WINDOW_RATIO_ADVISORY: float
    BAR_HEIGHT_FRACTION: float
    LABEL_CHAR_WIDTH: int
    LABEL_PADDING: int
    LABEL_OFFSET_ABOVE: int
    DEFAULT_ROW_LABEL_WIDTH: int
    CHUNK_SIZE: int
    PROGRESS_STEPS: ProgressSteps


# Visual parity constants, keep them exactly as they are.
CHART_CONFIG: ChartConfig = {
    "MIN_HEIGHT": 400,
    "MAX_HEIGHT": 800,
    "FIXED_MARGIN": 100,
    "MAX_VISIBLE_ROWS": 10,
    "DEFAULT_MIN_ROW_HEIGHT": 40,
    "DEFAULT_MIN_BAR_WIDTH": 2,
    "TIME_PADDING_PERCENT": 0.05,
    "WINDOW_RATIO_ADVISORY": 10.0,
    "BAR_HEIGHT_FRACTION": 0.6,
    "LABEL_CHAR_WIDTH": 6,
    "LABEL_PADDING": 10,
    "LABEL_OFFSET_ABOVE": 5,
    "DEFAULT_ROW_LABEL_WIDTH": 150,
    "CHUNK_SIZE": 100,
    "PROGRESS_STEPS": {
        "START": 10,
        "GROUPING_END": 30,
        "SORTING": 35,
        "TRANSFORM_START": 40,
        "TRANSFORM_END": 90,
        "COMPLETE": 100,
    },
}


class Configuration(TypedDict):
    min_row_height: int
    min_bar_width: int
    default_color: str
    time_format: str
    container_width: Optional[int]
    show_header: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "min_row_height": CHART_CONFIG["DEFAULT_MIN_ROW_HEIGHT"],
        "min_bar_width": CHART_CONFIG["DEFAULT_MIN_BAR_WIDTH"],
        "default_color": DEFAULT_BAR_COLOR,
        "time_format": "HH:mm:ss",
        "container_width": None,
        "show_header": True,
    }
