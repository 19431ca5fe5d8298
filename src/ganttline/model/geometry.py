# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

LabelPlacement = Literal["inside", "above"]


class Point(TypedDict):
    x: float
    y: float


class Rect(TypedDict):
    x: float
    y: float
    width: float
    height: float


class BarLabel(TypedDict):
    text: str
    x: float
    y: float
    fill: str
    align: str
    placement: LabelPlacement


class BarGeometry(TypedDict):
    rect: Rect
    bar_width: float
    bar_height: float
    label: BarLabel
