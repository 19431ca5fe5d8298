# SPDX-License-Identifier: MIT

from typing import TypedDict


class Row(TypedDict):
    index: int
    name: str
    axis_label: str
    is_group: bool
