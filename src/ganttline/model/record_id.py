# SPDX-License-Identifier: MIT

from typing import Any, TypeAlias

RecordId: TypeAlias = str


def to_record_id(value: Any) -> RecordId:
    """Keys are compared by their string form, so 7 and "7" name the same record."""
    return str(value)
