# SPDX-License-Identifier: MIT

from typing import Any, Callable, NotRequired, Optional, TypeAlias, TypedDict

# Reads one attribute from a host record. A value of None means "not set".
Accessor: TypeAlias = Callable[[Any], Any]


class SourceRecord(TypedDict):
    id: Any
    start: Any
    end: Any
    parent_id: NotRequired[Any]
    sort_key: NotRequired[Any]
    color: NotRequired[Optional[str]]
    tooltip_content: NotRequired[Optional[str]]
    row_label: NotRequired[Optional[str]]
    bar_label: NotRequired[Optional[str]]
    display_name: NotRequired[Optional[str]]


class Accessors(TypedDict):
    """
    The attribute capabilities configured by the host.

    `id`, `start` and `end` are always present. Every other key is optional: leaving
    it out (or setting it to None) means the attribute is not configured, which is
    different from a configured attribute that returns None for one record.
    """

    id: Accessor
    start: Accessor
    end: Accessor
    display_name: NotRequired[Optional[Accessor]]
    parent_id: NotRequired[Optional[Accessor]]
    sort_key: NotRequired[Optional[Accessor]]
    color: NotRequired[Optional[Accessor]]
    tooltip_content: NotRequired[Optional[Accessor]]
    row_label: NotRequired[Optional[Accessor]]
    bar_label: NotRequired[Optional[Accessor]]


def key_accessor(key: str) -> Accessor:
    def get(record: Any) -> Any:
        return record.get(key)

    return get


def default_accessors(
    parent_id: bool = True,
    sort_key: bool = False,
) -> Accessors:
    """Accessors reading the SourceRecord keys from mapping shaped records."""
    accessors: Accessors = {
        "id": key_accessor("id"),
        "start": key_accessor("start"),
        "end": key_accessor("end"),
        "display_name": key_accessor("display_name"),
        "color": key_accessor("color"),
        "tooltip_content": key_accessor("tooltip_content"),
        "row_label": key_accessor("row_label"),
        "bar_label": key_accessor("bar_label"),
    }
    if parent_id:
        accessors["parent_id"] = key_accessor("parent_id")
    if sort_key:
        accessors["sort_key"] = key_accessor("sort_key")
    return accessors


def read_attribute(accessors: Accessors, name: str, record: Any) -> Any:
    accessor = accessors.get(name)
    if accessor is None:
        return None
    return accessor(record)
