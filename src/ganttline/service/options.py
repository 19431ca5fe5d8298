# SPDX-License-Identifier: MIT

import re
from collections.abc import Mapping, MutableMapping
from typing import Any

_HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


def merge_options(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> None:
    """
    Recursively merge source into target, in place.

    Nested mappings are merged key by key. Scalars and lists from source replace
    whatever target holds, and a mapping in source replaces a non-mapping in target.

    Example:
        target = {"layout": {"min_row_height": 40}}
        merge_options(target, {"layout": {"min_bar_width": 4}})
        # {"layout": {"min_row_height": 40, "min_bar_width": 4}}
    """
    for key, value in source.items():
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, MutableMapping):
                existing = {}
                target[key] = existing
            merge_options(existing, value)
        else:
            target[key] = value


def strip_html_tags(text: str) -> str:
    """Remove markup so a label can be shown on a plain text axis."""
    return _HTML_TAG_PATTERN.sub("", text)
