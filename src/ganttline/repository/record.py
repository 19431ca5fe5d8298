# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any

from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore[assignment]


class RecordFileError(ValueError):
    pass


def load_records(path: Path) -> list[dict[str, Any]]:
    """
    Load source records from a YAML or JSON file holding a list of mappings.

    Either the list itself or a mapping with a top level "records" key is accepted.
    Unquoted YAML timestamps arrive as datetime values, quoted ones as strings.
    """
    try:
        data = load(path.read_text(), Loader=SafeLoader)
    except YAMLError as e:
        raise RecordFileError(f"{path} is not valid YAML or JSON: {e}") from e

    if isinstance(data, dict):
        if "records" not in data:
            raise RecordFileError(f'{path} has no top level "records" list')
        data = data["records"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise RecordFileError(f"{path} must contain a list of records")

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise RecordFileError(f"record {index} in {path} is not a mapping")
        if "id" not in record:
            raise RecordFileError(f"record {index} in {path} has no id")
    return data
