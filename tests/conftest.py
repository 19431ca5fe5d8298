# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any

import pytest
from factories import record

from ganttline import configuration
from ganttline.repository.configuration import CONFIGURATION_REPO


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration file at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config_dir / "config.yaml"


@pytest.fixture
def grouped_records() -> list[dict[str, Any]]:
    """
    c1 and c2 belong to p, which appears after c1 in input order. orphan names a
    parent that is not in the input and bad has an unparseable start.
    """
    return [
        record("c1", parent_id="p", display_name="Child 1"),
        record(
            "p",
            start="2024-01-01T09:00:00Z",
            end="2024-01-01T12:00:00Z",
            display_name="Parent",
        ),
        record(
            "c2",
            start="2024-01-01T11:00:00Z",
            end="2024-01-01T11:45:00Z",
            parent_id="p",
            display_name="Child 2",
        ),
        record("orphan", parent_id="missing", display_name="Orphan"),
        record("bad", start="not-a-date", end="2024-01-01", display_name="Bad"),
    ]
