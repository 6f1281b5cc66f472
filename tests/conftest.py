"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Dict, Any

import pytest

from urlpreview.logger import reset_logger
from urlpreview.models import Base, Field, Table


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from an empty directory with a fresh logger."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("URLPREVIEW_LOG_DIR", raising=False)
    monkeypatch.delenv("URLPREVIEW_LOG_LEVEL", raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def figma_id() -> str:
    """A 22 character Figma file key (the shortest accepted)."""
    return "abcdefghijklmnopqrstuv"


@pytest.fixture
def base_dict() -> Dict[str, Any]:
    """Base with one table holding a URL field and a checkbox field."""
    return {
        "tables": [
            {
                "id": "tblVideos",
                "name": "Videos",
                "fields": [
                    {"id": "fldLink", "name": "Link", "type": "url"},
                    {"id": "fldDone", "name": "Done", "type": "checkbox"},
                ],
            },
            {"id": "tblEmpty", "name": "Empty", "fields": []},
        ]
    }


@pytest.fixture
def base() -> Base:
    return Base(tables=[
        Table(
            id="tblVideos",
            name="Videos",
            fields=[
                Field(id="fldLink", name="Link", type="url"),
                Field(id="fldDone", name="Done", type="checkbox"),
            ],
        ),
    ])


@pytest.fixture
def base_file(tmp_path, base_dict) -> Path:
    path = tmp_path / "base.json"
    path.write_text(json.dumps(base_dict))
    return path


@pytest.fixture
def write_config(tmp_path):
    """Write a settings JSON file and return its path."""
    def _write(data: Dict[str, Any]) -> Path:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        return path
    return _write
