import json
from pathlib import Path
from typing import Any, Dict, Optional


class GlobalConfig:
    """Read-only view of the block's key-value settings."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values = dict(values or {})

    def get(self, key: str) -> Any:
        return self._values.get(key)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)


def load_json_object(path: Path) -> Dict[str, Any]:
    """Load a JSON object from path. Missing or empty files give {}."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        content = f.read().strip()
    if not content:
        return {}
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def load_global_config(path: Path) -> GlobalConfig:
    return GlobalConfig(load_json_object(path))
