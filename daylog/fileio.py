"""Read-only file loaders for DayLog configuration and entry exports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    """Read a text file, returning empty string if missing."""
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping, returning empty dict if missing, empty or not a mapping."""
    text = read_text(path)
    if not text.strip():
        return {}
    result = yaml.safe_load(text)
    return result if isinstance(result, dict) else {}


def read_json_list(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects.

    A top-level {"entries": [...]} wrapper is also accepted. Non-object
    elements are dropped. Missing or empty files give [].
    """
    text = read_text(path)
    if not text.strip():
        return []
    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get("entries") or []
    if not isinstance(data, list):
        return []
    return [d for d in data if isinstance(d, dict)]
