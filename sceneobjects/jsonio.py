"""Reading and writing JSON object files."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


class JsonLoadError(Exception):
    """Raised when a JSON object file cannot be read or parsed."""


def load_json_object(path: str | Path) -> dict[str, Any]:
    """Read ``path`` and return the JSON object at its root."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        log.error("Init file load failed, maybe doesn't exist")
        raise JsonLoadError(f"cannot read {path}: {exc}") from exc
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonLoadError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(value, dict):
        raise JsonLoadError(f"root of {path} is not a JSON object")
    return value


def save_json_object(path: str | Path, obj: dict[str, Any]) -> None:
    """Write ``obj`` to ``path`` as tab-indented JSON, creating parent directories."""
    try:
        text = json.dumps(obj, indent="\t")
    except (TypeError, ValueError):
        log.error("Error during json serialization")
        raise
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


def to_json_array(values: Iterable[float]) -> list[float]:
    """Return ``values`` as a list of JSON numbers."""
    return [float(value) for value in values]