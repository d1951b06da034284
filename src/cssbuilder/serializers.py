"""JSON serialization of Selector descriptors.

Fragments are stored already rendered; loading restores the stage, so a
loaded selector keeps enforcing part order and uniqueness.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from cssbuilder.errors import SerializationError
from cssbuilder.selector import Selector, Stage

__all__ = ["to_dict", "from_dict", "to_json", "from_json", "save", "load"]

logger = logging.getLogger(__name__)

# Serialized key -> Selector field
_FIELDS = {
    "element": "element_part",
    "id": "id_part",
    "class": "class_part",
    "attr": "attr_part",
    "pseudo_class": "pseudo_class_part",
    "pseudo_element": "pseudo_element_part",
    "composite": "rendered_composite",
}

# Serialized key -> grammar position of that part
_PART_STAGES = {
    "element": Stage.ELEMENT,
    "id": Stage.ID,
    "class": Stage.CLASS,
    "attr": Stage.ATTRIBUTE,
    "pseudo_class": Stage.PSEUDO_CLASS,
    "pseudo_element": Stage.PSEUDO_ELEMENT,
}


def to_dict(selector: Selector) -> dict[str, Any]:
    """Convert a selector to a plain dict. Absent parts are omitted."""
    data: dict[str, Any] = {}
    for key, attr in _FIELDS.items():
        value = getattr(selector, attr)
        if value is not None:
            data[key] = value
    data["stage"] = int(selector.stage)
    return data


def from_dict(data: dict[str, Any]) -> Selector:
    """Rebuild a selector from the output of :func:`to_dict`."""
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    try:
        stage = Stage(data.get("stage", 0))
    except ValueError as exc:
        raise SerializationError(
            f"Invalid stage: {data.get('stage')!r}", cause=exc
        ) from exc

    parts: dict[str, str] = {}
    for key, attr in _FIELDS.items():
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise SerializationError(
                f"Selector part {key!r} must be a string, got {type(value).__name__}"
            )
        parts[attr] = value

    # stage must not sit below any part already present
    highest = max(
        (part for key, part in _PART_STAGES.items() if data.get(key) is not None),
        default=Stage.NONE,
    )
    if stage < highest:
        raise SerializationError(
            f"Stage {stage.name} is below the {highest.name} part already present"
        )
    return Selector(stage=stage, **parts)


def to_json(selector: Selector, indent: int | None = None) -> str:
    return json.dumps(to_dict(selector), indent=indent)


def from_json(text: str) -> Selector:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid selector JSON: {exc}", cause=exc) from exc
    return from_dict(data)


# --- files --------------------------------------------------------------------


def save(selector: Selector, path: Path, indent: int | None = 2) -> None:
    """Serialise to JSON and write to *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(selector, indent=indent), encoding="utf-8")
    logger.debug("Saved selector %r to %s", selector.stringify(), path)


def load(path: Path) -> Selector:
    """Deserialise a selector from a JSON file at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SerializationError(
            f"Selector file {path} is not valid UTF-8: {exc}", cause=exc
        ) from exc
    selector = from_json(text)
    logger.debug("Loaded selector %r from %s", selector.stringify(), path)
    return selector
