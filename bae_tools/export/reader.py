"""
Reading the address book snapshot and flattening each person into a dict of strings,
ready to be written out as CSV or TXT.

A snapshot looks like:

    {"persons": [{"name": "Amy Bee", "tags": [{"priority": "high"}, {"vip": null}]}]}
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """
    The snapshot is valid JSON but isn't shaped like an address book
    """


def read_and_flatten(file_path: Path) -> list[dict[str, str]]:
    """
    Read a snapshot file and flatten its persons. Raises OSError if the file can't be
    read, or ValueError if it isn't a valid snapshot.
    """
    with file_path.open(encoding="utf-8") as f:
        doc = json.load(f)
    return flatten_snapshot(doc)


def flatten_snapshot(doc: Any) -> list[dict[str, str]]:
    persons = doc.get("persons") if isinstance(doc, dict) else None
    if not isinstance(persons, list):
        raise SnapshotError("Snapshot has no 'persons' list")

    records = []
    for person in persons:
        if not isinstance(person, dict):
            raise SnapshotError(f"Expected a person object, got: {person!r}")
        records.append(flatten_person(person))

    logger.debug(f"Flattened {len(records)} persons")
    return records


def flatten_person(person: dict[str, Any]) -> dict[str, str]:
    """
    Flatten a single person. Field order is kept, since it decides the column order of
    the export.
    """
    record = {}
    for key, value in person.items():
        if isinstance(value, str):
            record[key] = value
        elif key == "tags" and isinstance(value, list):
            record[key] = ", ".join(render_tag(t) for t in value)
        else:
            record[key] = to_json_text(value)
    return record


def render_tag(tag: Any) -> str:
    """
    Render a tag from the snapshot as "key" or "key : value"
    """
    if isinstance(tag, str):
        name, sep, value = tag.partition(":")
        if sep and value.strip():
            return f"{name.strip()} : {value.strip()}"
        return tag.strip()

    if isinstance(tag, dict):
        parts = []
        for name, value in tag.items():
            if value is None or value == "":
                parts.append(name)
            elif isinstance(value, str):
                parts.append(f"{name} : {value}")
            else:
                parts.append(f"{name} : {to_json_text(value)}")
        return ", ".join(parts)

    return to_json_text(tag)


def to_json_text(value: Any) -> str:
    """
    Compact JSON text for a value, e.g. null, 5 or {"a":1}
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
