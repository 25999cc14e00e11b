"""A JSON-file backed store of entities keyed by their "id" field."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


class Repository:
    """Keeps a list of JSON objects in a single file."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self.filename = Path(filename)

    def create(self, entity: Any) -> None:
        """Append an entity to the file."""
        entities = self.read_all()
        entities.append(entity)
        self._write_all(entities)

    def read_all(self) -> list[Any]:
        """Return every stored entity; an absent file or non-array gives []."""
        try:
            with self.filename.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError:
            return []
        if not isinstance(data, list):
            return []
        return data

    def update(self, entity_id: str, new_entity: Any) -> bool:
        """Replace the first entity with the given id; return whether one was found."""
        entities = self.read_all()
        for index, entity in enumerate(entities):
            if _has_id(entity, entity_id):
                entities[index] = new_entity
                self._write_all(entities)
                return True
        return False

    def remove(self, entity_id: str) -> bool:
        """Remove every entity with the given id; return whether any was removed."""
        entities = self.read_all()
        kept = [e for e in entities if not _has_id(e, entity_id)]
        if len(kept) == len(entities):
            return False
        self._write_all(kept)
        return True

    def _write_all(self, entities: list[Any]) -> None:
        with self.filename.open("w", encoding="utf-8") as fh:
            fh.write(json.dumps(entities, indent=4, sort_keys=True, ensure_ascii=False))


def _has_id(entity: Any, entity_id: str) -> bool:
    return isinstance(entity, dict) and "id" in entity and entity["id"] == entity_id