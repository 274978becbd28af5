"""Generic entity collections: characters, locations, quests, scenes.

Each kind is one row in SCHEMAS: identity field, full field order, required
fields, list fields (comma-separated on input) and numeric fields. A single
CollectionRepository consumes a row and provides add / get / update / list.

Identity lookup is case-insensitive. Uniqueness is checked only when adding;
updates never rename, so they cannot introduce duplicates.

Numeric fields parse to int or float; a blank value counts as 0 and NaN or
infinity is rejected with InvalidInput.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from campaign_store.errors import (
    CorruptedDocument,
    DuplicateIdentity,
    InvalidInput,
    MissingRequiredField,
    NotFound,
)

from .document import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntitySchema:
    collection: str  # top-level document key
    label: str  # singular, used in messages and response keys
    identity: str
    fields: tuple[str, ...]
    required: tuple[str, ...]
    list_fields: frozenset[str] = frozenset()
    numeric_fields: frozenset[str] = frozenset()
    defaults: dict[str, Any] = field(default_factory=dict)

    def default_for(self, name: str) -> Any:
        if name in self.defaults:
            return self.defaults[name]
        return [] if name in self.list_fields else ""


SCHEMAS: dict[str, EntitySchema] = {
    "characters": EntitySchema(
        collection="characters",
        label="character",
        identity="name",
        fields=("name", "race", "age", "personality", "goals",
                "visual_description", "relationship"),
        required=("name", "age", "personality", "goals", "visual_description"),
        numeric_fields=frozenset({"age"}),
    ),
    "locations": EntitySchema(
        collection="locations",
        label="location",
        identity="name",
        fields=("name", "visual_description", "region", "type", "notes",
                "factions", "characters"),
        required=("name", "visual_description", "region", "type"),
        list_fields=frozenset({"characters"}),
    ),
    "quests": EntitySchema(
        collection="quests",
        label="quest",
        identity="title",
        fields=("title", "description", "status", "locations", "reward", "notes"),
        required=("title", "description", "locations"),
        list_fields=frozenset({"locations"}),
        defaults={"status": "available"},
    ),
    "scenes": EntitySchema(
        collection="scenes",
        label="scene",
        identity="title",
        fields=("title", "description", "location", "characters", "notes"),
        required=("title", "description"),
        list_fields=frozenset({"characters"}),
    ),
}


def split_list(raw: Any) -> list[str]:
    """'Bob, Alice ,' → ['Bob', 'Alice']. Lists are trimmed the same way."""
    if isinstance(raw, str):
        parts = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        parts = [str(p) for p in raw]
    else:
        raise InvalidInput(f"Expected a comma-separated list, got {raw!r}")
    return [p.strip() for p in parts if p.strip()]


def coerce_number(name: str, raw: Any) -> int | float:
    """Parse a numeric field. A blank string counts as 0; NaN and infinity are rejected."""
    if isinstance(raw, bool):
        raise InvalidInput(f"Field '{name}' must be a number")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw):
            return raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            value = None
        if value is not None and math.isfinite(value):
            return value
    raise InvalidInput(f"Field '{name}' must be a number, got {raw!r}")


def same_identity(a: Any, b: Any) -> bool:
    return str(a).lower() == str(b).lower()


class CollectionRepository:
    def __init__(self, store: DocumentStore, schema: EntitySchema) -> None:
        self._store = store
        self.schema = schema

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _entities(self, document: dict[str, Any]) -> list[dict[str, Any]]:
        """The collection list inside `document`, created if missing."""
        entities = document.setdefault(self.schema.collection, [])
        if not isinstance(entities, list):
            raise CorruptedDocument(f"'{self.schema.collection}' must be a list")
        return entities

    def _find(self, entities: list[dict[str, Any]], identity: str) -> dict[str, Any] | None:
        key = self.schema.identity
        for entity in entities:
            if isinstance(entity, dict) and same_identity(entity.get(key), identity):
                return entity
        return None

    def _require(self, entities: list[dict[str, Any]], identity: str) -> dict[str, Any]:
        entity = self._find(entities, identity)
        if entity is None:
            raise NotFound(f"{self.schema.label.capitalize()} '{identity}' not found")
        return entity

    def _coerce(self, name: str, raw: Any) -> Any:
        if name in self.schema.list_fields:
            return split_list(raw)
        if name in self.schema.numeric_fields:
            return coerce_number(name, raw)
        return raw

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Create a record, filling defaults for omitted optional fields."""
        missing = [f for f in self.schema.required if fields.get(f) in (None, "")]
        if missing:
            raise MissingRequiredField(missing)

        entity: dict[str, Any] = {}
        for name in self.schema.fields:
            raw = fields.get(name)
            if raw is None or (raw == "" and name in self.schema.list_fields):
                entity[name] = self.schema.default_for(name)
            else:
                entity[name] = self._coerce(name, raw)

        document = self._store.load()
        entities = self._entities(document)
        identity = entity[self.schema.identity]
        if self._find(entities, identity) is not None:
            raise DuplicateIdentity(
                f"{self.schema.label.capitalize()} with this "
                f"{self.schema.identity} already exists: '{identity}'"
            )
        entities.append(entity)
        self._store.save(document)
        logger.info("added %s '%s'", self.schema.label, identity)
        return entity

    def get(self, identity: str) -> dict[str, Any]:
        document = self._store.load()
        return self._require(self._entities(document), identity)

    def update(self, identity: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Overwrite only the fields present in `fields`; never renames."""
        document = self._store.load()
        entity = self._require(self._entities(document), identity)
        changed = []
        for name in self.schema.fields:
            if name == self.schema.identity or name not in fields:
                continue
            entity[name] = self._coerce(name, fields[name])
            changed.append(name)
        self._store.save(document)
        logger.info("updated %s '%s' fields=%s", self.schema.label, identity, changed)
        return entity

    def list(self) -> list[Any]:
        """Identity values in insertion order."""
        document = self._store.load()
        key = self.schema.identity
        return [e.get(key) for e in self._entities(document) if isinstance(e, dict)]
