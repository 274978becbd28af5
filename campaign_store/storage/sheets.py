"""The singleton character sheet.

Stored under the document's `sheet` key. create() always replaces it with a
fresh fixed-shape sheet; patch() deep-merges partial updates into it;
remove_field() deletes a dotted-path field or filters a value out of a list.

remove_field() reports failures through RemovalResult instead of raising, so
callers check `success`. Storage-level errors (corrupted or unwritable
document) still raise.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from campaign_store.errors import InvalidInput, InvalidPath, NotFound

from .collections import coerce_number
from .document import DocumentStore
from .merge import deep_merge
from .paths import has_key, resolve_path

logger = logging.getLogger(__name__)

SHEET_KEY = "sheet"

ABILITIES = ("STR", "DEX", "CON", "INT", "WIS", "CHA")
PROFICIENCIES = ("armor", "weapons", "saving_throws", "skills", "expertise")
SEED_FIELDS = ("name", "race", "class", "level", "background")

# Sentinel for "no value supplied", distinct from an explicit None.
MISSING: Any = object()


def new_sheet() -> dict[str, Any]:
    """Empty sheet: blank identity, zeroed scores, empty lists."""
    return {
        "name": "",
        "race": "",
        "class": "",
        "level": 0,
        "background": "",
        "xp": 0,
        "abilities": {a: 0 for a in ABILITIES},
        "proficiencies": {p: [] for p in PROFICIENCIES},
        "features": {},
        "equipment": [],
        "misc": {
            "wealth": {"gold": 0},
            "titles": [],
            "achievements": [],
        },
    }


@dataclass
class RemovalResult:
    success: bool
    sheet: dict[str, Any] | None = None
    error: str | None = None
    reason: str | None = None  # "invalid_input" | "not_found" | "invalid_path"

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "error": self.error, "sheet": self.sheet}


class SheetService:
    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def _stored(self, document: dict[str, Any]) -> dict[str, Any]:
        sheet = document.get(SHEET_KEY)
        if not isinstance(sheet, dict):
            raise NotFound("Character sheet not found")
        return sheet

    def create(self, seed: dict[str, Any] | None = None) -> dict[str, Any]:
        """Replace any existing sheet with a fresh one, optionally seeded."""
        sheet = new_sheet()
        if seed:
            values = {k: v for k, v in seed.items() if k in SEED_FIELDS and v is not None}
            if "level" in values:
                values["level"] = coerce_number("level", values["level"])
            deep_merge(sheet, values)
        document = self._store.load()
        replaced = SHEET_KEY in document
        document[SHEET_KEY] = sheet
        self._store.save(document)
        logger.info("created character sheet%s", " (replaced existing)" if replaced else "")
        return sheet

    def get(self) -> dict[str, Any]:
        return self._stored(self._store.load())

    def patch(self, updates: Any) -> dict[str, Any]:
        """Deep-merge `updates` into the stored sheet."""
        if not isinstance(updates, dict):
            raise InvalidInput("Sheet updates must be a JSON object")
        try:
            json.dumps(updates, allow_nan=False)
        except ValueError as e:
            raise InvalidInput(f"Sheet updates must be plain JSON: {e}") from e
        document = self._store.load()
        sheet = deep_merge(self._stored(document), updates)
        self._store.save(document)
        return sheet

    def remove_field(self, path: Any, value: Any = MISSING) -> RemovalResult:
        """Delete the field at `path`, or drop `value` from the list there."""
        if not isinstance(path, str) or not path:
            return self._failed("Path must be a non-empty string", "invalid_input")

        document = self._store.load()
        sheet = document.get(SHEET_KEY)
        if not isinstance(sheet, dict):
            return self._failed("Character sheet not found", "not_found")

        try:
            parent, key = resolve_path(sheet, path)
        except InvalidPath as e:
            return self._failed(str(e), "invalid_path")
        if not has_key(parent, key):
            return self._failed(f"Field '{path}' does not exist", "invalid_path")

        current = parent[key]
        if isinstance(current, list) and value is not MISSING:
            parent[key] = [item for item in current if item != value]
        else:
            del parent[key]
        self._store.save(document)
        return RemovalResult(success=True, sheet=sheet)

    def _failed(self, message: str, reason: str) -> RemovalResult:
        logger.warning("sheet removal failed: %s", message)
        return RemovalResult(success=False, error=message, reason=reason)
