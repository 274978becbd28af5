"""Whole-document JSON file storage.

The entire campaign lives in one JSON object. load() reads it in full and
save() replaces it in full: the new content goes to a temporary sibling file
which is then swapped in with os.replace(), so readers see either the old or
the new document, never a mix.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from campaign_store.errors import CorruptedDocument, PersistenceError

logger = logging.getLogger(__name__)


class DocumentStore:
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """Read the document. Missing or blank file → {}."""
        if not self._path.is_file():
            logger.debug("document %s missing, starting empty", self._path)
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Failed to read {self._path}: {e}") from e
        if not text.strip():
            return {}
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("document %s is not valid JSON: %s", self._path, e)
            raise CorruptedDocument(f"Invalid JSON in {self._path.name}") from e
        if not isinstance(document, dict):
            logger.warning("document %s root is %s, not an object",
                           self._path, type(document).__name__)
            raise CorruptedDocument(f"{self._path.name} must hold a JSON object")
        return document

    def save(self, document: dict[str, Any]) -> None:
        """Replace the stored document with `document`."""
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(document, indent=2, allow_nan=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            tmp.unlink(missing_ok=True)
            raise PersistenceError(f"Failed to save {self._path}: {e}") from e
        logger.debug("saved document %s (%d top-level keys)", self._path, len(document))
