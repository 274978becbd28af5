"""Character placement across locations.

Membership is denormalized: a location's `characters` list holds plain name
strings. move() keeps a character in at most one location by clearing it
everywhere before placing it, and it saves the cleared state before looking up
the destination. A move to an unknown destination therefore fails with
NotFound and leaves the character in no location at all.
"""

from __future__ import annotations

import logging
from typing import Any

from campaign_store.errors import NotFound

from .collections import SCHEMAS, CollectionRepository, same_identity
from .document import DocumentStore

logger = logging.getLogger(__name__)


class LocationRepository(CollectionRepository):
    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store, SCHEMAS["locations"])

    def locate(self, name: str) -> list[dict[str, Any]]:
        """Summaries of every location listing `name` among its characters."""
        found = []
        for loc in self._entities(self._store.load()):
            members = loc.get("characters") if isinstance(loc, dict) else None
            if not isinstance(members, list):
                continue
            if any(same_identity(c, name) for c in members):
                found.append({
                    "name": loc.get("name"),
                    "region": loc.get("region"),
                    "type": loc.get("type"),
                })
        return found

    def move(self, name: str, destination: str) -> dict[str, Any]:
        """Remove `name` from every location, then add it to `destination`."""
        document = self._store.load()
        locations = self._entities(document)

        for loc in locations:
            if isinstance(loc, dict) and isinstance(loc.get("characters"), list):
                loc["characters"] = [c for c in loc["characters"] if not same_identity(c, name)]
        self._store.save(document)

        target = self._find(locations, destination)
        if target is None:
            logger.warning("move of '%s' failed: destination '%s' not found; "
                           "character is now in no location", name, destination)
            raise NotFound(f"Destination location '{destination}' not found")

        if not isinstance(target.get("characters"), list):
            target["characters"] = []
        target["characters"].append(name)
        self._store.save(document)
        logger.info("moved '%s' to '%s'", name, target.get("name"))
        return target
