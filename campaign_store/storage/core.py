"""Storage initialization and repository accessors."""

from pathlib import Path

from .collections import SCHEMAS, CollectionRepository
from .document import DocumentStore
from .placement import LocationRepository
from .sheets import SheetService

_store: DocumentStore | None = None


def init_storage(data_file: Path) -> None:
    global _store
    _store = DocumentStore(data_file)


def document_store() -> DocumentStore:
    assert _store is not None, "Call init_storage() before using storage"
    return _store


def data_file() -> Path:
    return document_store().path


def characters() -> CollectionRepository:
    return CollectionRepository(document_store(), SCHEMAS["characters"])


def locations() -> LocationRepository:
    return LocationRepository(document_store())


def quests() -> CollectionRepository:
    return CollectionRepository(document_store(), SCHEMAS["quests"])


def scenes() -> CollectionRepository:
    return CollectionRepository(document_store(), SCHEMAS["scenes"])


def sheet() -> SheetService:
    return SheetService(document_store())
