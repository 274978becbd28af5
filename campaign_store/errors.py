"""Error taxonomy shared by storage and routes.

Each error carries the HTTP status the app's exception handler answers with.
"""


class StoreError(Exception):
    """Base class for every storage-layer failure."""

    status_code = 500


class MissingRequiredField(StoreError):
    status_code = 400

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class DuplicateIdentity(StoreError):
    status_code = 409


class NotFound(StoreError):
    status_code = 404


class InvalidPath(StoreError):
    status_code = 400


class InvalidInput(StoreError):
    status_code = 400


class CorruptedDocument(StoreError):
    """The stored document is not valid JSON or has the wrong shape."""


class PersistenceError(StoreError):
    """Reading or writing the document file failed at the OS level."""
