"""Error types raised by the notes service.

Mapped to HTTP status codes in ``notes_api.main`` only:

    ValidationError -> 400
    NotFoundError   -> 404

StorageError is raised by NotesStore.write; NotesStore.save logs it instead.
"""
from __future__ import annotations


class NotesError(Exception):
    def __init__(self, message: str = "Unexpected error"):
        self.message = message
        super().__init__(message)


class ValidationError(NotesError):
    def __init__(self, message: str = "Validation error", field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(NotesError):
    def __init__(self, note_id: int | None = None):
        super().__init__("Note not found")
        self.note_id = note_id


class StorageError(NotesError):
    def __init__(self, message: str = "Failed to persist notes", path: str | None = None):
        super().__init__(message)
        self.path = path
