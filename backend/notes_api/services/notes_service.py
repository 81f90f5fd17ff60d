from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional

from notes_api.errors import NotFoundError, ValidationError
from notes_api.storage.notes_store import Note, NotesStore

logger = logging.getLogger(__name__)

TITLE_REQUIRED = 'Validation error: "title" is required.'


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _require_title(payload: Any) -> str:
    if not isinstance(payload, Mapping):
        raise ValidationError(TITLE_REQUIRED, field="title")
    title = payload.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(TITLE_REQUIRED, field="title")
    return title.strip()


class NotesService:
    """In-memory note collection mirrored to a NotesStore after every mutation.

    Built once per process and handed to the routes. Mutations hold a lock so
    the collection and the file it is written to stay in step when requests
    are served from a thread pool.
    """

    def __init__(self, store: NotesStore, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self._clock = clock or _utc_now
        self._lock = threading.Lock()
        self._notes: list[Note] = store.load()
        self._next_id = max((n.id for n in self._notes), default=0) + 1
        logger.info("Loaded %d note(s) from %s", len(self._notes), store.path)

    @property
    def next_id(self) -> int:
        return self._next_id

    def _now(self) -> datetime:
        # persisted timestamps carry milliseconds only
        now = self._clock()
        return now.replace(microsecond=now.microsecond - now.microsecond % 1000)

    def _index_of(self, note_id: int) -> int:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        raise NotFoundError(note_id)

    def persist(self) -> bool:
        ok = self.store.save(self._notes)
        if not ok:
            logger.warning("Notes were not persisted; keeping %d note(s) in memory", len(self._notes))
        return ok

    def list_notes(self) -> list[Note]:
        with self._lock:
            return list(self._notes)

    def get_note(self, note_id: int) -> Note:
        with self._lock:
            return self._notes[self._index_of(note_id)]

    def create_note(self, payload: Any) -> Note:
        title = _require_title(payload)
        content = payload.get("content")

        with self._lock:
            now = self._now()
            note = Note(
                id=self._next_id,
                title=title,
                content=content if isinstance(content, str) else "",
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._notes.append(note)
            self.persist()

        logger.info("Created note %d", note.id)
        return note

    def update_note(self, note_id: int, payload: Any) -> Note:
        with self._lock:
            idx = self._index_of(note_id)
            title = _require_title(payload)
            current = self._notes[idx]

            content = payload.get("content")
            now = self._now()
            if now <= current.updated_at:
                now = current.updated_at + timedelta(milliseconds=1)

            updated = replace(
                current,
                title=title,
                content=content if isinstance(content, str) else current.content,
                updated_at=now,
            )
            self._notes[idx] = updated
            self.persist()

        logger.info("Updated note %d", note_id)
        return updated

    def delete_note(self, note_id: int) -> None:
        with self._lock:
            idx = self._index_of(note_id)
            del self._notes[idx]
            self.persist()

        logger.info("Deleted note %d", note_id)
