import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from notes_api.errors import StorageError

logger = logging.getLogger(__name__)


def format_timestamp(dt: datetime) -> str:
    # 2026-10-18T12:00:00.000Z
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(s: str) -> datetime:
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _atomic_write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    tmp_path.replace(path)


@dataclass(frozen=True)
class Note:
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Note":
        note_id = raw["id"]
        # bool is an int subclass; true/false are not ids
        if not isinstance(note_id, int) or isinstance(note_id, bool):
            raise ValueError(f"invalid note id: {note_id!r}")
        title = raw["title"]
        if not isinstance(title, str) or not title.strip():
            raise ValueError("note title must be a non-empty string")
        content = raw.get("content")
        return cls(
            id=note_id,
            title=title,
            content=content if isinstance(content, str) else "",
            created_at=parse_timestamp(raw["createdAt"]),
            updated_at=parse_timestamp(raw["updatedAt"]),
        )


class NotesStore:
    """Keeps the whole note collection as one JSON array file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> list[Note]:
        if not self.path.exists():
            logger.debug("Notes file %s does not exist yet, starting empty", self.path)
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("Failed to load notes file %s, falling back to empty store: %s", self.path, exc)
            return []

        if not isinstance(raw, list):
            logger.error(
                "Notes file %s does not contain a JSON array (got %s), falling back to empty store",
                self.path,
                type(raw).__name__,
            )
            return []

        out: list[Note] = []
        for i, item in enumerate(raw):
            try:
                out.append(Note.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping malformed note at index %d in %s: %s", i, self.path, exc)
        return out

    def write(self, notes: Iterable[Note]) -> None:
        data = [n.to_dict() for n in notes]
        try:
            _atomic_write_json(self.path, data)
        except OSError as exc:
            raise StorageError(f"Failed to persist notes file: {exc}", path=str(self.path)) from exc

    def save(self, notes: Iterable[Note]) -> bool:
        try:
            self.write(notes)
        except StorageError as exc:
            logger.error("%s (%s)", exc.message, exc.path)
            return False
        return True
