import re
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from notes_api.models.notes import ErrorOut, NoteOut
from notes_api.services.notes_service import NotesService

router = APIRouter(prefix="/notes", tags=["notes"])

# leading integer prefix, the rest of the segment is ignored: "12abc" -> 12
_ID_RE = re.compile(r"\s*([+-]?[0-9]+)")

BAD_ID = {400: {"model": ErrorOut, "description": "Invalid id parameter"}}
BAD_ID_OR_INVALID = {400: {"model": ErrorOut, "description": "Invalid id parameter or validation error"}}
NOT_FOUND = {404: {"model": ErrorOut, "description": "Note not found"}}
INVALID = {400: {"model": ErrorOut, "description": "Validation error"}}


def get_notes_service(request: Request) -> NotesService:
    return request.app.state.notes_service


def parse_note_id(note_id: str) -> int:
    # rejected before the service is reached
    m = _ID_RE.match(note_id)
    if m is None:
        raise HTTPException(status_code=400, detail="Invalid id parameter")
    return int(m.group(1))


@router.get("", response_model=list[NoteOut])
def list_notes(service: NotesService = Depends(get_notes_service)) -> list[NoteOut]:
    return [NoteOut(**n.to_dict()) for n in service.list_notes()]


@router.post("", response_model=NoteOut, status_code=201, responses=INVALID)
def create_note(
    payload: Any = Body(default=None),
    service: NotesService = Depends(get_notes_service),
) -> NoteOut:
    note = service.create_note(payload if payload is not None else {})
    return NoteOut(**note.to_dict())


@router.get("/{note_id}", response_model=NoteOut, responses={**BAD_ID, **NOT_FOUND})
def get_note(
    note_id: int = Depends(parse_note_id),
    service: NotesService = Depends(get_notes_service),
) -> NoteOut:
    return NoteOut(**service.get_note(note_id).to_dict())


@router.put("/{note_id}", response_model=NoteOut, responses={**BAD_ID_OR_INVALID, **NOT_FOUND})
def update_note(
    note_id: int = Depends(parse_note_id),
    payload: Any = Body(default=None),
    service: NotesService = Depends(get_notes_service),
) -> NoteOut:
    updated = service.update_note(note_id, payload if payload is not None else {})
    return NoteOut(**updated.to_dict())


@router.delete("/{note_id}", status_code=204, responses={**BAD_ID, **NOT_FOUND})
def delete_note(
    note_id: int = Depends(parse_note_id),
    service: NotesService = Depends(get_notes_service),
) -> None:
    service.delete_note(note_id)
    return None
