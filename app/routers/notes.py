"""
Notes router.

GET    /notes        — all notes, most recently updated first
GET    /notes/{id}   — one note (404 when absent)
POST   /notes        — create
PATCH  /notes/{id}   — partial update (404 when absent)
DELETE /notes/{id}   — delete (succeeds when absent)
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.common import ERROR_RESPONSES, ErrorResponse, SuccessResponse
from app.schemas.note import NoteCreateRequest, NoteResponse, NoteUpdateRequest
from app.services import notes as note_service

router = APIRouter(prefix="/notes", tags=["notes"], responses=ERROR_RESPONSES)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Note not found."}}


@router.get("", response_model=list[NoteResponse], summary="List notes")
def list_notes(db: Session = Depends(get_db)):
    return [NoteResponse.model_validate(n) for n in note_service.list_notes(db)]


@router.get("/{note_id}", response_model=NoteResponse, summary="Get a note", responses=_NOT_FOUND)
def get_note(note_id: int, db: Session = Depends(get_db)):
    return NoteResponse.model_validate(note_service.get_note(db, note_id))


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a note",
)
def create_note(payload: NoteCreateRequest, db: Session = Depends(get_db)):
    note = note_service.create_note(
        db, title=payload.title, content=payload.content, labels=payload.labels
    )
    return NoteResponse.model_validate(note)


@router.patch(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Update a note",
    responses=_NOT_FOUND,
)
def update_note(note_id: int, payload: NoteUpdateRequest, db: Session = Depends(get_db)):
    """Change the fields present in the body; `updated_at` is always refreshed."""
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    note = note_service.update_note(db, note_id, changes)
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", response_model=SuccessResponse, summary="Delete a note")
def delete_note(note_id: int, db: Session = Depends(get_db)):
    note_service.delete_note(db, note_id)
    return SuccessResponse()
