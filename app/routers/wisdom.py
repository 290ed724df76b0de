"""
Wisdom router.

GET    /wisdom          — list, optionally by category
GET    /wisdom/random   — weighted random pick (least shown favoured)
POST   /wisdom          — add an entry
DELETE /wisdom/{id}     — delete (succeeds when absent)
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import InputValidationError
from app.db.base import get_db
from app.models.wisdom import WisdomCategory
from app.schemas.common import ERROR_RESPONSES, SuccessResponse
from app.schemas.wisdom import WisdomCreateRequest, WisdomResponse
from app.services import wisdom as wisdom_service

router = APIRouter(prefix="/wisdom", tags=["wisdom"], responses=ERROR_RESPONSES)


def _parse_category(category: Optional[str]) -> Optional[WisdomCategory]:
    if category is None or category == "all":
        return None
    try:
        return WisdomCategory(category)
    except ValueError:
        allowed = ", ".join(c.value for c in WisdomCategory)
        raise InputValidationError(
            message=f"Unknown category {category!r}. Expected one of: all, {allowed}.",
            field="category",
        )


@router.get("", response_model=list[WisdomResponse], summary="List wisdom entries")
def list_wisdom(
    category: Optional[str] = Query(
        default=None,
        description='Category filter; "all" or omitted returns every entry.',
        examples=["quote"],
    ),
    db: Session = Depends(get_db),
):
    items = wisdom_service.list_wisdom(db, _parse_category(category))
    return [WisdomResponse.model_validate(w) for w in items]


@router.get("/random", response_model=list[WisdomResponse], summary="Random wisdom")
def random_wisdom(
    limit: Optional[int] = Query(default=None, ge=1, le=50),
    db: Session = Depends(get_db),
):
    """
    Sample without replacement, each entry weighted by `1 / (show_count + 1)`.
    Every returned entry has its `show_count` incremented and `last_shown_at`
    set to now.
    """
    items = wisdom_service.pick_random_wisdom(db, limit or settings.WISDOM_RANDOM_LIMIT)
    return [WisdomResponse.model_validate(w) for w in items]


@router.post(
    "",
    response_model=WisdomResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a wisdom entry",
)
def create_wisdom(payload: WisdomCreateRequest, db: Session = Depends(get_db)):
    item = wisdom_service.create_wisdom(
        db,
        content=payload.content,
        category=payload.category,
        source=payload.source,
        author=payload.author,
    )
    return WisdomResponse.model_validate(item)


@router.delete("/{wisdom_id}", response_model=SuccessResponse, summary="Delete a wisdom entry")
def delete_wisdom(wisdom_id: int, db: Session = Depends(get_db)):
    wisdom_service.delete_wisdom(db, wisdom_id)
    return SuccessResponse()
