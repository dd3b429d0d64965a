from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.schemas import comment_schema, house_schema
from app.services import comment_service

router = APIRouter(
    prefix="/api/comments",
    tags=["Comments"],
)


@router.get("", response_model=List[comment_schema.CommentOut])
def list_comments(db: Session = Depends(get_db)):
    return comment_service.list_inquiries(db)


@router.post("", response_model=comment_schema.CommentCreated)
def create_comment(
    comment_in: comment_schema.CommentCreate,
    db: Session = Depends(get_db),
):
    comment = comment_service.create_inquiry(db, comment_in)
    return {"success": True, "data": comment_schema.CommentOut.model_validate(comment)}


@router.put("/mark-seen/{house_id}", response_model=house_schema.SuccessResponse)
def mark_seen(house_id: int, db: Session = Depends(get_db)):
    comment_service.mark_seen_for_house(db, house_id)
    return {"success": True}
