import logging
from typing import List

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from app.core import errors
from app.models import comment_model
from app.schemas import comment_schema

logger = logging.getLogger(__name__)


def create_inquiry(db: Session, comment_in: comment_schema.CommentCreate) -> comment_model.Comment:
    # A existência da casa não é consultada antes; a FK decide
    db_comment = comment_model.Comment(
        **comment_in.model_dump(exclude={"seen"}),
        seen=False,
    )
    db.add(db_comment)
    try:
        db.commit()
    except sa_exc.IntegrityError as e:
        db.rollback()
        logger.error(f"Pedido rejeitado pelo banco (houseId={comment_in.house_id}): {e.orig}")
        raise errors.IntegrityError("House does not exist") from e
    db.refresh(db_comment)
    logger.info(f"Novo pedido {db_comment.id} para a casa {db_comment.house_id}")
    return db_comment


def list_inquiries(db: Session) -> List[comment_model.Comment]:
    return (
        db.query(comment_model.Comment)
        .order_by(comment_model.Comment.created_at.desc(), comment_model.Comment.id.desc())
        .all()
    )


def mark_seen_for_house(db: Session, house_id: int) -> int:
    """Marca como lidos todos os pedidos da casa. Nunca volta seen para False."""
    updated = (
        db.query(comment_model.Comment)
        .filter(comment_model.Comment.house_id == house_id)
        .update({comment_model.Comment.seen: True}, synchronize_session="fetch")
    )
    db.commit()
    return updated
