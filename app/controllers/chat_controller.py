import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core import errors
from app.core.dependencies import get_db
from app.core.rate_limit import limit
from app.core.session_store import ChatSessionStore, get_session_store
from app.schemas import chat_schema, house_schema
from app.services import chat_service
from app.services.completion_client import CompletionClient, get_completion_client

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
)

NOT_CONFIGURED = "The chat assistant is not configured. Please contact our team directly."
TROUBLE_CONNECTING = "I'm having trouble connecting right now. Please try again in a moment."


@router.post("", response_model=chat_schema.ChatResponse)
@limit()
def chat(
    request: Request,
    body: chat_schema.ChatRequest,
    db: Session = Depends(get_db),
    store: ChatSessionStore = Depends(get_session_store),
    client: CompletionClient = Depends(get_completion_client),
):
    if not body.message or not body.session_id:
        raise errors.ValidationError("Message and sessionId are required")

    try:
        turn = chat_service.handle_turn(db, body.session_id, body.message, store, client)
    except errors.ConfigurationError as e:
        logger.error(f"Chat indisponível: {e.message}")
        raise errors.ConfigurationError(NOT_CONFIGURED) from e
    except errors.UpstreamError as e:
        logger.error(f"Falha no serviço de chat (sessão {body.session_id}): {e.message}")
        raise errors.UpstreamError(TROUBLE_CONNECTING) from e

    return chat_schema.ChatResponse(
        response=turn.response,
        suggested_houses=[house_schema.HouseOut.model_validate(h) for h in turn.suggested_houses],
    )
