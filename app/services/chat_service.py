"""
Orquestração de um turno do chat

Fluxo: casas ativas -> prompt de sistema novo -> mensagem do usuário ->
janela de contexto -> serviço externo -> resposta gravada na sessão ->
casas citadas na resposta.

A transcrição é copiada antes do turno e só é gravada de volta quando o
serviço externo responde; um turno com falha não altera a sessão.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.session_store import ChatSessionStore, Transcript
from app.models import house_model
from app.services import house_service
from app.services.completion_client import CompletionClient
from app.services.prompt_service import build_prompt

logger = logging.getLogger(__name__)


@dataclass
class ChatTurn:
    response: str
    suggested_houses: List[house_model.House] = field(default_factory=list)


def system_message(active_houses) -> Dict[str, str]:
    return {"role": "system", "content": build_prompt(active_houses)}


def last_messages(transcript: Transcript, count: int) -> Transcript:
    """System + as últimas `count` mensagens, quando a conversa passa do limite."""
    if len(transcript) > count + 1:
        return [transcript[0]] + transcript[len(transcript) - count:]
    return list(transcript)


def build_context(transcript: Transcript, window: int) -> Transcript:
    return last_messages(transcript, window)


def trim_transcript(transcript: Transcript, max_stored: int) -> Transcript:
    # Número par: o histórico guardado sempre começa por uma mensagem do usuário
    return last_messages(transcript, max_stored - max_stored % 2)


def suggest_houses(reply: str, houses: Iterable[house_model.House]) -> List[house_model.House]:
    """
    Casas cujo número aparece na resposta como termo isolado.
    Sensível a maiúsculas; "Unit 10" sugere a casa 10, não a casa 1.
    """
    suggested = []
    for house in houses:
        if not house.number:
            continue
        pattern = r"(?<!\w)" + re.escape(house.number) + r"(?!\w)"
        if re.search(pattern, reply):
            suggested.append(house)
    return suggested


def handle_turn(
    db: Session,
    session_id: str,
    user_text: str,
    store: ChatSessionStore,
    client: CompletionClient,
    context_messages: Optional[int] = None,
    max_stored: Optional[int] = None,
) -> ChatTurn:
    if context_messages is None:
        context_messages = settings.CHAT_CONTEXT_MESSAGES
    if max_stored is None:
        max_stored = settings.CHAT_MAX_STORED_MESSAGES

    active_houses = house_service.list_active_houses(db)

    with store.locked(session_id):
        previous = store.get(session_id)
        if previous is None:
            logger.info(f"Nova sessão de chat {session_id}")
            previous = []

        transcript = [system_message(active_houses)] + previous[1:]
        transcript.append({"role": "user", "content": user_text})

        reply = client.complete(build_context(transcript, context_messages))

        transcript.append({"role": "assistant", "content": reply})
        store.set(session_id, trim_transcript(transcript, max_stored))

    return ChatTurn(response=reply, suggested_houses=suggest_houses(reply, active_houses))
