"""
Armazenamento em memória das conversas do chat

Cada sessão guarda a transcrição (lista de {role, content}). As entradas
expiram após CHAT_SESSION_TTL_SECONDS sem uso e as menos recentes são
descartadas além de CHAT_SESSION_MAX. O histórico é local ao processo:
reiniciar o servidor apaga todas as conversas.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from cachetools import TTLCache

from app.core.config import settings

logger = logging.getLogger(__name__)

Transcript = List[Dict[str, str]]


class _SessionLock:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


class ChatSessionStore:
    def __init__(self, maxsize: int, ttl: float):
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl)
        # Só existe enquanto algum turno usa ou espera a sessão; não expira com o cache
        self._locks: Dict[str, _SessionLock] = {}
        # TTLCache não é thread-safe e os handlers síncronos rodam no threadpool
        self._guard = threading.RLock()

    @property
    def maxsize(self) -> int:
        return self._cache.maxsize

    @property
    def ttl(self) -> float:
        return self._cache.ttl

    def get(self, session_id: str) -> Optional[Transcript]:
        with self._guard:
            transcript = self._cache.get(session_id)
        return list(transcript) if transcript is not None else None

    def set(self, session_id: str, transcript: Transcript) -> None:
        with self._guard:
            self._cache[session_id] = list(transcript)

    def delete(self, session_id: str) -> None:
        with self._guard:
            self._cache.pop(session_id, None)

    @contextmanager
    def locked(self, session_id: str) -> Iterator[None]:
        """Turnos da mesma conversa são executados em série."""
        with self._guard:
            entry = self._locks.get(session_id)
            if entry is None:
                entry = self._locks[session_id] = _SessionLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[session_id]

    def active_locks(self) -> int:
        with self._guard:
            return len(self._locks)

    def clear(self) -> None:
        with self._guard:
            self._cache.clear()
        logger.info("Sessões de chat removidas")

    def __len__(self) -> int:
        with self._guard:
            return len(self._cache)

    def __contains__(self, session_id: str) -> bool:
        with self._guard:
            return session_id in self._cache


session_store = ChatSessionStore(
    maxsize=settings.CHAT_SESSION_MAX,
    ttl=settings.CHAT_SESSION_TTL_SECONDS,
)


def get_session_store() -> ChatSessionStore:
    return session_store
