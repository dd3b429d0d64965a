"""
Cliente do serviço externo de chat completion (API compatível com OpenAI)

Uma única chamada POST por turno, sem retry.
"""
import logging
from typing import Dict, List, Optional

import requests

from app.core import errors
from app.core.config import settings

logger = logging.getLogger(__name__)


class CompletionClient:
    def __init__(
        self,
        api_key: Optional[str],
        url: str,
        model: str,
        temperature: float = 0.7,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.temperature = temperature
        self.timeout = timeout

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Envia a conversa e retorna o texto da primeira resposta.

        Raises:
            ConfigurationError: chave da API ausente
            UpstreamError: erro de rede ou status diferente de 2xx
            MalformedResponseError: resposta sem choices[0].message.content
        """
        if not self.api_key:
            raise errors.ConfigurationError("CHAT_API_KEY is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }

        try:
            response = requests.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Falha de rede ao chamar o serviço de chat: {e}")
            raise errors.UpstreamError(f"Completion request failed: {e}") from e

        if not response.ok:
            logger.error(f"Erro da API de chat {response.status_code}: {response.text}")
            raise errors.UpstreamError(
                f"Completion request failed: {response.status_code}",
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Resposta inesperada da API de chat: {response.text}")
            raise errors.MalformedResponseError() from e

        if not isinstance(content, str):
            logger.error(f"Conteúdo da resposta não é texto: {content!r}")
            raise errors.MalformedResponseError()
        return content


def get_completion_client() -> CompletionClient:
    return CompletionClient(
        api_key=settings.CHAT_API_KEY,
        url=settings.CHAT_API_URL,
        model=settings.CHAT_MODEL,
        temperature=settings.CHAT_TEMPERATURE,
        timeout=settings.CHAT_TIMEOUT_SECONDS,
    )
