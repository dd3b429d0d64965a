"""
Configuração global para testes

Este arquivo é carregado automaticamente pelo pytest antes de qualquer teste.
Ele configura as variáveis de ambiente necessárias para os testes.
"""
import os
import pytest

# Configurações padrão para testes - definidas ANTES de qualquer import
TEST_ENV_VARS = {
    "DATABASE_URL": "sqlite:///:memory:",
    "ENVIRONMENT": "testing",
    "CORS_ORIGINS": "http://localhost:5173",
    "CHAT_API_KEY": "test-chat-key",
    "CHAT_API_URL": "https://chat.test/v1/chat/completions",
    "CHAT_MODEL": "test-model",
    "CHAT_CONTEXT_MESSAGES": "20",
    "CHAT_MAX_STORED_MESSAGES": "100",
    "RATE_LIMIT_ENABLED": "false",
    "RATE_LIMIT_PER_MINUTE": "60",
    "ADMIN_EMAIL": "admin@test.com",
    "ADMIN_PASSWORD": "admin123",
}

# Configura variáveis de ambiente imediatamente quando o módulo é importado
# Isso garante que estejam disponíveis antes de qualquer import que use Settings
for key, value in TEST_ENV_VARS.items():
    os.environ[key] = value


class FakeCompletionClient:
    """Substitui o serviço externo: grava as chamadas e devolve respostas fixas"""

    def __init__(self, replies=None, error=None):
        self.replies = list(replies or ["Hello from the assistant"])
        self.error = error
        self.calls = []

    def complete(self, messages):
        self.calls.append([dict(m) for m in messages])
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


@pytest.fixture
def fake_client():
    return FakeCompletionClient()
