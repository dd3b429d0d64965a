"""
Rate limiting para a API
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Sem limites padrão: só as rotas decoradas (login e chat) são limitadas
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

PER_MINUTE = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"


def limit(limit_value: str = PER_MINUTE):
    """Wrapper para limiter.limit que não faz nada com rate limiting desabilitado"""
    if not settings.RATE_LIMIT_ENABLED:
        def noop_decorator(func):
            return func
        return noop_decorator
    return limiter.limit(limit_value)
