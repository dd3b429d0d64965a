"""
Testes para rate limiting
"""
from unittest.mock import patch

from app.core import rate_limit
from app.core.config import settings


class TestRateLimiting:
    """Testes para rate limiting"""

    def test_rate_limit_config(self):
        """Testa se rate limiting está configurado"""
        assert hasattr(settings, 'RATE_LIMIT_ENABLED')
        assert hasattr(settings, 'RATE_LIMIT_PER_MINUTE')
        assert rate_limit.PER_MINUTE == f"{settings.RATE_LIMIT_PER_MINUTE}/minute"

    def test_limit_is_noop_when_disabled(self):
        """Com rate limiting desabilitado o decorator devolve a própria função"""
        def endpoint():
            return "ok"

        with patch.object(settings, "RATE_LIMIT_ENABLED", False):
            decorated = rate_limit.limit()(endpoint)
        assert decorated is endpoint
        assert decorated() == "ok"

    def test_limit_delegates_to_slowapi_when_enabled(self):
        """Com rate limiting habilitado o decorator vem do slowapi"""
        sentinel = object()
        with patch.object(settings, "RATE_LIMIT_ENABLED", True), \
                patch.object(rate_limit.limiter, "limit", return_value=sentinel) as limit_mock:
            assert rate_limit.limit("5/minute") is sentinel
        limit_mock.assert_called_once_with("5/minute")
