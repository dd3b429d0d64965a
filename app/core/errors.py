"""
Erros da aplicação e tradução para respostas HTTP

Os controllers não montam respostas de erro: levantam uma das exceções
abaixo e os handlers registrados em main.py convertem para JSON.
Mensagens de falha de banco ou do serviço externo são genéricas; o detalhe
vai apenas para o log.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import exc as sa_exc

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Wrong password"


class IntegrityError(AppError):
    status_code = status.HTTP_409_CONFLICT
    message = "Request conflicts with existing data"


class ConfigurationError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Service is not configured"


class UpstreamError(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Upstream service failed"

    def __init__(self, message: Optional[str] = None, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class MalformedResponseError(UpstreamError):
    message = "Upstream service returned an unexpected payload"


class ServiceUnavailable(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Database unavailable"


def error_response(error: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"success": False, "error": error.message, "message": error.message},
    )


async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc)


async def integrity_error_handler(request: Request, exc: sa_exc.IntegrityError):
    logger.error(f"Violação de integridade em {request.url.path}: {exc.orig}")
    return error_response(IntegrityError())


async def operational_error_handler(request: Request, exc: sa_exc.OperationalError):
    logger.error(f"Banco de dados indisponível em {request.url.path}: {exc}", exc_info=True)
    return error_response(ServiceUnavailable())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(sa_exc.IntegrityError, integrity_error_handler)
    app.add_exception_handler(sa_exc.OperationalError, operational_error_handler)
