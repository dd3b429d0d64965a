"""
Health check da API
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.dependencies import get_db
from app.core.session_store import ChatSessionStore, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health Check"],
)


def _database_ok(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Erro ao conectar com banco de dados: {e}")
        return False


@router.get(
    "/",
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Verifica o status da API e conectividade com o banco de dados"
)
def health_check(
    db: Session = Depends(get_db),
    store: ChatSessionStore = Depends(get_session_store),
):
    """
    Health check básico da API

    Retorna:
    - Status da API
    - Status da conexão com banco de dados
    - Ocupação das sessões de chat e se o assistente está configurado
    """
    db_status = "healthy" if _database_ok(db) else "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "database": {
            "status": db_status
        },
        "chat": {
            "configured": bool(settings.CHAT_API_KEY),
            "sessions": len(store),
            "max_sessions": store.maxsize,
            "ttl_seconds": store.ttl
        },
        "rate_limiting": {
            "enabled": settings.RATE_LIMIT_ENABLED,
            "limit_per_minute": settings.RATE_LIMIT_PER_MINUTE
        }
    }


@router.get(
    "/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness Check",
    description="Verifica se a API está pronta para receber requisições"
)
def readiness_check(db: Session = Depends(get_db)):
    if _database_ok(db):
        return {
            "status": "ready",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat()
        },
    )


@router.get(
    "/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness Check",
    description="Verifica se a API está viva (usado por orquestradores como Kubernetes)"
)
def liveness_check():
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
